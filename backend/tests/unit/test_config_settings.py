"""Unit tests for application settings configuration."""

from pathlib import Path

from app.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_attribute_editor_defaults():
    """Requests time out after 15 seconds and searches return 50 hits by default."""
    settings = Settings(_env_file=None)

    assert settings.attribute_request_timeout == 15.0
    assert settings.attribute_search_limit == 50
    assert settings.attribute_api_base_url.endswith("/api/v1")


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("ATTRIBUTE_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL_EDITOR", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.attribute_request_timeout == 2.5
    assert settings.log_level_editor == "DEBUG"
