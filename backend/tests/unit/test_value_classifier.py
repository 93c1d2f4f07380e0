"""Unit tests for display-time value classification."""

import pytest

from app.application.services.value_classifier import ValueKind, classify_value


@pytest.mark.parametrize("value", ["#fff", "#FFFF", "#1a2b3c", "#1A2B3C80", "  #abc  "])
def test_hex_colors(value):
    assert classify_value(value) == ValueKind.COLOR


@pytest.mark.parametrize(
    "value",
    ["https://example.com/size-chart.png", "http://cdn.example.com", "HTTPS://EXAMPLE.COM"],
)
def test_http_urls(value):
    assert classify_value(value) == ValueKind.URL


@pytest.mark.parametrize(
    "value",
    ["red", "#ff", "#12345", "#ggg", "ftp://example.com", "https://", "example.com", ""],
)
def test_everything_else_is_text(value):
    assert classify_value(value) == ValueKind.TEXT


@pytest.mark.parametrize("value", [None, 42, 3.5, ["#fff"], {"value": "#fff"}])
def test_non_strings_are_text(value):
    assert classify_value(value) == ValueKind.TEXT
