from .attribute_api_client import AttributeApiClient

__all__ = ["AttributeApiClient"]
