"""External API client implementations."""

from .http_client import HttpGatewayClient

__all__ = [
    "HttpGatewayClient",
]
