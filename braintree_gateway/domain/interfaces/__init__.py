"""
Domain Interfaces (Ports)
"""

from .clients import GatewayHTTPClient, ResponseError

__all__ = [
    "GatewayHTTPClient",
    "ResponseError",
]
