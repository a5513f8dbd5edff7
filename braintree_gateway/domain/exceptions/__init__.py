"""Domain Exceptions - Gateway and configuration errors."""

from .base import DomainException
from .config import ConfigurationException
from .gateway import (
    GatewayException,
    GatewayTimeoutException,
    GatewayConnectionException,
)

__all__ = [
    "DomainException",
    "ConfigurationException",
    "GatewayException",
    "GatewayTimeoutException",
    "GatewayConnectionException",
]
