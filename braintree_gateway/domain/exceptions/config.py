"""Configuration-related exceptions."""

from .base import DomainException


class ConfigurationException(DomainException):
    """Raised when the client is missing credentials or settings."""

    def __init__(self, setting: str):
        super().__init__(
            message=f"Missing or invalid Braintree setting: {setting}",
            code="CONFIGURATION_ERROR",
        )
        self.setting = setting
