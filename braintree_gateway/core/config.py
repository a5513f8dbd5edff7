"""Client configuration using Pydantic Settings."""

from enum import Enum
from functools import lru_cache

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from braintree_gateway.domain.exceptions import ConfigurationException


class Environment(str, Enum):
    """Braintree environments a merchant account can live in."""

    DEVELOPMENT = "development"
    SANDBOX = "sandbox"
    PRODUCTION = "production"


ENVIRONMENT_HOSTS = {
    Environment.DEVELOPMENT: "http://localhost:3000",
    Environment.SANDBOX: "https://api.sandbox.braintreegateway.com",
    Environment.PRODUCTION: "https://api.braintreegateway.com",
}


class Settings(BaseSettings):
    """
    Gateway settings loaded from environment variables.

    Every setting can be overridden with a BRAINTREE_ prefixed
    environment variable or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="BRAINTREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Credentials
    environment: Environment = Environment.SANDBOX
    merchant_id: str = ""
    public_key: str = ""
    private_key: str = ""

    # HTTP
    base_url: str | None = None
    timeout: float = 30.0
    api_version: str = "4"

    # Metrics
    metrics_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def merchant_url(self) -> str:
        """Base URL of the merchant's resources, honoring an explicit override."""
        if self.base_url:
            return self.base_url.rstrip("/")
        host = ENVIRONMENT_HOSTS[self.environment]
        return f"{host}/merchants/{self.merchant_id}"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Raises:
        ConfigurationException: If an environment value fails validation
    """
    try:
        return Settings()
    except ValidationError as e:
        setting = str(e.errors()[0]["loc"][0])
        raise ConfigurationException(setting) from e


settings = get_settings()
