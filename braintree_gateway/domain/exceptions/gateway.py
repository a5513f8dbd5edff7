"""Gateway transport exceptions."""

from .base import DomainException


class GatewayException(DomainException):
    """Raised when the gateway cannot be reached or answered unexpectedly."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message=message,
            code="GATEWAY_ERROR",
        )
        self.status_code = status_code


class GatewayTimeoutException(GatewayException):
    """Raised when a gateway request times out."""

    def __init__(self, path: str):
        super().__init__(
            message=f"Braintree request timed out: {path}",
            status_code=None,
        )
        self.code = "GATEWAY_TIMEOUT"
        self.path = path


class GatewayConnectionException(GatewayException):
    """Raised when the gateway connection fails before a response arrives."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"Braintree request failed: {path}: {reason}",
            status_code=None,
        )
        self.code = "GATEWAY_CONNECTION_ERROR"
        self.path = path
