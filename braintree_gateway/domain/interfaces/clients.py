"""External client interfaces."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict

from braintree_gateway.domain.entities import Result


class ResponseError(str, Enum):
    """Failures the gateway reports without a structured body."""

    NOT_FOUND = "not_found"


class GatewayHTTPClient(ABC):
    """
    Abstract HTTP client for the Braintree gateway.

    Paths are relative to the merchant's base URL, e.g. "transactions/123".
    Every call resolves to one of:

    - `Result.ok(body)` with the decoded JSON body
    - `Result.error(body)` where body holds an `api_error_response` key
    - `Result.error(ResponseError.NOT_FOUND)` for any other failure status
    """

    @abstractmethod
    async def get(self, path: str) -> Result:
        """
        Read the resource at `path`.

        Raises:
            GatewayTimeoutException: If the request times out
            GatewayConnectionException: If no response was received
        """
        ...

    @abstractmethod
    async def post(self, path: str, body: Dict[str, Any]) -> Result:
        """Create a resource at `path` from the JSON `body`."""
        ...

    @abstractmethod
    async def put(self, path: str, body: Dict[str, Any]) -> Result:
        """Update the resource at `path` with the JSON `body`."""
        ...
