"""HTTP implementation of GatewayHTTPClient."""

from typing import Any, Dict, Optional

import httpx
import structlog

from braintree_gateway import __version__
from braintree_gateway.core.config import settings
from braintree_gateway.core.metrics import (
    track_gateway_latency,
    record_gateway_request,
)
from braintree_gateway.domain.entities import Result
from braintree_gateway.domain.exceptions import (
    ConfigurationException,
    GatewayConnectionException,
    GatewayTimeoutException,
)
from braintree_gateway.domain.interfaces import GatewayHTTPClient, ResponseError

logger = structlog.get_logger(__name__)


class HttpGatewayClient(GatewayHTTPClient):
    """
    HTTP client for the Braintree gateway.

    Authenticates with the merchant's key pair and exchanges JSON.
    Each call is a single request; retries and deadlines beyond the
    configured timeout are left to the caller.
    """

    def __init__(
        self,
        base_url: str | None = None,
        public_key: str | None = None,
        private_key: str | None = None,
        timeout: float | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if base_url is None:
            if not settings.base_url and not settings.merchant_id:
                raise ConfigurationException("merchant_id")
            base_url = settings.merchant_url

        self._base_url = base_url.rstrip("/")
        self._public_key = settings.public_key if public_key is None else public_key
        self._private_key = settings.private_key if private_key is None else private_key
        self._timeout = settings.timeout if timeout is None else timeout
        self._transport = transport

        if not self._public_key:
            raise ConfigurationException("public_key")
        if not self._private_key:
            raise ConfigurationException("private_key")

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": f"braintree-gateway/{__version__}",
            "X-ApiVersion": settings.api_version,
        }

    async def get(self, path: str) -> Result:
        return await self._request("GET", path)

    async def post(self, path: str, body: Dict[str, Any]) -> Result:
        return await self._request("POST", path, body)

    async def put(self, path: str, body: Dict[str, Any]) -> Result:
        return await self._request("PUT", path, body)

    async def _request(
        self,
        method: str,
        path: str,
        body: Dict[str, Any] | None = None,
    ) -> Result:
        """Issue one request and map the response to a tagged result."""
        url = f"{self._base_url}/{path.lstrip('/')}"

        try:
            with track_gateway_latency(method):
                async with httpx.AsyncClient(
                    timeout=self._timeout,
                    auth=(self._public_key, self._private_key),
                    headers=self.headers,
                    transport=self._transport,
                ) as client:
                    response = await client.request(method, url, json=body)

        except httpx.TimeoutException:
            record_gateway_request(method, "timeout")
            logger.warning("gateway_timeout", method=method, path=path)
            raise GatewayTimeoutException(path)
        except httpx.HTTPError as e:
            record_gateway_request(method, "connection_error")
            logger.error(
                "gateway_connection_error",
                method=method,
                path=path,
                error=str(e),
            )
            raise GatewayConnectionException(path, str(e))

        return self._process_response(method, path, response)

    def _process_response(
        self,
        method: str,
        path: str,
        response: httpx.Response,
    ) -> Result:
        """
        Map an HTTP response onto the client contract.

        2xx with a JSON object body is a success. Any status carrying an
        `api_error_response` body is a structured error. Everything else,
        including undecodable bodies, is reported as not found.
        """
        data = self._decode(response)

        if response.is_success and data is not None:
            record_gateway_request(method, "ok")
            logger.info(
                "gateway_request_completed",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            return Result.ok(data)

        if data is not None and "api_error_response" in data:
            record_gateway_request(method, "api_error")
            logger.info(
                "gateway_api_error",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            return Result.error(data)

        record_gateway_request(method, "not_found")
        logger.warning(
            "gateway_resource_not_found",
            method=method,
            path=path,
            status_code=response.status_code,
            response=response.text[:200],
        )
        return Result.error(ResponseError.NOT_FOUND)

    @staticmethod
    def _decode(response: httpx.Response) -> Dict[str, Any] | None:
        """Decode a JSON object body; empty bodies decode to {}."""
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError:
            return None
        return data if isinstance(data, dict) else None
