"""
Fixtures for integration tests.

Provides:
- Stub gateway client that replays canned results and records calls
- Transaction services wired to the stub for each response shape
"""

from typing import Any, Dict, List, Tuple

import pytest

from braintree_gateway.application.services import TransactionService
from braintree_gateway.domain.entities import Result
from braintree_gateway.domain.interfaces import GatewayHTTPClient, ResponseError


# =============================================================================
# Stub Client
# =============================================================================

class StubGatewayClient(GatewayHTTPClient):
    """Gateway client that returns the same result for every call."""

    def __init__(self, result: Result):
        self.result = result
        self.calls: List[Tuple[str, str, Dict[str, Any] | None]] = []

    async def get(self, path: str) -> Result:
        self.calls.append(("GET", path, None))
        return self.result

    async def post(self, path: str, body: Dict[str, Any]) -> Result:
        self.calls.append(("POST", path, body))
        return self.result

    async def put(self, path: str, body: Dict[str, Any]) -> Result:
        self.calls.append(("PUT", path, body))
        return self.result


# =============================================================================
# Stub Client Fixtures
# =============================================================================

@pytest.fixture
def success_client(sale_payload: dict) -> StubGatewayClient:
    """Client whose calls all succeed with the sale fixture."""
    return StubGatewayClient(Result.ok(sale_payload))


@pytest.fixture
def api_error_client(api_error_payload: dict) -> StubGatewayClient:
    """Client whose calls all fail with a structured API error."""
    return StubGatewayClient(Result.error(api_error_payload))


@pytest.fixture
def not_found_client() -> StubGatewayClient:
    """Client whose calls all fail with not-found."""
    return StubGatewayClient(Result.error(ResponseError.NOT_FOUND))


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def service(success_client: StubGatewayClient) -> TransactionService:
    return TransactionService(http_client=success_client)


@pytest.fixture
def failing_service(api_error_client: StubGatewayClient) -> TransactionService:
    return TransactionService(http_client=api_error_client)


@pytest.fixture
def not_found_service(not_found_client: StubGatewayClient) -> TransactionService:
    return TransactionService(http_client=not_found_client)


@pytest.fixture
def stub_client_factory():
    """Build a StubGatewayClient for an arbitrary result."""
    return StubGatewayClient
