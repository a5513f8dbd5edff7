"""Wiring of services to their gateway client."""

from braintree_gateway.application.services import TransactionService
from braintree_gateway.domain.interfaces import GatewayHTTPClient
from braintree_gateway.infrastructure.clients import HttpGatewayClient


def get_http_client() -> HttpGatewayClient:
    """Get a GatewayHTTPClient configured from settings."""
    return HttpGatewayClient()


def get_transaction_service(
    http_client: GatewayHTTPClient | None = None,
) -> TransactionService:
    """Get a TransactionService, defaulting to the configured HTTP client."""
    return TransactionService(http_client=http_client or get_http_client())
