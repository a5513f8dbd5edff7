"""Transaction service - sale, settlement, refund, void and lookup."""

from typing import Any, Awaitable, Dict, Optional

import structlog

from braintree_gateway.core.metrics import record_transaction_operation
from braintree_gateway.domain.entities import (
    ErrorResponse,
    Result,
    Transaction,
    TransactionType,
)
from braintree_gateway.domain.exceptions import GatewayException
from braintree_gateway.domain.interfaces import GatewayHTTPClient, ResponseError

logger = structlog.get_logger(__name__)

INVALID_TRANSACTION_ID = "transaction id is invalid"
UNEXPECTED_RESPONSE = "unexpected gateway response"


class TransactionService:
    """
    Application service for the gateway's transaction resource.

    Every operation makes exactly one gateway call and returns a
    `Result`: `(ok, Transaction)` on success, `(error, ErrorResponse)`
    otherwise.
    """

    def __init__(self, http_client: GatewayHTTPClient):
        self._http = http_client

    async def sale(self, params: Dict[str, Any]) -> Result:
        """
        Charge a payment method once.

        `params` must include an `amount` and either a
        `payment_method_nonce` or a `payment_method_token`.

        Example:
            status, transaction = await service.sale({
                "amount": "100.00",
                "payment_method_nonce": nonce,
                "options": {"submit_for_settlement": True},
            })
            transaction.status  # "settling"
        """
        sale_params = {**params, "type": TransactionType.SALE.value}

        return await self._call(
            "sale",
            self._http.post("transactions", {"transaction": sale_params}),
        )

    async def submit_for_settlement(
        self,
        transaction_id: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Result:
        """
        Settle an authorized transaction, optionally for a partial `amount`.

        Use this when the sale was created without `submit_for_settlement`.
        """
        return await self._call(
            "submit_for_settlement",
            self._http.put(
                f"transactions/{transaction_id}/submit_for_settlement",
                {"transaction": params or {}},
            ),
            transaction_id,
        )

    async def refund(
        self,
        transaction_id: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Result:
        """Refund a settled transaction, optionally for a partial `amount`."""
        return await self._call(
            "refund",
            self._http.post(
                f"transactions/{transaction_id}/refund",
                {"transaction": params or {}},
            ),
            transaction_id,
        )

    async def void(self, transaction_id: str) -> Result:
        """Void a transaction that has not settled yet."""
        return await self._call(
            "void",
            self._http.put(f"transactions/{transaction_id}/void", {}),
            transaction_id,
        )

    async def find(self, transaction_id: str) -> Result:
        """Find an existing transaction."""
        return await self._call(
            "find",
            self._http.get(f"transactions/{transaction_id}"),
            transaction_id,
        )

    async def _call(
        self,
        operation: str,
        request: Awaitable[Result],
        transaction_id: str | None = None,
    ) -> Result:
        """Await the single gateway request; transport failures become error results."""
        try:
            response = await request
        except GatewayException as e:
            error = ErrorResponse.construct({"message": e.message})
            return self._failure(operation, error, transaction_id, e.code)

        return self._to_result(operation, response, transaction_id)

    def _to_result(
        self,
        operation: str,
        response: Result,
        transaction_id: str | None = None,
    ) -> Result:
        """
        Convert a gateway response into a transaction result.

        Not-found is only meaningful for operations addressing a single
        transaction; for `sale` it falls through to the generic error.
        """
        status, body = response

        if response.is_ok and isinstance(body, dict):
            transaction = Transaction.construct(body.get("transaction"))
            if isinstance(transaction, Transaction):
                record_transaction_operation(operation, "ok")
                logger.info(
                    "transaction_operation_completed",
                    operation=operation,
                    transaction_id=transaction.id,
                    status=transaction.status,
                )
                return Result.ok(transaction)

        if isinstance(body, dict) and "api_error_response" in body:
            error = ErrorResponse.construct(body["api_error_response"])
        elif body == ResponseError.NOT_FOUND and transaction_id is not None:
            error = ErrorResponse.construct({"message": INVALID_TRANSACTION_ID})
        else:
            error = ErrorResponse.construct({"message": UNEXPECTED_RESPONSE})

        return self._failure(operation, error, transaction_id, status.value)

    def _failure(
        self,
        operation: str,
        error: ErrorResponse,
        transaction_id: str | None,
        reason: str,
    ) -> Result:
        record_transaction_operation(operation, "error")
        logger.warning(
            "transaction_operation_failed",
            operation=operation,
            transaction_id=transaction_id,
            reason=reason,
            message=error.message,
        )
        return Result.error(error)
