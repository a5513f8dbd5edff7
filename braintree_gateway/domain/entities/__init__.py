"""Domain Entities - Records mapped from gateway responses."""

from .construction import Construction
from .add_on import AddOn
from .transaction import Transaction, TransactionType
from .error_response import ErrorResponse
from .result import Result, ResultStatus

__all__ = [
    "Construction",
    "AddOn",
    "Transaction",
    "TransactionType",
    "ErrorResponse",
    "Result",
    "ResultStatus",
]
