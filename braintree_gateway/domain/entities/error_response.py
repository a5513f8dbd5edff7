"""Normalized error record for gateway-reported failures."""

from dataclasses import dataclass, field
from typing import Any, Dict

from .construction import Construction


@dataclass(frozen=True)
class ErrorResponse(Construction):
    """
    A failure reported by the gateway.

    Built from the body of an `api_error_response`, or synthesized
    locally with only a message when the gateway gives no body.
    """

    errors: Dict[str, Any] = field(default_factory=dict)
    message: str = ""
    params: Dict[str, Any] = field(default_factory=dict)
    transaction: Dict[str, Any] = field(default_factory=dict)
