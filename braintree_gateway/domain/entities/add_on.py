"""AddOn record attached to transactions and subscriptions."""

from dataclasses import dataclass
from typing import Optional

from .construction import Construction


@dataclass(frozen=True)
class AddOn(Construction):
    """A recurring charge modifier applied on top of a plan price."""

    id: Optional[str] = None
    amount: str | int = 0
    current_billing_cycle: Optional[int] = None
    description: Optional[str] = None
    kind: Optional[str] = None
    name: Optional[str] = None
    never_expires: bool = False
    number_of_billing_cycles: int = 0
    quantity: int = 0
