"""Transaction record mirroring the gateway's transaction resource."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional

from .add_on import AddOn
from .construction import Construction


class TransactionType(str, Enum):
    """Kind of transaction as reported by the gateway."""

    SALE = "sale"


@dataclass(frozen=True)
class Transaction(Construction):
    """
    Immutable mirror of a gateway transaction.

    Every field is optional. Maps default to `{}`, lists to `[]`,
    amounts to `0` and flags to `False`; everything else to None.
    Amounts are kept verbatim, so a gateway amount of "100.00"
    stays the string "100.00".
    """

    add_ons: List[AddOn] = field(default_factory=list)
    additional_processor_response: Optional[str] = None
    amount: str | int = 0
    apple_pay_details: Optional[Any] = None
    avs_error_response_code: Optional[str] = None
    avs_postal_code_response_code: Optional[str] = None
    avs_street_address_response_code: Optional[str] = None
    billing_details: Dict[str, Any] = field(default_factory=dict)
    channel: Optional[str] = None
    coinbase_details: Optional[Any] = None
    created_at: Optional[str] = None
    credit_card_details: Dict[str, Any] = field(default_factory=dict)
    currency_iso_code: Optional[str] = None
    custom_fields: Dict[str, Any] = field(default_factory=dict)
    customer_details: Dict[str, Any] = field(default_factory=dict)
    cvv_response_code: Optional[str] = None
    descriptor: Dict[str, Any] = field(default_factory=dict)
    disbursement_details: Optional[Dict[str, Any]] = None
    discounts: List[Any] = field(default_factory=list)
    disputes: List[Any] = field(default_factory=list)
    escrow_status: Optional[str] = None
    gateway_rejection_reason: Optional[str] = None
    id: Optional[str] = None
    merchant_account_id: Optional[str] = None
    order_id: Optional[str] = None
    payment_instrument_type: Optional[str] = None
    paypal: Dict[str, Any] = field(default_factory=dict)
    plan_id: Optional[str] = None
    processor_authorization_code: Optional[str] = None
    processor_response_code: Optional[str] = None
    processor_response_text: Optional[str] = None
    processor_settlement_response_code: Optional[str] = None
    processor_settlement_response_text: Optional[str] = None
    purchase_order_number: Optional[str] = None
    recurring: Optional[Any] = None
    refund_ids: Optional[Any] = None
    refunded_transaction_id: Optional[str] = None
    risk_data: Optional[Any] = None
    service_fee_amount: str | int = 0
    settlement_batch_id: Optional[str] = None
    shipping_details: Dict[str, Any] = field(default_factory=dict)
    status: Optional[str] = None
    status_history: Optional[Any] = None
    subscription_details: Dict[str, Any] = field(default_factory=dict)
    subscription_id: Optional[str] = None
    tax_amount: str | int = 0
    tax_exempt: bool = False
    type: Optional[str] = None
    updated_at: Optional[str] = None
    voice_referral_number: Optional[str] = None

    @classmethod
    def construct(cls, data: Any) -> Any:
        """
        Convert a map, or a list of maps, into transactions.

        Add-ons are converted into AddOn records as well.

        Example:
            Transaction.construct({"subscription_id": "subxid",
                                   "status": "submitted_for_settlement"})
        """
        if isinstance(data, cls):
            return data

        transaction = super().construct(data)
        if not isinstance(transaction, cls):
            return transaction

        return replace(transaction, add_ons=AddOn.construct(transaction.add_ons or []))

