"""Money movement records: debits, credits, refunds, reversals, holds, disputes.

All amounts are integers in minor units (cents).
"""
from __future__ import annotations

from typing import ClassVar, List, Optional

from pydantic import Field

from .base import Envelope, Resource, Timestamp

__all__ = [
    "Debit",
    "DebitEnvelope",
    "Credit",
    "CreditEnvelope",
    "Refund",
    "RefundEnvelope",
    "Reversal",
    "ReversalEnvelope",
    "CardHold",
    "CardHoldEnvelope",
    "Dispute",
    "DisputeEnvelope",
]


class _Transaction(Resource):
    amount: Optional[int] = None
    currency: Optional[str] = None
    description: Optional[str] = None  # shown on the dashboard
    status: Optional[str] = None  # "pending", "succeeded" or "failed"
    transaction_number: Optional[str] = None


class Debit(_Transaction):
    """Money taken from a funding instrument (card or bank account)."""

    appears_on_statement_as: Optional[str] = None
    order: Optional[str] = None  # "/orders/{id}"
    failure_reason: Optional[str] = None
    failure_reason_code: Optional[str] = None


class DebitEnvelope(Envelope):
    collection: ClassVar[str] = "debits"
    items: List[Debit] = Field(default_factory=list, alias="debits")


class Credit(_Transaction):
    """Money paid out to a bank account or card."""

    appears_on_statement_as: Optional[str] = None
    destination: Optional[str] = None
    order: Optional[str] = None  # "/orders/{id}"
    failure_reason: Optional[str] = None
    failure_reason_code: Optional[str] = None


class CreditEnvelope(Envelope):
    collection: ClassVar[str] = "credits"
    items: List[Credit] = Field(default_factory=list, alias="credits")


class Refund(_Transaction):
    """Return of up to the full amount of a debit."""


class RefundEnvelope(Envelope):
    collection: ClassVar[str] = "refunds"
    items: List[Refund] = Field(default_factory=list, alias="refunds")


class Reversal(_Transaction):
    """Return of up to the full amount of a credit."""


class ReversalEnvelope(Envelope):
    collection: ClassVar[str] = "reversals"
    items: List[Reversal] = Field(default_factory=list, alias="reversals")


class CardHold(_Transaction):
    """Authorization reserving funds on a card without capturing them."""

    expires_at: Timestamp = None
    voided_at: Timestamp = None
    failure_reason: Optional[str] = None
    failure_reason_code: Optional[str] = None


class CardHoldEnvelope(Envelope):
    collection: ClassVar[str] = "card_holds"
    items: List[CardHold] = Field(default_factory=list, alias="card_holds")


class Dispute(Resource):
    """A chargeback raised by the card holder against a debit."""

    amount: Optional[int] = None
    currency: Optional[str] = None
    status: Optional[str] = None  # "pending", "won" or "lost"
    reason: Optional[str] = None
    initiated_at: Timestamp = None
    respond_by: Timestamp = None


class DisputeEnvelope(Envelope):
    collection: ClassVar[str] = "disputes"
    items: List[Dispute] = Field(default_factory=list, alias="disputes")
