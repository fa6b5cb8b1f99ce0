"""Event log records and the entity snapshot each event carries."""
from __future__ import annotations

from typing import ClassVar, List, Optional

from pydantic import Field

from .base import BalancedModel, Envelope, Resource, Timestamp
from .funding_instruments import BankAccount, Card, Verification
from .marketplace import Customer, Order
from .transactions import CardHold, Credit, Debit, Dispute, Refund, Reversal

__all__ = ["Event", "EventEntity", "CallbackStatuses", "EventEnvelope"]


class EventEntity(BalancedModel):
    """Snapshot of the resource an event is about, keyed by collection."""

    customers: Optional[List[Customer]] = None
    bank_accounts: Optional[List[BankAccount]] = None
    cards: Optional[List[Card]] = None
    card_holds: Optional[List[CardHold]] = None
    debits: Optional[List[Debit]] = None
    credits: Optional[List[Credit]] = None
    disputes: Optional[List[Dispute]] = None
    orders: Optional[List[Order]] = None
    refunds: Optional[List[Refund]] = None
    reversals: Optional[List[Reversal]] = None
    verifications: Optional[List[Verification]] = None


class CallbackStatuses(BalancedModel):
    failed: int = 0
    pending: int = 0
    retrying: int = 0
    succeeded: int = 0


class Event(Resource):
    type: Optional[str] = None  # e.g. "debit.created"
    occurred_at: Timestamp = None
    entity: Optional[EventEntity] = None
    callback_statuses: Optional[CallbackStatuses] = None


class EventEnvelope(Envelope):
    collection: ClassVar[str] = "events"
    items: List[Event] = Field(default_factory=list, alias="events")
