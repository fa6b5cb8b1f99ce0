"""Record models for Balanced API resources."""

from .base import Address, BalancedModel, Envelope, Resource, Timestamp, parse_timestamp
from .events import CallbackStatuses, Event, EventEntity, EventEnvelope
from .funding_instruments import (
    BankAccount,
    BankAccountEnvelope,
    Card,
    CardEnvelope,
    ConfirmationAmounts,
    Verification,
    VerificationEnvelope,
)
from .marketplace import (
    ApiKey,
    ApiKeyEnvelope,
    Callback,
    CallbackEnvelope,
    Customer,
    CustomerEnvelope,
    Marketplace,
    MarketplaceEnvelope,
    Order,
    OrderEnvelope,
)
from .transactions import (
    CardHold,
    CardHoldEnvelope,
    Credit,
    CreditEnvelope,
    Debit,
    DebitEnvelope,
    Dispute,
    DisputeEnvelope,
    Refund,
    RefundEnvelope,
    Reversal,
    ReversalEnvelope,
)

__all__ = [
    "Address",
    "ApiKey",
    "ApiKeyEnvelope",
    "BalancedModel",
    "BankAccount",
    "BankAccountEnvelope",
    "Callback",
    "CallbackEnvelope",
    "CallbackStatuses",
    "Card",
    "CardEnvelope",
    "CardHold",
    "CardHoldEnvelope",
    "ConfirmationAmounts",
    "Credit",
    "CreditEnvelope",
    "Customer",
    "CustomerEnvelope",
    "Debit",
    "DebitEnvelope",
    "Dispute",
    "DisputeEnvelope",
    "Envelope",
    "Event",
    "EventEntity",
    "EventEnvelope",
    "Marketplace",
    "MarketplaceEnvelope",
    "Order",
    "OrderEnvelope",
    "Refund",
    "RefundEnvelope",
    "Resource",
    "Reversal",
    "ReversalEnvelope",
    "Timestamp",
    "Verification",
    "VerificationEnvelope",
    "parse_timestamp",
]
