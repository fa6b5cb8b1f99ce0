"""Funding instruments: cards, bank accounts and bank-account verifications."""
from __future__ import annotations

from typing import Any, ClassVar, List, Optional

from pydantic import Field

from .base import Address, BalancedModel, Envelope, Resource

__all__ = [
    "Card",
    "CardEnvelope",
    "BankAccount",
    "BankAccountEnvelope",
    "Verification",
    "VerificationEnvelope",
    "ConfirmationAmounts",
]


class Card(Resource):
    """A tokenized credit or debit card.

    ``number``, ``expiration_month`` and ``expiration_year`` are required on
    create. Supplying ``name``, ``cvv`` and the address postal/country code
    reduces fraud flags and declines.
    """

    number: Optional[str] = None
    expiration_month: Optional[int] = None
    expiration_year: Optional[int] = None
    cvv: Optional[str] = None
    name: Optional[str] = None  # name on card
    address: Optional[Address] = None
    customer: Optional[str] = None  # "/customers/{id}" when associating

    # set by the server
    brand: Optional[str] = None  # e.g. "MasterCard"
    fingerprint: Optional[str] = None
    cvv_match: Optional[str] = None  # e.g. "yes"
    cvv_result: Optional[str] = None  # e.g. "Match"
    avs_postal_match: Optional[Any] = None
    avs_street_match: Optional[Any] = None
    avs_result: Optional[Any] = None
    is_verified: Optional[bool] = None


class CardEnvelope(Envelope):
    collection: ClassVar[str] = "cards"
    items: List[Card] = Field(default_factory=list, alias="cards")


class BankAccount(Resource):
    account_number: Optional[str] = None
    routing_number: Optional[str] = None
    account_type: Optional[str] = None  # "checking" or "savings"
    name: Optional[str] = None
    address: Optional[Address] = None
    customer: Optional[str] = None

    bank_name: Optional[str] = None
    can_credit: Optional[bool] = None
    can_debit: Optional[bool] = None
    fingerprint: Optional[str] = None


class BankAccountEnvelope(Envelope):
    collection: ClassVar[str] = "bank_accounts"
    items: List[BankAccount] = Field(default_factory=list, alias="bank_accounts")


class Verification(Resource):
    """Micro-deposit ownership check for a bank account.

    Creating one sends two deposits under $1 to the account. The owner has
    three attempts to confirm the amounts; after that a new verification must
    be created. Only one verification exists per bank account at a time.
    """

    attempts: Optional[int] = None  # e.g. 0
    attempts_remaining: Optional[int] = None  # e.g. 3
    deposit_status: Optional[str] = None  # e.g. "succeeded"
    verification_status: Optional[str] = None  # e.g. "pending"


class VerificationEnvelope(Envelope):
    collection: ClassVar[str] = "bank_account_verifications"
    items: List[Verification] = Field(default_factory=list, alias="bank_account_verifications")


class ConfirmationAmounts(BalancedModel):
    """Body of a verification confirmation attempt (amounts in cents)."""

    amount_1: int
    amount_2: int
