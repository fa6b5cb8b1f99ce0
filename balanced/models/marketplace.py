"""Marketplace-level records: customers, orders, marketplaces, API keys, callbacks."""
from __future__ import annotations

from typing import ClassVar, List, Optional

from pydantic import Field

from .base import Address, Envelope, Resource

__all__ = [
    "Customer",
    "CustomerEnvelope",
    "Order",
    "OrderEnvelope",
    "Marketplace",
    "MarketplaceEnvelope",
    "ApiKey",
    "ApiKeyEnvelope",
    "Callback",
    "CallbackEnvelope",
]


class Customer(Resource):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[Address] = None
    business_name: Optional[str] = None
    ein: Optional[str] = None
    dob_month: Optional[int] = None
    dob_year: Optional[int] = None
    ssn_last4: Optional[str] = None
    merchant_status: Optional[str] = None


class CustomerEnvelope(Envelope):
    collection: ClassVar[str] = "customers"
    items: List[Customer] = Field(default_factory=list, alias="customers")


class Order(Resource):
    """Groups the transactions of one seller.

    Each order keeps its own escrow balance, separate from the marketplace
    escrow; crediting an order beyond what was debited into it fails.
    """

    amount: Optional[int] = None
    amount_escrowed: Optional[int] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    delivery_address: Optional[Address] = None


class OrderEnvelope(Envelope):
    collection: ClassVar[str] = "orders"
    items: List[Order] = Field(default_factory=list, alias="orders")


class Marketplace(Resource):
    name: Optional[str] = None
    support_email_address: Optional[str] = None
    support_phone_number: Optional[str] = None
    domain_url: Optional[str] = None
    in_escrow: Optional[int] = None
    unsettled_fees: Optional[int] = None
    production: Optional[bool] = None


class MarketplaceEnvelope(Envelope):
    collection: ClassVar[str] = "marketplaces"
    items: List[Marketplace] = Field(default_factory=list, alias="marketplaces")


class ApiKey(Resource):
    secret: Optional[str] = None  # only returned by create


class ApiKeyEnvelope(Envelope):
    collection: ClassVar[str] = "api_keys"
    items: List[ApiKey] = Field(default_factory=list, alias="api_keys")


class Callback(Resource):
    url: Optional[str] = None
    method: Optional[str] = None  # "post", "put" or "get"
    revision: Optional[str] = None


class CallbackEnvelope(Envelope):
    collection: ClassVar[str] = "callbacks"
    items: List[Callback] = Field(default_factory=list, alias="callbacks")
