"""Per-resource services of the Balanced API.

Public exports:

- ApiKeyService
- BankAccountService
- CallbackService
- CardHoldService
- CardService
- CreditService
- CustomerService
- DebitService
- DisputeService
- EventService
- MarketplaceService
- OrderService
- RefundService
- ReversalService
- VerificationService
"""

from .api_keys import ApiKeyService
from .bank_accounts import BankAccountService
from .base import ResourceService
from .callbacks import CallbackService
from .card_holds import CardHoldService
from .cards import CARD_CREDIT_LIMIT, CardService
from .credits import CreditService
from .customers import CustomerService
from .debits import DebitService
from .disputes import DisputeService
from .events import EventService
from .marketplaces import MarketplaceService
from .orders import OrderService
from .refunds import RefundService
from .reversals import ReversalService
from .verifications import VerificationService

__all__ = (
    "ApiKeyService",
    "BankAccountService",
    "CallbackService",
    "CardHoldService",
    "CardService",
    "CreditService",
    "CustomerService",
    "DebitService",
    "DisputeService",
    "EventService",
    "MarketplaceService",
    "OrderService",
    "RefundService",
    "ReversalService",
    "ResourceService",
    "VerificationService",
    "CARD_CREDIT_LIMIT",
)
