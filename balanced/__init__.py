"""Python binding for the Balanced Payments REST API (revision 1.1)."""
import os
from typing import Final

VERSION: Final[str] = "0.1"
API_VERSION: Final[str] = "v1.1"
API_REVISION: Final[str] = "1.1"

BASE_URL: Final[str] = os.getenv("BALANCED_BASE_URL", "https://api.balancedpayments.com/")
USER_AGENT: Final[str] = f"balanced-python/{VERSION}"

# Transaction status values
PENDING: Final[str] = "pending"
SUCCEEDED: Final[str] = "succeeded"
FAILED: Final[str] = "failed"

# Dispute outcomes
WON: Final[str] = "won"
LOST: Final[str] = "lost"

from .errors import BalancedAPIError, BalancedError, CardCreditLimitExceeded, ErrorDetail  # noqa: E402
from .client import BalancedClient  # noqa: E402

__all__ = [
    "BalancedClient",
    "BalancedError",
    "BalancedAPIError",
    "CardCreditLimitExceeded",
    "ErrorDetail",
    "VERSION",
    "API_VERSION",
    "BASE_URL",
    "PENDING",
    "SUCCEEDED",
    "FAILED",
    "WON",
    "LOST",
]
