"""Exceptions raised by the Balanced client.

Transport failures (``httpx.HTTPError``) and decoding failures propagate
unchanged; only answers from the API itself are wrapped.
"""
from __future__ import annotations

from typing import List, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "BalancedError",
    "BalancedAPIError",
    "CardCreditLimitExceeded",
    "ErrorDetail",
    "ErrorEnvelope",
]


class ErrorDetail(BaseModel):
    """One entry of the ``errors`` array in a non-2xx response."""

    model_config = ConfigDict(extra="ignore")

    status: Optional[str] = None
    category_code: Optional[str] = None
    category_type: Optional[str] = None
    description: Optional[str] = None
    request_id: Optional[str] = None
    status_code: Optional[int] = None


class ErrorEnvelope(BaseModel):
    model_config = ConfigDict(extra="ignore")

    errors: List[ErrorDetail] = Field(default_factory=list)


class BalancedError(Exception):
    """Base class for errors raised by this package."""


class BalancedAPIError(BalancedError):
    """The API answered with a status outside 200-299."""

    def __init__(
        self,
        response: httpx.Response,
        errors: Optional[List[ErrorDetail]] = None,
        *,
        method: str,
        url: str,
    ) -> None:
        self.response = response
        self.errors: List[ErrorDetail] = list(errors or [])
        self.method = method
        self.url = url
        super().__init__(str(self))

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def first_error(self) -> Optional[ErrorDetail]:
        return self.errors[0] if self.errors else None

    @property
    def category_code(self) -> Optional[str]:
        return self.first_error.category_code if self.first_error else None

    @property
    def description(self) -> str:
        if self.first_error and self.first_error.description:
            return self.first_error.description
        return ""

    @property
    def request_id(self) -> Optional[str]:
        return self.first_error.request_id if self.first_error else None

    def __str__(self) -> str:
        return f"{self.method} {self.url}: {self.status_code} {self.description}"


class CardCreditLimitExceeded(BalancedError, ValueError):
    """Card credits above the per-card cap are refused before any request."""

    def __init__(self, amount: int, limit: int) -> None:
        self.amount = amount
        self.limit = limit
        super().__init__(
            f"Cannot credit more than ${limit / 100:,.0f} to a card, "
            f"but tried crediting {amount / 100:.2f}"
        )
