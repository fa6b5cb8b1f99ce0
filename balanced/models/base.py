"""Shared pieces of the Balanced record models.

Records mirror the remote JSON schema and carry no client-side behavior.
Unknown server fields are ignored; unset fields stay ``None`` and are dropped
when a record is sent back as a request body.
"""
from __future__ import annotations

import datetime as _dt
from typing import Annotated, Any, ClassVar, Dict, List, Optional, Union

from dateutil.parser import isoparse as _isoparse
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from ..errors import BalancedError
from ..pagination import Page, Pagination

__all__ = [
    "BalancedModel",
    "Resource",
    "Address",
    "Envelope",
    "Timestamp",
    "parse_timestamp",
]


def parse_timestamp(value: Union[str, _dt.datetime, None]) -> Optional[_dt.datetime]:
    """Parse an API timestamp into an aware UTC datetime.

    The API emits ISO-8601 strings with a trailing ``Z`` and fractional
    seconds; naive values are taken to be UTC already.
    """
    if value is None or value == "":
        return None
    dt = value if isinstance(value, _dt.datetime) else _isoparse(value)
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        return dt.replace(tzinfo=_dt.timezone.utc)
    return dt.astimezone(_dt.timezone.utc)


Timestamp = Annotated[Optional[_dt.datetime], BeforeValidator(parse_timestamp)]


class BalancedModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Address(BalancedModel):
    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country_code: Optional[str] = None  # ISO 3166-1 alpha-3


class Resource(BalancedModel):
    """Fields every Balanced entity carries."""

    id: Optional[str] = None
    href: Optional[str] = None  # e.g. "/cards/CC2t9628l4ecJics6T8RuLPf"
    meta: Optional[Dict[str, Any]] = None
    links: Optional[Dict[str, Any]] = None
    created_at: Timestamp = None
    updated_at: Timestamp = None


class Envelope(BalancedModel):
    """Response wrapper: ``{"<collection>": [...], "links": {...}, "meta": {...}}``.

    Subclasses alias ``items`` to the collection key of their resource.
    """

    collection: ClassVar[str] = ""

    items: List[Any] = Field(default_factory=list)
    links: Optional[Dict[str, Any]] = None
    meta: Optional[Dict[str, Any]] = None

    def first(self) -> Any:
        if not self.items:
            raise BalancedError(f"response contained no {self.collection or 'records'}")
        return self.items[0]

    def page(self) -> Page:
        return Page(items=list(self.items), pagination=Pagination.from_meta(self.meta))
