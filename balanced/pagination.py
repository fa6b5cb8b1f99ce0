"""Offset/limit pagination for list endpoints.

List responses carry a ``meta`` envelope::

    {"limit": 10, "offset": 0, "total": 42,
     "first": "/cards?limit=10&offset=0", "href": "...", "last": "...",
     "next": "/cards?limit=10&offset=10", "previous": null}
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterator, List, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

__all__ = ["DEFAULT_OFFSET", "DEFAULT_LIMIT", "PageParams", "Pagination", "Page"]

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 10

T = TypeVar("T")


@dataclass
class PageParams:
    """Query for one page of a collection: offset, limit and named filters."""

    offset: Optional[int] = None
    limit: Optional[int] = None
    filters: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_args(cls, *args: Any, **filters: Any) -> "PageParams":
        """Merge positional list arguments into one ``PageParams``.

        Bare ints map positionally: the first is the offset, the second the
        limit, any further ints are ignored. Mappings and keyword arguments
        merge as filters; a ``PageParams`` merges field by field.
        """
        params = cls()
        num_ints = 0
        for arg in args:
            if isinstance(arg, PageParams):
                if arg.offset is not None:
                    params.offset = arg.offset
                if arg.limit is not None:
                    params.limit = arg.limit
                params.filters.update(arg.filters)
            elif isinstance(arg, int) and not isinstance(arg, bool):
                num_ints += 1
                if num_ints == 1:
                    params.offset = arg
                elif num_ints == 2:
                    params.limit = arg
            elif isinstance(arg, Mapping):
                params.filters.update(arg)
            else:
                raise TypeError(f"unexpected pagination argument of type {type(arg).__name__}")
        params.filters.update(filters)
        return params

    def to_query(self) -> Dict[str, Any]:
        query: Dict[str, Any] = dict(self.filters)
        # explicit offset/limit win over same-named filters
        if self.offset is not None:
            query["offset"] = self.offset
        if self.limit is not None:
            query["limit"] = self.limit
        return query


class Pagination(BaseModel):
    """Pagination summary rebuilt from a response ``meta`` envelope."""

    model_config = ConfigDict(extra="ignore")

    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET
    total: int = 0
    first: Optional[str] = None
    href: Optional[str] = None
    last: Optional[str] = None
    next: Optional[str] = None
    previous: Optional[str] = None

    @classmethod
    def from_meta(cls, meta: Optional[Mapping[str, Any]]) -> "Pagination":
        # null limit/offset fall back to the default page shape
        data = {k: v for k, v in (meta or {}).items() if v is not None}
        return cls.model_validate(data)

    @property
    def has_next(self) -> bool:
        return bool(self.next)


@dataclass
class Page(Generic[T]):
    """One page of decoded records plus its pagination summary."""

    items: List[T]
    pagination: Pagination

    @property
    def total(self) -> int:
        return self.pagination.total

    @property
    def limit(self) -> int:
        return self.pagination.limit

    @property
    def offset(self) -> int:
        return self.pagination.offset

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
