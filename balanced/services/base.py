"""Plumbing shared by the per-resource services."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional, Type

from ..http import BalancedHTTP
from ..models.base import Envelope
from ..pagination import Page, PageParams

if TYPE_CHECKING:  # pragma: no cover
    from ..client import BalancedClient

__all__ = ["ResourceService", "resource_path"]

_LOG = logging.getLogger(__name__)


def resource_path(collection_path: str, resource_id: str, *children: str) -> str:
    """``resource_path("/cards", "CC1", "debits")`` -> ``"/cards/CC1/debits"``."""
    if not resource_id:
        raise ValueError(f"empty id for {collection_path}")
    return "/".join([collection_path.rstrip("/"), str(resource_id), *children])


class ResourceService:
    """Thin façade over `BalancedHTTP` for one resource family.

    Subclasses set ``path`` (the collection path) and ``envelope`` (the
    response model) and expose only the operations the API supports.
    """

    path: str = ""
    envelope: Type[Envelope] = Envelope

    def __init__(self, client: "BalancedClient") -> None:
        self._client = client

    @property
    def http(self) -> BalancedHTTP:
        return self._client.http

    def _item_path(self, resource_id: str, *children: str) -> str:
        return resource_path(self.path, resource_id, *children)

    # ------------------------------------------------------------------
    # helpers used by the public methods of subclasses
    # ------------------------------------------------------------------

    def _create(self, path: str, body: Any = None, envelope: Optional[Type[Envelope]] = None) -> Any:
        return self.http.post(path, body, into=envelope or self.envelope).first()

    def _fetch(self, resource_id: str) -> Any:
        return self.http.get(self._item_path(resource_id), into=self.envelope).first()

    def _list(self, path: str, *args: Any, **filters: Any) -> Page:
        params = PageParams.from_args(*args, **filters)
        return self.http.get(path, params.to_query(), into=self.envelope).page()

    def _update(self, resource_id: str, params: Mapping[str, Any]) -> Any:
        return self.http.put(self._item_path(resource_id), dict(params), into=self.envelope).first()

    def _delete(self, resource_id: str) -> bool:
        response = self.http.delete(self._item_path(resource_id))
        deleted = 200 <= response.status_code < 300
        _LOG.debug("deleted %s/%s: %s", self.path, resource_id, deleted)
        return deleted
