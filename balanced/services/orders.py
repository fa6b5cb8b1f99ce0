from __future__ import annotations

from typing import Any, Mapping

from ..models import Order, OrderEnvelope
from ..pagination import Page
from .base import ResourceService, resource_path

__all__ = ["OrderService"]


class OrderService(ResourceService):
    path = "/orders"
    envelope = OrderEnvelope

    def create(self, customer_id: str, order: Order) -> Order:
        """Open an order whose merchant is ``customer_id``."""
        return self._create(resource_path("/customers", customer_id, "orders"), order)

    def fetch(self, order_id: str) -> Order:
        return self._fetch(order_id)

    def list(self, *args: Any, **filters: Any) -> Page[Order]:
        return self._list(self.path, *args, **filters)

    def update(self, order_id: str, params: Mapping[str, Any]) -> Order:
        return self._update(order_id, params)
