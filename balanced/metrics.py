"""Prometheus metrics for Balanced API calls.

This module does NOT start an HTTP server. Embedding applications expose the
default registry the way they already do, e.g.::

    from prometheus_client import make_asgi_app
    app.mount("/metrics", make_asgi_app())
"""
from __future__ import annotations

import re
from typing import Any, Dict, Tuple, Type

from prometheus_client import Counter, Histogram

__all__ = [
    "get_metric",
    "endpoint_label",
    "http_requests_total",
    "http_latency_seconds",
]

# ----------------------------
# Registration helper (avoid duplicate collectors)
# ----------------------------
_METRICS: Dict[Tuple[Type[Any], str], Any] = {}


def get_metric(cls: Type[Any], name: str, *args, **kwargs):
    key = (cls, name)
    if key in _METRICS:
        return _METRICS[key]
    metric = cls(name, *args, **kwargs)
    _METRICS[key] = metric
    return metric


# Balanced ids are a two-letter prefix followed by a base62 token,
# e.g. CC2t9628l4ecJics6T8RuLPf
_ID_SEGMENT = re.compile(r"^[A-Z]{2}[0-9A-Za-z]{12,}$")


COLLECTIONS = frozenset(
    {
        "api_keys",
        "bank_accounts",
        "callbacks",
        "card_holds",
        "cards",
        "credits",
        "customers",
        "debits",
        "disputes",
        "events",
        "marketplaces",
        "orders",
        "refunds",
        "reversals",
        "verifications",
    }
)


def endpoint_label(path: str) -> str:
    """Collapse resource ids so label cardinality stays bounded.

    A segment is an id when it follows a collection name or looks like one.
    """
    path = path.split("?", 1)[0]
    parts: list[str] = []
    for segment in path.split("/"):
        if segment and (_ID_SEGMENT.match(segment) or (parts and parts[-1] in COLLECTIONS)):
            segment = "{id}"
        parts.append(segment)
    return "/".join(parts)


http_requests_total = get_metric(
    Counter,
    "balanced_http_requests_total",
    "HTTP requests sent to the Balanced API",
    ["method", "endpoint", "status"],
)

http_latency_seconds = get_metric(
    Histogram,
    "balanced_http_latency_seconds",
    "Latency of Balanced API requests in seconds",
    ["method", "endpoint"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10),
)
