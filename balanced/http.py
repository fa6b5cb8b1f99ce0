"""Shared HTTP plumbing for the Balanced REST API.

Uses a synchronous `httpx.Client` with:
* Base URL from env (see `balanced.BASE_URL`)
* HTTP basic auth, the API secret as username and an empty password
* Accept header pinned to API revision 1.1
* Prometheus counter + histogram (labels: method, endpoint, status)

No retry loop: every error reaches the caller.
Tests patch the transport with `httpx.MockTransport`.
"""
from __future__ import annotations

import json
import logging
import time
from typing import Any, Mapping, Optional

import httpx
from pydantic import TypeAdapter
from pydantic_core import to_jsonable_python

from . import API_REVISION, BASE_URL, USER_AGENT
from .errors import BalancedAPIError, ErrorEnvelope
from .metrics import endpoint_label, http_latency_seconds, http_requests_total

__all__ = ["BalancedHTTP", "ACCEPT", "encode_query", "encode_body"]

_LOG = logging.getLogger(__name__)

ACCEPT = f"application/vnd.api+json;revision={API_REVISION}"

_ERROR_ENVELOPE = TypeAdapter(Optional[ErrorEnvelope])


def encode_query(params: Optional[Mapping[str, Any]]) -> dict[str, str]:
    """Flatten a query mapping into string values (``True`` -> ``"true"``)."""
    if not params:
        return {}
    out: dict[str, str] = {}
    for key, value in params.items():
        if isinstance(value, bool):
            out[key] = "true" if value else "false"
        else:
            out[key] = str(value)
    return out


def encode_body(body: Any) -> bytes:
    """JSON-encode a request body; unset (None) record fields are dropped."""
    payload = to_jsonable_python(body, by_alias=True, exclude_none=True)
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def _is_sink(target: Any) -> bool:
    return not isinstance(target, type) and callable(getattr(target, "write", None))


class BalancedHTTP:
    """Builds, authenticates and sends a single request per call."""

    def __init__(
        self,
        secret: Optional[str] = None,
        *,
        base_url: str = BASE_URL,
        client: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._secret = secret or None
        # secret as username, empty password
        self._auth = (
            httpx.BasicAuth(self._secret, "") if self._secret is not None else httpx.USE_CLIENT_DEFAULT
        )
        self._base_url = httpx.URL(base_url if base_url.endswith("/") else f"{base_url}/")
        self._own_client = client is None
        self._client = client or httpx.Client(transport=transport)

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def has_secret(self) -> bool:
        return self._secret is not None

    # --- request building -------------------------------------------------

    def resolve(self, path: str) -> httpx.URL:
        return self._base_url.join(path)

    def build_request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> httpx.Request:
        url = self.resolve(path)
        query = encode_query(params)
        if query:
            url = url.copy_merge_params(query)

        headers = {"Accept": ACCEPT, "User-Agent": USER_AGENT}
        content: Optional[bytes] = None
        if body is not None:
            content = encode_body(body)
            headers["Content-Type"] = "application/json"

        return self._client.build_request(method, url, headers=headers, content=content)

    # --- sending ----------------------------------------------------------

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        *,
        into: Any = None,
    ) -> Any:
        """Send one request.

        ``into`` may be a pydantic model class (the decoded model is returned),
        an object with a ``write`` method (the raw body is streamed into it and
        the response is returned) or None (the response is returned).
        """
        request = self.build_request(method, path, params, body)
        endpoint = endpoint_label(request.url.path)
        stream = _is_sink(into)

        start = time.perf_counter()
        try:
            response = self._client.send(request, stream=stream, auth=self._auth)
        except httpx.HTTPError:
            http_requests_total.labels(method, endpoint, "error").inc()
            raise
        finally:
            http_latency_seconds.labels(method, endpoint).observe(time.perf_counter() - start)
        http_requests_total.labels(method, endpoint, str(response.status_code)).inc()
        _LOG.debug("%s %s -> %s", method, request.url, response.status_code)

        try:
            self._check_response(response, method, str(request.url))
            if into is None:
                return response
            if stream:
                for chunk in response.iter_bytes():
                    into.write(chunk)
                return response
            return into.model_validate_json(response.content)
        finally:
            if stream:
                response.close()

    def _check_response(self, response: httpx.Response, method: str, url: str) -> None:
        if 200 <= response.status_code <= 299:
            return
        data = response.read()
        # an empty or `null` body decodes to no errors
        envelope = _ERROR_ENVELOPE.validate_json(data) if data else None
        errors = envelope.errors if envelope is not None else []
        err = BalancedAPIError(response, errors, method=method, url=url)
        _LOG.warning(
            "Balanced API error: %s",
            err,
            extra={
                "method": method,
                "url": url,
                "status": response.status_code,
                "request_id": err.request_id,
            },
        )
        raise err

    # --- verbs ------------------------------------------------------------

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None, *, into: Any = None):
        return self.request("GET", path, params, None, into=into)

    def post(self, path: str, body: Any = None, *, params: Optional[Mapping[str, Any]] = None, into: Any = None):
        return self.request("POST", path, params, body, into=into)

    def put(self, path: str, body: Any = None, *, params: Optional[Mapping[str, Any]] = None, into: Any = None):
        return self.request("PUT", path, params, body, into=into)

    def delete(self, path: str, *, params: Optional[Mapping[str, Any]] = None, into: Any = None):
        return self.request("DELETE", path, params, None, into=into)

    # --- lifecycle --------------------------------------------------------

    def close(self) -> None:
        if self._own_client:
            self._client.close()

    def __enter__(self) -> "BalancedHTTP":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
