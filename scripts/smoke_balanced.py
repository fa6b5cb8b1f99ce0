#!/usr/bin/env python3
"""
Smoke test for the Balanced client.

Default mode is in-memory: the client is wired to an httpx.MockTransport that
answers like the API, so no outbound network calls happen. With --live the
same flow runs against the Balanced sandbox using BALANCED_API_SECRET (from
the secrets file, the environment, or .env.local / .env at the repo root).

Prints 'BALANCED SMOKE: OK' on success and exits 0.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import httpx
from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT))

from balanced import BalancedAPIError, BalancedClient  # noqa: E402
from balanced.models import Customer  # noqa: E402
from common.logging import configure_logging  # noqa: E402

_LOG = logging.getLogger("smoke_balanced")


def _load_env() -> None:
    for f in (REPO_ROOT / ".env.local", REPO_ROOT / ".env"):
        if f.exists():
            load_dotenv(dotenv_path=f, override=False)
            _LOG.info("loaded env file %s", f)
            break


def _mock_transport() -> httpx.MockTransport:
    customers: dict[str, dict] = {}

    def handler(request: httpx.Request) -> httpx.Response:  # noqa: D401
        path = request.url.path
        if request.method == "POST" and path == "/customers":
            body = json.loads(request.content or b"{}")
            cid = f"CU{len(customers) + 1:022d}"
            customers[cid] = {**body, "id": cid, "href": f"/customers/{cid}"}
            return httpx.Response(201, json={"customers": [customers[cid]]})
        if request.method == "GET" and path == "/customers":
            meta = {"limit": 10, "offset": 0, "total": len(customers)}
            return httpx.Response(200, json={"customers": list(customers.values()), "meta": meta})
        if request.method == "DELETE" and path.startswith("/customers/"):
            customers.pop(path.rsplit("/", 1)[-1], None)
            return httpx.Response(204)
        return httpx.Response(
            404,
            json={"errors": [{"status": "Not Found", "status_code": 404, "category_code": "not-found",
                              "description": f"{path} not found", "request_id": "OHMsmoke"}]},
        )

    return httpx.MockTransport(handler)


def run(client: BalancedClient) -> None:
    before = client.customers.list()
    created = client.customers.create(Customer(name="Smoke Test", email="smoke@example.com"))
    if not created.id or not created.href:
        raise RuntimeError("created customer has no id/href")
    during = client.customers.list()
    if during.total != before.total + 1:
        raise RuntimeError(f"expected total {before.total + 1}, got {during.total}")
    if not client.customers.delete(created.id):
        raise RuntimeError("delete did not report success")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--live", action="store_true", help="call the Balanced sandbox")
    args = parser.parse_args(argv)

    configure_logging()
    if args.live:
        _load_env()
        client = BalancedClient()
        if not client.http.has_secret:
            print("SMOKE ERR: BALANCED_API_SECRET is not set", file=sys.stderr)
            client.close()
            return 1
    else:
        client = BalancedClient("ak-test-smoke", transport=_mock_transport())

    with client:
        try:
            run(client)
        except (BalancedAPIError, httpx.HTTPError, RuntimeError) as exc:
            print(f"SMOKE ERR: {exc}", file=sys.stderr)
            return 1

    print("BALANCED SMOKE: OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
