from __future__ import annotations

import os

import pytest

from balanced import BalancedClient
from common import secrets as secrets_module
from fakes import FakeBalanced


def pytest_configure(config):
    """If pytest-socket is installed, disable sockets and allow localhost if supported."""
    if os.getenv("BALANCED_LIVE") == "1":
        return
    try:
        import pytest_socket

        pytest_socket.disable_socket()
        if hasattr(pytest_socket, "allow_hosts"):
            pytest_socket.allow_hosts(["127.0.0.1", "localhost"])
    except ImportError:
        pass


def pytest_collection_modifyitems(config, items):
    """Skip tests that talk to the live sandbox unless opted in via env."""
    if os.getenv("BALANCED_LIVE") == "1":
        return
    skip_marker = pytest.mark.skip(reason="live sandbox tests disabled (set BALANCED_LIVE=1 to run)")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_marker)


# ---------------------------------------------------------------------------
# Secrets: never read the real secrets file or the developer's environment
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _secrets(monkeypatch) -> None:
    if os.getenv("BALANCED_LIVE") != "1":
        monkeypatch.delenv("BALANCED_API_SECRET", raising=False)
    secrets_module.secrets.set_override({})
    yield
    secrets_module.secrets.reload()


# ---------------------------------------------------------------------------
# In-memory API + client wired to it
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_api() -> FakeBalanced:
    return FakeBalanced()


@pytest.fixture
def client(fake_api: FakeBalanced) -> BalancedClient:
    with BalancedClient("ak-test-secret", transport=fake_api.transport()) as c:
        yield c
