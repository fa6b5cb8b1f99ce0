from __future__ import annotations

import importlib.util
import logging
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "smoke_balanced.py"


@pytest.fixture
def smoke():
    spec = importlib.util.spec_from_file_location("smoke_balanced", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield module
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_offline_smoke_passes(smoke, capsys):
    assert smoke.main([]) == 0
    assert "BALANCED SMOKE: OK" in capsys.readouterr().out


def test_live_smoke_without_secret_fails_fast(smoke, capsys, monkeypatch):
    monkeypatch.setattr(smoke, "_load_env", lambda: None)
    assert smoke.main(["--live"]) == 1
    assert "BALANCED_API_SECRET is not set" in capsys.readouterr().err
