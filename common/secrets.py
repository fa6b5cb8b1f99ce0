"""File-backed secret lookup with an environment fallback.

Deployments mount a JSON object at ``SECRETS_PATH``, for example::

    {"BALANCED_API_SECRET": "ak-test-..."}

Local runs and CI usually export the same keys as environment variables
instead; :func:`get_secret` checks the file first and the environment second.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

__all__ = ["SecretsManager", "secrets", "get_secret", "DEFAULT_SECRETS_PATH"]

DEFAULT_SECRETS_PATH = "/var/run/secrets/balanced.json"


class SecretsManager:
    """Lazily read secrets file; tests swap its contents in memory."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path or os.getenv("SECRETS_PATH", DEFAULT_SECRETS_PATH))
        self._values: Optional[Dict[str, Any]] = None

    @property
    def values(self) -> Dict[str, Any]:
        if self._values is None:
            self._values = self._read()
        return self._values

    def _read(self) -> Dict[str, Any]:
        if not self.path.is_file():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} must hold a JSON object")
        return data

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self.values.get(key, default)

    def set_override(self, data: Dict[str, Any]) -> None:
        """Replace all cached values (test helper)."""
        self._values = dict(data)

    def update(self, data: Dict[str, Any]) -> None:
        """Merge *data* into the cached values (test helper)."""
        self.values.update(data)

    def reload(self) -> None:
        self._values = None


secrets = SecretsManager()


def get_secret(key: str, default: Optional[Any] = None) -> Any:
    """Return *key* from the secrets file, else from the environment, else *default*."""
    value = secrets.get(key)
    if value in (None, ""):
        value = os.getenv(key) or default
    return value
