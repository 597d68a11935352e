"""Parameter Store — per-request accumulator of named statement parameters.

Invariants:
    - Keys are unique; set() is an upsert
    - Owned by exactly one RequestContext, never shared across requests
    - No IO: entries() is handed verbatim to the persistence gateway

Design Decisions:
    - The "$" marker flags a key as a named statement parameter; the SQL gateway
      binds "$wage" to ":wage" (ADR: keys stay readable in logs and tests)
"""

from collections.abc import Mapping
from typing import Any

PARAM_PREFIX = "$"


def param_key(name: str) -> str:
    """Named-parameter key for a field or identifier name."""
    return f"{PARAM_PREFIX}{name}"


class ParameterStore:
    """Mutable name → scalar mapping scoped to one request."""

    def __init__(self):
        self._store: dict[str, Any] = {}

    def set(self, key: str, value: Any) -> None:
        self._store[key] = value

    def get(self, key: str) -> Any | None:
        return self._store.get(key)

    def entry(self, key: str) -> dict[str, Any]:
        """Single-key mapping, e.g. the identifier bound to this request."""
        return {key: self._store.get(key)}

    def entries(self) -> dict[str, Any]:
        return self._store

    def unset(self, key: str) -> None:
        self._store.pop(key, None)

    def reset(self) -> None:
        self._store.clear()

    def seed(self, source: Mapping[str, Any], prefixed: bool = False) -> None:
        """Import every field of source, optionally as named parameters."""
        for key, value in source.items():
            self.set(param_key(key) if prefixed else key, value)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __repr__(self) -> str:
        return f"ParameterStore({self._store!r})"
