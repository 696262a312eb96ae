"""Id generators injected into the importers.

An id factory is any callable taking a prefix ("recipe", "ingredient", ...) and
returning a fresh string id.
"""
import itertools
from uuid import uuid4


def uuid_ids(prefix: str) -> str:
    return f"{prefix}-{uuid4()}"


class CounterIds:
    """Deterministic ids: "<prefix>-1", "<prefix>-2", ... (one shared counter)."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def __call__(self, prefix: str) -> str:
        return f"{prefix}-{next(self._counter)}"


__all__ = ['uuid_ids', 'CounterIds']
