"""Single-entry memo for layout geometry.

Pickers describe everything their geometry depends on as a hashable key
(size, radius, palette version, padding, ...). The cached value is reused
until the key changes and recomputed lazily on the next read.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GeometryCache(Generic[T]):
    def __init__(self, name: str) -> None:
        self.name = name
        self._key: Hashable | None = None
        self._value: T | None = None
        self.misses = 0

    def get(self, key: Hashable, compute: Callable[[], T]) -> T:
        if self._value is None or key != self._key:
            logger.debug("%s cache miss for key %r", self.name, key)
            self._value = compute()
            self._key = key
            self.misses += 1
        return self._value

    def invalidate(self) -> None:
        self._key = None
        self._value = None

    def peek(self) -> T | None:
        """Cached value without recomputing, or None."""
        return self._value
