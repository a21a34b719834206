from __future__ import annotations

from collections import OrderedDict
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class FIFOCache(Generic[K, V]):
    """Insertion-order cache; the oldest resident entry is evicted first.

    ``max_size=None`` disables eviction entirely.
    """

    def __init__(self, max_size: int | None = 160) -> None:
        if max_size is not None and max_size <= 0:
            raise ValueError("max_size must be positive.")
        self._max_size = max_size
        self._store: OrderedDict[K, V] = OrderedDict()

    @property
    def max_size(self) -> int | None:
        return self._max_size

    def get(self, key: K) -> V | None:
        return self._store.get(key)

    def set(self, key: K, value: V) -> None:
        if key in self._store:
            return
        if self._max_size is not None and len(self._store) >= self._max_size:
            self._store.popitem(last=False)
        self._store[key] = value

    def keys(self) -> list[K]:
        return list(self._store)

    def clear(self) -> None:
        self._store.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)
