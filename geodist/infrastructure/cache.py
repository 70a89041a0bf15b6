"""
Sharded in-process lookup cache.

Keys are spread over a fixed number of shards, each guarded by its own
``threading.Lock``, so unrelated keys never contend on one global lock and
the cache is safe to share between event-loop tasks and worker threads.

``get_or_load`` implements cache-aside: the loader runs with **no** shard
lock held, and two concurrent misses for the same key may both run it.
The second insert simply overwrites the first with an equal value; there is
no single-flight de-duplication.

Entries never expire.  The size bound is applied per shard: each shard holds
at most ``ceil(maxsize / shards)`` entries and drops its oldest insertion
when full, so an unevenly filled shard can evict while the cache as a whole
is below ``maxsize``.  An evicted key is simply loaded again on its next miss.
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Awaitable, Callable, Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING = object()


class _Shard:
    __slots__ = ("lock", "entries", "capacity")

    def __init__(self, capacity: int) -> None:
        self.lock = threading.Lock()
        self.entries: OrderedDict = OrderedDict()
        self.capacity = capacity


class ShardedCache(Generic[K, V]):
    def __init__(self, maxsize: int, shards: int = 16) -> None:
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        shards = max(1, min(shards, maxsize))
        capacity = -(-maxsize // shards)
        self.maxsize = maxsize
        self._shards = [_Shard(capacity) for _ in range(shards)]

    def _shard_for(self, key: K) -> _Shard:
        return self._shards[hash(key) % len(self._shards)]

    def get(self, key: K, default=None):
        shard = self._shard_for(key)
        with shard.lock:
            return shard.entries.get(key, default)

    def __contains__(self, key: K) -> bool:
        shard = self._shard_for(key)
        with shard.lock:
            return key in shard.entries

    def insert(self, key: K, value: V) -> None:
        shard = self._shard_for(key)
        with shard.lock:
            if key not in shard.entries and len(shard.entries) >= shard.capacity:
                shard.entries.popitem(last=False)
            shard.entries[key] = value

    def __len__(self) -> int:
        total = 0
        for shard in self._shards:
            with shard.lock:
                total += len(shard.entries)
        return total

    def clear(self) -> None:
        for shard in self._shards:
            with shard.lock:
                shard.entries.clear()

    async def get_or_load(self, key: K, loader: Callable[[], Awaitable[V]]) -> V:
        """Return the cached value for *key*, loading and storing it on a miss.

        ``None`` is a valid cached value.  If *loader* raises, nothing is
        stored and the exception propagates.
        """
        value = self.get(key, _MISSING)
        if value is not _MISSING:
            return value

        value = await loader()
        self.insert(key, value)
        return value
