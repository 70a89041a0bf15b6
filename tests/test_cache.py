"""
Tests for the sharded lookup cache.

Covers memoisation of ``None``, failed loads, capacity bounds, and the
intentional lack of single-flight: concurrent misses for one key may all
run the loader.
"""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from geodist.infrastructure.cache import ShardedCache


class TestShardedCache:
    def test_get_missing_returns_default(self):
        cache = ShardedCache(4)
        assert cache.get("KRK") is None
        assert cache.get("KRK", "fallback") == "fallback"

    def test_insert_and_get(self):
        cache = ShardedCache(4)
        cache.insert("KRK", 1)
        assert cache.get("KRK") == 1
        assert "KRK" in cache
        assert len(cache) == 1

    def test_insert_same_key_overwrites(self):
        cache = ShardedCache(4)
        cache.insert("KRK", 1)
        cache.insert("KRK", 2)
        assert cache.get("KRK") == 2
        assert len(cache) == 1

    def test_bounded_drops_oldest(self):
        cache = ShardedCache(2, shards=1)
        cache.insert("a", 1)
        cache.insert("b", 2)
        cache.insert("c", 3)
        assert len(cache) == 2
        assert "a" not in cache
        assert cache.get("c") == 3

    def test_shard_count_never_exceeds_capacity(self):
        cache = ShardedCache(1, shards=16)
        cache.insert("a", 1)
        cache.insert("b", 2)
        assert len(cache) == 1

    def test_rejects_empty_capacity(self):
        with pytest.raises(ValueError):
            ShardedCache(0)

    def test_clear(self):
        cache = ShardedCache(8)
        cache.insert("a", 1)
        cache.clear()
        assert len(cache) == 0

    def test_concurrent_inserts_from_threads(self):
        cache = ShardedCache(1000, shards=8)

        def fill(start: int) -> None:
            for i in range(start, start + 100):
                cache.insert(f"key-{i}", i)

        with ThreadPoolExecutor(max_workers=4) as pool:
            list(pool.map(fill, range(0, 400, 100)))

        assert len(cache) == 400
        assert cache.get("key-399") == 399


class TestGetOrLoad:
    @pytest.mark.asyncio
    async def test_loader_runs_once_per_key(self):
        cache = ShardedCache(4)
        calls = 0

        async def load():
            nonlocal calls
            calls += 1
            return "value"

        assert await cache.get_or_load("k", load) == "value"
        assert await cache.get_or_load("k", load) == "value"
        assert calls == 1

    @pytest.mark.asyncio
    async def test_none_is_memoised(self):
        cache = ShardedCache(4)
        calls = 0

        async def load():
            nonlocal calls
            calls += 1
            return None

        assert await cache.get_or_load("missing", load) is None
        assert await cache.get_or_load("missing", load) is None
        assert calls == 1

    @pytest.mark.asyncio
    async def test_failed_load_is_not_cached(self):
        cache = ShardedCache(4)

        async def broken():
            raise RuntimeError("store down")

        async def working():
            return 42

        with pytest.raises(RuntimeError):
            await cache.get_or_load("k", broken)
        assert "k" not in cache
        assert await cache.get_or_load("k", working) == 42

    @pytest.mark.asyncio
    async def test_concurrent_misses_may_both_load(self):
        cache = ShardedCache(4)
        release = asyncio.Event()
        calls = 0

        async def load():
            nonlocal calls
            calls += 1
            await release.wait()
            return "value"

        first = asyncio.create_task(cache.get_or_load("k", load))
        second = asyncio.create_task(cache.get_or_load("k", load))
        while calls < 2:
            await asyncio.sleep(0)
        release.set()

        assert await asyncio.gather(first, second) == ["value", "value"]
        assert calls == 2
        assert cache.get("k") == "value"
        assert len(cache) == 1

    @pytest.mark.asyncio
    async def test_other_keys_readable_while_loading(self):
        cache = ShardedCache(4, shards=1)
        cache.insert("ready", 1)
        release = asyncio.Event()

        async def slow():
            await release.wait()
            return 2

        pending = asyncio.create_task(cache.get_or_load("slow", slow))
        await asyncio.sleep(0)
        assert cache.get("ready") == 1
        release.set()
        assert await pending == 2

    @pytest.mark.asyncio
    async def test_evicted_key_is_loaded_again(self):
        cache = ShardedCache(1, shards=1)
        calls = []

        async def load_a():
            calls.append("a")
            return 1

        async def load_b():
            return 2

        await cache.get_or_load("a", load_a)
        await cache.get_or_load("b", load_b)
        assert "a" not in cache
        assert await cache.get_or_load("a", load_a) == 1
        assert calls == ["a", "a"]
