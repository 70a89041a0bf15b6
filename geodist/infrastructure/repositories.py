"""
Repository Pattern -- abstracts DB access so domain logic stays DB-agnostic.

* ``AirportStore`` runs the two read queries against the airport table and
  translates driver errors into ``StoreFault``.
* ``CachedAirportRepository`` puts cache-aside lookups in front of a store.
  The dataset is static for the life of the process, so cached entries
  (including "not found") are never invalidated.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .cache import ShardedCache
from .models import UNUSABLE_AIRPORT_NAME, AirportModel
from geodist.config import settings
from geodist.domain.entities import Airport
from geodist.domain.errors import StoreFault

logger = logging.getLogger(__name__)

_ALL_CODES_KEY = ()


def _to_entity(row: AirportModel) -> Airport:
    return Airport(
        id=row.id,
        icao_code=row.icao_code,
        iata_code=row.iata_code,
        name=row.name,
        city=row.city,
        country=row.country,
        lat_deg=row.lat_deg,
        lat_min=row.lat_min,
        lat_sec=row.lat_sec,
        lat_dir=row.lat_dir,
        lon_deg=row.lon_deg,
        lon_min=row.lon_min,
        lon_sec=row.lon_sec,
        lon_dir=row.lon_dir,
        altitude=row.altitude,
        lat_decimal=row.lat_decimal,
        lon_decimal=row.lon_decimal,
    )


class AirportStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def find_by_code(self, iata_code: str) -> Optional[Airport]:
        query = (
            select(AirportModel)
            .where(AirportModel.iata_code == iata_code)
            .where(AirportModel.name != UNUSABLE_AIRPORT_NAME)
            .limit(1)
        )
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                row = result.scalars().first()
        except SQLAlchemyError as exc:
            logger.exception("Failed to fetch airport %s from database", iata_code)
            raise StoreFault(f"Failed to fetch airport {iata_code}") from exc
        return _to_entity(row) if row is not None else None

    async def list_distinct_codes(self) -> list[str]:
        query = (
            select(AirportModel.iata_code)
            .where(AirportModel.name != UNUSABLE_AIRPORT_NAME)
            .distinct()
        )
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                codes = list(result.scalars().all())
        except SQLAlchemyError as exc:
            logger.exception("Failed to list airport codes from database")
            raise StoreFault("Failed to list airport codes") from exc
        return codes


class CachedAirportRepository:
    def __init__(
        self,
        store: AirportStore,
        airports_cache_size: int = settings.airports_cache_size,
        codes_cache_size: int = settings.codes_cache_size,
        shards: int = settings.cache_shards,
    ):
        self.store = store
        self.airports_cache: ShardedCache[str, Optional[Airport]] = ShardedCache(
            airports_cache_size, shards=shards
        )
        self.codes_cache: ShardedCache[tuple, tuple[str, ...]] = ShardedCache(
            codes_cache_size, shards=1
        )

    async def resolve(self, iata_code: str) -> Optional[Airport]:
        """Return the airport for *iata_code*, or ``None`` if it is unknown."""

        async def load() -> Optional[Airport]:
            logger.debug("Airport cache miss: %s", iata_code)
            return await self.store.find_by_code(iata_code)

        return await self.airports_cache.get_or_load(iata_code, load)

    async def list_codes(self) -> list[str]:
        """Return every known airport code once, in store order."""

        async def load() -> tuple[str, ...]:
            logger.debug("Airport codes cache miss")
            codes = await self.store.list_distinct_codes()
            return tuple(dict.fromkeys(codes))

        return list(await self.codes_cache.get_or_load(_ALL_CODES_KEY, load))
