"""
Shared test fixtures.

Uses an in-memory SQLite database (via aiosqlite) seeded with a handful of
airports, including placeholder ``N/A`` rows that every query must ignore.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from geodist.domain.entities import Airport
from geodist.infrastructure.database import Base
from geodist.infrastructure.models import UNUSABLE_AIRPORT_NAME, AirportModel

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


# ── Sample data ───────────────────────────────────────────────────────

AIRPORT_ROWS = [
    ("EPKK", "KRK", "Krakow Balice", "Krakow", "Poland", 50.077778, 19.784722),
    ("EPWA", "WAW", "Warsaw Chopin", "Warsaw", "Poland", 52.165833, 20.967222),
    ("EGLL", "LHR", "London Heathrow", "London", "United Kingdom", 51.4775, -0.461389),
    ("KJFK", "JFK", "John F Kennedy International", "New York", "United States", 40.639722, -73.778889),
    # Second placeholder row for a valid code, and a code with only a placeholder
    ("XXXX", "WAW", UNUSABLE_AIRPORT_NAME, "N/A", "N/A", 0.0, 0.0),
    ("ZZZZ", "ZZZ", UNUSABLE_AIRPORT_NAME, "N/A", "N/A", 0.0, 0.0),
]


def make_airport(
    iata_code: str = "KRK",
    lat: float = 50.077778,
    lon: float = 19.784722,
    name: str = "Krakow Balice",
    airport_id: int = 1,
) -> Airport:
    return Airport(
        id=airport_id,
        icao_code="E" + iata_code,
        iata_code=iata_code,
        name=name,
        city="City",
        country="Country",
        lat_deg=int(abs(lat)),
        lat_min=0,
        lat_sec=0,
        lat_dir="N" if lat >= 0 else "S",
        lon_deg=int(abs(lon)),
        lon_min=0,
        lon_sec=0,
        lon_dir="E" if lon >= 0 else "W",
        altitude=0,
        lat_decimal=lat,
        lon_decimal=lon,
    )


def _row(icao, iata, name, city, country, lat, lon) -> AirportModel:
    return AirportModel(
        icao_code=icao,
        iata_code=iata,
        name=name,
        city=city,
        country=country,
        lat_deg=int(abs(lat)),
        lat_min=0,
        lat_sec=0,
        lat_dir="N" if lat >= 0 else "S",
        lon_deg=int(abs(lon)),
        lon_min=0,
        lon_sec=0,
        lon_dir="E" if lon >= 0 else "W",
        altitude=100,
        lat_decimal=lat,
        lon_decimal=lon,
    )


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def airport_factory():
    return make_airport


@pytest.fixture
def krk() -> Airport:
    return make_airport("KRK", 50.077778, 19.784722)


@pytest.fixture
def waw() -> Airport:
    return make_airport("WAW", 52.165833, 20.967222, name="Warsaw Chopin", airport_id=2)


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Create and seed the airport table, yield a session factory, then drop it."""
    engine = create_async_engine(TEST_DB_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        session.add_all([_row(*r) for r in AIRPORT_ROWS])
        await session.commit()

    yield factory

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()
