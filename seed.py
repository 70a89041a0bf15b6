"""
Seed script -- builds a small airport dataset for local runs and reviewers.

Run once before starting the API:
    python seed.py

Creates:
  - the ``airports`` table (if missing)
  - 10 well-known airports
  - 1 placeholder row named ``N/A`` that every query ignores

The production dataset is a read-only SQLite file with the same schema;
point ``DATABASE_URL`` at it instead of seeding.
"""

import asyncio

from sqlalchemy import func, select

from geodist.infrastructure.database import Base, async_session_factory, engine
from geodist.infrastructure.models import UNUSABLE_AIRPORT_NAME, AirportModel


AIRPORTS = [
    {"icao": "EGLL", "iata": "LHR", "name": "London Heathrow", "city": "London", "country": "United Kingdom", "lat": 51.4775, "lng": -0.461389, "alt": 83},
    {"icao": "KJFK", "iata": "JFK", "name": "John F Kennedy International", "city": "New York", "country": "United States", "lat": 40.639722, "lng": -73.778889, "alt": 13},
    {"icao": "KLAX", "iata": "LAX", "name": "Los Angeles International", "city": "Los Angeles", "country": "United States", "lat": 33.9425, "lng": -118.408056, "alt": 38},
    {"icao": "KBOS", "iata": "BOS", "name": "General Edward Lawrence Logan International", "city": "Boston", "country": "United States", "lat": 42.363056, "lng": -71.006389, "alt": 6},
    {"icao": "LFPG", "iata": "CDG", "name": "Charles de Gaulle International", "city": "Paris", "country": "France", "lat": 49.009722, "lng": 2.547778, "alt": 119},
    {"icao": "EPWA", "iata": "WAW", "name": "Warsaw Chopin", "city": "Warsaw", "country": "Poland", "lat": 52.165833, "lng": 20.967222, "alt": 110},
    {"icao": "EPKK", "iata": "KRK", "name": "John Paul II International Krakow-Balice", "city": "Krakow", "country": "Poland", "lat": 50.077778, "lng": 19.784722, "alt": 241},
    {"icao": "WSSS", "iata": "SIN", "name": "Singapore Changi", "city": "Singapore", "country": "Singapore", "lat": 1.359167, "lng": 103.989444, "alt": 7},
    {"icao": "YSSY", "iata": "SYD", "name": "Sydney Kingsford Smith International", "city": "Sydney", "country": "Australia", "lat": -33.946111, "lng": 151.177222, "alt": 6},
    {"icao": "RJAA", "iata": "NRT", "name": "Narita International", "city": "Tokyo", "country": "Japan", "lat": 35.765278, "lng": 140.385556, "alt": 41},
    # Placeholder row, filtered out by every lookup
    {"icao": "ZZZZ", "iata": "ZZZ", "name": UNUSABLE_AIRPORT_NAME, "city": "N/A", "country": "N/A", "lat": 0.0, "lng": 0.0, "alt": 0},
]


def to_dms(value: float, positive: str, negative: str) -> tuple[int, int, int, str]:
    """Split a decimal angle into whole degrees, minutes, seconds and hemisphere."""
    direction = positive if value >= 0 else negative
    total_seconds = round(abs(value) * 3600)
    degrees, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return degrees, minutes, seconds, direction


async def seed():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as session:
        # Check if already seeded
        result = await session.execute(select(func.count()).select_from(AirportModel))
        if result.scalar() > 0:
            print("Database already seeded. Skipping.")
            return

        for a in AIRPORTS:
            lat_deg, lat_min, lat_sec, lat_dir = to_dms(a["lat"], "N", "S")
            lon_deg, lon_min, lon_sec, lon_dir = to_dms(a["lng"], "E", "W")
            session.add(
                AirportModel(
                    icao_code=a["icao"],
                    iata_code=a["iata"],
                    name=a["name"],
                    city=a["city"],
                    country=a["country"],
                    lat_deg=lat_deg,
                    lat_min=lat_min,
                    lat_sec=lat_sec,
                    lat_dir=lat_dir,
                    lon_deg=lon_deg,
                    lon_min=lon_min,
                    lon_sec=lon_sec,
                    lon_dir=lon_dir,
                    altitude=a["alt"],
                    lat_decimal=a["lat"],
                    lon_decimal=a["lng"],
                )
            )
        await session.commit()
        print(f"  Created {len(AIRPORTS)} airports")

    print("\nSeed complete!")


async def main():
    print("Seeding database...")
    await seed()
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
