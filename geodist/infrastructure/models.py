"""
SQLAlchemy ORM models.

Tables
------
* ``airports`` -- global airport dataset, one row per airport.  Rows whose
  ``name`` is the ``N/A`` placeholder are unusable and filtered out by every
  query.

Indexes
-------
* **B-Tree** on ``iata_code`` for the by-code lookup.
"""

from sqlalchemy import Column, Float, Index, Integer, String

from .database import Base

UNUSABLE_AIRPORT_NAME = "N/A"


class AirportModel(Base):
    __tablename__ = "airports"

    id = Column(Integer, primary_key=True, autoincrement=True)
    icao_code = Column(String(4), nullable=False)
    iata_code = Column(String(3), nullable=False)
    name = Column(String(255), nullable=False)
    city = Column(String(255), nullable=False)
    country = Column(String(255), nullable=False)

    # Sexagesimal position as published in the source dataset
    lat_deg = Column(Integer, nullable=False)
    lat_min = Column(Integer, nullable=False)
    lat_sec = Column(Integer, nullable=False)
    lat_dir = Column(String(1), nullable=False)
    lon_deg = Column(Integer, nullable=False)
    lon_min = Column(Integer, nullable=False)
    lon_sec = Column(Integer, nullable=False)
    lon_dir = Column(String(1), nullable=False)
    altitude = Column(Integer, nullable=False)

    # Decimal position, used for distance calculations
    lat_decimal = Column(Float, nullable=False)
    lon_decimal = Column(Float, nullable=False)

    __table_args__ = (Index("idx_airports_iata", "iata_code"),)
