"""
Reference ellipsoid constants.

All lengths are in kilometres.  ``inverse_flattening`` holds the
flattening ratio itself (``1 / 298.257...`` for WGS84), which is the value
the Vincenty solver consumes directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from .enums import Datum


@dataclass(frozen=True)
class EllipsoidParameters:
    radius_km: float
    semi_minor_axis_km: float
    inverse_flattening: float


DATUM_PARAMETERS = MappingProxyType(
    {
        Datum.WGS84: EllipsoidParameters(
            radius_km=6378.137,
            semi_minor_axis_km=6356.752314245,
            inverse_flattening=1.0 / 298.257223563,
        ),
        Datum.NAD27: EllipsoidParameters(
            radius_km=6378.2064,
            semi_minor_axis_km=6356.5838,
            inverse_flattening=1.0 / 294.9786982,
        ),
        Datum.NAD83: EllipsoidParameters(
            radius_km=6378.137,
            semi_minor_axis_km=6356.752314140347,
            inverse_flattening=1.0 / 298.257222101,
        ),
    }
)


def datum_parameters(datum: Datum) -> EllipsoidParameters:
    return DATUM_PARAMETERS[Datum(datum)]
