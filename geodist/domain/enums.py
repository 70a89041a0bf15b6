"""Domain enumerations: reference datums and distance formulas."""

import enum


class Datum(str, enum.Enum):
    WGS84 = "wgs84"
    NAD27 = "nad27"
    NAD83 = "nad83"


class Formula(str, enum.Enum):
    GREAT_CIRCLE = "great_circle"
    HAVERSINE = "haversine"
    VINCENTY = "vincenty"


DEFAULT_DATUM = Datum.WGS84
DEFAULT_FORMULA = Formula.GREAT_CIRCLE
