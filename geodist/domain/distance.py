"""
Distance calculators  (Strategy Pattern)
========================================

Three interchangeable formulas, all returning kilometres:

* **Great Circle** -- spherical law of cosines on the datum's mean radius.
* **Haversine**    -- half-chord formulation on the same sphere; better
  conditioned for short distances.
* **Vincenty**     -- iterative inverse solution on the oblate ellipsoid.
  Fails with ``ConvergenceFailure`` for nearly antipodal points.

``create_calculator`` maps a (formula, datum) pair to a configured
calculator.  Calculators hold only constants, so one instance can be shared
freely between threads and tasks.

Complexity: O(1) per call (Vincenty: at most ``MAX_ITERATIONS`` rounds).
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .earth import datum_parameters
from .entities import Coordinates
from .enums import Datum, Formula
from .errors import ConvergenceFailure

MAX_ITERATIONS = 200
CONVERGENCE_THRESHOLD = 1e-12


# ── Strategy hierarchy ────────────────────────────────────────────────


class DistanceCalculator(ABC):
    formula: Formula

    @abstractmethod
    def calculate(self, start: Coordinates, end: Coordinates) -> float:
        """Return the distance in **km** between *start* and *end*."""


class GreatCircleDistanceCalculator(DistanceCalculator):
    formula = Formula.GREAT_CIRCLE

    def __init__(self, radius_km: float):
        self.radius_km = radius_km

    def calculate(self, start: Coordinates, end: Coordinates) -> float:
        if start == end:
            return 0.0

        lat1, lat2 = math.radians(start.latitude), math.radians(end.latitude)
        d_lon = abs(math.radians(end.longitude) - math.radians(start.longitude))

        cos_angle = (
            math.sin(lat1) * math.sin(lat2)
            + math.cos(lat1) * math.cos(lat2) * math.cos(d_lon)
        )
        # Rounding can push the cosine just outside acos' domain.
        cos_angle = min(1.0, max(-1.0, cos_angle))
        return self.radius_km * math.acos(cos_angle)


class HaversineDistanceCalculator(DistanceCalculator):
    formula = Formula.HAVERSINE

    def __init__(self, radius_km: float):
        self.radius_km = radius_km

    def calculate(self, start: Coordinates, end: Coordinates) -> float:
        lat1, lat2 = math.radians(start.latitude), math.radians(end.latitude)
        dlat = lat2 - lat1
        dlon = math.radians(end.longitude) - math.radians(start.longitude)

        a = (
            math.sin(dlat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        )
        return self.radius_km * 2 * math.asin(math.sqrt(min(1.0, a)))


class VincentyDistanceCalculator(DistanceCalculator):
    """
    Vincenty's inverse formula on an oblate ellipsoid.

    Iterates on the longitude difference on the auxiliary sphere ``λ``
    until two successive values differ by less than
    ``CONVERGENCE_THRESHOLD`` radians.  Coincident points are detected
    before ``sin α`` is computed, since ``sin σ == 0`` would divide by
    zero there.
    """

    formula = Formula.VINCENTY

    def __init__(
        self,
        radius_km: float,
        semi_minor_axis_km: float,
        inverse_flattening: float,
    ):
        self.radius_km = radius_km
        self.semi_minor_axis_km = semi_minor_axis_km
        self.inverse_flattening = inverse_flattening

    def calculate(self, start: Coordinates, end: Coordinates) -> float:
        f = self.inverse_flattening
        b = self.semi_minor_axis_km

        u1 = math.atan((1 - f) * math.tan(math.radians(start.latitude)))
        u2 = math.atan((1 - f) * math.tan(math.radians(end.latitude)))
        sin_u1, cos_u1 = math.sin(u1), math.cos(u1)
        sin_u2, cos_u2 = math.sin(u2), math.cos(u2)

        big_l = math.radians(end.longitude - start.longitude)
        lam = big_l

        for _ in range(MAX_ITERATIONS):
            sin_lam, cos_lam = math.sin(lam), math.cos(lam)
            sin_sigma = math.sqrt(
                (cos_u2 * sin_lam) ** 2
                + (cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam) ** 2
            )
            if sin_sigma == 0:
                return 0.0

            cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lam
            sigma = math.atan2(sin_sigma, cos_sigma)
            sin_alpha = cos_u1 * cos_u2 * sin_lam / math.sin(sigma)
            cos_sq_alpha = 1 - sin_alpha**2

            # Both points on the equator: cos²α is zero and cos(2σm) is
            # undefined, take it as 0.
            if cos_sq_alpha != 0:
                cos_2_sigma_m = cos_sigma - 2 * sin_u1 * sin_u2 / cos_sq_alpha
            else:
                cos_2_sigma_m = 0.0
            if math.isnan(cos_2_sigma_m):
                cos_2_sigma_m = 0.0

            c = f / 16 * cos_sq_alpha * (4 + f * (4 - 3 * cos_sq_alpha))

            previous_lam = lam
            lam = big_l + (1 - c) * f * sin_alpha * (
                sigma
                + c
                * sin_sigma
                * (cos_2_sigma_m + c * cos_sigma * (-1 + 2 * cos_2_sigma_m**2))
            )

            if abs(lam - previous_lam) < CONVERGENCE_THRESHOLD:
                break
        else:
            raise ConvergenceFailure(
                f"Failed to converge after {MAX_ITERATIONS} iterations"
            )

        u_sq = cos_sq_alpha * (self.radius_km**2 - b**2) / b**2
        big_a = 1 + u_sq / 16384 * (
            4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq))
        )
        big_b = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
        delta_sigma = (
            big_b
            * sin_sigma
            * (
                cos_2_sigma_m
                + big_b
                / 4
                * (
                    cos_sigma * (-1 + 2 * cos_2_sigma_m**2)
                    - big_b
                    / 6
                    * cos_2_sigma_m
                    * (-3 + 4 * sin_sigma**2)
                    * (-3 + 4 * cos_2_sigma_m**2)
                )
            )
        )
        return b * big_a * (sigma - delta_sigma)


# ── Factory ───────────────────────────────────────────────────────────


def create_calculator(formula: Formula, datum: Datum) -> DistanceCalculator:
    """Build the calculator for *formula*, configured with *datum*'s constants."""
    params = datum_parameters(datum)
    formula = Formula(formula)

    if formula is Formula.GREAT_CIRCLE:
        return GreatCircleDistanceCalculator(params.radius_km)
    if formula is Formula.HAVERSINE:
        return HaversineDistanceCalculator(params.radius_km)
    return VincentyDistanceCalculator(
        params.radius_km,
        params.semi_minor_axis_km,
        params.inverse_flattening,
    )
