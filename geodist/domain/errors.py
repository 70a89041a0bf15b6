"""Domain exceptions raised by the distance engine and the airport lookups."""

from __future__ import annotations


class GeodistError(Exception):
    """Base class for every error raised by the engine."""


class ConvergenceFailure(GeodistError):
    """Raised when Vincenty's iteration hits its cap without converging.

    Deterministic for a given input pair; retrying with the same formula is
    pointless, a non-iterative formula is the usual fallback.
    """


class InvalidRoute(GeodistError):
    """Raised when a route has fewer than two points."""


class StoreFault(GeodistError):
    """Raised when the airport store cannot be read on a cache miss."""


class MissingAirports(GeodistError):
    """Raised when one or more airport codes of a route are unknown."""

    def __init__(self, codes: list[str]):
        self.codes = list(codes)
        super().__init__(
            "Some airports are missing in our database: " + ", ".join(self.codes)
        )
