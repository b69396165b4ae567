"""Base class for the ellipsoidal projections used by UTM and UPS."""

from typing import NamedTuple


class RawProjection(NamedTuple):
    """Projected coordinates relative to the projection origin (no false origin).

    x and y are in meters, convergence is in degrees and scale is dimensionless.
    """

    x: float
    y: float
    convergence: float
    scale: float


class RawGeographic(NamedTuple):
    """Geographic coordinates in degrees, with convergence and scale at the point."""

    lat: float
    lon: float
    convergence: float
    scale: float


class EllipsoidProjection:
    """Maps geographic coordinates to transverse Mercator and polar stereographic.

    Implementations are parameterized by the ellipsoid and the central scale factors,
    and must be safe to call from several threads at once.
    """

    def forward_tm(self, lat: float, lon: float, lon0: float) -> RawProjection:
        """Transverse Mercator projection about the central meridian lon0.

        Args:
            lat: latitude in degrees.
            lon: longitude in degrees.
            lon0: central meridian in degrees.

        Returns:
            the RawProjection
        """
        raise NotImplementedError

    def reverse_tm(self, x: float, y: float, lon0: float) -> RawGeographic:
        """Inverse transverse Mercator projection about the central meridian lon0."""
        raise NotImplementedError

    def forward_ps(self, northp: bool, lat: float, lon: float) -> RawProjection:
        """Polar stereographic projection about the north (northp) or south pole."""
        raise NotImplementedError

    def reverse_ps(self, northp: bool, x: float, y: float) -> RawGeographic:
        """Inverse polar stereographic projection."""
        raise NotImplementedError
