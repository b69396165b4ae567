"""Ellipsoidal projections used by the UTM/UPS conversions."""

from .projection import EllipsoidProjection, RawGeographic, RawProjection
from .pyproj_projection import PyprojProjection, TMAlgorithm

__all__ = (
    "EllipsoidProjection",
    "PyprojProjection",
    "RawGeographic",
    "RawProjection",
    "TMAlgorithm",
)
