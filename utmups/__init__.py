"""Conversions between geographic coordinates and UTM/UPS."""

from .config import ProjectionConfig
from .errors import InputRangeError, OutOfRangeError, UTMUPSError
from .transformer import (
    CoordinateTransformer,
    GeographicPoint,
    ProjectedPoint,
    ProjectionResult,
    ReverseResult,
    forward,
    forward_point,
    reverse,
    reverse_point,
    transfer,
)
from .zones import Hemisphere, ZoneOverride, decode_zone, encode_zone, standard_zone

__all__ = (
    "CoordinateTransformer",
    "GeographicPoint",
    "Hemisphere",
    "InputRangeError",
    "OutOfRangeError",
    "ProjectedPoint",
    "ProjectionConfig",
    "ProjectionResult",
    "ReverseResult",
    "UTMUPSError",
    "ZoneOverride",
    "decode_zone",
    "encode_zone",
    "forward",
    "forward_point",
    "reverse",
    "reverse_point",
    "standard_zone",
    "transfer",
)
