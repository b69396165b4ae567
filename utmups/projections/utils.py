"""Longitude helpers shared by the projections and the transformer."""

import math


def normalize_lon(lon: float) -> float:
    """Reduce a longitude in degrees to (-180, 180]."""
    lon = math.fmod(lon, 360)
    if lon <= -180:
        lon += 360
    elif lon > 180:
        lon -= 360
    return lon


def lon_diff(lon0: float, lon: float) -> float:
    """Returns lon - lon0 reduced to [-180, 180)."""
    dlon = lon - lon0
    return dlon - 360 * math.floor((dlon + 180) / 360)
