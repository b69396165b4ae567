"""Selection of UTM zones and UPS for geographic points.

Zones are plain integers: 0 designates UPS and 1 to 60 designate the UTM
longitudinal zones.
"""

import math
import re
from dataclasses import dataclass
from enum import StrEnum

from utmups.const import (
    MAX_UTM_LAT,
    MAX_UTM_ZONE,
    MIN_UTM_LAT,
    MIN_UTM_ZONE,
    UPS,
)
from utmups.errors import InputRangeError

ZONE_PATTERN = re.compile(
    r"^\s*(?:(\d{1,2})|UPS)?\s*(N|S|NORTH|SOUTH)\s*$", re.IGNORECASE
)


class Hemisphere(StrEnum):
    """Hemisphere of a projected point.

    For UPS this designates the polar cap rather than a hemisphere of latitude.
    """

    NORTH = "N"
    SOUTH = "S"

    @property
    def northp(self) -> bool:
        """Returns whether this is the northern hemisphere."""
        return self == Hemisphere.NORTH

    @staticmethod
    def from_northp(northp: bool) -> "Hemisphere":
        """Returns the Hemisphere for a northp flag."""
        return Hemisphere.NORTH if northp else Hemisphere.SOUTH


def as_northp(hemisphere: "Hemisphere | bool") -> bool:
    """Accept either a Hemisphere or a northp flag and return the flag."""
    if isinstance(hemisphere, Hemisphere):
        return hemisphere.northp
    return bool(hemisphere)


def _check_finite(lat: float, lon: float) -> None:
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InputRangeError(f"Latitude {lat}d and longitude {lon}d must be finite")


def _reduce_lon(lon: float) -> int:
    """Returns floor(lon) reduced to [-180, 180)."""
    ilon = math.floor(math.fmod(lon, 360))
    if ilon >= 180:
        ilon -= 360
    elif ilon < -180:
        ilon += 360
    return ilon


def utm_zone(lat: float, lon: float) -> int:
    """Returns the standard UTM zone for a point, ignoring the polar caps.

    The Norway and Svalbard exceptions are applied. All the latitude and longitude
    tests are closed on the lower end and open on the upper end.

    Args:
        lat: latitude in degrees.
        lon: longitude in degrees, any multiple of 360 is accepted.

    Returns:
        the UTM zone in [1, 60]
    """
    _check_finite(lat, lon)
    ilon = _reduce_lon(lon)
    zone = (ilon + 186) // 6
    if 56 <= lat < 64 and zone == 31 and ilon >= 3:
        # Norway.
        zone = 32
    elif 72 <= lat < 84 and 0 <= ilon < 42:
        # Svalbard uses 12 degree wide zones 31, 33, 35 and 37.
        zone = 2 * ((ilon + 183) // 12) + 1
    return zone


def standard_zone(lat: float, lon: float) -> int:
    """Returns the standard zone for a point.

    Args:
        lat: latitude in degrees.
        lon: longitude in degrees.

    Returns:
        0 if the point is in the standard UPS region (latitude below -80 or at least
        84), otherwise the UTM zone including the Norway and Svalbard exceptions.
    """
    _check_finite(lat, lon)
    if MIN_UTM_LAT <= lat < MAX_UTM_LAT:
        return utm_zone(lat, lon)
    return UPS


def central_meridian(zone: int) -> float:
    """Returns the central meridian in degrees of a UTM zone."""
    return 6.0 * zone - 183


def check_zone(zone: int) -> None:
    """Raise InputRangeError unless zone is UPS or a UTM zone."""
    if not (UPS <= zone <= MAX_UTM_ZONE):
        raise InputRangeError(f"Zone {zone} not in range [{UPS}, {MAX_UTM_ZONE}]")


class OverrideKind(StrEnum):
    """The ways a caller can choose the zone for a forward conversion."""

    STANDARD = "standard"
    UTM = "utm"
    UPS = "ups"
    ZONE = "zone"


@dataclass(frozen=True)
class ZoneOverride:
    """Zone preference for a forward conversion.

    STANDARD uses standard_zone, UTM uses the standard UTM zone even within the polar
    caps, UPS forces UPS and ZONE forces a particular UTM zone.
    """

    kind: OverrideKind = OverrideKind.STANDARD
    zone: int | None = None

    def __post_init__(self) -> None:
        """Validate that only ZONE carries a zone number."""
        if self.kind == OverrideKind.ZONE:
            if self.zone is None or not (MIN_UTM_ZONE <= self.zone <= MAX_UTM_ZONE):
                raise InputRangeError(
                    f"Zone {self.zone} not in range [{MIN_UTM_ZONE}, {MAX_UTM_ZONE}]"
                )
        elif self.zone is not None:
            raise ValueError(f"zone must not be set for override kind {self.kind}")

    @staticmethod
    def standard() -> "ZoneOverride":
        """Use the standard zone."""
        return ZoneOverride(OverrideKind.STANDARD)

    @staticmethod
    def utm() -> "ZoneOverride":
        """Use the standard UTM zone, extending UTM into the polar caps."""
        return ZoneOverride(OverrideKind.UTM)

    @staticmethod
    def ups() -> "ZoneOverride":
        """Force UPS."""
        return ZoneOverride(OverrideKind.UPS)

    @staticmethod
    def force_utm(zone: int) -> "ZoneOverride":
        """Force the given UTM zone."""
        return ZoneOverride(OverrideKind.ZONE, zone)

    @staticmethod
    def from_setzone(setzone: "int | ZoneOverride") -> "ZoneOverride":
        """Convert an integer zone preference.

        Negative means the standard zone, zero means UPS and a positive number is a
        UTM zone. A ZoneOverride is returned as is.
        """
        if isinstance(setzone, ZoneOverride):
            return setzone
        if setzone < 0:
            return ZoneOverride.standard()
        if setzone == UPS:
            return ZoneOverride.ups()
        return ZoneOverride.force_utm(setzone)

    def resolve(self, lat: float, lon: float) -> int:
        """Returns the zone to use for the given point."""
        if self.kind == OverrideKind.STANDARD:
            return standard_zone(lat, lon)
        if self.kind == OverrideKind.UTM:
            return utm_zone(lat, lon)
        if self.kind == OverrideKind.UPS:
            return UPS
        if self.zone is None:
            raise ValueError(f"override kind {self.kind} requires a zone")
        return self.zone


def encode_zone(zone: int, northp: "bool | Hemisphere") -> str:
    """Returns the zone designator, e.g. "38N", or "N" / "S" for UPS."""
    check_zone(zone)
    hemisphere = Hemisphere.from_northp(as_northp(northp))
    if zone == UPS:
        return hemisphere.value
    return f"{zone}{hemisphere.value}"


def decode_zone(text: str) -> tuple[int, bool]:
    """Parse a zone designator.

    Accepted forms are a UTM zone followed by a hemisphere ("38N", "38south") and a
    bare hemisphere with an optional UPS prefix ("N", "UPSs") for UPS. Case is
    ignored.

    Args:
        text: the zone designator.

    Returns:
        a (zone, northp) tuple
    """
    match = ZONE_PATTERN.match(text)
    if match is None:
        raise InputRangeError(f"Zone designator {text!r} is malformed")
    zone = UPS
    if match.group(1) is not None:
        zone = int(match.group(1))
        if not (MIN_UTM_ZONE <= zone <= MAX_UTM_ZONE):
            raise InputRangeError(
                f"Zone {zone} in {text!r} not in range [{MIN_UTM_ZONE}, {MAX_UTM_ZONE}]"
            )
    northp = match.group(2).upper().startswith("N")
    return zone, northp
