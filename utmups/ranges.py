"""Legal ranges of geographic and UTM/UPS coordinates.

The projected ranges are 100 km larger than those allowed for MGRS. This gives
generous overlaps between UTM zones and between UTM and UPS, and it keeps forward
and reverse conversions closed: the output of one is legal input for the other.
"""

import math
from types import MappingProxyType
from typing import NamedTuple

from utmups.errors import InputRangeError, OutOfRangeError

KM = 1000.0


class RangeEntry(NamedTuple):
    """False origin and legal easting/northing range for one kind and hemisphere.

    All values are in meters.
    """

    false_easting: float
    false_northing: float
    min_easting: float
    max_easting: float
    min_northing: float
    max_northing: float


# Keyed by (utmp, northp). UTM northings may continue across the equator, hence the
# negative minimum for the northern label and the 19600 km maximum for the southern.
RANGE_TABLE: MappingProxyType[tuple[bool, bool], RangeEntry] = MappingProxyType(
    {
        (True, True): RangeEntry(
            500 * KM, 0 * KM, 0 * KM, 1000 * KM, -9100 * KM, 9600 * KM
        ),
        (True, False): RangeEntry(
            500 * KM, 10000 * KM, 0 * KM, 1000 * KM, 900 * KM, 19600 * KM
        ),
        (False, True): RangeEntry(
            2000 * KM, 2000 * KM, 1200 * KM, 2800 * KM, 1200 * KM, 2800 * KM
        ),
        (False, False): RangeEntry(
            2000 * KM, 2000 * KM, 700 * KM, 3100 * KM, 700 * KM, 3100 * KM
        ),
    }
)


def get_range_entry(utmp: bool, northp: bool) -> RangeEntry:
    """Returns the RangeEntry for a projection kind and hemisphere."""
    return RANGE_TABLE[(bool(utmp), bool(northp))]


def check_lat_lon(lat: float, lon: float) -> None:
    """Raise InputRangeError unless the latitude and longitude are legal.

    Latitude must be in [-90, 90] and longitude must be finite and in [-540, 540).
    """
    if not (-90 <= lat <= 90):
        raise InputRangeError(f"Latitude {lat}d not in [-90d, 90d]")
    if not (math.isfinite(lon) and -540 <= lon < 540):
        raise InputRangeError(f"Longitude {lon}d not in [-540d, 540d)")


def _describe(utmp: bool, northp: bool) -> str:
    return f"{'UTM' if utmp else 'UPS'} range for {'N' if northp else 'S'} hemisphere"


def check_coords(utmp: bool, northp: bool, x: float, y: float) -> None:
    """Raise OutOfRangeError unless the easting and northing are in the legal range.

    Args:
        utmp: whether the coordinates are UTM (else UPS).
        northp: whether they are labelled with the northern hemisphere.
        x: easting in meters, including the false easting.
        y: northing in meters, including the false northing.
    """
    entry = get_range_entry(utmp, northp)
    if not (entry.min_easting <= x <= entry.max_easting):
        raise OutOfRangeError(
            f"Easting {x / KM}km not in {_describe(utmp, northp)} "
            f"[{entry.min_easting / KM}km, {entry.max_easting / KM}km]"
        )
    if not (entry.min_northing <= y <= entry.max_northing):
        raise OutOfRangeError(
            f"Northing {y / KM}km not in {_describe(utmp, northp)} "
            f"[{entry.min_northing / KM}km, {entry.max_northing / KM}km]"
        )
