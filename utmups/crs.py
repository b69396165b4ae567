"""EPSG codes and rasterio CRS objects for UTM/UPS zones."""

from rasterio.crs import CRS

from utmups.const import (
    MAX_UTM_ZONE,
    MIN_UTM_ZONE,
    UPS,
    UPS_NORTH_EPSG,
    UPS_NORTH_EPSG_NE,
    UPS_SOUTH_EPSG,
    UPS_SOUTH_EPSG_NE,
    UTM_NORTH_EPSG_BASE,
    UTM_SOUTH_EPSG_BASE,
)
from utmups.errors import InputRangeError
from utmups.zones import Hemisphere, as_northp, check_zone, standard_zone


def encode_epsg(zone: int, northp: Hemisphere | bool) -> int:
    """Returns the WGS84 EPSG code for a zone and hemisphere.

    UTM zones map to 326zz (north) and 327zz (south), UPS to 5041 and 5042,
    whose (E, N) axis order matches the easting and northing used here.
    """
    check_zone(zone)
    northp = as_northp(northp)
    if zone == UPS:
        return UPS_NORTH_EPSG if northp else UPS_SOUTH_EPSG
    return (UTM_NORTH_EPSG_BASE if northp else UTM_SOUTH_EPSG_BASE) + zone


def decode_epsg(epsg: int) -> tuple[int, bool]:
    """Returns the (zone, northp) for a WGS84 UTM/UPS EPSG code.

    Both the (E, N) UPS codes 5041/5042 and the (N, E) codes 32661/32761 are accepted.
    """
    if epsg in (UPS_NORTH_EPSG, UPS_NORTH_EPSG_NE):
        return UPS, True
    if epsg in (UPS_SOUTH_EPSG, UPS_SOUTH_EPSG_NE):
        return UPS, False
    for base, northp in ((UTM_NORTH_EPSG_BASE, True), (UTM_SOUTH_EPSG_BASE, False)):
        if MIN_UTM_ZONE <= epsg - base <= MAX_UTM_ZONE:
            return epsg - base, northp
    raise InputRangeError(f"EPSG:{epsg} is not a WGS84 UTM or UPS code")


def get_zone_crs(zone: int, northp: Hemisphere | bool) -> CRS:
    """Get the rasterio CRS for a zone and hemisphere."""
    return CRS.from_epsg(encode_epsg(zone, northp))


def get_utm_ups_crs(lon: float, lat: float) -> CRS:
    """Get the appropriate UTM or UPS CRS for a given lon/lat.

    The standard zone is used, including the Norway and Svalbard exceptions.

    Args:
        lon: longitude in degrees
        lat: latitude in degrees

    Returns:
        the rasterio CRS for the appropriate UTM or UPS zone
    """
    return get_zone_crs(standard_zone(lat, lon), lat >= 0)
