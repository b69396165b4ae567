"""Constants shared across utmups."""

WGS84_A = 6378137.0
"""Equatorial radius of the WGS84 ellipsoid in meters."""

WGS84_F = 1 / 298.257223563
"""Flattening of the WGS84 ellipsoid."""

UTM_K0 = 0.9996
"""Central scale factor for UTM."""

UPS_K0 = 0.994
"""Central scale factor for UPS."""

UPS = 0
"""Zone number used to designate UPS."""

MIN_UTM_ZONE = 1
MAX_UTM_ZONE = 60

UTM_SHIFT = 10_000_000.0
"""Difference in UTM northing between the northern and southern hemisphere labels."""

# Standard zone boundaries between UTM and UPS, closed below and open above.
MIN_UTM_LAT = -80
MAX_UTM_LAT = 84

MAX_UTM_DLON = 60
"""Longest distance in degrees from the central meridian accepted for UTM."""

MIN_UPS_LAT = 70
"""UPS is not computed more than 90 - MIN_UPS_LAT degrees from the pole."""

UTM_NORTH_EPSG_BASE = 32600
UTM_SOUTH_EPSG_BASE = 32700
UPS_NORTH_EPSG = 5041
"""EPSG code for UPS North with (E, N) axis order."""

UPS_SOUTH_EPSG = 5042
"""EPSG code for UPS South with (E, N) axis order."""

# The older WGS 84 / UPS codes with (N, E) axis order, accepted when decoding.
UPS_NORTH_EPSG_NE = 32661
UPS_SOUTH_EPSG_NE = 32761
