"""Conversions between geographic coordinates and UTM/UPS.

The conversions are closed: the output of forward is legal input for reverse and
vice versa, with an error of about 5 nm in each direction. This is guaranteed by
checking the projected coordinates against the legal ranges in utmups.ranges on
the way in (reverse) and on the way out (forward).
"""

import threading
from dataclasses import dataclass
from typing import NamedTuple

from utmups.config import ProjectionConfig
from utmups.const import MAX_UTM_DLON, MIN_UPS_LAT, UPS, UTM_SHIFT
from utmups.errors import OutOfRangeError
from utmups.log_utils import get_logger
from utmups.projections import EllipsoidProjection, PyprojProjection
from utmups.projections.utils import lon_diff
from utmups.ranges import check_coords, check_lat_lon, get_range_entry
from utmups.zones import (
    Hemisphere,
    ZoneOverride,
    as_northp,
    central_meridian,
    check_zone,
)

logger = get_logger(__name__)


class GeographicPoint(NamedTuple):
    """A latitude and longitude in degrees."""

    lat: float
    lon: float


@dataclass(frozen=True)
class ProjectedPoint:
    """A point in UTM (zone 1 to 60) or UPS (zone 0) coordinates.

    easting and northing are in meters and include the false origin.
    """

    zone: int
    hemisphere: Hemisphere
    easting: float
    northing: float

    @property
    def northp(self) -> bool:
        """Returns whether the point is labelled with the northern hemisphere."""
        return self.hemisphere.northp

    @property
    def utmp(self) -> bool:
        """Returns whether the point is in UTM (else UPS)."""
        return self.zone != UPS


@dataclass(frozen=True)
class ProjectionResult(ProjectedPoint):
    """Result of a forward conversion.

    convergence is the bearing of grid north clockwise from true north in degrees,
    and scale is the point scale of the projection.
    """

    convergence: float
    scale: float

    @property
    def point(self) -> ProjectedPoint:
        """Returns the projected point without convergence and scale."""
        return ProjectedPoint(self.zone, self.hemisphere, self.easting, self.northing)


@dataclass(frozen=True)
class ReverseResult:
    """Result of a reverse conversion."""

    lat: float
    lon: float
    convergence: float
    scale: float

    @property
    def point(self) -> GeographicPoint:
        """Returns the geographic point without convergence and scale."""
        return GeographicPoint(self.lat, self.lon)


class CoordinateTransformer:
    """Converts between geographic coordinates and UTM/UPS.

    The ellipsoidal projections are delegated to an EllipsoidProjection. The
    transformer itself holds no mutable state and can be shared between threads.
    """

    def __init__(self, projection: EllipsoidProjection | None = None) -> None:
        """Create a new CoordinateTransformer.

        Args:
            projection: the projection implementation, by default PROJ through
                PyprojProjection for WGS84.
        """
        self.projection = projection if projection is not None else PyprojProjection()

    @staticmethod
    def from_config(config: ProjectionConfig) -> "CoordinateTransformer":
        """Create a CoordinateTransformer from a ProjectionConfig."""
        return CoordinateTransformer(config.build_projection())

    def forward(
        self,
        lat: float,
        lon: float,
        setzone: ZoneOverride | int = ZoneOverride.standard(),
    ) -> ProjectionResult:
        """Convert geographic coordinates to UTM or UPS.

        Args:
            lat: latitude in degrees.
            lon: longitude in degrees.
            setzone: the zone preference. An integer is interpreted as by
                ZoneOverride.from_setzone: negative for the standard zone, 0 for UPS
                and 1 to 60 for a particular UTM zone.

        Returns:
            the ProjectionResult. For UTM the hemisphere is north when lat >= 0; for
            UPS it is the pole nearest the point.

        Raises:
            InputRangeError: if the latitude or longitude is illegal.
            OutOfRangeError: if the point is too far from the requested zone, or the
                resulting easting or northing is outside the legal range.
        """
        check_lat_lon(lat, lon)
        zone = ZoneOverride.from_setzone(setzone).resolve(lat, lon)
        northp = lat >= 0
        utmp = zone != UPS
        logger.debug(
            "forward lat=%s lon=%s to zone %s northp=%s", lat, lon, zone, northp
        )

        if utmp:
            lon0 = central_meridian(zone)
            dlon = abs(lon_diff(lon0, lon))
            if dlon > MAX_UTM_DLON:
                raise OutOfRangeError(
                    f"Longitude {lon}d more than {MAX_UTM_DLON}d from center of "
                    f"UTM zone {zone}"
                )
            raw = self.projection.forward_tm(lat, lon, lon0)
        else:
            if abs(lat) < MIN_UPS_LAT:
                raise OutOfRangeError(
                    f"Latitude {lat}d more than {90 - MIN_UPS_LAT}d from "
                    f"{'N' if northp else 'S'} pole"
                )
            raw = self.projection.forward_ps(northp, lat, lon)

        entry = get_range_entry(utmp, northp)
        x = raw.x + entry.false_easting
        y = raw.y + entry.false_northing
        check_coords(utmp, northp, x, y)
        return ProjectionResult(
            zone=zone,
            hemisphere=Hemisphere.from_northp(northp),
            easting=x,
            northing=y,
            convergence=raw.convergence,
            scale=raw.scale,
        )

    def reverse(
        self, zone: int, northp: Hemisphere | bool, x: float, y: float
    ) -> ReverseResult:
        """Convert UTM or UPS coordinates to geographic coordinates.

        Args:
            zone: the zone, 0 for UPS.
            northp: the hemisphere, or whether it is the northern one.
            x: easting in meters.
            y: northing in meters.

        Returns:
            the ReverseResult, with longitude in (-180, 180].

        Raises:
            InputRangeError: if the zone is not in [0, 60].
            OutOfRangeError: if the easting or northing is outside the legal range.
        """
        check_zone(zone)
        northp = as_northp(northp)
        utmp = zone != UPS
        check_coords(utmp, northp, x, y)
        logger.debug("reverse zone %s northp=%s x=%s y=%s", zone, northp, x, y)

        entry = get_range_entry(utmp, northp)
        x -= entry.false_easting
        y -= entry.false_northing
        if utmp:
            raw = self.projection.reverse_tm(x, y, central_meridian(zone))
        else:
            raw = self.projection.reverse_ps(northp, x, y)
        return ReverseResult(
            lat=raw.lat, lon=raw.lon, convergence=raw.convergence, scale=raw.scale
        )

    def forward_point(
        self,
        lat: float,
        lon: float,
        setzone: ZoneOverride | int = ZoneOverride.standard(),
    ) -> ProjectedPoint:
        """Like forward but without convergence and scale."""
        return self.forward(lat, lon, setzone).point

    def reverse_point(
        self, zone: int, northp: Hemisphere | bool, x: float, y: float
    ) -> GeographicPoint:
        """Like reverse but without convergence and scale."""
        return self.reverse(zone, northp, x, y).point

    def transfer(
        self,
        zone_in: int,
        northp_in: Hemisphere | bool,
        x: float,
        y: float,
        zone_out: ZoneOverride | int,
        northp_out: Hemisphere | bool,
    ) -> ProjectedPoint:
        """Express UTM/UPS coordinates in another zone and/or hemisphere label.

        When the zones differ the point goes through geographic coordinates. When
        only the hemisphere label changes the UTM northing is shifted by 10000 km,
        which may take it outside the legal range for reverse.

        Args:
            zone_in: the input zone, 0 for UPS.
            northp_in: the input hemisphere.
            x: input easting in meters.
            y: input northing in meters.
            zone_out: the requested zone, as for forward.
            northp_out: the requested hemisphere label.

        Returns:
            the ProjectedPoint in the output zone and hemisphere
        """
        northp_in = as_northp(northp_in)
        northp_out = as_northp(northp_out)
        setzone = ZoneOverride.from_setzone(zone_out)
        if setzone == ZoneOverride.from_setzone(zone_in):
            check_zone(zone_in)
            zone, northp = zone_in, northp_in
        else:
            lat, lon = self.reverse_point(zone_in, northp_in, x, y)
            result = self.forward(lat, lon, setzone)
            zone, northp = result.zone, result.northp
            x, y = result.easting, result.northing
        if northp != northp_out:
            if zone == UPS:
                raise OutOfRangeError(
                    "Attempt to transfer UPS coordinates between hemispheres"
                )
            y += (-1 if northp_out else 1) * UTM_SHIFT
        return ProjectedPoint(zone, Hemisphere.from_northp(northp_out), x, y)


_default_transformer: CoordinateTransformer | None = None
_default_lock = threading.Lock()


def get_default_transformer() -> CoordinateTransformer:
    """Returns the shared CoordinateTransformer for WGS84."""
    global _default_transformer
    with _default_lock:
        if _default_transformer is None:
            _default_transformer = CoordinateTransformer()
        return _default_transformer


def forward(
    lat: float, lon: float, setzone: ZoneOverride | int = ZoneOverride.standard()
) -> ProjectionResult:
    """Convert geographic coordinates to UTM/UPS on WGS84.

    See CoordinateTransformer.forward.
    """
    return get_default_transformer().forward(lat, lon, setzone)


def reverse(zone: int, northp: Hemisphere | bool, x: float, y: float) -> ReverseResult:
    """Convert UTM/UPS to geographic coordinates on WGS84.

    See CoordinateTransformer.reverse.
    """
    return get_default_transformer().reverse(zone, northp, x, y)


def forward_point(
    lat: float, lon: float, setzone: ZoneOverride | int = ZoneOverride.standard()
) -> ProjectedPoint:
    """Like forward but without convergence and scale."""
    return get_default_transformer().forward_point(lat, lon, setzone)


def reverse_point(
    zone: int, northp: Hemisphere | bool, x: float, y: float
) -> GeographicPoint:
    """Like reverse but without convergence and scale."""
    return get_default_transformer().reverse_point(zone, northp, x, y)


def transfer(
    zone_in: int,
    northp_in: Hemisphere | bool,
    x: float,
    y: float,
    zone_out: ZoneOverride | int,
    northp_out: Hemisphere | bool,
) -> ProjectedPoint:
    """Re-express UTM/UPS coordinates, see CoordinateTransformer.transfer."""
    return get_default_transformer().transfer(
        zone_in, northp_in, x, y, zone_out, northp_out
    )
