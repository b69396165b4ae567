"""EllipsoidProjection backed by PROJ through pyproj."""

import threading
from enum import StrEnum

import pyproj

from utmups.const import UPS_K0, UTM_K0, WGS84_A, WGS84_F
from utmups.log_utils import get_logger
from utmups.projections.projection import (
    EllipsoidProjection,
    RawGeographic,
    RawProjection,
)
from utmups.projections.utils import normalize_lon

logger = get_logger(__name__)


class TMAlgorithm(StrEnum):
    """The transverse Mercator algorithms offered by PROJ tmerc."""

    # Krüger series accurate to a few nanometers far from the central meridian.
    PODER_ENGSAGER = "poder_engsager"
    # Faster series that is only accurate within a few degrees of it.
    EVENDEN_SNYDER = "evenden_snyder"


class PyprojProjection(EllipsoidProjection):
    """Uses the PROJ tmerc and stere operations.

    Convergence and scale come from Proj.get_factors. One Proj is created per
    central meridian and per pole and then reused.
    """

    def __init__(
        self,
        equatorial_radius: float = WGS84_A,
        flattening: float = WGS84_F,
        utm_scale_factor: float = UTM_K0,
        ups_scale_factor: float = UPS_K0,
        tm_algorithm: TMAlgorithm = TMAlgorithm.PODER_ENGSAGER,
    ) -> None:
        """Create a new PyprojProjection.

        Args:
            equatorial_radius: equatorial radius of the ellipsoid in meters.
            flattening: flattening of the ellipsoid, 0 for a sphere.
            utm_scale_factor: central scale factor for transverse Mercator.
            ups_scale_factor: scale factor at the pole for polar stereographic.
            tm_algorithm: which PROJ algorithm computes transverse Mercator.
        """
        self.equatorial_radius = equatorial_radius
        self.flattening = flattening
        self.utm_scale_factor = utm_scale_factor
        self.ups_scale_factor = ups_scale_factor
        self.tm_algorithm = TMAlgorithm(tm_algorithm)
        self._ellps = f"+a={float(equatorial_radius)!r} +f={float(flattening)!r}"
        self._projs: dict[tuple[str, float], pyproj.Proj] = {}
        self._lock = threading.Lock()

    def _get_proj(self, kind: str, origin: float) -> pyproj.Proj:
        key = (kind, origin)
        with self._lock:
            proj = self._projs.get(key)
            if proj is None:
                if kind == "tmerc":
                    definition = (
                        f"+proj=tmerc +lat_0=0 +lon_0={float(origin)!r} "
                        f"+k_0={self.utm_scale_factor!r} +x_0=0 +y_0=0 "
                        f"+algo={self.tm_algorithm.value}"
                    )
                else:
                    definition = (
                        f"+proj=stere +lat_0={float(origin)!r} +lon_0=0 "
                        f"+k_0={self.ups_scale_factor!r} +x_0=0 +y_0=0"
                    )
                definition += f" {self._ellps} +units=m +no_defs"
                logger.debug("creating Proj %s", definition)
                proj = pyproj.Proj(definition)
                self._projs[key] = proj
        return proj

    def _project(self, proj: pyproj.Proj, lat: float, lon: float) -> RawProjection:
        x, y = proj(lon, lat)
        factors = proj.get_factors(lon, lat)
        return RawProjection(
            x=float(x),
            y=float(y),
            convergence=float(factors.meridian_convergence),
            scale=float(factors.meridional_scale),
        )

    def _unproject(self, proj: pyproj.Proj, x: float, y: float) -> RawGeographic:
        lon, lat = proj(x, y, inverse=True)
        factors = proj.get_factors(lon, lat)
        return RawGeographic(
            lat=float(lat),
            lon=normalize_lon(float(lon)),
            convergence=float(factors.meridian_convergence),
            scale=float(factors.meridional_scale),
        )

    def forward_tm(self, lat: float, lon: float, lon0: float) -> RawProjection:
        """Transverse Mercator projection about the central meridian lon0."""
        return self._project(self._get_proj("tmerc", lon0), lat, lon)

    def reverse_tm(self, x: float, y: float, lon0: float) -> RawGeographic:
        """Inverse transverse Mercator projection about the central meridian lon0."""
        return self._unproject(self._get_proj("tmerc", lon0), x, y)

    def forward_ps(self, northp: bool, lat: float, lon: float) -> RawProjection:
        """Polar stereographic projection about the north (northp) or south pole."""
        return self._project(self._get_proj("stere", 90 if northp else -90), lat, lon)

    def reverse_ps(self, northp: bool, x: float, y: float) -> RawGeographic:
        """Inverse polar stereographic projection."""
        return self._unproject(self._get_proj("stere", 90 if northp else -90), x, y)
