"""Forward and reverse conversions over numpy arrays."""

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from utmups.errors import UTMUPSError
from utmups.log_utils import get_logger
from utmups.transformer import CoordinateTransformer, get_default_transformer
from utmups.zones import ZoneOverride

logger = get_logger(__name__)


@dataclass
class ProjectedArrays:
    """UTM/UPS coordinates of many points, one array element per point."""

    zone: npt.NDArray[np.int_]
    northp: npt.NDArray[np.bool_]
    easting: npt.NDArray[np.float64]
    northing: npt.NDArray[np.float64]
    convergence: npt.NDArray[np.float64]
    scale: npt.NDArray[np.float64]


@dataclass
class GeographicArrays:
    """Geographic coordinates of many points."""

    lat: npt.NDArray[np.float64]
    lon: npt.NDArray[np.float64]
    convergence: npt.NDArray[np.float64]
    scale: npt.NDArray[np.float64]


def _as_arrays(*arrays: npt.ArrayLike) -> list[np.ndarray]:
    result = [np.asarray(array) for array in arrays]
    shapes = {array.shape for array in result}
    if len(shapes) != 1:
        raise ValueError(f"input arrays must have the same shape but got {shapes}")
    return result


def forward_array(
    lats: npt.ArrayLike,
    lons: npt.ArrayLike,
    setzone: ZoneOverride | int = ZoneOverride.standard(),
    transformer: CoordinateTransformer | None = None,
) -> ProjectedArrays:
    """Apply CoordinateTransformer.forward to each point.

    Args:
        lats: latitudes in degrees.
        lons: longitudes in degrees, same shape as lats.
        setzone: the zone preference applied to every point.
        transformer: the transformer to use, by default the WGS84 one.

    Returns:
        the ProjectedArrays, with the same shape as the inputs.
    """
    if transformer is None:
        transformer = get_default_transformer()
    lat_array, lon_array = _as_arrays(lats, lons)
    result = ProjectedArrays(
        zone=np.zeros(lat_array.shape, dtype=np.int_),
        northp=np.zeros(lat_array.shape, dtype=np.bool_),
        easting=np.zeros(lat_array.shape, dtype=np.float64),
        northing=np.zeros(lat_array.shape, dtype=np.float64),
        convergence=np.zeros(lat_array.shape, dtype=np.float64),
        scale=np.zeros(lat_array.shape, dtype=np.float64),
    )
    for idx in np.ndindex(lat_array.shape):
        try:
            cur = transformer.forward(
                float(lat_array[idx]), float(lon_array[idx]), setzone
            )
        except UTMUPSError:
            logger.debug("forward failed for point at index %s", idx)
            raise
        result.zone[idx] = cur.zone
        result.northp[idx] = cur.northp
        result.easting[idx] = cur.easting
        result.northing[idx] = cur.northing
        result.convergence[idx] = cur.convergence
        result.scale[idx] = cur.scale
    return result


def reverse_array(
    zones: npt.ArrayLike,
    northps: npt.ArrayLike,
    xs: npt.ArrayLike,
    ys: npt.ArrayLike,
    transformer: CoordinateTransformer | None = None,
) -> GeographicArrays:
    """Apply CoordinateTransformer.reverse to each point.

    Args:
        zones: zone of each point, 0 for UPS.
        northps: whether each point is in the northern hemisphere.
        xs: eastings in meters.
        ys: northings in meters.
        transformer: the transformer to use, by default the WGS84 one.

    Returns:
        the GeographicArrays, with the same shape as the inputs.
    """
    if transformer is None:
        transformer = get_default_transformer()
    zone_array, northp_array, x_array, y_array = _as_arrays(zones, northps, xs, ys)
    result = GeographicArrays(
        lat=np.zeros(x_array.shape, dtype=np.float64),
        lon=np.zeros(x_array.shape, dtype=np.float64),
        convergence=np.zeros(x_array.shape, dtype=np.float64),
        scale=np.zeros(x_array.shape, dtype=np.float64),
    )
    for idx in np.ndindex(x_array.shape):
        try:
            cur = transformer.reverse(
                int(zone_array[idx]),
                bool(northp_array[idx]),
                float(x_array[idx]),
                float(y_array[idx]),
            )
        except UTMUPSError:
            logger.debug("reverse failed for point at index %s", idx)
            raise
        result.lat[idx] = cur.lat
        result.lon[idx] = cur.lon
        result.convergence[idx] = cur.convergence
        result.scale[idx] = cur.scale
    return result
