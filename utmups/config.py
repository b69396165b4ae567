"""Configuration of the ellipsoid and the projection algorithms."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utmups.const import UPS_K0, UTM_K0, WGS84_A, WGS84_F
from utmups.projections import EllipsoidProjection, PyprojProjection, TMAlgorithm


class ProjectionConfig(BaseModel):
    """Ellipsoid, scale factors and transverse Mercator algorithm for UTM/UPS.

    The defaults are the WGS84 ellipsoid with the standard UTM and UPS scale factors.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    equatorial_radius: float = Field(
        default=WGS84_A, gt=0, description="Equatorial radius in meters."
    )
    flattening: float = Field(
        default=WGS84_F, ge=0, lt=1, description="Flattening of the ellipsoid."
    )
    utm_scale_factor: float = Field(
        default=UTM_K0, gt=0, description="Central scale factor for UTM."
    )
    ups_scale_factor: float = Field(
        default=UPS_K0, gt=0, description="Scale factor at the pole for UPS."
    )
    tm_algorithm: TMAlgorithm = Field(
        default=TMAlgorithm.PODER_ENGSAGER,
        description="Which PROJ algorithm computes transverse Mercator.",
    )

    @field_validator("flattening", mode="before")
    @classmethod
    def parse_inverse_flattening(cls, v: object) -> object:
        """Accept the flattening as a string like "1/298.257223563"."""
        if isinstance(v, str) and "/" in v:
            numerator, denominator = v.split("/", 1)
            return float(numerator) / float(denominator)
        return v

    def build_projection(self) -> EllipsoidProjection:
        """Create the EllipsoidProjection described by this config."""
        return PyprojProjection(
            self.equatorial_radius,
            self.flattening,
            self.utm_scale_factor,
            self.ups_scale_factor,
            self.tm_algorithm,
        )
