"""ParamConfig: Expert defaults for the sdfgen pipeline.

This module defines the complete default configuration. ALL pipeline
parameters must have defaults here. No runtime code should define fallback
values - this is the single source of truth for defaults.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from sdfgen.schemas.base import SdfBaseModel


# =============================================================================
# Nested Configuration Models
# =============================================================================

class ExtractorConfig(SdfBaseModel):
    """Reference-color mask extraction configuration."""
    tolerance: float = Field(
        0.005, gt=0, le=1.0,
        description="Per-channel match tolerance as a fraction of full channel range",
    )
    max_logged_colors: int = Field(16, ge=0, description="Unmatched colors listed in debug log")

    @field_validator("tolerance", mode="before")
    @classmethod
    def coerce_tolerance_to_float(cls, v):
        """Allow int or float for tolerance."""
        return float(v)


class EngineConfig(SdfBaseModel):
    """Distance field engine configuration.

    ``unbounded`` decides what happens for a mask with no boundary at all:
    "sentinel" keeps the finite sentinel distance, "reject" raises InvalidInput.
    """
    unbounded: Literal["sentinel", "reject"] = "sentinel"

    @field_validator("unbounded", mode="before")
    @classmethod
    def normalize_policy_name(cls, v):
        """Normalize policy names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class CodecConfig(SdfBaseModel):
    """Serialized field format configuration."""
    byte_order: Literal["big", "little"] = "big"


class ImageConfig(SdfBaseModel):
    """Image decoding configuration."""
    max_pixels: Optional[int] = Field(None, ge=1, description="Reject decoded images above this size")


class VisualizerConfig(SdfBaseModel):
    """Preview image configuration."""
    bit_depth: Literal[8, 16] = 16


class LoggingConfig(SdfBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file: Optional[str] = None


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(SdfBaseModel):
    """Complete expert configuration with all defaults.

    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    extractor: ExtractorConfig = Field(default_factory=ExtractorConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)
    codec: CodecConfig = Field(default_factory=CodecConfig)
    image: ImageConfig = Field(default_factory=ImageConfig)
    visualizer: VisualizerConfig = Field(default_factory=VisualizerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
