"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and contains explicit values for everything processing code
depends on. Fallback defaults and .get() calls do not belong in runtime code.
"""

from typing import Literal, Optional
from pydantic import Field, ConfigDict
from sdfgen.schemas.base import SdfBaseModel


# =============================================================================
# Nested Configuration Models (Runtime)
# =============================================================================

class InternalExtractorConfig(SdfBaseModel):
    """Runtime mask extraction configuration."""
    tolerance: float = Field(gt=0, le=1.0)
    max_logged_colors: int = Field(ge=0)


class InternalEngineConfig(SdfBaseModel):
    """Runtime distance field engine configuration."""
    unbounded: Literal["sentinel", "reject"]


class InternalCodecConfig(SdfBaseModel):
    """Runtime serialized field configuration."""
    byte_order: Literal["big", "little"]


class InternalImageConfig(SdfBaseModel):
    """Runtime image decoding configuration."""
    max_pixels: Optional[int] = Field(ge=1)


class InternalVisualizerConfig(SdfBaseModel):
    """Runtime preview configuration."""
    bit_depth: Literal[8, 16]


class InternalLoggingConfig(SdfBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    file: Optional[str]


# =============================================================================
# Main InternalConfig
# =============================================================================

class InternalConfig(SdfBaseModel):
    """Authoritative runtime configuration.

    Runtime modules receive InternalConfig and access fields directly:

        def __init__(self, config: InternalConfig):
            self.tolerance = config.extractor.tolerance  # NOT .get()

    All validation happens during config resolution, not in runtime code.
    """

    extractor: InternalExtractorConfig
    engine: InternalEngineConfig
    codec: InternalCodecConfig
    image: InternalImageConfig
    visualizer: InternalVisualizerConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(frozen=True)
