"""UserConfig: Forgiving, minimal user-facing configuration.

This schema accepts user inputs with aliases for the common settings
(e.g., TOLERANCE → tolerance, BIT_DEPTH → bit_depth), as written in a
user config file's CONFIG dict.

Users only specify what they want to override from the expert defaults.
Unknown keys are ignored so old config files keep loading.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from sdfgen.schemas.base import SdfBaseModel


class UserExtractorConfig(SdfBaseModel):
    """User-facing extractor config."""
    tolerance: Optional[float] = None
    max_logged_colors: Optional[int] = None

    @field_validator("tolerance", mode="before")
    @classmethod
    def coerce_tolerance(cls, v):
        """Accept int or float for tolerance."""
        if v is not None:
            return float(v)
        return v


class UserEngineConfig(SdfBaseModel):
    """User-facing engine config."""
    unbounded: Optional[str] = None

    @field_validator("unbounded", mode="before")
    @classmethod
    def normalize_policy(cls, v):
        """Normalize policy names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class UserVisualizerConfig(SdfBaseModel):
    """User-facing visualizer config."""
    bit_depth: Optional[int] = None


class UserConfig(SdfBaseModel):
    """User-facing configuration schema.

    Minimal, forgiving, and uses common aliases. Converted to internal
    overrides during resolution.

    Usage
    -----
        user_cfg = UserConfig(TOLERANCE=0.01, BIT_DEPTH=8)
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    # Flat aliases
    tolerance: Optional[float] = Field(None, alias="TOLERANCE")
    unbounded: Optional[str] = Field(None, alias="UNBOUNDED_POLICY")
    byte_order: Optional[Literal["big", "little"]] = Field(None, alias="BYTE_ORDER")
    max_image_pixels: Optional[int] = Field(None, alias="MAX_IMAGE_PIXELS")
    bit_depth: Optional[int] = Field(None, alias="BIT_DEPTH")
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(None, alias="LOG_LEVEL")
    log_file: Optional[str] = Field(None, alias="LOG_FILE")

    # Nested overrides (advanced users)
    extractor: Optional[UserExtractorConfig] = None
    engine: Optional[UserEngineConfig] = None
    visualizer: Optional[UserVisualizerConfig] = None

    model_config = SdfBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown legacy keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("tolerance", mode="before")
    @classmethod
    def coerce_numeric_fields(cls, v):
        """Accept int or float for numeric fields."""
        if v is not None:
            return float(v)
        return v

    @field_validator("unbounded", mode="before")
    @classmethod
    def normalize_policy_name(cls, v):
        """Normalize policy names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("byte_order", mode="before")
    @classmethod
    def normalize_byte_order(cls, v):
        """Accept 'BIG' or 'Little'."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept 'debug' as well as 'DEBUG'."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        # Extractor section
        extractor = {}
        if self.tolerance is not None:
            extractor["tolerance"] = self.tolerance
        if self.extractor is not None:
            extractor.update(self.extractor.model_dump(exclude_none=True))
        if extractor:
            overrides["extractor"] = extractor

        # Engine section
        engine = {}
        if self.unbounded is not None:
            engine["unbounded"] = self.unbounded
        if self.engine is not None:
            engine.update(self.engine.model_dump(exclude_none=True))
        if engine:
            overrides["engine"] = engine

        if self.byte_order is not None:
            overrides["codec"] = {"byte_order": self.byte_order}

        if self.max_image_pixels is not None:
            overrides["image"] = {"max_pixels": self.max_image_pixels}

        # Visualizer section
        visualizer = {}
        if self.bit_depth is not None:
            visualizer["bit_depth"] = self.bit_depth
        if self.visualizer is not None:
            visualizer.update(self.visualizer.model_dump(exclude_none=True))
        if visualizer:
            overrides["visualizer"] = visualizer

        logging_cfg = {}
        if self.log_level is not None:
            logging_cfg["level"] = self.log_level
        if self.log_file is not None:
            logging_cfg["file"] = self.log_file
        if logging_cfg:
            overrides["logging"] = logging_cfg

        return overrides
