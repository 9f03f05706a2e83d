"""CLIConfig: Command-line operational overrides.

Minimal configuration for the parameters that commonly change between runs:
tolerance, byte order, preview bit depth, unbounded-mask policy, verbosity.

This schema handles command-line arguments parsed by argparse.
"""

from typing import Literal, Optional
from pydantic import Field
from sdfgen.schemas.base import SdfBaseModel


class CLIConfig(SdfBaseModel):
    """Command-line configuration overrides.

    Highest priority in config resolution.

    Usage
    -----
        cli_cfg = CLIConfig(tolerance=0.01, log_level="DEBUG")
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    tolerance: Optional[float] = Field(None, gt=0, le=1.0)
    unbounded: Optional[Literal["sentinel", "reject"]] = None
    byte_order: Optional[Literal["big", "little"]] = None
    bit_depth: Optional[Literal[8, 16]] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None
    log_file: Optional[str] = None

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        if self.tolerance is not None:
            overrides["extractor"] = {"tolerance": self.tolerance}

        if self.unbounded is not None:
            overrides["engine"] = {"unbounded": self.unbounded}

        if self.byte_order is not None:
            overrides["codec"] = {"byte_order": self.byte_order}

        if self.bit_depth is not None:
            overrides["visualizer"] = {"bit_depth": self.bit_depth}

        logging_overrides = {}
        if self.log_level is not None:
            logging_overrides["level"] = self.log_level
        if self.log_file is not None:
            logging_overrides["file"] = self.log_file
        if logging_overrides:
            overrides["logging"] = logging_overrides

        return overrides
