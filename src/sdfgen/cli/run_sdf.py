"""Core sdfgen command execution logic.

This module contains the actual command runners, separated from argument
parsing. main.py is a thin wrapper; this is the real implementation.
"""

import importlib.util
import logging
from pathlib import Path
from typing import Optional, Dict, Any, Sequence

from sdfgen.contracts import SdfError, ContractViolation, InvalidInput
from sdfgen.pipeline.processor import SdfProcessor
from sdfgen.schemas import resolve_config, ParamConfig, UserConfig, CLIConfig, InternalConfig


logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from Python file.

    Returns the raw dict before Pydantic validation.

    Parameters
    ----------
    config_path : str
        Path to user config Python file containing a CONFIG dict.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If no CONFIG dict found in file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    spec = importlib.util.spec_from_file_location("config_module", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ValueError(f"No CONFIG dict found in {path}")


def build_config(
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> InternalConfig:
    """Resolve runtime configuration (Param < User < CLI).

    ``cli_args`` keys are CLIConfig fields; None values are dropped.
    """
    param_cfg = ParamConfig()

    user_cfg = None
    if user_config_path is not None:
        try:
            user_cfg = UserConfig.model_validate(load_user_config_dict(user_config_path))
        except (FileNotFoundError, ValueError) as e:
            raise InvalidInput(f"Bad user config {user_config_path}: {e}") from e

    cli_dict = {k: v for k, v in (cli_args or {}).items() if v is not None}
    if verbose:
        cli_dict.setdefault("log_level", "DEBUG")
    try:
        cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()
        return resolve_config(param_cfg, user_cfg, cli_cfg)
    except ValueError as e:
        raise InvalidInput(f"Invalid configuration: {e}") from e


def setup_logging(config: InternalConfig) -> None:
    """Configure root logger with console and optional file handlers."""
    log_level = getattr(logging, config.logging.level, logging.INFO)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    # Clear existing handlers and add new ones
    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    if config.logging.file:
        log_path = Path(config.logging.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path)
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    logger.debug("Logging: level=%s, file=%s", config.logging.level, config.logging.file)


def run_command(command: str, config: InternalConfig, paths: Sequence[str],
                colors: Sequence[str] = ()) -> int:
    """Run one pipeline command and translate failures to an exit status.

    Parameters
    ----------
    command : str
        "prepare-bitmap", "generate-sdf" or "sdf-to-png".
    config : InternalConfig
        Resolved runtime configuration.
    paths : sequence of str
        (input, output) paths for the command.
    colors : sequence of str
        Reference colors, prepare-bitmap only.

    Returns
    -------
    int
        0 on success, 1 on any failure.
    """
    processor = SdfProcessor(config)
    input_path, output_path = paths

    try:
        if command == "prepare-bitmap":
            processor.prepare_bitmap(input_path, output_path, colors)
        elif command == "generate-sdf":
            processor.generate_sdf(input_path, output_path)
        elif command == "sdf-to-png":
            processor.sdf_to_png(input_path, output_path)
        else:
            raise InvalidInput(f"Unknown command: {command}")

    except ContractViolation as e:
        logger.critical("Pipeline contract violated: %s", e)
        return 1

    except SdfError as e:
        logger.error("%s failed: %s", command, e)
        return 1

    return 0
