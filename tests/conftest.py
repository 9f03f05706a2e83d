"""Root-level pytest fixtures for the sdfgen test suite.

Provides shared configuration fixtures following the Pydantic-based
architecture. Tests build configs through these fixtures instead of raw dicts.
"""

import pytest
from pathlib import Path
import tempfile
import shutil

import numpy as np

from sdfgen.schemas import ParamConfig, UserConfig, resolve_config
from sdfgen.raster.grid import make_mask


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides).

    Examples
    --------
    >>> def test_engine_init(internal_config):
    ...     engine = DistanceFieldEngine(internal_config)
    ...     assert engine.unbounded == "sentinel"
    """
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Returns a callable that accepts UserConfig-compatible kwargs.

    Examples
    --------
    >>> def test_little_endian(make_config):
    ...     config = make_config(BYTE_ORDER="little")
    ...     assert FieldCodec(config).header_dtype.byteorder in "<="
    """
    def _make(**user_overrides):
        """Create InternalConfig with user overrides."""
        if user_overrides:
            user = UserConfig(**user_overrides)
            return resolve_config(param_config, user, None)
        else:
            return resolve_config(param_config, None, None)

    return _make


# =============================================================================
# Directory Fixtures
# =============================================================================

@pytest.fixture
def temp_dir():
    """Temporary directory that is cleaned up after test."""
    d = tempfile.mkdtemp()
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)


# =============================================================================
# Mask Fixtures
# =============================================================================

@pytest.fixture
def center_mask():
    """3x3 mask with only the center cell filled."""
    values = np.zeros((3, 3), dtype=bool)
    values[1, 1] = True
    return make_mask(values)


@pytest.fixture
def random_mask():
    """Reproducible 24x17 mask with both classes present."""
    rng = np.random.default_rng(1234)
    values = rng.random((17, 24)) < 0.35
    values[0, 0] = True
    values[-1, -1] = False
    return make_mask(values)
