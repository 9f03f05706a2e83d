"""Tests for CLIConfig and UserConfig input normalization."""

import pytest
from pydantic import ValidationError

from sdfgen.schemas import CLIConfig, UserConfig

pytestmark = pytest.mark.unit


class TestCLIConfig:

    def test_empty_has_no_overrides(self):
        assert CLIConfig().to_internal_overrides() == {}

    def test_overrides_structure(self):
        cli = CLIConfig(tolerance=0.05, unbounded="reject", byte_order="little",
                        bit_depth=8, log_level="ERROR", log_file="run.log")

        assert cli.to_internal_overrides() == {
            "extractor": {"tolerance": 0.05},
            "engine": {"unbounded": "reject"},
            "codec": {"byte_order": "little"},
            "visualizer": {"bit_depth": 8},
            "logging": {"level": "ERROR", "file": "run.log"},
        }

    @pytest.mark.parametrize("kwargs", [
        {"tolerance": 0.0},
        {"tolerance": 1.5},
        {"bit_depth": 12},
        {"byte_order": "middle"},
        {"unbounded": "clamp"},
        {"log_level": "VERBOSE"},
        {"threads": 4},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValidationError):
            CLIConfig(**kwargs)


class TestUserConfigNormalization:

    def test_aliases_and_field_names(self):
        assert UserConfig(TOLERANCE=0.01).tolerance == 0.01
        assert UserConfig(tolerance=0.01).tolerance == 0.01

    def test_int_tolerance_coerced(self):
        tolerance = UserConfig(TOLERANCE=1).tolerance
        assert isinstance(tolerance, float)
        assert tolerance == 1.0

    def test_case_normalization(self):
        user = UserConfig(UNBOUNDED_POLICY=" Reject ", BYTE_ORDER="LITTLE", LOG_LEVEL="debug")

        assert user.unbounded == "reject"
        assert user.byte_order == "little"
        assert user.log_level == "DEBUG"

    def test_unknown_keys_ignored(self):
        user = UserConfig(TOLERANCE=0.01, OUTPUT_DIR="out")

        assert user.to_internal_overrides() == {"extractor": {"tolerance": 0.01}}

    def test_empty_user_config_has_no_overrides(self):
        assert UserConfig().to_internal_overrides() == {}

    def test_log_settings(self):
        overrides = UserConfig(LOG_LEVEL="warning", LOG_FILE="out/run.log").to_internal_overrides()

        assert overrides["logging"] == {"level": "WARNING", "file": "out/run.log"}
