"""Test config resolution and validation with Pydantic."""

import pytest
from pydantic import ValidationError

from sdfgen.schemas import ParamConfig, UserConfig, CLIConfig, InternalConfig
from sdfgen.schemas.resolve import resolve_config, deep_merge

pytestmark = pytest.mark.unit


class TestConfigResolution:
    """Test resolve_config() precedence and merging."""

    def test_resolve_config_all_defaults(self):
        """Resolving with no user/CLI overrides uses all ParamConfig defaults."""
        config = resolve_config(ParamConfig(), None, None)

        assert isinstance(config, InternalConfig)
        assert config.extractor.tolerance == 0.005
        assert config.extractor.max_logged_colors == 16
        assert config.engine.unbounded == "sentinel"
        assert config.codec.byte_order == "big"
        assert config.image.max_pixels is None
        assert config.visualizer.bit_depth == 16
        assert config.logging.level == "INFO"
        assert config.logging.file is None

    def test_user_config_overrides_param_config(self):
        """UserConfig values override ParamConfig defaults."""
        user = UserConfig(TOLERANCE=0.02, BIT_DEPTH=8)
        config = resolve_config(ParamConfig(), user, None)

        assert config.extractor.tolerance == 0.02
        assert config.visualizer.bit_depth == 8
        # Untouched sections keep defaults
        assert config.codec.byte_order == "big"

    def test_cli_overrides_user(self):
        """Full precedence: CLI > User > Param."""
        user = UserConfig(TOLERANCE=0.02, BYTE_ORDER="little", LOG_LEVEL="WARNING")
        cli = CLIConfig(tolerance=0.1, log_level="DEBUG")
        config = resolve_config(ParamConfig(), user, cli)

        assert config.extractor.tolerance == 0.1
        assert config.logging.level == "DEBUG"
        # User still wins where CLI is silent
        assert config.codec.byte_order == "little"

    def test_dict_inputs_accepted(self):
        config = resolve_config({}, {"BIT_DEPTH": 8}, {"byte_order": "little"})

        assert config.visualizer.bit_depth == 8
        assert config.codec.byte_order == "little"

    def test_custom_param_defaults(self):
        param = ParamConfig(engine={"unbounded": "reject"})
        config = resolve_config(param)

        assert config.engine.unbounded == "reject"

    def test_nested_user_sections(self):
        user = UserConfig(extractor={"max_logged_colors": 0}, engine={"unbounded": "REJECT"})
        config = resolve_config(ParamConfig(), user)

        assert config.extractor.max_logged_colors == 0
        assert config.engine.unbounded == "reject"

    def test_nested_section_beats_flat_alias(self):
        user = UserConfig(TOLERANCE=0.02, extractor={"tolerance": 0.03})
        config = resolve_config(ParamConfig(), user)

        assert config.extractor.tolerance == 0.03

    def test_max_image_pixels(self):
        config = resolve_config(ParamConfig(), UserConfig(MAX_IMAGE_PIXELS=4096))
        assert config.image.max_pixels == 4096


class TestInternalConfigValidation:

    def test_invalid_bit_depth_rejected(self):
        with pytest.raises(ValidationError):
            resolve_config(ParamConfig(), UserConfig(BIT_DEPTH=12))

    def test_invalid_policy_rejected(self):
        with pytest.raises(ValidationError):
            resolve_config(ParamConfig(), UserConfig(UNBOUNDED_POLICY="clamp"))

    def test_zero_tolerance_rejected(self):
        with pytest.raises(ValidationError):
            resolve_config(ParamConfig(), UserConfig(TOLERANCE=0))

    def test_internal_config_is_frozen(self):
        config = resolve_config(ParamConfig())
        with pytest.raises(ValidationError):
            config.codec = config.codec

    def test_internal_config_requires_every_section(self):
        with pytest.raises(ValidationError):
            InternalConfig.model_validate({"extractor": {"tolerance": 0.1, "max_logged_colors": 1}})

    def test_param_config_rejects_unknown_keys(self):
        with pytest.raises(ValidationError):
            ParamConfig(extractor={"tolerence": 0.1})


class TestDeepMerge:

    def test_nested_merge(self):
        base = {"a": 1, "b": {"c": 2, "d": 3}}
        override = {"b": {"d": 4, "e": 5}, "f": 6}

        assert deep_merge(base, override) == {"a": 1, "b": {"c": 2, "d": 4, "e": 5}, "f": 6}

    def test_base_not_mutated(self):
        base = {"b": {"c": 2}}
        deep_merge(base, {"b": {"c": 3}})

        assert base == {"b": {"c": 2}}

    def test_later_overrides_win(self):
        assert deep_merge({"a": 1}, {"a": 2}, {"a": 3}) == {"a": 3}
