"""Layered configuration resolution.

``resolve_config()`` is the only way runtime code obtains configuration.
Layers, lowest priority first:

- ParamConfig: expert defaults, complete
- UserConfig: the CONFIG dict of a user config file
- CLIConfig: options given on the command line

Each layer contributes a nested override dict; the merged result is
validated once more as a frozen InternalConfig.
"""

from typing import Optional, Type, TypeVar, Union

from pydantic import BaseModel

from sdfgen.schemas.param import ParamConfig
from sdfgen.schemas.user import UserConfig
from sdfgen.schemas.cli import CLIConfig
from sdfgen.schemas.internal import InternalConfig

_Model = TypeVar("_Model", bound=BaseModel)


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Merge ``overrides`` into a copy of ``base``, left to right.

    Nested dicts merge key by key; any other value replaces what was there.
    ``base`` is never modified.

    Examples
    --------
    >>> deep_merge({"codec": {"byte_order": "big"}, "x": 1}, {"codec": {"byte_order": "little"}})
    {'codec': {'byte_order': 'little'}, 'x': 1}
    """
    merged = dict(base)
    for override in overrides:
        for key, value in override.items():
            current = merged.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                merged[key] = deep_merge(current, value)
            else:
                merged[key] = value
    return merged


def _as_model(value, model: Type[_Model]) -> _Model:
    """Validate a dict (or None) into ``model``; pass instances through."""
    if isinstance(value, model):
        return value
    return model.model_validate(value or {})


def resolve_config(
    param_cfg: Union[dict, ParamConfig],
    user_cfg: Optional[Union[dict, UserConfig]] = None,
    cli_cfg: Optional[Union[dict, CLIConfig]] = None,
) -> InternalConfig:
    """Build the runtime configuration.

    Parameters
    ----------
    param_cfg : dict or ParamConfig
        Expert defaults. An empty dict means "all defaults".
    user_cfg : dict or UserConfig, optional
        User file overrides.
    cli_cfg : dict or CLIConfig, optional
        Command-line overrides, applied last.

    Returns
    -------
    InternalConfig

    Raises
    ------
    pydantic.ValidationError
        If any layer, or the merged result, is invalid.

    Examples
    --------
    >>> resolve_config(ParamConfig(), UserConfig(BIT_DEPTH=8)).visualizer.bit_depth
    8
    """
    param = _as_model(param_cfg, ParamConfig)
    user = _as_model(user_cfg, UserConfig)
    cli = _as_model(cli_cfg, CLIConfig)

    merged = deep_merge(
        param.model_dump(),
        user.to_internal_overrides(),
        cli.to_internal_overrides(),
    )
    return InternalConfig.model_validate(merged)
