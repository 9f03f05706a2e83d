"""Configuration schemas.

Runtime code only ever receives an ``InternalConfig``, produced by
``resolve_config(ParamConfig(), user, cli)``.
"""

from sdfgen.schemas.resolve import resolve_config
from sdfgen.schemas.internal import InternalConfig
from sdfgen.schemas.param import ParamConfig
from sdfgen.schemas.user import UserConfig
from sdfgen.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'CLIConfig',
]
