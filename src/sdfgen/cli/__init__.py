"""Command-line interface modules for sdfgen.

run_sdf holds the execution logic; main is the argparse wrapper.
"""

from sdfgen.cli.run_sdf import run_command, build_config

__all__ = ['run_command', 'build_config']
