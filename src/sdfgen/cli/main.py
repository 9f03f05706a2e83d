#!/usr/bin/env python3
"""sdfgen command-line entry point.

Usage:
    sdfgen prepare-bitmap terrain.png land_mask.png "#2e8b57" "#3cb371"
    sdfgen generate-sdf land_mask.png land.sdf
    sdfgen sdf-to-png land.sdf land_preview.png
    sdfgen --config scripts/user_config.py -v generate-sdf land_mask.png land.sdf
"""

import sys
import argparse
from typing import Optional, Sequence

from sdfgen.contracts import InvalidInput
from sdfgen.cli.run_sdf import build_config, setup_logging, run_command


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="sdfgen",
        description="Exact signed distance fields from occupancy masks",
    )
    parser.add_argument("--config", help="Path to user config file (Python file with CONFIG dict)")
    parser.add_argument("--log-level", type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Override log level")
    parser.add_argument("--log-file", help="Also write the log to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    bitmap = commands.add_parser("prepare-bitmap", help="Extract a 16-bit mask bitmap by reference colors")
    bitmap.add_argument("input_image", help="Reference color image")
    bitmap.add_argument("output_image", help="Mask bitmap to write (PNG)")
    bitmap.add_argument("colors", nargs="+", metavar="color",
                        help="1 to 3 reference colors (name, #rgb, #rrggbb or #rrggbbaa)")
    bitmap.add_argument("--tolerance", type=float,
                        help="Per-channel match tolerance as a fraction of full range")

    generate = commands.add_parser("generate-sdf", help="Compute and serialize the signed distance field")
    generate.add_argument("input_image", help="Mask bitmap (non-zero = filled)")
    generate.add_argument("output_field", help="Serialized field to write")
    generate.add_argument("--byte-order", choices=["big", "little"], help="Field byte order")
    generate.add_argument("--unbounded", choices=["sentinel", "reject"],
                          help="Policy for masks with no boundary")

    preview = commands.add_parser("sdf-to-png", help="Render a serialized field as an RGBA preview")
    preview.add_argument("input_field", help="Serialized field to read")
    preview.add_argument("output_image", help="Preview image to write (PNG)")
    preview.add_argument("--byte-order", choices=["big", "little"], help="Field byte order")
    preview.add_argument("--bit-depth", type=int, choices=[8, 16], help="Preview channel depth")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    cli_args = {
        "tolerance": getattr(args, "tolerance", None),
        "byte_order": getattr(args, "byte_order", None),
        "bit_depth": getattr(args, "bit_depth", None),
        "unbounded": getattr(args, "unbounded", None),
        "log_level": args.log_level,
        "log_file": args.log_file,
    }

    try:
        config = build_config(args.config, cli_args, verbose=args.verbose)
    except InvalidInput as e:
        print(f"sdfgen: error: {e}", file=sys.stderr)
        return 1

    setup_logging(config)

    if args.command == "prepare-bitmap":
        paths = (args.input_image, args.output_image)
        return run_command(args.command, config, paths, colors=args.colors)
    if args.command == "generate-sdf":
        return run_command(args.command, config, (args.input_image, args.output_field))
    return run_command(args.command, config, (args.input_field, args.output_image))


if __name__ == "__main__":
    sys.exit(main())
