"""Command-line interface for tau-scale."""

import argparse
import logging
import sys

from tau_scale import __version__, normalize, trace
from tau_scale.core import format_fixed
from tau_scale.exceptions import TauScaleError

DEFAULT_VALUE = 37


def _parse_value(raw: str) -> int:
    try:
        return int(raw, 0)
    except ValueError as e:
        raise TauScaleError(f"Invalid integer: {raw!r}") from e


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="tau-scale",
        description="Round an unsigned 64-bit integer through the tau pipeline",
    )
    parser.add_argument(
        "value",
        nargs="?",
        default=str(DEFAULT_VALUE),
        help=f"Input integer, decimal or 0x/0o/0b prefixed (default: {DEFAULT_VALUE})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Also print the floored integer (default: TAU_SCALE_DEBUG env var)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output every stage as JSON",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"tau-scale {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        value = _parse_value(args.value)
    except TauScaleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(trace(value).model_dump_json(indent=2))
        return 0

    result = normalize(value, debug=args.debug)
    print(f"The value is {format_fixed(result)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
