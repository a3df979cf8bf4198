"""
Command-line interface for romantic.

Converts integers to numerals and back, using the classical I..M
alphabet or one given with --alphabet.
"""
from __future__ import annotations

import argparse
import logging
import sys

from ..core.errors import NumeralError
from ..core.numerals import DEFAULT_ALPHABET, Numerals


def positive_bits(text: str) -> int:
    """Parse --bits, rejecting widths below 1 at parse time."""
    try:
        bits = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"must be an integer, got {text!r}")
    if bits < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {bits}")
    return bits


def print_symbols(numerals: Numerals):
    """Print each symbol beside its value, values right-aligned."""
    if not len(numerals):
        print("(no symbols)")
        return
    values = [f"{numerals.value_of(s):,}" for s in numerals.symbols]
    width = max(len("VALUE"), *(len(v) for v in values))
    print(f"SYMBOL  {'VALUE':>{width}}")
    for symbol, value in zip(numerals.symbols, values):
        print(f"{symbol:<6}  {value:>{width}}")


def cmd_encode(args: argparse.Namespace) -> int:
    """Encode integers as numerals."""
    status = 0
    for value in args.values:
        try:
            print(args.numerals.encode(value))
        except NumeralError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            status = 1
    return status


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode numerals to integers."""
    status = 0
    for text in args.texts:
        try:
            print(args.numerals.decode(text, bits=args.bits))
        except NumeralError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            status = 1
    return status


def cmd_range(args: argparse.Namespace) -> int:
    """Show symbol values and the representable range."""
    numerals = args.numerals
    print_symbols(numerals)
    print()
    if numerals.maximum:
        print(f"Range: {numerals.minimum}-{numerals.maximum:,}")
    else:
        print("Range: (empty)")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="romantic",
        description="Roman numerals over any ordered alphabet",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "-a", "--alphabet",
        default=DEFAULT_ALPHABET,
        help=f"Ordered symbols, lowest value first (default: {DEFAULT_ALPHABET})",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    # Encode command
    encode_parser = subparsers.add_parser("encode", help="Convert integers to numerals")
    encode_parser.add_argument("values", nargs="+", type=int, help="Integers to encode")
    encode_parser.set_defaults(func=cmd_encode)

    # Decode command
    decode_parser = subparsers.add_parser("decode", help="Convert numerals to integers")
    decode_parser.add_argument("texts", nargs="+", help="Numerals to decode")
    decode_parser.add_argument(
        "--bits",
        type=positive_bits,
        default=None,
        help="Reject results that overflow a signed integer of this width",
    )
    decode_parser.set_defaults(func=cmd_decode)

    # Range command
    range_parser = subparsers.add_parser("range", help="Show symbol values and range")
    range_parser.set_defaults(func=cmd_range)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(level)

    try:
        args.numerals = Numerals(args.alphabet)
    except NumeralError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
