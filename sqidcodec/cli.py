"""Command line interface for encoding and decoding identifiers."""
import argparse
import logging
import sys
from typing import List, Optional

from .config import Config
from .encoding import Sqids
from .exceptions import SqidsError
from .logging_setup import setup_logging


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {value}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sqidcodec", description="Encode numbers into short identifiers and back")
    parser.add_argument(
        "--alphabet",
        "-a",
        default=Config.ALPHABET,
        help="Alphabet to draw identifier characters from (default: SQIDS_ALPHABET or a-z, A-Z, 0-9)",
    )
    parser.add_argument(
        "--min-length",
        "-m",
        type=int,
        default=None,
        help="Minimum identifier length, 0-255 (default: SQIDS_MIN_LENGTH or 0)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", help="Also write logs to this file (rotated at 10 MiB)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode numbers into one identifier")
    encode_parser.add_argument("numbers", nargs="+", type=_non_negative_int, help="Non-negative integers")

    decode_parser = subparsers.add_parser("decode", help="Decode an identifier into numbers")
    decode_parser.add_argument("id", help="Identifier to decode")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = logging.getLogger("sqidcodec")

    try:
        logger = setup_logging("DEBUG" if args.verbose else Config.log_level(), args.log_file)
        min_length = args.min_length if args.min_length is not None else Config.min_length()
        sqids = Sqids(alphabet=args.alphabet, min_length=min_length)

        if args.command == "encode":
            print(sqids.encode(args.numbers))
        else:
            print(" ".join(str(n) for n in sqids.decode(args.id)))
    except SqidsError as e:
        logger.debug(f"Command {args.command} failed: {e}")
        print(f"sqidcodec: error: {e}", file=sys.stderr)
        return 2

    return 0
