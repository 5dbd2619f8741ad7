"""``rtasks`` command line: file and module utilities.

Examples::

    rtasks hash data.bin -a SHA1
    rtasks decompress data.gz -m gzip
    rtasks read legacy.txt -e cp1251
    rtasks planets Planets.xlsx
    rtasks obsolete some.module
"""

from __future__ import annotations

import argparse
import logging
import sys
import zlib
from typing import IO

from .config import get_settings
from .errors import RTasksError
from .reflection import public_obsolete_classes
from .streams import (
    DecompressionMethod,
    calculate_hash,
    check_text_encoding,
    decompress_stream,
    read_encoded_text,
    read_planet_info_from_xlsx,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_hash(args: argparse.Namespace, dest: IO[str]) -> None:
    with open(args.file, "rb") as fh:
        print(calculate_hash(fh, args.algorithm), file=dest)


def cmd_decompress(args: argparse.Namespace, dest: IO[str]) -> None:
    encoding = args.encoding or get_settings().default_encoding
    check_text_encoding(encoding)
    with decompress_stream(args.file, args.method) as stream:
        text = stream.read().decode(encoding)
    dest.write(text)


def cmd_read(args: argparse.Namespace, dest: IO[str]) -> None:
    encoding = args.encoding or get_settings().default_encoding
    dest.write(read_encoded_text(args.file, encoding))


def cmd_planets(args: argparse.Namespace, dest: IO[str]) -> None:
    planets = read_planet_info_from_xlsx(args.file)
    if not planets:
        return
    width = max(len(p.name) for p in planets)
    for planet in planets:
        print(f"{planet.name:<{width}}  {planet.mean_radius:.2f}", file=dest)


def cmd_obsolete(args: argparse.Namespace, dest: IO[str]) -> None:
    for name in public_obsolete_classes(args.module):
        print(name, file=dest)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rtasks",
        description="Runtime utility tasks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("hash", help="Print the digest of a file")
    p.add_argument("file")
    p.add_argument("-a", "--algorithm", default="SHA256", help="Hash algorithm (default: SHA256)")
    p.set_defaults(func=cmd_hash)

    p = subparsers.add_parser("decompress", help="Print the decompressed content of a file")
    p.add_argument("file")
    p.add_argument(
        "-m", "--method",
        choices=[m.value for m in DecompressionMethod],
        default=DecompressionMethod.NONE.value,
    )
    p.add_argument("-e", "--encoding", help="Text encoding of the decompressed bytes")
    p.set_defaults(func=cmd_decompress)

    p = subparsers.add_parser("read", help="Print a file decoded with a given encoding")
    p.add_argument("file")
    p.add_argument("-e", "--encoding", help="Source encoding")
    p.set_defaults(func=cmd_read)

    p = subparsers.add_parser("planets", help="List planets from a spreadsheet")
    p.add_argument("file")
    p.set_defaults(func=cmd_planets)

    p = subparsers.add_parser("obsolete", help="List public deprecated classes of a module")
    p.add_argument("module")
    p.set_defaults(func=cmd_obsolete)

    return parser


def main(argv: list[str] | None = None, dest: IO[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        args.func(args, dest or sys.stdout)
    except (RTasksError, OSError, EOFError, ImportError, ValueError, zlib.error) as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
