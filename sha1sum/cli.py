"""Command line front end: print the SHA-1 digest of a file or of standard input."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional

from sha1sum.constants import DEFAULT_CHUNK_SIZE
from sha1sum.engine import hash_file, hash_stream
from sha1sum.errors import Sha1Error

log = logging.getLogger(__name__)

PROG = "sha1sum"


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Print the SHA-1 digest of FILE, or of standard input when FILE is omitted or '-'.",
    )
    parser.add_argument("file", nargs="?", default="-", help="Input file (default: standard input).")
    parser.add_argument(
        "--chunk-size",
        type=_positive_int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Bytes read per chunk (default: {DEFAULT_CHUNK_SIZE}).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to standard error.")
    return parser


def run(path: str, chunk_size: int) -> str:
    if path == "-":
        log.debug("reading standard input in %d byte chunks", chunk_size)
        return hash_stream(sys.stdin.buffer, chunk_size)
    log.debug("reading %s in %d byte chunks", path, chunk_size)
    return hash_file(path, chunk_size)


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        digest = run(args.file, args.chunk_size)
    except (OSError, Sha1Error) as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return 1

    print(digest)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
