"""Command-line interface for depot_gbk."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

import depot_gbk
from depot_gbk._utils import DEFAULT_MAX_BYTES

_SAMPLE_CHARS = 50


def _read_input(args: argparse.Namespace) -> bytes:
    """Return the bytes to examine: file, then literal text, then stdin.

    :raises OSError: If the file or stdin cannot be read.
    """
    if args.file is not None:
        return Path(args.file).read_bytes()
    if args.text is not None:
        # argv was decoded with surrogateescape; recover the original bytes.
        return os.fsencode(args.text)
    return sys.stdin.buffer.read()


def _report(data: bytes, max_bytes: int) -> None:
    result = depot_gbk.detect_encoding_detailed(data, max_bytes=max_bytes)
    print(f"Detected charset: {result.charset}")
    print(f"Confidence: {result.confidence * 100:.2f}%")
    print(f"Language: {result.language}")
    print(f"Valid UTF-8: {'Yes' if result.is_valid_utf8 else 'No'}")

    if result.is_valid_utf8:
        text = data.decode("utf-8")
        if text.strip():
            print(f"Sample text: {text[:_SAMPLE_CHARS]}")

    if depot_gbk.is_likely_gbk(data):
        print("Likely GBK encoding: Yes")


def main(argv: list[str] | None = None) -> None:
    """Run the ``depot-gbk`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        prog="depot-gbk",
        description="Detect the character encoding of a file, a string or stdin.",
    )
    parser.add_argument("-f", "--file", metavar="FILE", help="Input file to examine")
    parser.add_argument("-t", "--text", metavar="TEXT", help="Text string to examine")
    parser.add_argument(
        "--max-bytes",
        type=int,
        default=DEFAULT_MAX_BYTES,
        help="Maximum number of bytes the classifier examines",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log detection details"
    )
    parser.add_argument(
        "--version", action="version", version=f"depot-gbk {depot_gbk.__version__}"
    )

    args = parser.parse_args(argv)
    if args.max_bytes < 1:
        parser.error("--max-bytes must be a positive integer")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        data = _read_input(args)
    except OSError as e:
        if args.file is not None:
            print(f"Error reading file {args.file}: {e}", file=sys.stderr)
        else:
            print(f"Error reading from stdin: {e}", file=sys.stderr)
        sys.exit(1)

    if not data:
        print("No data provided for encoding detection.")
        return

    _report(data, args.max_bytes)


if __name__ == "__main__":
    main()
