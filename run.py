"""Command-line entry point: read, validate and summarize an Intel HEX file.

Reads the file named on the command line, or standard input when no file is
given, and prints the data segments it covers.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pyhexinfo.loader import HexFileError, HexReadError
from pyhexinfo.ui.app import HexInfoApp, InfoConfig

EXIT_FORMAT_ERROR = 1
EXIT_READ_ERROR = 3


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexinfo",
        description="Read, validate, and summarize an Intel HEX format file",
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        type=Path,
        help="HEX file to read (default: standard input)",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of the input (default: utf-8)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the totals, not every data segment",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    config = InfoConfig(
        input_path=args.input_file,
        encoding=args.encoding,
        list_chunks=not args.quiet,
    )
    app = HexInfoApp(config)
    try:
        lines = app.run()
    except HexReadError as exc:
        parser.exit(EXIT_READ_ERROR, f"{parser.prog}: Error: {exc}\n")
    except HexFileError as exc:
        parser.exit(EXIT_FORMAT_ERROR, f"{parser.prog}: Error: {exc}\n")

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
