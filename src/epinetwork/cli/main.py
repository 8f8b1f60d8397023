"""Command line interface for epinetwork."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import cast

from .flatten_cmd import FormatArg, run_flatten

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="epinetwork")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    flatten_parser = subparsers.add_parser(
        "flatten", help="Write the network structure of a contact trace JSON file"
    )
    flatten_parser.add_argument("trace_file", type=Path, help="Path to contact trace JSON file")
    flatten_parser.add_argument(
        "--format",
        choices=["json", "csv"],
        default="csv",
        help="Output format of the network table",
    )
    flatten_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Optional output file path, defaults to stdout",
    )
    flatten_parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker threads used for collections of contact traces",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    if args.command == "flatten":
        return run_flatten(
            args.trace_file,
            cast(FormatArg, args.format),
            output_path=args.output,
            workers=args.workers,
        )

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
