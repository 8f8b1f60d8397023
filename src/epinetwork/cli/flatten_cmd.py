"""Flatten subcommand implementation."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import ValidationError

from ..core import FlattenConfig, NetworkFlattener
from ..exceptions import EpinetworkLoadError, TraceCollectionError
from ..models import NetworkTable
from ..serializers import load_trace_json, table_to_csv, table_to_json

FormatArg = Literal["json", "csv"]

logger = logging.getLogger(__name__)


def run_flatten(
    trace_file: Path,
    output_format: FormatArg,
    *,
    output_path: Path | None,
    workers: int = 1,
) -> int:
    try:
        config = FlattenConfig(max_workers=workers)
    except ValidationError as exc:
        raise ValueError(f"--workers must be at least 1, got {workers}") from exc

    try:
        trace = load_trace_json(trace_file)
    except FileNotFoundError:
        print(f"Error: file not found: {trace_file}", file=sys.stderr)
        return 1
    except EpinetworkLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return 1

    try:
        table = NetworkFlattener(config=config).flatten(trace)
    except TraceCollectionError as exc:
        print(f"Error: malformed trace collection: {exc}", file=sys.stderr)
        return 3
    logger.info("%s: %d network rows", trace_file, len(table))

    payload = _render(table, output_format)
    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload, encoding="utf-8")
    else:
        sys.stdout.write(payload)
    return 0


def _render(table: NetworkTable, output_format: FormatArg) -> str:
    if output_format == "json":
        return table_to_json(table) + "\n"
    return table_to_csv(table)
