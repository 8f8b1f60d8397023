"""CSV export of network tables."""

from __future__ import annotations

from pathlib import Path

from ..models import NetworkTable


def table_to_csv(table: NetworkTable) -> str:
    """Render ``table`` as CSV. The header is written even when there are no rows."""
    return table.to_dataframe().to_csv(index=False, date_format="%Y-%m-%d")


def save_table_csv(table: NetworkTable, path: str | Path) -> Path:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(table_to_csv(table), encoding="utf-8")
    return output_path
