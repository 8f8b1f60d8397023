from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from epinetwork.cli import main
from epinetwork.models import COLUMNS, ContactTrace, Contacts, Direction, TraceCollection, TracedEdge
from epinetwork.serializers import save_trace_json

BEGIN = date(2005, 8, 1)
END = date(2005, 10, 31)


def _trace(root: str = "2645") -> ContactTrace:
    return ContactTrace(
        root=root,
        ingoing=Contacts(
            root=root,
            direction=Direction.INGOING,
            t_begin=BEGIN,
            t_end=END,
            edges=[
                TracedEdge(source="100", destination=root, distance=1),
                TracedEdge(source="100", destination=root, distance=1),
            ],
        ),
        outgoing=Contacts.empty(root, Direction.OUTGOING, BEGIN, END),
    )


def _create_trace_file(tmp_path: Path) -> Path:
    return save_trace_json(_trace(), tmp_path / "trace.json")


def test_cli_flatten_prints_csv(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    trace_file = _create_trace_file(tmp_path)
    exit_code = main(["flatten", str(trace_file)])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.splitlines() == [
        ",".join(COLUMNS),
        "2645,2005-08-01,2005-10-31,,,in,100,2645,1",
    ]


def test_cli_flatten_json_output_to_file(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    trace_file = _create_trace_file(tmp_path)
    output_path = tmp_path / "out" / "network.json"
    exit_code = main(
        ["flatten", str(trace_file), "--format", "json", "--output", str(output_path)]
    )

    captured = capsys.readouterr()
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert exit_code == 0
    assert captured.out == ""
    assert payload["schema_version"] == "0.1.0"
    assert len(payload["rows"]) == 1
    assert payload["rows"][0]["inBegin"] == "2005-08-01"


def test_cli_flatten_collection_with_workers(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    collection = TraceCollection.of([_trace("1"), _trace("2"), _trace("3")])
    trace_file = save_trace_json(collection, tmp_path / "collection.json")

    exit_code = main(["--log-level", "DEBUG", "flatten", str(trace_file), "--workers", "2"])

    captured = capsys.readouterr()
    rows = captured.out.splitlines()[1:]
    assert exit_code == 0
    assert [row.split(",")[0] for row in rows] == ["1", "2", "3"]


def test_cli_flatten_nonexistent_file(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["flatten", "/tmp/does_not_exist_epinetwork.json"])
    assert exit_code == 1
    captured = capsys.readouterr()
    assert "not found" in captured.err.lower()


def test_cli_flatten_corrupt_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bad_file = tmp_path / "corrupt.json"
    bad_file.write_text("NOT JSON AT ALL")

    exit_code = main(["flatten", str(bad_file)])
    assert exit_code == 1
    captured = capsys.readouterr()
    assert "error" in captured.err.lower()


def test_cli_flatten_malformed_collection(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    collection = TraceCollection.of([_trace("1"), [_trace("2"), _trace("3")]])
    trace_file = save_trace_json(collection, tmp_path / "bundled.json")

    exit_code = main(["flatten", str(trace_file)])

    captured = capsys.readouterr()
    assert exit_code == 3
    assert captured.out == ""
    assert "malformed trace collection" in captured.err


def test_cli_flatten_rejects_zero_workers(tmp_path: Path) -> None:
    trace_file = _create_trace_file(tmp_path)
    with pytest.raises(ValueError, match="--workers must be at least 1"):
        main(["flatten", str(trace_file), "--workers", "0"])


def test_cli_flatten_malformed_collection_envelope(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    bad_file = tmp_path / "collection.json"
    bad_file.write_text(json.dumps({"kind": "collection", "items": 5}), encoding="utf-8")

    exit_code = main(["flatten", str(bad_file)])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "failed to parse trace json" in captured.err.lower()
