"""Tests for build_snapshot.write_snapshot module."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from build_snapshot.write_snapshot import SnapshotWriteError, write_snapshot


class TestWriteSnapshot:
    def test_writes_json_document(self, snapshot, tmp_path: Path) -> None:
        path = tmp_path / "data" / "latest.json"

        result = write_snapshot(snapshot, path)

        assert result == path
        document = json.loads(path.read_text(encoding="utf-8"))
        assert document == snapshot.to_dict()

    def test_keeps_non_ascii_text(self, snapshot, tmp_path: Path) -> None:
        path = tmp_path / "latest.json"
        write_snapshot(snapshot, path)
        assert "지수" in path.read_text(encoding="utf-8")

    def test_replaces_previous_snapshot(self, snapshot, tmp_path: Path) -> None:
        path = tmp_path / "latest.json"
        path.write_text('{"old": true}')

        write_snapshot(snapshot, path)

        assert "old" not in json.loads(path.read_text(encoding="utf-8"))
        assert [p.name for p in tmp_path.iterdir()] == ["latest.json"]

    def test_failed_replace_keeps_previous_snapshot(self, snapshot, tmp_path: Path) -> None:
        path = tmp_path / "latest.json"
        path.write_text('{"old": true}')

        with patch("build_snapshot.write_snapshot.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(SnapshotWriteError, match="disk full"):
                write_snapshot(snapshot, path)

        assert json.loads(path.read_text()) == {"old": True}
        assert [p.name for p in tmp_path.iterdir()] == ["latest.json"]

    def test_unwritable_destination_raises(self, snapshot, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(SnapshotWriteError):
            write_snapshot(snapshot, blocker / "latest.json")
