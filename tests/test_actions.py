"""Tests for `quartersort.actions`.

Covers the per-file state machine for both operations:

- dry-run reports and never touches the filesystem
- an existing destination is a warning under dry-run and an error otherwise
- copy keeps the source; move removes it; both produce identical bytes
- OS failures surface as ``ActionError``
"""
from datetime import datetime
from pathlib import Path

import pytest

from quartersort.actions import copy_file, move_file, run_action
from quartersort.errors import ActionError, ConfigurationError, DestinationExistsError
from quartersort.models import FileRecord, RunConfig


def _snapshot(root: Path):
    return sorted(
        (str(p.relative_to(root)), p.read_bytes() if p.is_file() else None)
        for p in root.rglob("*")
    )


@pytest.fixture
def photo(tmp_path):
    src_dir = tmp_path / "in"
    src_dir.mkdir()
    f = src_dir / "photo.jpg"
    f.write_bytes(b"\x89binary\x00data")
    return FileRecord(f, True, datetime(2023, 5, 10))


def test_copy_keeps_source_and_writes_identical_bytes(tmp_path, photo, capsys):
    out = tmp_path / "out"
    res = copy_file(photo, out, 0)

    dst = out / "2023" / "01_apr_to_jun" / "photo_0.jpg"
    assert res.dst == dst
    assert res.performed
    assert photo.path.read_bytes() == b"\x89binary\x00data"
    assert dst.read_bytes() == photo.path.read_bytes()
    assert "Copied" in capsys.readouterr().out


def test_move_removes_source(tmp_path, photo, capsys):
    out = tmp_path / "out"
    data = photo.path.read_bytes()
    res = move_file(photo, out, 3)

    assert res.performed
    assert not photo.path.exists()
    assert (out / "2023" / "01_apr_to_jun" / "photo_3.jpg").read_bytes() == data
    assert "Moved" in capsys.readouterr().out


def test_move_undefined_bucket(tmp_path):
    f = tmp_path / "scan.pdf"
    f.write_bytes(b"pdf")
    res = move_file(FileRecord(f), tmp_path / "out", 5)
    assert res.dst == tmp_path / "out" / "UNDEFINED" / "UNDEFINED" / "scan_5.pdf"
    assert res.dst.read_bytes() == b"pdf"
    assert not f.exists()


@pytest.mark.parametrize("action", [copy_file, move_file])
def test_dry_run_touches_nothing(tmp_path, photo, action, capsys):
    before = _snapshot(tmp_path)
    res = action(photo, tmp_path / "out", 0, dry_run=True)

    assert not res.performed
    assert res.skipped_reason == ""
    assert _snapshot(tmp_path) == before
    assert "DRY RUN: would" in capsys.readouterr().out


@pytest.mark.parametrize("action", [copy_file, move_file])
def test_existing_destination_is_an_error(tmp_path, photo, action):
    dst = tmp_path / "out" / "2023" / "01_apr_to_jun" / "photo_0.jpg"
    dst.parent.mkdir(parents=True)
    dst.write_bytes(b"old")

    with pytest.raises(DestinationExistsError, match="already exists"):
        action(photo, tmp_path / "out", 0)
    assert dst.read_bytes() == b"old"
    assert photo.path.exists()


@pytest.mark.parametrize("action", [copy_file, move_file])
def test_existing_destination_under_dry_run_warns(tmp_path, photo, action, capsys):
    dst = tmp_path / "out" / "2023" / "01_apr_to_jun" / "photo_0.jpg"
    dst.parent.mkdir(parents=True)
    dst.write_bytes(b"old")
    before = _snapshot(tmp_path)

    res = action(photo, tmp_path / "out", 0, dry_run=True)

    assert res.skipped_reason == "exists"
    assert not res.performed
    assert _snapshot(tmp_path) == before
    assert "already exists" in capsys.readouterr().err


def test_copy_missing_source_raises_action_error(tmp_path):
    rec = FileRecord(tmp_path / "gone.jpg", True, datetime(2020, 2, 2))
    with pytest.raises(ActionError, match="unable to open input file"):
        copy_file(rec, tmp_path / "out", 0)
    assert not (tmp_path / "out").exists()


def test_move_missing_source_raises_action_error(tmp_path):
    rec = FileRecord(tmp_path / "gone.jpg", True, datetime(2020, 2, 2))
    with pytest.raises(ActionError, match="unable to move"):
        move_file(rec, tmp_path / "out", 0)


def test_bucket_blocked_by_file_raises_action_error(tmp_path, photo):
    out = tmp_path / "out"
    out.mkdir()
    (out / "2023").write_text("not a directory")
    with pytest.raises(ActionError, match="unable to create output directory"):
        copy_file(photo, out, 0)


def test_run_action_dispatches_on_operation(tmp_path, photo):
    cfg = RunConfig(photo.path.parent, tmp_path / "out", operation="move")
    res = run_action(cfg, photo, 1)
    assert res.operation == "move"
    assert not photo.path.exists()


def test_run_action_rejects_unknown_operation(tmp_path, photo):
    cfg = RunConfig(photo.path.parent, tmp_path / "out", operation="delete")
    with pytest.raises(ConfigurationError, match="valid values are: copy, move"):
        run_action(cfg, photo, 0)
    assert photo.path.exists()
