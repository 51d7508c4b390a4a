"""Copy or move a single file into its dated bucket.

Both actions share the same flow: compute the destination, refuse to
overwrite an existing file, report instead of acting under dry-run, and
otherwise create the bucket directory and perform the operation.
"""
import os
import shutil
import sys
from pathlib import Path

from .errors import ActionError, ConfigurationError, DestinationExistsError
from .models import ActionResult, FileRecord, RunConfig, VALID_OPERATIONS
from .paths import destination_for

# Read, write and execute for user, group and other (subject to umask)
DIR_MODE = 0o777


def _warn(msg: str):
    print(msg, file=sys.stderr)


def _check_destination(operation: str, record: FileRecord, dst: Path, dry_run: bool):
    """Return a skipped result for a dry-run collision, raise otherwise.

    Returns ``None`` when ``dst`` is free.
    """
    if not os.path.lexists(dst):
        return None
    if dry_run:
        _warn(f"DRY RUN: cannot {operation} {record.path} -> {dst}, destination already exists")
        return ActionResult(operation, record.path, dst, performed=False, skipped_reason="exists")
    raise DestinationExistsError(
        f"unable to {operation} {record.path} to {dst}, the output file already exists"
    )


def _make_bucket(dst: Path):
    try:
        os.makedirs(dst.parent, mode=DIR_MODE, exist_ok=True)
    except OSError as e:
        raise ActionError(f"unable to create output directory {dst.parent}: {e}") from e


def copy_file(record: FileRecord, out_root: Path, index: int, dry_run: bool = False) -> ActionResult:
    """Copy ``record`` to ``out_root/<year>/<quarter>/<stem>_<index><ext>``.

    The source is left untouched. The destination is opened with
    exclusive-create so an existing file is never truncated.

    Raises:
        DestinationExistsError: the destination exists and ``dry_run`` is False.
        ActionError: opening, creating or writing a file failed.
    """
    dst = destination_for(record, out_root, index)
    skipped = _check_destination("copy", record, dst, dry_run)
    if skipped is not None:
        return skipped

    if dry_run:
        print(f"DRY RUN: would copy {record.path} -> {dst}")
        return ActionResult("copy", record.path, dst, performed=False)

    try:
        src_fh = open(record.path, "rb")
    except OSError as e:
        raise ActionError(f"unable to open input file {record.path}: {e}") from e
    with src_fh:
        _make_bucket(dst)
        try:
            dst_fh = open(dst, "xb")
        except FileExistsError as e:
            raise DestinationExistsError(
                f"unable to copy {record.path} to {dst}, the output file already exists"
            ) from e
        except OSError as e:
            raise ActionError(f"unable to create output file {dst}: {e}") from e
        with dst_fh:
            try:
                shutil.copyfileobj(src_fh, dst_fh)
            except OSError as e:
                raise ActionError(f"unable to copy {record.path} to {dst}: {e}") from e

    print(f"Copied {record.path} -> {dst}")
    return ActionResult("copy", record.path, dst, performed=True)


def move_file(record: FileRecord, out_root: Path, index: int, dry_run: bool = False) -> ActionResult:
    """Move ``record`` into its bucket. See :func:`copy_file`."""
    dst = destination_for(record, out_root, index)
    skipped = _check_destination("move", record, dst, dry_run)
    if skipped is not None:
        return skipped

    if dry_run:
        print(f"DRY RUN: would move {record.path} -> {dst}")
        return ActionResult("move", record.path, dst, performed=False)

    _make_bucket(dst)
    try:
        shutil.move(str(record.path), str(dst))
    except OSError as e:
        raise ActionError(f"unable to move {record.path} to {dst}: {e}") from e

    print(f"Moved {record.path} -> {dst}")
    return ActionResult("move", record.path, dst, performed=True)


_ACTIONS = {
    "copy": copy_file,
    "move": move_file,
}


def run_action(config: RunConfig, record: FileRecord, index: int) -> ActionResult:
    action = _ACTIONS.get(config.operation)
    if action is None:
        raise ConfigurationError(
            f"unknown operation: {config.operation}, valid values are: {', '.join(VALID_OPERATIONS)}"
        )
    return action(record, config.output_dir, index, dry_run=config.dry_run)
