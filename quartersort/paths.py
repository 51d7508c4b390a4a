"""Destination path helpers."""
from pathlib import Path

from .classify import labels_for
from .models import FileRecord


def output_dir(record: FileRecord, out_root: Path) -> Path:
    year, quarter = labels_for(record)
    return Path(out_root) / year / quarter


def output_filename(record: FileRecord, suffix: str = "") -> str:
    """Return the stem, an optional ``_<suffix>``, then the extension.

    The suffix only keeps same-named files from different source folders
    apart once they land in the same bucket.
    """
    if suffix:
        return f"{record.stem}_{suffix}{record.ext}"
    return f"{record.stem}{record.ext}"


def destination_for(record: FileRecord, out_root: Path, index: int) -> Path:
    return output_dir(record, out_root) / output_filename(record, str(index))
