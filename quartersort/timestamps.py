"""Resolve file creation ("birth") times.

Not every platform reports a birth time: macOS and the BSDs expose
``st_birthtime``, most Linux builds of Python do not. Callers get an
explicit ``has_created_at`` flag instead of a guessed value.
"""
import os
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Tuple

from .models import FileRecord
from .utils import local_datetime


def resolve_created_at(
        path: Path,
        stat_func: Optional[Callable] = None,
        mtime_fallback: bool = False,
) -> Tuple[bool, Optional[datetime]]:
    """Return ``(has_created_at, created_at)`` for ``path``.

    Args:
        path: File to inspect.
        stat_func: Optional replacement for :func:`os.stat`. Tests inject
            a function returning a ``SimpleNamespace`` so they do not
            depend on the host filesystem.
        mtime_fallback: When True and no birth time is available, use the
            modification time instead.

    Raises:
        OSError: when ``path`` cannot be stat'ed at all.
    """
    st = (stat_func or os.stat)(path)
    ts = getattr(st, "st_birthtime", None)
    if ts is None and mtime_fallback:
        ts = getattr(st, "st_mtime", None)
    if ts is None:
        return False, None
    return True, local_datetime(ts)


def load_record(
        path: Path,
        stat_func: Optional[Callable] = None,
        mtime_fallback: bool = False,
) -> FileRecord:
    has_created_at, created_at = resolve_created_at(
        path, stat_func=stat_func, mtime_fallback=mtime_fallback
    )
    return FileRecord(path=Path(path), has_created_at=has_created_at, created_at=created_at)
