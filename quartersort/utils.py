"""Small path and timestamp helpers shared by the organizer modules.

The extension is everything from the last dot of the basename, so
dot-files such as ``.DS_Store`` are treated as an extension with an
empty stem. The ignore list in :mod:`quartersort.models` depends on that.
"""

import os
from datetime import datetime
from pathlib import Path
from dateutil import tz


def file_ext(path) -> str:
    """Return the extension of ``path`` including the leading dot.

    Unlike :attr:`pathlib.PurePath.suffix` a leading-dot name counts as
    an extension:

    >>> file_ext("photo.jpg")
    '.jpg'
    >>> file_ext("/in/.DS_Store")
    '.DS_Store'
    >>> file_ext("README")
    ''
    """
    name = os.path.basename(os.fspath(path))
    i = name.rfind(".")
    if i < 0:
        return ""
    return name[i:]


def file_stem(path) -> str:
    """Return the basename of ``path`` without :func:`file_ext`."""
    name = os.path.basename(os.fspath(path))
    ext = file_ext(name)
    return name[: len(name) - len(ext)]


def local_datetime(ts: float) -> datetime:
    """Convert a POSIX timestamp to an aware datetime in the local zone."""
    return datetime.fromtimestamp(ts, tz=tz.tzlocal())


def is_within(child: Path, parent: Path) -> bool:
    """Return True when ``child`` is ``parent`` or lives somewhere below it."""
    try:
        child.resolve().relative_to(parent.resolve())
    except ValueError:
        return False
    return True
