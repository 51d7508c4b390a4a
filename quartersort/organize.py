"""Organize files into year/quarter folders based on their creation time.

The walk is a plain generator (:func:`iter_files`) so callers and tests
can process entries one at a time; :func:`organize` drives it and stops
at the first error, leaving already-processed files in place.
"""
import os
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from tqdm import tqdm

from .actions import run_action
from .models import ActionResult, RunConfig
from .timestamps import load_record


def iter_files(root: Path) -> Iterator[Path]:
    """Yield regular files below ``root`` depth-first in lexical order.

    Files and subdirectories of a folder are visited together in name
    order, so ``a.txt``, ``b/...``, ``c.txt`` come out in that sequence.
    Symlinked directories are not followed; pipes, sockets and device
    nodes are skipped. Errors reading a directory propagate to the caller.
    """
    root = Path(root)
    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda e: e.name)
    except NotADirectoryError:
        yield root
        return
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            yield from iter_files(Path(entry.path))
        elif entry.is_file():
            yield Path(entry.path)


def organize(config: RunConfig, stat_func: Optional[Callable] = None) -> List[ActionResult]:
    """Copy or move every eligible file of ``config.input_dir``.

    Args:
        config: Run settings; validated before anything is touched.
        stat_func: Optional replacement for :func:`os.stat` used when
            resolving creation times.

    Returns:
        One :class:`ActionResult` per processed file, in walk order.

    Raises:
        ConfigurationError: the config is invalid.
        DestinationExistsError: a destination exists outside dry-run.
        ActionError: a copy or move failed.
        OSError: a file could not be stat'ed or a directory read.
    """
    config.validate()

    results = []
    index = 0
    for path in tqdm(iter_files(config.input_dir), disable=not config.progress, unit="file"):
        if config.is_ignored(path):
            continue
        record = load_record(path, stat_func=stat_func, mtime_fallback=config.mtime_fallback)
        results.append(run_action(config, record, index))
        index += 1
    return results
