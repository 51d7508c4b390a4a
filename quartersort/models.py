"""Records passed between the organizer stages."""
import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from .errors import ConfigurationError
from .utils import file_ext, file_stem, is_within

VALID_OPERATIONS = ("copy", "move")

# macOS drops these into every browsed folder
DEFAULT_IGNORED_EXTENSIONS = (".DS_Store",)


@dataclass(frozen=True)
class FileRecord:
    path: Path
    has_created_at: bool = False
    created_at: Optional[datetime] = None

    @property
    def ext(self) -> str:
        return file_ext(self.path)

    @property
    def stem(self) -> str:
        return file_stem(self.path)


@dataclass(frozen=True)
class ActionResult:
    operation: str
    src: Path
    dst: Path
    performed: bool  # False under dry-run
    skipped_reason: str = ""  # "exists" when a dry-run hit a collision


@dataclass(frozen=True)
class RunConfig:
    """Settings for a single organize run.

    Built once by the CLI (or a test) and handed to every stage, so no
    stage reads process-wide state.
    """
    input_dir: Path
    output_dir: Path
    operation: str = "copy"
    dry_run: bool = False
    ignored_extensions: Tuple[str, ...] = field(default=DEFAULT_IGNORED_EXTENSIONS)
    mtime_fallback: bool = False
    progress: bool = False

    def validate(self) -> None:
        """Raise :class:`ConfigurationError` when the run cannot start."""
        if self.operation not in VALID_OPERATIONS:
            raise ConfigurationError(
                f"unknown operation: {self.operation}, "
                f"valid values are: {', '.join(VALID_OPERATIONS)}"
            )
        if not self.input_dir.is_dir():
            raise ConfigurationError(f"input directory does not exist: {self.input_dir}")
        if not os.access(self.input_dir, os.R_OK | os.X_OK):
            raise ConfigurationError(f"input directory is not readable: {self.input_dir}")
        if self.input_dir.resolve() == self.output_dir.resolve():
            raise ConfigurationError(
                f"input and output directories are the same: {self.input_dir}"
            )
        if is_within(self.output_dir, self.input_dir):
            raise ConfigurationError(
                f"output directory {self.output_dir} cannot be inside input directory {self.input_dir}"
            )
        if self.output_dir.exists() and not self.output_dir.is_dir():
            raise ConfigurationError(f"output path is not a directory: {self.output_dir}")

    def is_ignored(self, path) -> bool:
        return file_ext(path) in self.ignored_extensions
