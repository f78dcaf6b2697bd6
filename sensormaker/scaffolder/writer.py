"""Writing rendered artifacts to disk.

``ProjectWriter`` creates directories and writes artifact text.  An existing
artifact is first copied to a sibling ``<name>.<epoch-millis>.bak`` file, so
regenerating a project never silently loses an edited file.

Every failure is raised immediately as a distinct
:class:`~sensormaker.errors.MaterializeError`; nothing is retried.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Optional

from ..config import GeneratorConfig
from ..errors import (
    BackupFailed,
    DirectoryCreateError,
    DirectoryNotWritable,
    FileMissing,
    FileNotWritable,
    NotADirectory,
    NotAFile,
)
from ..utils import epoch_millis, print_notice


class ProjectWriter:
    """Creates directories and writes artifacts with backup-on-overwrite.

    Args:
        config: Layout settings (only ``backup_extension`` is used here).
        clock: Returns the current time in epoch milliseconds; used for
            backup file names.
        notify: Called with a one-line message for every backup taken.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        clock: Callable[[], int] = epoch_millis,
        notify: Callable[[str], None] = print_notice,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.clock = clock
        self.notify = notify

    # -- Directories -------------------------------------------------------

    def ensure_directory(self, path: str | Path) -> Path:
        """Create *path* (and parents) if needed and check it is writable.

        Raises:
            NotADirectory: If *path* exists but is not a directory.
            DirectoryCreateError: If the directory cannot be created.
            DirectoryNotWritable: If the directory exists but is read-only.
        """
        dir_path = Path(path)
        if dir_path.exists() and not dir_path.is_dir():
            raise NotADirectory(dir_path)
        if not dir_path.exists():
            try:
                dir_path.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                if dir_path.exists() and not dir_path.is_dir():
                    raise NotADirectory(dir_path) from exc
                raise DirectoryCreateError(dir_path, _describe(dir_path, exc)) from exc
        if not os.access(dir_path, os.W_OK):
            raise DirectoryNotWritable(dir_path)
        return dir_path

    # -- Files -------------------------------------------------------------

    def write_artifact(self, path: str | Path, content: str) -> Optional[Path]:
        """Write *content* to *path*, backing up any existing file first.

        Returns:
            The backup path if an existing file was backed up, else ``None``.

        Raises:
            NotAFile: If *path* exists but is not a regular file.
            BackupFailed: If the existing file cannot be copied.
            FileNotWritable: If the file cannot be created or written.
            FileMissing: If the target vanished while it was being opened.
        """
        file_path = Path(path)
        self.ensure_directory(file_path.parent)

        backup: Optional[Path] = None
        if file_path.exists():
            if not file_path.is_file():
                raise NotAFile(file_path)
            backup = self.backup(file_path)
            if not os.access(file_path, os.W_OK):
                raise FileNotWritable(file_path)

        try:
            with file_path.open("w", encoding="utf-8", newline="\n") as handle:
                handle.write(content)
        except FileNotFoundError as exc:
            raise FileMissing(file_path) from exc
        except IsADirectoryError as exc:
            raise NotAFile(file_path) from exc
        except OSError as exc:
            raise FileNotWritable(file_path, _describe(file_path, exc)) from exc
        return backup

    def backup(self, path: str | Path) -> Path:
        """Copy *path* to ``<name>.<epoch-millis><backup_extension>`` beside it.

        Raises:
            BackupFailed: If the copy fails.
        """
        source = Path(path)
        target = source.with_name(f"{source.name}.{self.clock()}{self.config.backup_extension}")
        try:
            shutil.copyfile(source, target)
        except OSError as exc:
            raise BackupFailed(source, _describe(source, exc)) from exc
        self.notify(f"Backed up existing: {source} to {target}")
        return target


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _describe(path: Path, exc: OSError) -> str:
    reason = exc.strerror or str(exc)
    return f"{path} ({reason})"
