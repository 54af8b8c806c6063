from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from repo_locator.domain.ports import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def normalize(self, path: Path) -> Path:
        return Path(os.path.normpath(os.path.abspath(os.path.expanduser(path))))

    def list_subdirectories(self, path: Path) -> Iterator[Path]:
        try:
            entries = list(os.scandir(path))
        except OSError as error:
            self._logger.debug(
                "directory enumeration skipped",
                extra={"event": "fs.scandir.skipped", "path": str(path), "error": str(error)},
            )
            return

        for entry in entries:
            try:
                if entry.is_dir():
                    yield Path(entry.path)
            except OSError:
                continue

    def is_directory(self, path: Path) -> bool:
        try:
            return path.is_dir()
        except OSError:
            return False

    def exists(self, path: Path) -> bool:
        try:
            return path.exists()
        except OSError:
            return False

    def modified_time(self, path: Path) -> float:
        try:
            return path.stat().st_mtime
        except OSError:
            return 0.0
