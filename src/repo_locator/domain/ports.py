from __future__ import annotations
"""Hexagonal architecture port interfaces.

Use cases depend only on these abstractions. Adapters provide the concrete
filesystem and `git` process implementations.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable


class FileSystemPort(ABC):
    """Filesystem queries abstracted for testability and portability.

    None of these methods raise for missing or unreadable paths; callers get
    an empty or negative answer instead.
    """

    @abstractmethod
    def normalize(self, path: Path) -> Path:
        """Return `path` as an absolute path with `~` and `..` collapsed."""
        raise NotImplementedError

    @abstractmethod
    def list_subdirectories(self, path: Path) -> Iterable[Path]:
        """Yield immediate child directories of `path` (symlinks followed)."""
        raise NotImplementedError

    @abstractmethod
    def is_directory(self, path: Path) -> bool:
        """Return whether `path` exists and is a directory."""
        raise NotImplementedError

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return whether a path exists."""
        raise NotImplementedError

    @abstractmethod
    def modified_time(self, path: Path) -> float:
        """Return the modification time of `path`, or 0.0 when unavailable."""
        raise NotImplementedError


class RepositoryStatusPort(ABC):
    """Authoritative repository query delegated to the version-control tool."""

    @abstractmethod
    def is_inside_work_tree(self, path: Path) -> bool:
        """Return whether `path` lies inside a working tree.

        Must never raise: an unavailable tool or an unexpected failure is
        reported as `False`.
        """
        raise NotImplementedError
