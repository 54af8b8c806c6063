from __future__ import annotations
"""Use case deciding whether a directory is a repository root."""

from dataclasses import dataclass
import logging
from pathlib import Path

from repo_locator.domain.entities import GIT_MARKER_NAME, RepoClassificationMode
from repo_locator.domain.ports import FileSystemPort, RepositoryStatusPort


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class RepoClassifier:
    """Classify paths as repositories with a selectable strategy.

    The fast modes only look for a `.git` directory and never spawn a
    process. The authoritative mode defers to `RepositoryStatusPort`, which
    also understands `.git` files (worktrees, submodules) and custom
    `GIT_DIR` setups, at an order of magnitude higher cost per call.

    Classification never raises for a bad path; it answers `False`.
    """

    filesystem: FileSystemPort
    repository_status: RepositoryStatusPort

    def is_repository(self, path: Path, mode: RepoClassificationMode) -> bool:
        """Return whether `path` is (or, for the ancestor walk, is inside) a repository.

        Args:
            path: Directory to classify. Relative paths are taken against the
                current working directory.
            mode: Classification strategy.
        """
        if mode is RepoClassificationMode.FAST_LEAF_ONLY:
            return self.has_marker(path)
        if mode is RepoClassificationMode.FAST_WITH_ANCESTOR_WALK:
            return self.find_enclosing_repository(path) is not None
        if mode is RepoClassificationMode.AUTHORITATIVE:
            result = self.repository_status.is_inside_work_tree(self.filesystem.normalize(path))
            LOGGER.debug(
                "authoritative classification",
                extra={"event": "classifier.authoritative", "path": str(path), "is_repository": result},
            )
            return result
        raise ValueError(f"Unsupported classification mode: {mode!r}")

    def has_marker(self, path: Path) -> bool:
        """Leaf test shared by every fast strategy: `<path>/.git` is a directory."""
        return self.filesystem.is_directory(path / GIT_MARKER_NAME)

    def find_enclosing_repository(self, path: Path) -> Path | None:
        """Walk from `path` up to the filesystem root and return the first repository root."""
        start = self.filesystem.normalize(path)
        for candidate in (start, *start.parents):
            if self.has_marker(candidate):
                return candidate
        return None
