from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable

import pytest

from repo_locator.adapters.filesystem.local_filesystem import LocalFileSystemAdapter
from repo_locator.application.use_cases.repo_classifier import RepoClassifier
from repo_locator.application.use_cases.repo_scanner import RepoScanner
from repo_locator.domain.ports import RepositoryStatusPort


class RecordingRepositoryStatus(RepositoryStatusPort):
    """Status port answering from a fixed set of paths and recording queries."""

    def __init__(self, inside: set[Path] | None = None) -> None:
        self.inside = inside or set()
        self.calls: list[Path] = []

    def is_inside_work_tree(self, path: Path) -> bool:
        self.calls.append(path)
        return path in self.inside


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def repository_status() -> RecordingRepositoryStatus:
    return RecordingRepositoryStatus()


@pytest.fixture
def classifier(repository_status: RecordingRepositoryStatus) -> RepoClassifier:
    return RepoClassifier(filesystem=LocalFileSystemAdapter(), repository_status=repository_status)


@pytest.fixture
def scanner(classifier: RepoClassifier) -> RepoScanner:
    return RepoScanner(filesystem=classifier.filesystem, classifier=classifier)


@pytest.fixture
def make_repo() -> Callable[..., Path]:
    def _make_repo(path: Path, *, mtime: float | None = None) -> Path:
        (path / ".git").mkdir(parents=True)
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _make_repo
