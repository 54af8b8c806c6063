from __future__ import annotations
"""Use case discovering repository roots below a directory."""

from dataclasses import dataclass
import logging

from repo_locator.application.use_cases.repo_classifier import RepoClassifier
from repo_locator.domain.entities import RepoCandidate, RepoClassificationMode, ScanRequest
from repo_locator.domain.errors import InvalidRootError
from repo_locator.domain.ports import FileSystemPort


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class RepoScanner:
    """Bounded-depth directory walk with early termination on a match.

    Responsibilities:
    - enumerate immediate subdirectories of the request root
    - classify each one with `RepoClassifier`
    - stop descending into a directory once it is a repository
    - descend into non-repositories while depth budget remains
    - skip unreadable directories without failing the scan
    """

    filesystem: FileSystemPort
    classifier: RepoClassifier

    def scan(
        self,
        request: ScanRequest,
        mode: RepoClassificationMode = RepoClassificationMode.FAST_LEAF_ONLY,
    ) -> frozenset[RepoCandidate]:
        """Discover repository roots below `request.root`.

        Args:
            request: Root directory and recursion depth budget.
            mode: Fast classification mode used for every directory.

        Returns:
            Unordered set of discovered repositories. No member is a
            descendant of another member.

        Raises:
            InvalidRootError: `request.root` is not an existing directory.
            ValueError: `mode` is `AUTHORITATIVE`.
        """
        if mode is RepoClassificationMode.AUTHORITATIVE:
            raise ValueError("Authoritative classification is not supported for bulk scans")

        root = self.filesystem.normalize(request.root)
        if not self.filesystem.is_directory(root):
            raise InvalidRootError(root)

        found: set[RepoCandidate] = set()
        self._scan_level(ScanRequest(root=root, depth=request.depth), mode, found)

        LOGGER.info(
            "scanner execution completed",
            extra={
                "event": "scanner.completed",
                "root": str(root),
                "depth": request.depth,
                "mode": mode.value,
                "repo_count": len(found),
            },
        )
        return frozenset(found)

    def _scan_level(self, request: ScanRequest, mode: RepoClassificationMode, found: set[RepoCandidate]) -> None:
        for child in self.filesystem.list_subdirectories(request.root):
            if self.classifier.is_repository(child, mode):
                found.add(RepoCandidate(path=child, last_modified=self.filesystem.modified_time(child)))
                continue
            if request.depth > 0:
                self._scan_level(request.descend(child), mode, found)
