from __future__ import annotations
"""Use case adapting scan results into interactive completion suggestions."""

from dataclasses import dataclass
import logging
from pathlib import Path
import shlex

from repo_locator.application.use_cases.repo_scanner import RepoScanner
from repo_locator.domain.entities import RepoCandidate, RepoClassificationMode, ScanRequest, Suggestion
from repo_locator.domain.errors import InvalidRootError


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class CompletionProvider:
    """Rank repositories under a root for an in-progress token.

    Every call rescans the tree; nothing is cached between keystrokes.
    """

    scanner: RepoScanner
    case_sensitive: bool = False

    def suggest(self, root: Path, depth: int, partial_token: str = "") -> list[Suggestion]:
        """Return suggestions for `partial_token`, most recently modified first.

        A candidate matches when its path relative to `root` contains the
        token anywhere, so both `"ap"` and a parent folder name find it.
        An unusable root yields no suggestions rather than an error.
        """
        try:
            candidates = self.scanner.scan(ScanRequest(root=root, depth=depth), RepoClassificationMode.FAST_LEAF_ONLY)
        except InvalidRootError as error:
            LOGGER.warning(
                "completion root unavailable",
                extra={"event": "completion.root.invalid", "root": str(error.root)},
            )
            return []

        scan_root = self.scanner.filesystem.normalize(root)
        needle = partial_token if self.case_sensitive else partial_token.lower()

        matches: list[tuple[RepoCandidate, str]] = []
        for candidate in candidates:
            relative = candidate.path.relative_to(scan_root).as_posix()
            haystack = relative if self.case_sensitive else relative.lower()
            if needle in haystack:
                matches.append((candidate, relative))

        matches.sort(key=lambda item: item[1])
        matches.sort(key=lambda item: item[0].last_modified, reverse=True)

        LOGGER.debug(
            "completion suggestions computed",
            extra={
                "event": "completion.suggested",
                "root": str(scan_root),
                "partial_token": partial_token,
                "candidate_count": len(candidates),
                "match_count": len(matches),
            },
        )

        return [
            Suggestion(
                insertable_text=shlex.quote(relative),
                display_label=candidate.path.name,
                tooltip_text=str(candidate.path),
            )
            for candidate, relative in matches
        ]
