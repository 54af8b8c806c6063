from __future__ import annotations
"""Use case turning a short user token into a location to switch to."""

from dataclasses import dataclass, field
import logging
import os
from pathlib import Path
from typing import Callable

from repo_locator.domain.entities import ResolutionRequest
from repo_locator.domain.ports import FileSystemPort


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class LocationResolver:
    """Resolve navigation targets.

    Resolution is total: a path is always produced and its existence is not
    checked, so a miss surfaces when the caller actually changes directory.
    """

    filesystem: FileSystemPort
    cwd: Callable[[], Path] = field(default=Path.cwd)

    def resolve(self, request: ResolutionRequest) -> Path:
        """Resolve `request.token` with the following precedence.

        1. empty or missing token: the root itself
        2. absolute token (after `~` expansion): the token
        3. `root/token` exists: that path
        4. otherwise the token relative to the working directory
        """
        token = request.token or ""
        if not token.strip():
            return self._log_resolution(request, "root", self.filesystem.normalize(request.root))

        expanded = Path(os.path.expanduser(token))
        if expanded.is_absolute():
            return self._log_resolution(request, "absolute", expanded)

        under_root = Path(os.path.normpath(self.filesystem.normalize(request.root) / token))
        if self.filesystem.exists(under_root):
            return self._log_resolution(request, "root_relative", under_root)

        return self._log_resolution(request, "cwd_relative", Path(os.path.normpath(self.cwd() / token)))

    def resolve_parent(self, start: Path, levels: int = 1) -> Path:
        """Return the `levels`-th ancestor of `start`, stopping at the filesystem root."""
        if levels < 1:
            raise ValueError(f"Parent levels must be >= 1, got {levels}")

        current = self.filesystem.normalize(start)
        for _ in range(levels):
            if current.parent == current:
                break
            current = current.parent
        return current

    @staticmethod
    def _log_resolution(request: ResolutionRequest, rule: str, target: Path) -> Path:
        LOGGER.debug(
            "location resolved",
            extra={
                "event": "resolver.resolved",
                "root": str(request.root),
                "token": request.token,
                "rule": rule,
                "target": str(target),
            },
        )
        return target
