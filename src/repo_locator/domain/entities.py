from __future__ import annotations
"""Core domain entities shared by use cases, adapters and the CLI.

Everything here is request scoped: entities are rebuilt on every invocation
because repositories can appear or disappear between two keystrokes.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


GIT_MARKER_NAME = ".git"


class RepoClassificationMode(str, Enum):
    """Strategy used to decide whether a directory is a repository root.

    Attributes:
        FAST_LEAF_ONLY: Look for a `.git` directory directly under the path.
        FAST_WITH_ANCESTOR_WALK: Leaf check, then the same check on every
            parent up to the filesystem root.
        AUTHORITATIVE: Ask `git` itself. Handles `.git` files and unusual
            layouts, but spawns a process (~35ms versus ~0.5ms).
    """

    FAST_LEAF_ONLY = "fast"
    FAST_WITH_ANCESTOR_WALK = "ancestor"
    AUTHORITATIVE = "authoritative"


@dataclass(frozen=True, slots=True)
class RepoCandidate:
    """Repository root discovered by a scan.

    Attributes:
        path: Absolute repository root path.
        last_modified: Modification time of the root, used only for ordering.
    """

    path: Path
    last_modified: float = field(default=0.0, compare=False)


@dataclass(frozen=True, slots=True)
class ScanRequest:
    """Bounded-depth scan below `root`.

    A depth of 0 checks only the immediate children of `root`.
    """

    root: Path
    depth: int = 0

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError(f"Scan depth must be >= 0, got {self.depth}")

    def descend(self, child: Path) -> "ScanRequest":
        """Request for one level below, consuming one unit of depth budget."""
        return ScanRequest(root=child, depth=self.depth - 1)


@dataclass(frozen=True, slots=True)
class ResolutionRequest:
    """User token to turn into a location, relative to the repository root."""

    root: Path
    token: str | None = None


@dataclass(frozen=True, slots=True)
class Suggestion:
    """One completion entry handed to the interactive host."""

    insertable_text: str
    display_label: str
    tooltip_text: str
