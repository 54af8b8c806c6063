from __future__ import annotations
"""Domain errors."""

from pathlib import Path


class InvalidRootError(ValueError):
    """Raised when a scan root is missing or is not a directory."""

    def __init__(self, root: Path) -> None:
        super().__init__(f"Repository root is not a directory: {root}")
        self.root = root
