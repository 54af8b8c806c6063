from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable, Sequence

from repo_locator.domain.ports import RepositoryStatusPort


class ShellGitStatusAdapter(RepositoryStatusPort):
    """Answer repository questions by running `git` in a child process.

    This is the only place that spawns `git`. The child's exit status is
    consumed here and never leaks to the caller; output is discarded.
    """

    def __init__(
        self,
        *,
        git_executable: str = "git",
        timeout_seconds: float = 5.0,
        runner: Callable[..., subprocess.CompletedProcess[str]] = subprocess.run,
    ) -> None:
        self._git_executable = git_executable
        self._timeout_seconds = timeout_seconds
        self._runner = runner
        self._logger = logging.getLogger(__name__)

    def is_inside_work_tree(self, path: Path) -> bool:
        result = self._run_git_allow_fail(["-C", str(path), "rev-parse", "--is-inside-work-tree"])
        if result is None:
            return False
        return result.returncode == 0

    def _run_git_allow_fail(self, args: Sequence[str]) -> subprocess.CompletedProcess[str] | None:
        command = [self._git_executable, *args]
        try:
            return self._runner(
                command,
                check=False,
                text=True,
                capture_output=True,
                timeout=self._timeout_seconds,
            )
        except FileNotFoundError:
            self._logger.debug(
                "git executable not found",
                extra={"event": "git.executable.missing", "git_executable": self._git_executable},
            )
        except subprocess.TimeoutExpired:
            self._logger.debug(
                "git command timed out",
                extra={
                    "event": "git.command.timeout",
                    "command": " ".join(command),
                    "timeout_seconds": self._timeout_seconds,
                },
            )
        except OSError as error:
            self._logger.debug(
                "git command could not be started",
                extra={"event": "git.command.error", "command": " ".join(command), "error": str(error)},
            )
        return None
