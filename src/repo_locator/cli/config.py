from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from repo_locator.domain.entities import RepoClassificationMode


DEFAULT_ROOT = "~/repos"
DEFAULT_DEPTH = 2
DEFAULT_GIT_TIMEOUT_SECONDS = 5.0
SUPPORTED_MODES = {mode.value for mode in RepoClassificationMode}


@dataclass(slots=True)
class AppConfig:
    root: Path
    depth: int
    mode: RepoClassificationMode
    case_sensitive: bool
    git_executable: str
    git_timeout_seconds: float


def load_config(args, env: Mapping[str, str]) -> AppConfig:
    root_raw = _normalize_empty(getattr(args, "root", None)) or _normalize_empty(env.get("REPO_ROOT")) or DEFAULT_ROOT
    raw_depth = _normalize_empty(_optional_str(getattr(args, "depth", None))) or _normalize_empty(
        env.get("REPO_SCAN_DEPTH")
    )
    raw_mode = (
        _normalize_empty(getattr(args, "mode", None))
        or _normalize_empty(env.get("REPO_CLASSIFY_MODE"))
        or RepoClassificationMode.FAST_LEAF_ONLY.value
    )

    depth = DEFAULT_DEPTH
    if raw_depth is not None:
        try:
            depth = int(raw_depth)
        except ValueError as error:
            raise ValueError("REPO_SCAN_DEPTH/--depth must be an integer") from error
        if depth < 0:
            raise ValueError("REPO_SCAN_DEPTH/--depth must be greater than or equal to 0")

    if raw_mode not in SUPPORTED_MODES:
        valid = ", ".join(sorted(SUPPORTED_MODES))
        raise ValueError(f"Unsupported classification mode '{raw_mode}'. Allowed values: {valid}")

    if getattr(args, "case_sensitive", False):
        case_sensitive = True
    else:
        case_sensitive = parse_bool(env.get("REPO_MATCH_CASE_SENSITIVE", "false"), "REPO_MATCH_CASE_SENSITIVE")

    git_executable = _normalize_empty(env.get("GIT_EXECUTABLE")) or "git"

    raw_timeout = _normalize_empty(env.get("GIT_TIMEOUT_SECONDS"))
    try:
        git_timeout_seconds = float(raw_timeout) if raw_timeout else DEFAULT_GIT_TIMEOUT_SECONDS
    except ValueError as error:
        raise ValueError("GIT_TIMEOUT_SECONDS must be a number") from error
    if git_timeout_seconds <= 0:
        raise ValueError("GIT_TIMEOUT_SECONDS must be greater than 0")

    return AppConfig(
        root=Path(root_raw).expanduser(),
        depth=depth,
        mode=RepoClassificationMode(raw_mode),
        case_sensitive=case_sensitive,
        git_executable=git_executable,
        git_timeout_seconds=git_timeout_seconds,
    )


def parse_bool(value: str, name: str) -> bool:
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off", ""}:
        return False
    raise ValueError(f"{name} must be a boolean (true/false)")


def _optional_str(value: object) -> str | None:
    return str(value) if value is not None else None


def _normalize_empty(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped if stripped else None
