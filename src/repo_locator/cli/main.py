from __future__ import annotations

import argparse
import io
import json
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from repo_locator.adapters.filesystem.local_filesystem import LocalFileSystemAdapter
from repo_locator.adapters.git_client.shell_git_client import ShellGitStatusAdapter
from repo_locator.application.use_cases.completion_provider import CompletionProvider
from repo_locator.application.use_cases.location_resolver import LocationResolver
from repo_locator.application.use_cases.repo_classifier import RepoClassifier
from repo_locator.application.use_cases.repo_scanner import RepoScanner
from repo_locator.cli.config import AppConfig, SUPPORTED_MODES, load_config
from repo_locator.cli.shell_integration import SUPPORTED_SHELLS, build_shell_init
from repo_locator.domain.entities import RepoClassificationMode, ResolutionRequest, ScanRequest
from repo_locator.domain.errors import InvalidRootError
from repo_locator.logging_utils import configure_logging


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--root", required=False, help="Repository root directory. Falls back to REPO_ROOT.")
    common.add_argument(
        "--depth",
        type=int,
        required=False,
        help="Extra directory levels to search below non-repositories. Falls back to REPO_SCAN_DEPTH.",
    )

    mode_option = argparse.ArgumentParser(add_help=False)
    mode_option.add_argument(
        "--mode",
        choices=sorted(SUPPORTED_MODES),
        required=False,
        help="Repository classification mode. Falls back to REPO_CLASSIFY_MODE.",
    )

    parser = argparse.ArgumentParser(
        prog="repo-locator",
        description="Discover git repositories under a root and jump between them.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser(
        "scan",
        parents=[common, mode_option],
        help="List repositories under the root, most recently modified first.",
    )

    resolve_parser = subparsers.add_parser("resolve", parents=[common], help="Print the location for a token.")
    resolve_parser.add_argument("token", nargs="?", default="", help="Repository name, relative or absolute path.")

    up_parser = subparsers.add_parser("up", help="Print an ancestor of the working directory.")
    up_parser.add_argument("levels", nargs="?", type=int, default=1, help="Number of levels to go up.")

    complete_parser = subparsers.add_parser("complete", parents=[common], help="Print completion suggestions.")
    complete_parser.add_argument("partial", nargs="?", default="", help="Token typed so far.")
    complete_parser.add_argument("--case-sensitive", action="store_true", help="Match the token case-sensitively.")
    complete_parser.add_argument("--format", choices=["tsv", "json"], default="tsv")

    classify_parser = subparsers.add_parser(
        "classify",
        parents=[mode_option],
        help="Exit 0 when the path is a repository, 1 otherwise.",
    )
    classify_parser.add_argument("path", nargs="?", default=".", help="Directory to check.")
    classify_parser.add_argument("--quiet", action="store_true", help="Only report through the exit status.")

    init_parser = subparsers.add_parser("shell-init", help="Print shell functions for your profile.")
    init_parser.add_argument("shell", choices=SUPPORTED_SHELLS)
    init_parser.add_argument("--name", default="rcd", help="Name of the navigation function.")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    log_level = (os.environ.get("LOG_LEVEL") or "WARNING").strip().upper()
    configure_logging(log_level if log_level in VALID_LOG_LEVELS else "WARNING")
    logger = logging.getLogger(__name__)
    _configure_stdout()

    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_config(args=args, env=os.environ)
    except ValueError as error:
        parser.error(str(error))

    logger.debug(
        "cli configuration resolved",
        extra={
            "event": "cli.config.resolved",
            "command": args.command,
            "root": str(config.root),
            "depth": config.depth,
            "mode": config.mode.value,
            "case_sensitive": config.case_sensitive,
        },
    )

    if args.command == "scan":
        if config.mode is RepoClassificationMode.AUTHORITATIVE:
            parser.error("scan supports only the fast classification modes")
        try:
            candidates = _build_scanner(config).scan(ScanRequest(root=config.root, depth=config.depth), config.mode)
        except InvalidRootError as error:
            logger.error("scan root unavailable", extra={"event": "cli.scan.invalid_root", "root": str(error.root)})
            parser.error(str(error))
        for candidate in sorted(candidates, key=lambda item: (-item.last_modified, str(item.path))):
            print(candidate.path)
        return 0

    if args.command == "resolve":
        resolver = LocationResolver(filesystem=LocalFileSystemAdapter())
        print(resolver.resolve(ResolutionRequest(root=config.root, token=args.token)))
        return 0

    if args.command == "up":
        resolver = LocationResolver(filesystem=LocalFileSystemAdapter())
        try:
            print(resolver.resolve_parent(Path.cwd(), args.levels))
        except ValueError as error:
            parser.error(str(error))
        return 0

    if args.command == "complete":
        provider = CompletionProvider(scanner=_build_scanner(config), case_sensitive=config.case_sensitive)
        suggestions = provider.suggest(config.root, config.depth, args.partial)
        if args.format == "json":
            print(
                json.dumps(
                    [
                        {
                            "insertable_text": item.insertable_text,
                            "display_label": item.display_label,
                            "tooltip_text": item.tooltip_text,
                        }
                        for item in suggestions
                    ]
                )
            )
        else:
            for item in suggestions:
                print(f"{item.insertable_text}\t{item.display_label}\t{item.tooltip_text}")
        return 0

    if args.command == "classify":
        is_repository = _build_classifier(config).is_repository(Path(args.path), config.mode)
        if not args.quiet:
            print("repository" if is_repository else "not a repository")
        return 0 if is_repository else 1

    if args.command == "shell-init":
        print(build_shell_init(args.shell, function_name=args.name), end="")
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 2


def _configure_stdout() -> None:
    # undecodable directory names come back from os.scandir as surrogates;
    # write them out as the original bytes so `cd` can use them
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(errors="surrogateescape")


def _build_classifier(config: AppConfig) -> RepoClassifier:
    return RepoClassifier(
        filesystem=LocalFileSystemAdapter(),
        repository_status=ShellGitStatusAdapter(
            git_executable=config.git_executable,
            timeout_seconds=config.git_timeout_seconds,
        ),
    )


def _build_scanner(config: AppConfig) -> RepoScanner:
    classifier = _build_classifier(config)
    return RepoScanner(filesystem=classifier.filesystem, classifier=classifier)
