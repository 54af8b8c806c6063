from __future__ import annotations

from pathlib import Path

import pytest

from repo_locator.application.use_cases.completion_provider import CompletionProvider
from repo_locator.domain.entities import Suggestion


@pytest.fixture
def provider(scanner) -> CompletionProvider:
    return CompletionProvider(scanner=scanner)


def test_concrete_scenario(tmp_path: Path, provider: CompletionProvider, make_repo) -> None:
    root = tmp_path / "repos"
    make_repo(root / "a")
    make_repo(root / "b" / "x")
    (root / "c").mkdir()

    assert provider.suggest(root, 2, "b") == [
        Suggestion(insertable_text="b/x", display_label="x", tooltip_text=str(root / "b" / "x")),
    ]


def test_substring_match_ordered_by_recency(tmp_path: Path, provider: CompletionProvider, make_repo) -> None:
    root = tmp_path / "repos"
    make_repo(root / "old-app", mtime=1_000)
    make_repo(root / "new-app", mtime=3_000)
    make_repo(root / "mapper", mtime=2_000)
    make_repo(root / "library", mtime=4_000)

    labels = [item.display_label for item in provider.suggest(root, 0, "ap")]

    assert labels == ["new-app", "mapper", "old-app"]


def test_equal_content_sorted_by_modification_time(tmp_path: Path, provider: CompletionProvider, make_repo) -> None:
    root = tmp_path / "repos"
    make_repo(root / "twin-one", mtime=500)
    make_repo(root / "twin-two", mtime=900)

    assert [item.display_label for item in provider.suggest(root, 0, "twin")] == ["twin-two", "twin-one"]


def test_empty_token_lists_everything(tmp_path: Path, provider: CompletionProvider, make_repo) -> None:
    root = tmp_path / "repos"
    make_repo(root / "one", mtime=1)
    make_repo(root / "two", mtime=2)

    assert [item.display_label for item in provider.suggest(root, 0, "")] == ["two", "one"]


def test_case_insensitive_by_default(tmp_path: Path, provider: CompletionProvider, make_repo) -> None:
    root = tmp_path / "repos"
    make_repo(root / "WebClient")

    assert [item.display_label for item in provider.suggest(root, 0, "webc")] == ["WebClient"]


def test_case_sensitive_matching(tmp_path: Path, scanner, make_repo) -> None:
    root = tmp_path / "repos"
    make_repo(root / "WebClient")
    provider = CompletionProvider(scanner=scanner, case_sensitive=True)

    assert provider.suggest(root, 0, "webc") == []
    assert len(provider.suggest(root, 0, "WebC")) == 1


def test_no_match_returns_empty_list(tmp_path: Path, provider: CompletionProvider, make_repo) -> None:
    root = tmp_path / "repos"
    make_repo(root / "alpha")

    assert provider.suggest(root, 0, "zzz") == []


def test_insertable_text_is_quoted_when_needed(tmp_path: Path, provider: CompletionProvider, make_repo) -> None:
    root = tmp_path / "repos"
    make_repo(root / "my project")

    (suggestion,) = provider.suggest(root, 0, "project")

    assert suggestion.insertable_text == "'my project'"
    assert suggestion.display_label == "my project"
    assert suggestion.tooltip_text == str(root / "my project")


def test_invalid_root_yields_no_suggestions(tmp_path: Path, provider: CompletionProvider) -> None:
    assert provider.suggest(tmp_path / "missing", 2, "x") == []


def test_results_are_recomputed_each_call(tmp_path: Path, provider: CompletionProvider, make_repo) -> None:
    root = tmp_path / "repos"
    make_repo(root / "first")

    assert len(provider.suggest(root, 0, "")) == 1

    make_repo(root / "second")

    assert {item.display_label for item in provider.suggest(root, 0, "")} == {"first", "second"}


def test_token_in_parent_folder_name_matches(tmp_path: Path, provider: CompletionProvider, make_repo) -> None:
    root = tmp_path / "repos"
    make_repo(root / "apps" / "tool")
    make_repo(root / "lib")

    assert provider.suggest(root, 1, "ap") == [
        Suggestion(insertable_text="apps/tool", display_label="tool", tooltip_text=str(root / "apps" / "tool")),
    ]
