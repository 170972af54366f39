"""Tests for the attribution pipeline."""

import json

import pytest

from gitfame.config import FameConfig
from gitfame.errors import GitCommandError
from gitfame.fame import build_path_filter, compute_fame
from gitfame.models import ContributorStatistics, HistoryEntry
from gitfame.settings import LANGUAGE_TABLE_ENV, get_language_table_path

from conftest import HASH_A, HASH_B, HASH_C, porcelain_block


class FakeRepository:
    """In-memory stand-in for GitRepository."""

    def __init__(self, files, history=None, fail_on=None):
        self.files = files
        self.history = history or {}
        self.fail_on = fail_on
        self.blamed = []

    def list_tracked_files(self):
        return list(self.files)

    def read_file_content(self, path):
        if path == self.fail_on:
            raise GitCommandError(["cat-file"], "boom", 128)
        content, _ = self.files[path]
        return content

    def most_recent_history_entry(self, path):
        return self.history.get(path)

    def line_attribution(self, path):
        self.blamed.append(path)
        _, blame = self.files[path]
        return blame


@pytest.fixture
def fake_repo():
    """Two blamed files and one empty file."""
    return FakeRepository(
        files={
            "main.go": (
                b"...",
                porcelain_block(HASH_A, "Alice", "Alice", ["a", "b", "c"])
                + porcelain_block(HASH_B, "Bob", "Zed", ["d", "e"]),
            ),
            "docs/README.md": (b"...", porcelain_block(HASH_A, "Alice", "Alice", ["x"])),
            "empty.txt": (b"", ""),
        },
        history={"empty.txt": HistoryEntry(HASH_C, "Carol", "Carol")},
    )


@pytest.fixture
def language_table(temp_dir, monkeypatch):
    """Point the language table at a small file."""
    path = temp_dir / "languages.json"
    path.write_text(json.dumps([{"name": "Go", "extensions": [".go"]}]))
    monkeypatch.setenv(LANGUAGE_TABLE_ENV, str(path))
    get_language_table_path.cache_clear()
    yield path
    get_language_table_path.cache_clear()


class TestComputeFame:
    """Test compute_fame with a fake repository."""

    def test_default_run(self, fake_repo):
        """Every file is attributed and ranked by lines."""
        result = compute_fame(FameConfig(), repo=fake_repo)

        assert result == [
            ContributorStatistics("Alice", 4, 1, 2),
            ContributorStatistics("Bob", 2, 1, 1),
            ContributorStatistics("Carol", 0, 1, 1),
        ]

    def test_empty_file_not_blamed(self, fake_repo):
        """Empty files use history instead of blame."""
        compute_fame(FameConfig(), repo=fake_repo)

        assert "empty.txt" not in fake_repo.blamed

    def test_empty_file_without_history(self, fake_repo):
        """An empty file with no history contributes nothing."""
        fake_repo.history = {}

        names = [s.name for s in compute_fame(FameConfig(), repo=fake_repo)]

        assert "Carol" not in names

    def test_use_committer(self, fake_repo):
        """Committer names replace author names."""
        result = compute_fame(FameConfig(use_committer=True), repo=fake_repo)

        assert [s.name for s in result] == ["Alice", "Zed", "Carol"]

    def test_order_by_files(self, fake_repo):
        """The primary key changes the ranking."""
        result = compute_fame(FameConfig(order_by="files"), repo=fake_repo)

        assert [s.name for s in result] == ["Alice", "Bob", "Carol"]

    def test_filters_skip_files(self, fake_repo):
        """Rejected paths are never read or blamed."""
        result = compute_fame(FameConfig(extensions=(".md",)), repo=fake_repo)

        assert result == [ContributorStatistics("Alice", 1, 1, 1)]
        assert fake_repo.blamed == ["docs/README.md"]

    def test_exclude_pattern(self, fake_repo):
        """Excluded paths are skipped."""
        result = compute_fame(FameConfig(exclude=("docs/*", "*.txt")), repo=fake_repo)

        assert [s.name for s in result] == ["Alice", "Bob"]
        assert result[0].files == 1

    def test_failure_aborts_run(self, fake_repo):
        """A collaborator failure propagates without partial results."""
        fake_repo.fail_on = "docs/README.md"

        with pytest.raises(GitCommandError):
            compute_fame(FameConfig(), repo=fake_repo)

    def test_language_filter(self, fake_repo, language_table):
        """Languages map to extensions through the table."""
        result = compute_fame(FameConfig(languages=("go",)), repo=fake_repo)

        assert [s.name for s in result] == ["Alice", "Bob"]
        assert result[0].lines == 3

    def test_unknown_language_rejects_everything(self, fake_repo, language_table):
        """An unknown language warns and leaves an empty, active filter."""
        warnings = []

        result = compute_fame(FameConfig(languages=("Cobol",)), repo=fake_repo, on_warning=warnings.append)

        assert result == []
        assert warnings == ["warning: unknown language Cobol"]
        assert fake_repo.blamed == []


class TestBuildPathFilter:
    """Test filter construction from configuration."""

    def test_no_languages(self):
        """Without languages the table is not consulted."""
        path_filter = build_path_filter(FameConfig(extensions=("GO",)))

        assert path_filter.use_language_filter is False
        assert path_filter.extensions == frozenset({".go"})

    def test_blank_languages_inactive(self):
        """Blank language names do not activate the filter."""
        assert build_path_filter(FameConfig(languages=("", " "))).use_language_filter is False


@pytest.mark.integration
class TestComputeFameIntegration:
    """End-to-end runs against a real repository."""

    def test_real_repository(self, git_helper):
        """Lines, commits and files are attributed per author."""
        git_helper.create_file("main.go", "package main\n\nfunc main() {}\n")
        git_helper.create_file("empty.txt", "")
        git_helper.add_and_commit("initial", author="Alice")
        git_helper.create_file("util.go", "package main\n")
        git_helper.create_file("main.go", "package main\n\nfunc main() {}\n// bob\n")
        git_helper.add_and_commit("bob's change", author="Bob")
        git_helper.create_file("empty.txt", "")
        git_helper.create_file("carol.txt", "")
        git_helper.add_and_commit("carol's empty file", author="Carol")

        result = compute_fame(FameConfig(repository=str(git_helper.repo_path)))

        assert result == [
            ContributorStatistics("Alice", 3, 1, 2),
            ContributorStatistics("Bob", 2, 1, 2),
            ContributorStatistics("Carol", 0, 1, 1),
        ]

    def test_committer_identity(self, git_helper):
        """Committer names are used when requested."""
        git_helper.create_file("a.txt", "1\n2\n")
        git_helper.add_and_commit("one", author="Alice", committer="Maintainer")

        authors = compute_fame(FameConfig(repository=str(git_helper.repo_path)))
        committers = compute_fame(FameConfig(repository=str(git_helper.repo_path), use_committer=True))

        assert [s.name for s in authors] == ["Alice"]
        assert committers == [ContributorStatistics("Maintainer", 2, 1, 1)]
