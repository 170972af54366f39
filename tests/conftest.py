"""Pytest configuration and fixtures for Git Fame tests."""

import os
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Generator, Optional

import pytest


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp(prefix="gitfame_test_"))
    try:
        yield temp_path
    finally:
        if temp_path.exists():
            shutil.rmtree(temp_path, ignore_errors=True)


class GitRepoHelper:
    """Helper class for git repository operations in tests."""

    def __init__(self, repo_path: Path):
        self.repo_path = repo_path
        self.env = os.environ.copy()
        self.env.update({
            "GIT_CONFIG_GLOBAL": os.devnull,
            "GIT_CONFIG_SYSTEM": os.devnull,
            "GIT_AUTHOR_NAME": "Test User",
            "GIT_AUTHOR_EMAIL": "test@example.com",
            "GIT_COMMITTER_NAME": "Test User",
            "GIT_COMMITTER_EMAIL": "test@example.com",
        })

    def run_git(self, args: list, env: Optional[dict] = None) -> subprocess.CompletedProcess:
        """Run git command in the repository."""
        return subprocess.run(
            ["git"] + args,
            cwd=self.repo_path,
            env=env or self.env,
            check=True,
            capture_output=True,
            text=True,
        )

    def create_file(self, path: str, content: str) -> None:
        """Create a file with content."""
        file_path = self.repo_path / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)

    def add_and_commit(
        self,
        message: str,
        author: str = "Test User",
        committer: Optional[str] = None,
    ) -> str:
        """Stage everything and commit as ``author``; return the commit SHA."""
        env = dict(self.env)
        env["GIT_AUTHOR_NAME"] = author
        env["GIT_COMMITTER_NAME"] = committer or author
        self.run_git(["add", "-A"], env=env)
        self.run_git(["commit", "-m", message], env=env)
        return self.get_current_sha()

    def get_current_sha(self) -> str:
        """Get current commit SHA."""
        result = self.run_git(["rev-parse", "HEAD"])
        return result.stdout.strip()


@pytest.fixture
def git_repo(temp_dir: Path) -> Path:
    """Create an empty git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()
    GitRepoHelper(repo_path).run_git(["init"])
    return repo_path


@pytest.fixture
def git_helper(git_repo: Path) -> GitRepoHelper:
    """Create a git repository helper."""
    return GitRepoHelper(git_repo)


HASH_A = "a" * 40
HASH_B = "b" * 40
HASH_C = "0123456789abcdef0123456789abcdef01234567"


def porcelain_block(
    commit: str,
    author: str,
    committer: str,
    lines: list,
    filename: str = "main.go",
) -> str:
    """Build a ``git blame --line-porcelain`` style block."""
    header = [
        f"{commit} 1 1 {len(lines)}",
        f"author {author}",
        f"author-mail <{author.lower() or 'nobody'}@example.com>",
        "author-time 1700000000",
        "author-tz +0000",
        f"committer {committer}",
        f"committer-mail <{committer.lower() or 'nobody'}@example.com>",
        "committer-time 1700000000",
        "committer-tz +0000",
        "summary Some change",
        f"filename {filename}",
    ]
    return "\n".join(header + ["\t" + line for line in lines]) + "\n"
