"""Version control system operations for Git Fame."""

import logging
import re
import subprocess
from typing import List, Optional

from .config import FameConfig
from .errors import GitCommandError, MalformedOutputError
from .models import HistoryEntry

logger = logging.getLogger(__name__)


def get_git_version() -> Optional[str]:
    """Return the installed git version, or None if git cannot be run."""
    try:
        result = subprocess.run(
            ["git", "--version"],
            capture_output=True,
            text=True,
            timeout=10,
            check=True,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("git --version check failed", exc_info=e)
        return None

    # Extract version number from "git version 2.34.1"
    match = re.search(r"git version (\d+\.\d+(?:\.\d+)?)", result.stdout)
    return match.group(1) if match else None


class GitRepository:
    """Read-only git queries against one repository revision."""

    def __init__(self, config: FameConfig):
        """Initialize with configuration."""
        self.config = config

    def _run_git(self, args: List[str]) -> bytes:
        """Run git and return raw stdout; any failure is fatal."""
        # Enforce deterministic git behavior across platforms
        cmd = [
            "git",
            "-C",
            self.config.repository,
            "-c",
            "core.quotepath=false",
            "-c",
            "color.ui=false",
        ] + args
        logger.debug("Running git", extra={"git_args": args})
        try:
            result = subprocess.run(
                cmd,
                env=self.config.git_env,
                check=True,
                capture_output=True,
            )
        except FileNotFoundError as e:
            raise GitCommandError(args, "git executable not found") from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
            raise GitCommandError(args, stderr or str(e), e.returncode) from e
        return result.stdout

    def list_tracked_files(self) -> List[str]:
        """List every tracked path at the configured revision, in tree order."""
        output = self._run_git(["ls-tree", "-r", "-z", "--name-only", self.config.revision])
        files = [
            path
            for path in output.decode("utf-8", errors="surrogateescape").split("\0")
            if path
        ]
        logger.info(
            "Listed tracked files",
            extra={"revision": self.config.revision, "files": len(files)},
        )
        return files

    def read_file_content(self, path: str) -> bytes:
        """Return the blob content of ``path`` at the configured revision."""
        return self._run_git(["cat-file", "-p", f"{self.config.revision}:{path}"])

    def most_recent_history_entry(self, path: str) -> Optional[HistoryEntry]:
        """Return the latest commit touching ``path``, or None if there is none."""
        output = self._run_git(
            [
                "log",
                "-1",
                "--format=%H%x00%an%x00%cn",
                self.config.revision,
                "--",
                path,
            ]
        ).decode("utf-8", errors="replace").strip()

        if not output:
            return None

        parts = output.split("\0")
        if len(parts) != 3:
            raise MalformedOutputError("log", output)

        return HistoryEntry(hash=parts[0], author_name=parts[1], committer_name=parts[2])

    def line_attribution(self, path: str) -> str:
        """Return ``git blame --line-porcelain`` text for ``path``."""
        output = self._run_git(
            ["blame", "--line-porcelain", self.config.revision, "--", path]
        )
        return output.decode("utf-8", errors="replace")
