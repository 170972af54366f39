"""Data records shared by the attribution pipeline."""

from dataclasses import dataclass, field
from typing import Any, Dict, Set


@dataclass(frozen=True)
class AttributionRecord:
    """A contiguous run of lines in one file traced to one commit."""

    commit_id: str
    author_name: str
    committer_name: str
    line_count: int = 0

    def identity(self, use_committer: bool) -> str:
        """Return the contributor name selected by the run's identity policy."""
        return self.committer_name if use_committer else self.author_name


@dataclass
class ContributorAccumulator:
    """Mutable running totals for one contributor."""

    identity: str
    total_lines: int = 0
    commit_ids: Set[str] = field(default_factory=set)
    file_paths: Set[str] = field(default_factory=set)

    def snapshot(self) -> "ContributorStatistics":
        """Freeze the current totals into statistics."""
        return ContributorStatistics(
            name=self.identity,
            lines=self.total_lines,
            commits=len(self.commit_ids),
            files=len(self.file_paths),
        )


@dataclass(frozen=True)
class ContributorStatistics:
    """Final per-contributor numbers as reported to the user."""

    name: str
    lines: int
    commits: int
    files: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON object layout."""
        return {
            "name": self.name,
            "lines": self.lines,
            "commits": self.commits,
            "files": self.files,
        }


@dataclass(frozen=True)
class HistoryEntry:
    """The most recent commit that touched a path."""

    hash: str
    author_name: str
    committer_name: str
