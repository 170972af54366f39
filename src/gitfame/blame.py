"""Parser for ``git blame --line-porcelain`` output."""

import logging
from typing import Iterable, Iterator, List, Optional

from .models import AttributionRecord

logger = logging.getLogger(__name__)

HASH_LENGTH = 40
_HEX_DIGITS = frozenset("0123456789abcdef")


def is_commit_hash(token: str) -> bool:
    """Check for a full 40-character lowercase hexadecimal object id."""
    return len(token) == HASH_LENGTH and all(c in _HEX_DIGITS for c in token)


def is_header_line(line: str) -> bool:
    """A block header is a commit hash followed by at least two more space-delimited fields."""
    parts = line.split(" ", 3)
    return len(parts) >= 3 and is_commit_hash(parts[0])


class BlameParser:
    """Incremental state machine over porcelain blame lines.

    Each header line opens a block; ``author`` and ``committer`` metadata
    lines fill it in, and every tab-prefixed content line adds one line to
    it. A block is emitted when the next header arrives or input ends.
    """

    def __init__(self, use_committer: bool = False):
        """Initialize with the identity policy for the run."""
        self.use_committer = use_committer
        self._reset(None)

    def _reset(self, commit_hash: Optional[str]) -> None:
        self.current_hash = commit_hash
        self.current_author = ""
        self.current_committer = ""
        self.current_line_count = 0

    def feed(self, line: str) -> Optional[AttributionRecord]:
        """Consume one line; return a record if it closed a block."""
        if not line:
            return None

        if line[0] == "\t":
            self.current_line_count += 1
            return None

        if is_header_line(line):
            record = self._flush()
            self._reset(line.split(" ", 1)[0])
            return record

        key, _, value = line.partition(" ")
        if key == "author":
            self.current_author = value
        elif key == "committer":
            self.current_committer = value
        return None

    def close(self) -> Optional[AttributionRecord]:
        """Signal end of input and emit any open block."""
        record = self._flush()
        self._reset(None)
        return record

    def _flush(self) -> Optional[AttributionRecord]:
        if not self.current_hash or self.current_line_count == 0:
            return None

        record = AttributionRecord(
            commit_id=self.current_hash,
            author_name=self.current_author,
            committer_name=self.current_committer,
            line_count=self.current_line_count,
        )
        if not record.identity(self.use_committer):
            logger.debug(
                "Dropping block without identity",
                extra={"commit": record.commit_id, "lines": record.line_count},
            )
            return None
        return record


def iter_attribution_records(
    lines: Iterable[str], use_committer: bool = False
) -> Iterator[AttributionRecord]:
    """Yield attribution records from porcelain blame lines."""
    parser = BlameParser(use_committer)
    for line in lines:
        record = parser.feed(line)
        if record is not None:
            yield record

    record = parser.close()
    if record is not None:
        yield record


def parse_attribution(text: str, use_committer: bool = False) -> List[AttributionRecord]:
    """Parse a complete ``git blame --line-porcelain`` dump."""
    return list(iter_attribution_records(text.split("\n"), use_committer))
