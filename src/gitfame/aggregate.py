"""Per-contributor accumulation of attribution records."""

import logging
from typing import Dict, Iterable, List, Optional

from .models import AttributionRecord, ContributorAccumulator, HistoryEntry

logger = logging.getLogger(__name__)


def resolve_empty_file(entry: Optional[HistoryEntry]) -> Optional[AttributionRecord]:
    """Derive the zero-line record that gives an empty file an owner.

    Returns ``None`` when the path has no history at the revision.
    """
    if entry is None or not entry.hash:
        return None
    return AttributionRecord(
        commit_id=entry.hash,
        author_name=entry.author_name,
        committer_name=entry.committer_name,
        line_count=0,
    )


class Aggregator:
    """Folds attribution records into per-identity accumulators."""

    def __init__(self, use_committer: bool = False):
        """Initialize with the identity policy for the run."""
        self.use_committer = use_committer
        self._accumulators: Dict[str, ContributorAccumulator] = {}

    def fold(self, record: AttributionRecord, file_path: str) -> None:
        """Add one record seen in ``file_path`` to its contributor's totals."""
        identity = record.identity(self.use_committer)
        if not identity:
            return

        accumulator = self._accumulators.get(identity)
        if accumulator is None:
            accumulator = ContributorAccumulator(identity=identity)
            self._accumulators[identity] = accumulator

        accumulator.total_lines += record.line_count
        accumulator.commit_ids.add(record.commit_id)
        accumulator.file_paths.add(file_path)

    def fold_all(self, records: Iterable[AttributionRecord], file_path: str) -> int:
        """Fold a batch of records from one file; return the line total."""
        lines = 0
        for record in records:
            self.fold(record, file_path)
            lines += record.line_count
        logger.debug("Folded file", extra={"path": file_path, "lines": lines})
        return lines

    def fold_empty_file(self, entry: Optional[HistoryEntry], file_path: str) -> None:
        """Credit an empty file to the author of its latest commit."""
        record = resolve_empty_file(entry)
        if record is None:
            logger.debug("Empty file has no history", extra={"path": file_path})
            return
        self.fold(record, file_path)

    def get(self, identity: str) -> Optional[ContributorAccumulator]:
        """Return the accumulator for ``identity`` if one exists."""
        return self._accumulators.get(identity)

    @property
    def accumulators(self) -> List[ContributorAccumulator]:
        """All accumulators, in first-seen order."""
        return list(self._accumulators.values())

    def __len__(self) -> int:
        return len(self._accumulators)
