"""Ordering of contributor statistics."""

from typing import Callable, Dict, Iterable, List, Tuple

from .config import ORDER_KEYS
from .models import ContributorAccumulator, ContributorStatistics

# Primary key followed by its tie-break chain; the name breaks any remaining tie.
RANKING_CHAINS: Dict[str, Tuple[str, str, str]] = {
    "lines": ("lines", "commits", "files"),
    "commits": ("commits", "lines", "files"),
    "files": ("files", "lines", "commits"),
}


def ranking_key(order_by: str) -> Callable[[ContributorStatistics], tuple]:
    """Build a sort key: chain metrics descending, then name ascending."""
    if order_by not in RANKING_CHAINS:
        raise ValueError(f"order_by must be one of {', '.join(ORDER_KEYS)}")
    chain = RANKING_CHAINS[order_by]

    def key(stats: ContributorStatistics) -> tuple:
        return tuple(-getattr(stats, metric) for metric in chain) + (stats.name,)

    return key


def rank_statistics(
    statistics: Iterable[ContributorStatistics], order_by: str = "lines"
) -> List[ContributorStatistics]:
    """Sort statistics for presentation."""
    return sorted(statistics, key=ranking_key(order_by))


def rank(
    accumulators: Iterable[ContributorAccumulator], order_by: str = "lines"
) -> List[ContributorStatistics]:
    """Snapshot accumulators and order them by ``order_by``."""
    return rank_statistics((acc.snapshot() for acc in accumulators), order_by)
