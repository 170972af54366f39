"""End-to-end attribution of a repository revision."""

import logging
from typing import Callable, List, Optional

from .aggregate import Aggregator
from .blame import parse_attribution
from .config import FameConfig
from .filters import PathFilter
from .languages import load_language_table, resolve_language_extensions
from .models import ContributorStatistics
from .ranking import rank
from .vcs import GitRepository

logger = logging.getLogger(__name__)

WarningHandler = Callable[[str], None]


def build_path_filter(config: FameConfig, on_warning: Optional[WarningHandler] = None) -> PathFilter:
    """Create the path filter described by ``config``.

    Requested languages are looked up in the language table; names it does
    not know are reported through ``on_warning``.
    """
    language_extensions = None
    if any(language.strip() for language in config.languages):
        language_extensions, unknown = resolve_language_extensions(
            config.languages, load_language_table()
        )
        if on_warning is not None:
            for language in unknown:
                on_warning(f"warning: unknown language {language}")

    return PathFilter(
        extensions=config.extensions,
        language_extensions=language_extensions,
        restrict_to=config.restrict_to,
        exclude=config.exclude,
    )


def process_file(repo: GitRepository, aggregator: Aggregator, path: str) -> None:
    """Attribute one file's lines, or its ownership if it is empty."""
    content = repo.read_file_content(path)
    if not content:
        aggregator.fold_empty_file(repo.most_recent_history_entry(path), path)
        return

    records = parse_attribution(repo.line_attribution(path), aggregator.use_committer)
    aggregator.fold_all(records, path)


def compute_fame(
    config: FameConfig,
    repo: Optional[GitRepository] = None,
    on_warning: Optional[WarningHandler] = None,
) -> List[ContributorStatistics]:
    """Attribute every selected file and return ranked statistics."""
    path_filter = build_path_filter(config, on_warning)
    repo = repo or GitRepository(config)

    files = repo.list_tracked_files()
    aggregator = Aggregator(use_committer=config.use_committer)

    processed = 0
    for path in files:
        if not path_filter.accepts(path):
            continue
        process_file(repo, aggregator, path)
        processed += 1

    logger.info(
        "Attribution finished",
        extra={
            "repository": config.repository,
            "revision": config.revision,
            "files_processed": processed,
            "files_skipped": len(files) - processed,
            "contributors": len(aggregator),
        },
    )
    return rank(aggregator.accumulators, config.order_by)
