"""Service layer for Git Fame API."""

import logging
from typing import Any, Dict, List, Sequence

from ...config import FameConfig
from ...fame import compute_fame
from ...serialize import StatisticsSerializer

logger = logging.getLogger(__name__)


class FameService:
    """Runs attribution for API requests and wraps results in envelopes."""

    def process_fame_request(
        self,
        repository: str,
        revision: str = "HEAD",
        order_by: str = "lines",
        use_committer: bool = False,
        extensions: Sequence[str] = (),
        languages: Sequence[str] = (),
        exclude: Sequence[str] = (),
        restrict_to: Sequence[str] = (),
    ) -> Dict[str, Any]:
        """Process a fame request and return the success envelope.

        Raises:
            GitFameError: If the configuration is invalid or git fails.
        """
        serializer = StatisticsSerializer("json")
        warnings: List[str] = []

        config = FameConfig(
            repository=repository,
            revision=revision,
            order_by=order_by,
            use_committer=use_committer,
            output_format="json",
            extensions=tuple(extensions),
            languages=tuple(languages),
            exclude=tuple(exclude),
            restrict_to=tuple(restrict_to),
        )
        statistics = compute_fame(config, on_warning=warnings.append)

        payload: Dict[str, Any] = config.to_summary_dict()
        payload["contributors"] = [stats.to_dict() for stats in statistics]
        if warnings:
            payload["warnings"] = warnings

        logger.info(
            "Fame processing succeeded",
            extra={"repository": repository, "contributors": len(statistics)},
        )
        return serializer.create_success_envelope(payload)
