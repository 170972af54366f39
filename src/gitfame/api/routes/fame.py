"""Attribution routes for Git Fame API."""

import logging
from typing import Any, Dict

from fastapi import APIRouter

from ..models import FameRequest, FameResponse
from ..services import FameService

router = APIRouter(tags=["fame"])

logger = logging.getLogger(__name__)

fame_service = FameService()


@router.post("/fame", response_model=FameResponse, response_model_exclude_none=True)
def create_fame(request: FameRequest) -> Dict[str, Any]:
    """Attribute a revision and return ranked contributors.

    Git and configuration failures propagate to the application's
    ``GitFameError`` handler, which renders the error envelope.
    """
    logger.info(
        "Received fame request",
        extra={"repository": request.repository, "revision": request.revision},
    )
    result = fame_service.process_fame_request(
        repository=request.repository,
        revision=request.revision,
        order_by=request.order_by,
        use_committer=request.use_committer,
        extensions=request.extensions,
        languages=request.languages,
        exclude=request.exclude,
        restrict_to=request.restrict_to,
    )
    logger.info(
        "Fame request completed",
        extra={"repository": request.repository, "contributors": len(result["data"]["contributors"])},
    )
    return result
