"""Application-wide settings and environment loading."""

import logging
import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()
logger.debug("Environment variables loaded from .env if present")

LANGUAGE_TABLE_ENV = "GITFAME_LANGUAGE_TABLE"

_BUNDLED_LANGUAGE_TABLE = Path(__file__).parent / "configs" / "language_extensions.json"


@lru_cache(maxsize=1)
def get_language_table_path() -> Path:
    """Return the language table path, honouring the environment override."""
    override = os.getenv(LANGUAGE_TABLE_ENV)
    if override:
        logger.debug("Using language table override", extra={"path": override})
        return Path(override)

    return _BUNDLED_LANGUAGE_TABLE
