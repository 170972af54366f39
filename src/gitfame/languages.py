"""Language name to file extension lookup for Git Fame."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from .errors import LanguageTableError
from .filters import normalize_extensions
from .settings import get_language_table_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LanguageDefinition:
    """One entry of the language table."""

    name: str
    extensions: Tuple[str, ...]
    type: str = ""


def load_language_table(path: Optional[Path] = None) -> List[LanguageDefinition]:
    """Load language definitions from a JSON file.

    The file holds a list of objects with ``name``, ``extensions`` and an
    optional ``type``.
    """
    table_path = path or get_language_table_path()
    try:
        raw = json.loads(Path(table_path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise LanguageTableError(str(table_path), str(e)) from e

    if not isinstance(raw, list):
        raise LanguageTableError(str(table_path), "expected a list of languages")

    definitions = []
    for entry in raw:
        if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
            raise LanguageTableError(str(table_path), f"invalid entry: {entry!r}")
        extensions = entry.get("extensions") or []
        if not isinstance(extensions, list):
            raise LanguageTableError(str(table_path), f"invalid extensions for {entry['name']}")
        definitions.append(
            LanguageDefinition(
                name=entry["name"],
                extensions=tuple(str(ext) for ext in extensions),
                type=str(entry.get("type", "")),
            )
        )

    logger.debug("Loaded language table", extra={"path": str(table_path), "languages": len(definitions)})
    return definitions


def resolve_language_extensions(
    languages: Sequence[str],
    definitions: List[LanguageDefinition],
) -> Tuple[FrozenSet[str], List[str]]:
    """Collect extensions for the requested language names.

    Names are matched case-insensitively. Returns the normalized extension
    set and the requested names that matched nothing, in request order.
    """
    requested: Dict[str, str] = {}
    for language in languages:
        language = language.strip()
        if language:
            requested.setdefault(language.lower(), language)

    found = set()
    extensions: List[str] = []
    for definition in definitions:
        key = definition.name.strip().lower()
        if key not in requested:
            continue
        found.add(key)
        extensions.extend(definition.extensions)

    unknown = []
    for language in languages:
        language = language.strip()
        if language and language.lower() not in found:
            unknown.append(language)
            logger.debug("Unknown language requested", extra={"language": language})

    return normalize_extensions(extensions), unknown
