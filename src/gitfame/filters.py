"""Path participation rules for Git Fame."""

import fnmatch
from typing import FrozenSet, Iterable, Optional, Sequence, Tuple


def normalize_extension(extension: str) -> str:
    """Return ``extension`` in lowercase with a leading dot, or "" if blank."""
    extension = extension.strip()
    if not extension:
        return ""
    if not extension.startswith("."):
        extension = "." + extension
    return extension.lower()


def normalize_extensions(extensions: Iterable[str]) -> FrozenSet[str]:
    """Normalize a collection of extensions, dropping blank entries."""
    normalized = (normalize_extension(ext) for ext in extensions)
    return frozenset(ext for ext in normalized if ext)


def file_extension(path: str) -> str:
    """Lowercase extension of the final path segment, including the dot.

    Dotfiles such as ``.gitignore`` are their own extension.
    """
    name = path.rsplit("/", 1)[-1]
    dot = name.rfind(".")
    if dot < 0:
        return ""
    return name[dot:].lower()


def glob_match(path: str, pattern: str) -> bool:
    """Shell-style match where wildcards never cross a ``/``.

    Pattern and path must have the same number of segments and each pair
    of segments must match.
    """
    pattern_parts = pattern.split("/")
    path_parts = path.split("/")
    if len(pattern_parts) != len(path_parts):
        return False
    return all(
        fnmatch.fnmatchcase(part, pattern_part)
        for part, pattern_part in zip(path_parts, pattern_parts)
    )


def matches_any_pattern(path: str, patterns: Sequence[str]) -> bool:
    """Check whether ``path`` glob-matches any non-blank pattern."""
    for pattern in patterns:
        pattern = pattern.strip()
        if not pattern:
            continue
        if glob_match(path, pattern):
            return True
    return False


class PathFilter:
    """Decides whether a tracked file takes part in attribution."""

    def __init__(
        self,
        extensions: Iterable[str] = (),
        language_extensions: Optional[Iterable[str]] = None,
        restrict_to: Sequence[str] = (),
        exclude: Sequence[str] = (),
    ):
        """Build the filter.

        ``language_extensions`` is ``None`` when no language was requested;
        an empty collection means the language filter is active but allows
        nothing.
        """
        self.extensions = normalize_extensions(extensions)
        self.use_language_filter = language_extensions is not None
        self.language_extensions = normalize_extensions(language_extensions or ())
        self.restrict_to: Tuple[str, ...] = tuple(p for p in restrict_to if p.strip())
        self.exclude: Tuple[str, ...] = tuple(p for p in exclude if p.strip())

    def accepts(self, path: str) -> bool:
        """Return True if ``path`` should be attributed."""
        if self.restrict_to and not matches_any_pattern(path, self.restrict_to):
            return False

        if self.exclude and matches_any_pattern(path, self.exclude):
            return False

        extension = file_extension(path)

        if self.extensions:
            if not extension or extension not in self.extensions:
                return False

        if self.use_language_filter:
            if not extension or extension not in self.language_extensions:
                return False

        return True
