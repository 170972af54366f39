"""Git Fame.

Attributes every line of a repository revision to its author (or committer)
and reports per-contributor line, commit and file totals.
"""

__version__ = "1.0.0"
__author__ = "Git Fame Team"

__all__ = ["__version__"]
