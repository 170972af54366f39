"""HTTP API for Git Fame."""

from .. import __version__

__all__ = ["__version__"]
