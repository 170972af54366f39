"""Service layer for Git Fame API."""

from .fame import FameService

__all__ = ["FameService"]
