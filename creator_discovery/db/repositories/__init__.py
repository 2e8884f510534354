"""Repository package for the database access layer."""

from creator_discovery.db.repositories.base import BaseRepository
from creator_discovery.db.repositories.creator import CreatorRepository

__all__ = [
    "BaseRepository",
    "CreatorRepository",
]
