"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.common import CachedProblemSetRepository
from app.repositories.db import (
    close_db,
    get_db,
    init_tables,
)
from app.repositories.problems import ProblemSetRepository

__all__ = [
    # DB
    "get_db",
    "close_db",
    "init_tables",
    # Base
    "BaseRepository",
    # Common
    "CachedProblemSetRepository",
    # Problems
    "ProblemSetRepository",
]
