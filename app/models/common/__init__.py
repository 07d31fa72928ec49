"""Common models - base classes and the cache ledger."""

from app.models.common.base import BaseEntity
from app.models.common.cache import CACHED_PROBLEM_SET_DDL, CachedProblemSet, is_fresh

__all__ = [
    "BaseEntity",
    "CACHED_PROBLEM_SET_DDL",
    "CachedProblemSet",
    "is_fresh",
]
