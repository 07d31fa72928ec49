"""Common repositories - cache ledger."""

from app.repositories.common.cache import CachedProblemSetRepository

__all__ = ["CachedProblemSetRepository"]
