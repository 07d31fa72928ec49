"""Models package - DDL and entities for all domains."""

from app.models.common import CACHED_PROBLEM_SET_DDL, BaseEntity, CachedProblemSet, is_fresh
from app.models.problems import (
    PROBLEM_DDL,
    PROBLEM_INDEXES,
    PROBLEM_PARTITION_DDL,
    Difficulty,
    PartitionKey,
    Problem,
    ProblemRequest,
    TimeRange,
    normalize_company,
)

ALL_DDL = [
    # Problems
    PROBLEM_PARTITION_DDL,
    PROBLEM_DDL,
    *PROBLEM_INDEXES,
    # Common
    CACHED_PROBLEM_SET_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "CACHED_PROBLEM_SET_DDL",
    "CachedProblemSet",
    "is_fresh",
    # Problems
    "PROBLEM_DDL",
    "PROBLEM_INDEXES",
    "PROBLEM_PARTITION_DDL",
    "Difficulty",
    "PartitionKey",
    "Problem",
    "ProblemRequest",
    "TimeRange",
    "normalize_company",
    # All DDL
    "ALL_DDL",
]
