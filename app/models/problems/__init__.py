"""Problem domain models - problems, difficulties, time ranges, partition keys."""

from app.models.problems.difficulty import Difficulty
from app.models.problems.problem import (
    PROBLEM_DDL,
    PROBLEM_INDEXES,
    PROBLEM_PARTITION_DDL,
    Problem,
    problem_url,
)
from app.models.problems.request import PartitionKey, ProblemRequest, normalize_company
from app.models.problems.time_range import TimeRange, widen

__all__ = [
    "PROBLEM_DDL",
    "PROBLEM_INDEXES",
    "PROBLEM_PARTITION_DDL",
    "Difficulty",
    "PartitionKey",
    "Problem",
    "ProblemRequest",
    "TimeRange",
    "normalize_company",
    "problem_url",
    "widen",
]
