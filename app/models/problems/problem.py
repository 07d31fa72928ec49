"""Problem model and problem set storage tables."""

import re
from dataclasses import dataclass

from app.models.common import BaseEntity
from app.models.problems.difficulty import Difficulty

PROBLEM_URL_TEMPLATE = "https://leetcode.com/problems/{slug}/"

PROBLEM_PARTITION_DDL = """
CREATE TABLE IF NOT EXISTS problem_partition (
    partition_key VARCHAR PRIMARY KEY,
    generation INTEGER NOT NULL DEFAULT 0,
    created_at TIMESTAMP NOT NULL
)
"""

# Rows of older generations are deleted in the same transaction that advances
# problem_partition.generation, so readers only ever join one complete set.
PROBLEM_DDL = """
CREATE TABLE IF NOT EXISTS problem (
    partition_key VARCHAR NOT NULL,
    generation INTEGER NOT NULL,
    number INTEGER NOT NULL,
    name VARCHAR NOT NULL,
    acceptance_rate DOUBLE,
    difficulty VARCHAR NOT NULL,
    frequency DOUBLE,
    url VARCHAR,
    PRIMARY KEY (partition_key, generation, number)
)
"""

PROBLEM_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_problem_partition ON problem(partition_key)",
]


def problem_url(name: str) -> str:
    """Derive the problem page URL from its name."""
    slug = re.sub(r"[^a-z0-9\s]", "", name.lower())
    slug = re.sub(r"\s+", "-", slug.strip())
    return PROBLEM_URL_TEMPLATE.format(slug=slug)


@dataclass
class Problem(BaseEntity):
    """Interview problem within a company problem set."""

    number: int
    name: str
    difficulty: Difficulty = Difficulty.MEDIUM
    acceptance_rate: float = 0.0
    frequency: float | None = None
    url: str | None = None

    def __post_init__(self):
        if self.number < 1:
            raise ValueError(f"Problem number must be positive, got {self.number}")
        if not self.name or not self.name.strip():
            raise ValueError("Problem name must not be empty")
        if not 0.0 <= self.acceptance_rate <= 1.0:
            raise ValueError(f"Acceptance rate must be within [0, 1], got {self.acceptance_rate}")
        if self.frequency is not None and not 0.0 <= self.frequency <= 1.0:
            raise ValueError(f"Frequency must be within [0, 1], got {self.frequency}")
        if not isinstance(self.difficulty, Difficulty):
            self.difficulty = Difficulty.parse(self.difficulty)
        if not self.url:
            self.url = problem_url(self.name)
