"""Cached problem set ledger - one record per stored partition."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from app.models.common.base import BaseEntity

CACHED_PROBLEM_SET_DDL = """
CREATE TABLE IF NOT EXISTS cached_problem_set (
    partition_key VARCHAR PRIMARY KEY,
    company VARCHAR NOT NULL,
    time_range VARCHAR NOT NULL,
    problem_count INTEGER NOT NULL,
    last_updated TIMESTAMP NOT NULL,
    created_at TIMESTAMP NOT NULL
)
"""


@dataclass
class CachedProblemSet(BaseEntity):
    """When a company/time range partition was last fetched and how big it is."""

    partition_key: str
    company: str
    time_range: str
    problem_count: int
    last_updated: datetime
    created_at: datetime

    def is_fresh(self, ttl_days: int, now: datetime) -> bool:
        return is_fresh(self, ttl_days, now)


def is_fresh(record: CachedProblemSet, ttl_days: int, now: datetime) -> bool:
    """Fresh while last_updated + ttl is strictly after now."""
    return record.last_updated + timedelta(days=ttl_days) > now
