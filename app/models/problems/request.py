"""Partition keys and parsed problem requests."""

import re
from dataclasses import dataclass, field

from app.models.problems.time_range import TimeRange

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_company(company: str) -> str:
    """Lower-case and strip everything outside [a-z0-9]: "Meta Platforms, Inc." -> "metaplatformsinc"."""
    return _NON_ALNUM.sub("", company.lower())


@dataclass(frozen=True)
class PartitionKey:
    """Storage identity of one company problem set for one time range."""

    company: str
    time_range: TimeRange

    @classmethod
    def of(cls, company: str, time_range: TimeRange) -> "PartitionKey":
        normalized = normalize_company(company)
        if not normalized:
            raise ValueError(f"Company name {company!r} is empty after normalization")
        return cls(normalized, TimeRange(time_range))

    def __str__(self) -> str:
        return f"{self.company}_{self.time_range.key}"


@dataclass
class ProblemRequest:
    """Structured request produced by the message parser."""

    companies: list[str] = field(default_factory=list)
    time_range: TimeRange | None = None
    explicit_time_range: bool = False
