"""Time ranges for problem frequency, ordered narrowest to widest."""

import re
from enum import StrEnum

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_MORE_THAN_WORDS = ("more", "over", "than", "plus", "older")


class TimeRange(StrEnum):
    """Frequency window. Declaration order is the escalation order."""

    LAST_30_DAYS = "last30days"
    LAST_3_MONTHS = "last3months"
    LAST_6_MONTHS = "last6months"
    MORE_THAN_6_MONTHS = "morethan6months"
    ALL = "all"

    @property
    def key(self) -> str:
        """Storage suffix, e.g. last30days."""
        return self.value

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def days(self) -> int | None:
        """Window length in days, None for all time."""
        return _DAYS[self]

    @property
    def wider(self) -> "TimeRange | None":
        """Next wider range, None at the widest."""
        members = list(TimeRange)
        position = members.index(self)
        return members[position + 1] if position + 1 < len(members) else None

    @classmethod
    def ordered(cls) -> list["TimeRange"]:
        """All ranges from narrowest to widest."""
        return list(cls)

    @classmethod
    def widest(cls) -> "TimeRange":
        return cls.ordered()[-1]

    @classmethod
    def parse(cls, text: str | None, required: bool = True) -> "TimeRange | None":
        """Map free-form text ("3 months", "last30days", "all time") to a range.

        Exact keys win, then numeric magnitude plus unit keywords. When nothing
        matches the narrowest range is returned if ``required``, else None.
        """
        fallback = cls.LAST_30_DAYS if required else None
        if not text:
            return fallback

        lowered = text.lower()
        normalized = _NON_ALNUM.sub("", lowered)

        for time_range in cls:
            if normalized == time_range.key:
                return time_range

        if "6" in normalized and "month" in normalized:
            if "+" in lowered or any(word in normalized for word in _MORE_THAN_WORDS):
                return cls.MORE_THAN_6_MONTHS
        if "30" in normalized and "day" in normalized:
            return cls.LAST_30_DAYS
        if "3" in normalized and "month" in normalized:
            return cls.LAST_3_MONTHS
        if "6" in normalized and "month" in normalized:
            return cls.LAST_6_MONTHS
        if "all" in normalized or "ever" in normalized:
            return cls.ALL

        return fallback


def widen(time_range: TimeRange) -> TimeRange | None:
    """Next wider range, None at the widest."""
    return time_range.wider


_LABELS = {
    TimeRange.LAST_30_DAYS: "Last 30 Days",
    TimeRange.LAST_3_MONTHS: "Last 3 Months",
    TimeRange.LAST_6_MONTHS: "Last 6 Months",
    TimeRange.MORE_THAN_6_MONTHS: "More than 6 Months",
    TimeRange.ALL: "All Time",
}

_DAYS = {
    TimeRange.LAST_30_DAYS: 30,
    TimeRange.LAST_3_MONTHS: 90,
    TimeRange.LAST_6_MONTHS: 180,
    TimeRange.MORE_THAN_6_MONTHS: 365,
    TimeRange.ALL: None,
}
