"""Tests for time range escalation order and parsing."""

import pytest

from app.models.problems import TimeRange, widen


class TestOrder:
    def test_narrowest_to_widest(self):
        assert TimeRange.ordered() == [
            TimeRange.LAST_30_DAYS,
            TimeRange.LAST_3_MONTHS,
            TimeRange.LAST_6_MONTHS,
            TimeRange.MORE_THAN_6_MONTHS,
            TimeRange.ALL,
        ]

    def test_widen_chain(self):
        chain = [TimeRange.LAST_30_DAYS]
        while (wider := widen(chain[-1])) is not None:
            chain.append(wider)
        assert chain == TimeRange.ordered()

    def test_widest_has_no_successor(self):
        assert TimeRange.ALL.wider is None
        assert TimeRange.widest() is TimeRange.ALL

    def test_days_increase(self):
        spans = [r.days for r in TimeRange.ordered() if r.days is not None]
        assert spans == sorted(spans)
        assert TimeRange.ALL.days is None

    def test_keys_and_labels(self):
        assert TimeRange.LAST_30_DAYS.key == "last30days"
        assert TimeRange.MORE_THAN_6_MONTHS.label == "More than 6 Months"


class TestParse:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("30 days", TimeRange.LAST_30_DAYS),
            ("last 30 days", TimeRange.LAST_30_DAYS),
            ("3 months", TimeRange.LAST_3_MONTHS),
            ("past 6 months", TimeRange.LAST_6_MONTHS),
            ("more than 6 months", TimeRange.MORE_THAN_6_MONTHS),
            ("6+ months", TimeRange.MORE_THAN_6_MONTHS),
            ("older than 6 months", TimeRange.MORE_THAN_6_MONTHS),
            ("all time", TimeRange.ALL),
            ("ALL", TimeRange.ALL),
        ],
    )
    def test_keywords(self, text, expected):
        assert TimeRange.parse(text) is expected

    @pytest.mark.parametrize("time_range", list(TimeRange))
    def test_exact_keys(self, time_range):
        assert TimeRange.parse(time_range.key) is time_range

    def test_unmatched_falls_back_to_narrowest(self):
        assert TimeRange.parse("yesterday") is TimeRange.LAST_30_DAYS
        assert TimeRange.parse(None) is TimeRange.LAST_30_DAYS

    def test_unmatched_optional_is_none(self):
        assert TimeRange.parse("yesterday", required=False) is None
        assert TimeRange.parse("", required=False) is None
