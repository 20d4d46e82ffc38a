"""Tests for scythe/timesheet/weeks.py - week partitioning."""

from datetime import date, timedelta
from decimal import Decimal

from scythe.timesheet.weeks import partition


class TestPartition:
    """Tests for partition function."""

    def test_single_week(self):
        """A Monday to the following Sunday is exactly one week."""
        weeks = partition(date(2024, 3, 4), date(2024, 3, 10))

        assert len(weeks) == 1
        assert weeks[0].start == date(2024, 3, 4)
        assert weeks[0].end == date(2024, 3, 10)
        assert weeks[0].label == "3/4/2024"

    def test_zero_length_range_is_empty(self):
        """start == end yields no weeks."""
        assert partition(date(2024, 3, 4), date(2024, 3, 4)) == []

    def test_start_after_end_is_empty(self):
        """A start past the end yields no weeks rather than looping."""
        assert partition(date(2024, 3, 11), date(2024, 3, 10)) == []

    def test_several_weeks_across_month_boundary(self):
        """Weeks are ordered, contiguous and seven days long."""
        weeks = partition(date(2024, 2, 19), date(2024, 3, 17))

        assert [w.start for w in weeks] == [
            date(2024, 2, 19),
            date(2024, 2, 26),
            date(2024, 3, 4),
            date(2024, 3, 11),
        ]
        for week in weeks:
            assert (week.end - week.start).days == 6
            assert week.start.weekday() == 0
            assert week.end.weekday() == 6
        for current, following in zip(weeks, weeks[1:]):
            assert following.start - current.end == timedelta(days=1)

    def test_week_starting_on_end_is_not_emitted(self):
        """The end date itself is excluded from the walk."""
        weeks = partition(date(2024, 3, 4), date(2024, 3, 11))

        assert [w.start for w in weeks] == [date(2024, 3, 4)]

    def test_mid_week_start_skips_to_next_monday(self):
        """Only Mondays reached by the walk start a week."""
        weeks = partition(date(2024, 3, 6), date(2024, 3, 17))

        assert [w.start for w in weeks] == [date(2024, 3, 11)]

    def test_weeks_are_skeletons(self):
        """Partitioned weeks carry no entries or PTO yet."""
        week = partition(date(2024, 3, 4), date(2024, 3, 10))[0]

        assert week.pto == Decimal("0")
        assert week.billable_entries == []
        assert week.non_billable_entries == []
        assert week.billable_hours == Decimal("0")
