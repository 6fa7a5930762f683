"""
Unit tests for the calendar windows.

Conventions checked here:
- weeks start on Monday
- today is half-open, the other windows end on their last millisecond
- the month window ends at 23:59:59 of the last day
"""

import unittest
from datetime import datetime, timedelta

from sessionfilter.date_ranges import compute_date_ranges


class TestDateRanges(unittest.TestCase):
    def test_today_contains_now_and_touches_tomorrow(self) -> None:
        for now in (
            datetime(2024, 6, 10, 0, 0),
            datetime(2024, 6, 10, 9, 0),
            datetime(2024, 6, 10, 23, 59, 59, 999999),
        ):
            r = compute_date_ranges(now)
            self.assertLessEqual(r.today.start, now)
            self.assertLess(now, r.today.end)
            self.assertEqual(r.today.end, r.tomorrow.start)
            self.assertFalse(r.today.end_inclusive)

    def test_tomorrow_ends_on_last_millisecond(self) -> None:
        r = compute_date_ranges(datetime(2024, 6, 10, 9, 0))
        self.assertEqual(r.tomorrow.start, datetime(2024, 6, 11))
        self.assertEqual(r.tomorrow.end, datetime(2024, 6, 11, 23, 59, 59, 999000))

    def test_weeks_start_on_monday(self) -> None:
        # 2024-06-03 is a Monday; walk through a full week incl. Sunday
        for offset in range(7):
            now = datetime(2024, 6, 3, 15, 30) + timedelta(days=offset)
            r = compute_date_ranges(now)
            self.assertEqual(r.this_week.start, datetime(2024, 6, 3))
            self.assertEqual(r.this_week.start.isoweekday(), 1)
            self.assertEqual(r.next_week.start, datetime(2024, 6, 10))
            self.assertEqual(r.next_week.start - r.this_week.start, timedelta(days=7))

    def test_sunday_belongs_to_the_week_before(self) -> None:
        r = compute_date_ranges(datetime(2024, 6, 9, 12, 0))
        self.assertEqual(r.this_week.start, datetime(2024, 6, 3))
        self.assertEqual(r.this_week.end, datetime(2024, 6, 9, 23, 59, 59, 999000))
        self.assertEqual(r.next_week.start, datetime(2024, 6, 10))
        self.assertEqual(r.next_week.end, datetime(2024, 6, 16, 23, 59, 59, 999000))

    def test_month_window_leap_february(self) -> None:
        r = compute_date_ranges(datetime(2024, 2, 15, 10, 0))
        self.assertEqual(r.this_month.start, datetime(2024, 2, 1))
        self.assertEqual(r.this_month.end, datetime(2024, 2, 29, 23, 59, 59))

    def test_month_window_december(self) -> None:
        r = compute_date_ranges(datetime(2023, 12, 31, 23, 0))
        self.assertEqual(r.this_month.start, datetime(2023, 12, 1))
        self.assertEqual(r.this_month.end, datetime(2023, 12, 31, 23, 59, 59))
        self.assertEqual(r.tomorrow.start, datetime(2024, 1, 1))

    def test_all_windows_share_now(self) -> None:
        now = datetime(2024, 6, 10, 9, 0)
        r = compute_date_ranges(now)
        self.assertEqual(r.now, now)


if __name__ == "__main__":
    unittest.main()
