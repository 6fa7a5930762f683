import unittest
from datetime import datetime

from sessionfilter.display import format_date_only, format_date_time, format_time_only


class TestDisplay(unittest.TestCase):
    def test_formats(self) -> None:
        dt = datetime(2024, 6, 5, 9, 7)
        self.assertEqual(format_date_time(dt), "05.06, 09:07")
        self.assertEqual(format_date_only(dt), "05.06.2024")
        self.assertEqual(format_time_only(dt), "09:07")

    def test_missing_is_dash(self) -> None:
        self.assertEqual(format_date_time(None), "-")
        self.assertEqual(format_date_only(None), "-")
        self.assertEqual(format_time_only(None), "-")


if __name__ == "__main__":
    unittest.main()
