"""
Tests for the date helpers and the music lookup.
"""

import unittest
from datetime import date

from daybook.date_utils import RELATIVE_DATES, current_date, resolve_task_date
from daybook.models import DateResponse
from daybook.music import DEFAULT_MUSIC_URL, MUSIC_URLS, resolve_music


class TestCurrentDate(unittest.TestCase):

    def test_current_date_parts(self):
        result = current_date(date(2024, 2, 29))
        self.assertEqual(result, DateResponse(day=29, month=2, year=2024))
        self.assertEqual(result.to_dict(), {"day": 29, "month": 2, "year": 2024})

    def test_current_date_defaults_to_local_today(self):
        before = date.today()
        result = current_date()
        after = date.today()

        self.assertIn(date(result.year, result.month, result.day), (before, after))


class TestResolveTaskDate(unittest.TestCase):

    def setUp(self):
        self.today = date(2024, 2, 28)

    def test_keywords(self):
        self.assertEqual(resolve_task_date("Today", self.today), "2024-02-28")
        self.assertEqual(resolve_task_date("Tomorrow", self.today), "2024-02-29")
        self.assertEqual(resolve_task_date("This Week", self.today), "2024-03-06")
        self.assertEqual(resolve_task_date("This Month", self.today), "2024-03-28")

    def test_this_month_overflow(self):
        self.assertEqual(resolve_task_date("This Month", date(2024, 3, 31)), "2024-03-31")
        self.assertEqual(resolve_task_date("This Month", date(2024, 1, 29)), "2024-02-29")

    def test_unknown_values_pass_through(self):
        for value in ["", "2025-03-01", "THIS WEEK", "Yesterday"]:
            self.assertEqual(resolve_task_date(value, self.today), value)

    def test_keyword_table(self):
        self.assertEqual(set(RELATIVE_DATES), {"Today", "Tomorrow", "This Week", "This Month"})


class TestMusicLookup(unittest.TestCase):

    def test_known_categories(self):
        self.assertEqual(
            resolve_music("Focus"),
            {"url": "https://ritika12df.github.io/ritikaaudio/focus.mp3"}
        )
        for category, url in MUSIC_URLS.items():
            self.assertEqual(resolve_music(category)["url"], url)

    def test_unknown_category_uses_default(self):
        self.assertEqual(resolve_music("unknown"), {"url": DEFAULT_MUSIC_URL})
        self.assertEqual(DEFAULT_MUSIC_URL, "https://ritika12df.github.io/ritikaaudio/default.mp3")

    def test_lookup_is_case_sensitive(self):
        self.assertEqual(resolve_music("focus")["url"], DEFAULT_MUSIC_URL)
        self.assertEqual(resolve_music("RELAX")["url"], DEFAULT_MUSIC_URL)


if __name__ == "__main__":
    unittest.main()
