from datetime import datetime, timezone as dt_timezone

from django.test import SimpleTestCase

from products.utils import months_ago


class MonthsAgoTest(SimpleTestCase):

    def test_same_day_two_months_back(self):
        now = datetime(2024, 5, 15, 10, 30, tzinfo=dt_timezone.utc)
        self.assertEqual(months_ago(2, now=now), datetime(2024, 3, 15, 10, 30, tzinfo=dt_timezone.utc))

    def test_crosses_year_boundary(self):
        now = datetime(2024, 1, 10, tzinfo=dt_timezone.utc)
        self.assertEqual(months_ago(2, now=now), datetime(2023, 11, 10, tzinfo=dt_timezone.utc))

    def test_clamps_to_month_length(self):
        now = datetime(2024, 4, 30, tzinfo=dt_timezone.utc)
        self.assertEqual(months_ago(2, now=now), datetime(2024, 2, 29, tzinfo=dt_timezone.utc))

        now = datetime(2023, 4, 30, tzinfo=dt_timezone.utc)
        self.assertEqual(months_ago(2, now=now), datetime(2023, 2, 28, tzinfo=dt_timezone.utc))
