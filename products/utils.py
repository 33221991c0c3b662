import calendar

from django.utils import timezone


def months_ago(months, now=None):
    """
    Return the datetime `months` calendar months before `now`.

    The day of month is clamped to the length of the target month, so
    31 March minus one month is 28 (or 29) February.
    """
    now = now or timezone.now()

    month_index = now.year * 12 + (now.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1

    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)
