"""Date helpers for dashboard totals."""

import calendar
from datetime import datetime, timezone


def one_month_ago(now: datetime | None = None) -> datetime:
    """
    Same wall-clock time one calendar month earlier.

    The day is clamped to the length of the previous month, so
    March 31 maps to February 28 (or 29).
    """
    now = now or datetime.now(timezone.utc)
    if now.month == 1:
        year, month = now.year - 1, 12
    else:
        year, month = now.year, now.month - 1
    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)
