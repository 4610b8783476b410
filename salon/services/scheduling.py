"""Calendar helpers shared by booking and reporting."""

from datetime import datetime, time, timedelta


def week_range(value: datetime) -> tuple[datetime, datetime]:
    """Return the Monday 00:00 .. Sunday 23:59:59.999999 window containing ``value``."""
    weekday = value.isoweekday()  # Monday=1 .. Sunday=7
    start = datetime.combine(value.date() - timedelta(days=weekday - 1), time.min)
    end = datetime.combine(start.date() + timedelta(days=6), time.max)
    return start, end
