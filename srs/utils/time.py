from datetime import timedelta
from zoneinfo import ZoneInfo

from django.conf import settings
from django.utils import timezone


def utc_now():
    return timezone.now()


def add_days(dt, days: int):
    # Aware datetimes keep their tzinfo and wall-clock time; month/year rollover
    # and month lengths are handled by the datetime arithmetic.
    return dt + timedelta(days=days)


def display_zone():
    return ZoneInfo(getattr(settings, "SRS_DISPLAY_TIME_ZONE", "Asia/Seoul"))


def to_display_iso(dt_utc):
    return dt_utc.astimezone(display_zone()).isoformat()
