"""Timezone-aware date/time helpers for the hotel admin."""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from flask import current_app


def get_timezone() -> ZoneInfo:
    """Get the configured timezone."""
    tz_name = current_app.config.get('TIMEZONE', 'Asia/Manila')
    return ZoneInfo(tz_name)


def get_today() -> date:
    """Get today's date in the configured timezone."""
    return datetime.now(get_timezone()).date()


def get_now() -> datetime:
    """Get current datetime in the configured timezone."""
    return datetime.now(get_timezone())


def to_db_timestamp(value: datetime = None) -> str:
    """
    Format a datetime for a TIMESTAMP column.

    SQLite's timestamp converter expects naive 'YYYY-MM-DD HH:MM:SS',
    so the timezone offset is dropped after conversion to local time.

    Args:
        value: Datetime to format (defaults to now)

    Returns:
        Timestamp string
    """
    if value is None:
        value = get_now()
    if value.tzinfo is not None:
        value = value.astimezone(get_timezone()).replace(tzinfo=None)
    return value.strftime('%Y-%m-%d %H:%M:%S')


def to_db_value(value):
    """
    Adapt a Python value for a DATE/TIMESTAMP column.

    datetimes become naive timestamps, dates become YYYY-MM-DD, anything
    else passes through.
    """
    if isinstance(value, datetime):
        return to_db_timestamp(value)
    if isinstance(value, date):
        return value.isoformat()
    return value
