from datetime import datetime, timezone, timedelta


def utcnow() -> datetime:
    """Timezone-aware current UTC time"""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """
    Attach UTC to naive datetimes

    Some backends (SQLite) hand timezone-aware columns back without tzinfo.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def shift_days(value: datetime, days: int) -> datetime:
    return value + timedelta(days=days)


def format_service_date(value: datetime) -> str:
    """Format a date the way customers see it on reports (MM/DD/YYYY)"""
    return value.strftime("%m/%d/%Y")
