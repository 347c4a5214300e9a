# core/utils/dates.py
from datetime import datetime, UTC
from typing import Optional

def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to a naive datetime (SQLite drops tzinfo); convert aware ones to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
