# fakeso/schemas/common.py
"""
Helpers shared by the schema modules.
"""
import datetime as dt

__all__ = ["as_utc"]

def as_utc(value: dt.datetime | None) -> dt.datetime | None:
    """
    Normalize a datetime to an aware UTC datetime.
    Naive values are taken to already be in UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc)
