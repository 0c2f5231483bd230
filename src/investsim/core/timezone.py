"""Timezone utilities for US/Eastern market time."""

from datetime import datetime

import pytz
from dateutil.relativedelta import relativedelta

EASTERN_TZ = pytz.timezone("US/Eastern")


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def to_eastern(dt: datetime) -> datetime:
    """Convert a datetime to US/Eastern timezone."""
    if dt.tzinfo is None:
        # Assume naive datetime is already Eastern
        return EASTERN_TZ.localize(dt)
    return dt.astimezone(EASTERN_TZ)


def add_months(dt: datetime, months: int) -> datetime:
    """
    Shift a datetime by whole calendar months.

    Month ends are clamped (Jan 31 + 1 month -> Feb 28/29).
    """
    shifted = to_eastern(dt).replace(tzinfo=None) + relativedelta(months=months)
    return EASTERN_TZ.localize(shifted)
