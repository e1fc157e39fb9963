"""Daylight-saving policies — plain functions from a calendar date to "DST in effect?".

The default is the European (CET/CEST) transition rule: DST runs from the last
Sunday of March up to the day before the last Sunday of October. It is a
simplification for one region, not a timezone database. Other locales can plug
in ``tz_database_policy`` or ``no_dst``.
"""

import calendar
from datetime import date, datetime, timedelta
from typing import Callable

from pytz import UnknownTimeZoneError, timezone

DstPolicy = Callable[[date], bool]


def last_sunday(year: int, month: int) -> date:
    """Return the last Sunday of the given month."""
    last_day = date(year, month, calendar.monthrange(year, month)[1])
    # date.weekday(): Monday=0 … Sunday=6
    return last_day - timedelta(days=(last_day.weekday() + 1) % 7)


def is_european_dst(d: date) -> bool:
    """European summer time rule, evaluated per calendar day."""
    if d.month < 3 or d.month > 10:
        return False
    if 3 < d.month < 10:
        return True
    if d.month == 3:
        return d >= last_sunday(d.year, 3)
    return d < last_sunday(d.year, 10)


def no_dst(d: date) -> bool:
    """Policy for locations that stay on standard time all year."""
    return False


def tz_database_policy(zone_name: str) -> DstPolicy:
    """Build a policy backed by the tz database (via pytz).

    DST is considered in effect when the zone's DST offset at local noon of
    the given day is non-zero.

    Raises:
        ValueError: When zone_name is not a known tz database zone.
    """
    try:
        tz = timezone(zone_name)
    except UnknownTimeZoneError as e:
        raise ValueError(f"Unknown time zone: {zone_name}") from e

    def policy(d: date) -> bool:
        local_noon = tz.localize(datetime(d.year, d.month, d.day, 12, 0))
        return bool(local_noon.dst())

    return policy


def resolve_policy(name: str) -> DstPolicy:
    """Map a configured rule name to a policy.

    ``"eu"`` → European rule, ``"none"`` → no DST, anything else is treated
    as a tz database zone name ("America/New_York").
    """
    key = name.strip()
    if key.lower() == "eu":
        return is_european_dst
    if key.lower() == "none":
        return no_dst
    return tz_database_policy(key)
