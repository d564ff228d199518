# ==================== UTILS/HOLIDAY_RESOLVER.PY ====================
"""Holiday and weekend lookups feeding the surge part of the price model"""
import logging
import math
from datetime import date, timedelta

from .records import HolidayCheck, HolidayRecord, to_calendar_date

logger = logging.getLogger(__name__)

DEFAULT_HOLIDAY_MULTIPLIER = 1.5
NO_HOLIDAY = HolidayCheck(is_holiday=False, holiday_name=None, multiplier=1.0)

# date.weekday(): Monday is 0
WEEKEND_DAYS = (5, 6)


def parse_multiplier(value):
    """Holiday multiplier as a float; anything unusable falls back to the default surge"""
    try:
        multiplier = float(value)
    except (TypeError, ValueError):
        return DEFAULT_HOLIDAY_MULTIPLIER
    if not math.isfinite(multiplier) or multiplier <= 0:
        return DEFAULT_HOLIDAY_MULTIPLIER
    return multiplier


def is_active(holiday):
    # Only an explicit False switches a holiday off
    return holiday.is_active is not False


def resolve_holiday(value, holidays=()):
    """Check whether ``value`` falls on an active holiday.

    ``value`` may be a date, a datetime or a ``YYYY-MM-DD`` string; its own
    calendar date is used. When several active holidays share the date the
    first one in ``holidays`` wins.
    """
    day = to_calendar_date(value)
    if day is None or not holidays:
        return NO_HOLIDAY

    for holiday in _as_records(holidays):
        if is_active(holiday) and holiday.date == day:
            multiplier = parse_multiplier(holiday.multiplier)
            logger.debug(f"{day.isoformat()} is {holiday.name} (x{multiplier})")
            return HolidayCheck(is_holiday=True, holiday_name=holiday.name, multiplier=multiplier)

    return NO_HOLIDAY


def is_weekend_day(value):
    """True on Saturdays and Sundays"""
    day = to_calendar_date(value)
    return day is not None and day.weekday() in WEEKEND_DAYS


def upcoming_holidays(holidays=(), horizon_days=7, today=None):
    """Active holidays between ``today`` and ``today + horizon_days`` inclusive"""
    start = to_calendar_date(today) or date.today()
    end = start + timedelta(days=horizon_days)

    return [
        holiday for holiday in _as_records(holidays)
        if is_active(holiday) and holiday.date is not None and start <= holiday.date <= end
    ]


def _as_records(holidays):
    for holiday in holidays:
        if isinstance(holiday, HolidayRecord):
            yield holiday
        else:
            yield HolidayRecord.from_source(holiday)
