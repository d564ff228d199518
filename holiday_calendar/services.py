from django.utils import timezone

from utils.holiday_resolver import resolve_holiday, is_weekend_day, upcoming_holidays
from utils.records import HolidayRecord
from .models import Holiday


class HolidayService:
    """Loads the holiday calendar and answers date questions with the resolver"""

    @staticmethod
    def active_holidays():
        return [HolidayRecord.from_source(holiday) for holiday in Holiday.objects.filter(is_active=True)]

    @staticmethod
    def check(day=None, holidays=None):
        """Holiday check for ``day`` (today in the configured time zone by default)"""
        day = day or timezone.localdate()
        if holidays is None:
            holidays = HolidayService.active_holidays()
        return resolve_holiday(day, holidays)

    @staticmethod
    def surge_for(day=None, holidays=None):
        """(holiday check, is weekend) pair used when pricing a stay on ``day``"""
        day = day or timezone.localdate()
        return HolidayService.check(day, holidays), is_weekend_day(day)

    @staticmethod
    def upcoming(days, today=None):
        return upcoming_holidays(HolidayService.active_holidays(), days, today or timezone.localdate())
