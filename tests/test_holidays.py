from datetime import date, datetime, timedelta

from django.contrib.auth import get_user_model
from django.test import SimpleTestCase, TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from holiday_calendar.models import Holiday
from utils.holiday_resolver import is_weekend_day, parse_multiplier, resolve_holiday, upcoming_holidays

DIWALI = {'date': '2025-10-20', 'name': 'Diwali', 'multiplier': '2.0', 'is_active': True}


class ResolveHolidayTests(SimpleTestCase):

    def test_matching_date(self):
        check = resolve_holiday(date(2025, 10, 20), [DIWALI])

        self.assertTrue(check.is_holiday)
        self.assertEqual(check.holiday_name, 'Diwali')
        self.assertEqual(check.multiplier, 2.0)

    def test_other_date(self):
        check = resolve_holiday(date(2025, 10, 21), [DIWALI])

        self.assertFalse(check.is_holiday)
        self.assertIsNone(check.holiday_name)
        self.assertEqual(check.multiplier, 1.0)

    def test_datetime_and_string_inputs_use_their_own_date(self):
        self.assertTrue(resolve_holiday(datetime(2025, 10, 20, 23, 30), [DIWALI]).is_holiday)
        self.assertTrue(resolve_holiday('2025-10-20', [DIWALI]).is_holiday)
        self.assertTrue(resolve_holiday('2025-10-20T08:00:00+05:30', [DIWALI]).is_holiday)

    def test_unusable_date_is_not_a_holiday(self):
        self.assertFalse(resolve_holiday('not a date', [DIWALI]).is_holiday)
        self.assertFalse(resolve_holiday(None, [DIWALI]).is_holiday)

    def test_no_holidays(self):
        self.assertFalse(resolve_holiday(date(2025, 10, 20), []).is_holiday)

    def test_bad_multiplier_falls_back_to_default_surge(self):
        for raw in ('abc', None, 0, -1, float('inf')):
            holiday = dict(DIWALI, multiplier=raw)
            self.assertEqual(resolve_holiday(date(2025, 10, 20), [holiday]).multiplier, 1.5)

    def test_only_explicit_false_disables(self):
        self.assertFalse(resolve_holiday(date(2025, 10, 20), [dict(DIWALI, is_active=False)]).is_holiday)
        self.assertTrue(resolve_holiday(date(2025, 10, 20), [dict(DIWALI, is_active=None)]).is_holiday)

    def test_first_matching_holiday_wins(self):
        holidays = [dict(DIWALI, name='Diwali'), dict(DIWALI, name='Naraka Chaturdashi', multiplier='3')]
        check = resolve_holiday(date(2025, 10, 20), holidays)

        self.assertEqual(check.holiday_name, 'Diwali')
        self.assertEqual(check.multiplier, 2.0)

    def test_parse_multiplier(self):
        self.assertEqual(parse_multiplier('1.25'), 1.25)
        self.assertEqual(parse_multiplier(''), 1.5)


class CalendarHelperTests(SimpleTestCase):

    def test_weekend(self):
        self.assertFalse(is_weekend_day(date(2025, 10, 24)))  # Friday
        self.assertTrue(is_weekend_day(date(2025, 10, 25)))
        self.assertTrue(is_weekend_day('2025-10-26'))
        self.assertFalse(is_weekend_day(date(2025, 10, 27)))

    def test_upcoming_window_is_inclusive(self):
        holidays = [
            {'date': '2025-10-17', 'name': 'Yesterday'},
            {'date': '2025-10-18', 'name': 'Today'},
            {'date': '2025-10-25', 'name': 'Edge'},
            {'date': '2025-10-26', 'name': 'Too far'},
            {'date': '2025-10-20', 'name': 'Off', 'is_active': False},
        ]
        upcoming = upcoming_holidays(holidays, 7, today=date(2025, 10, 18))
        self.assertEqual([holiday.name for holiday in upcoming], ['Today', 'Edge'])


class HolidayAPITests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.today = timezone.localdate()
        self.soon = Holiday.objects.create(date=self.today + timedelta(days=2), name='Festival', multiplier=2)
        Holiday.objects.create(date=self.today + timedelta(days=30), name='Far Away')
        Holiday.objects.create(date=self.today + timedelta(days=1), name='Cancelled', is_active=False)

    def test_list_shows_active_holidays(self):
        response = self.client.get('/api/v1/holidays/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        names = [holiday['name'] for holiday in response.data['results']]
        self.assertEqual(names, ['Festival', 'Far Away'])

    def test_upcoming(self):
        response = self.client.get('/api/v1/holidays/upcoming/', {'days': 7})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]['name'], 'Festival')
        self.assertEqual(response.data[0]['multiplier'], 2.0)

    def test_upcoming_rejects_bad_days(self):
        response = self.client.get('/api/v1/holidays/upcoming/', {'days': 'week'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_check_date(self):
        response = self.client.get('/api/v1/holidays/check/', {'date': self.soon.date.isoformat()})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['is_holiday'])
        self.assertEqual(response.data['holiday_name'], 'Festival')
        self.assertEqual(response.data['multiplier'], 2.0)

    def test_check_defaults_to_today(self):
        response = self.client.get('/api/v1/holidays/check/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data['is_holiday'])
        self.assertEqual(response.data['multiplier'], 1.0)

    def test_check_rejects_bad_date(self):
        response = self.client.get('/api/v1/holidays/check/', {'date': '20-10-2025'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_only_staff_can_write(self):
        payload = {'date': '2030-01-01', 'name': 'New Year', 'multiplier': '1.8'}
        user = get_user_model().objects.create_user(username='driver', password='pass12345')
        self.client.force_authenticate(user)
        self.assertEqual(self.client.post('/api/v1/holidays/', payload).status_code, status.HTTP_403_FORBIDDEN)

        user.is_staff = True
        user.save()
        self.assertEqual(self.client.post('/api/v1/holidays/', payload).status_code, status.HTTP_201_CREATED)
