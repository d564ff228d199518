from datetime import timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.utils import timezone

from bookings.models import Booking, BookingHistory
from bookings.services import BookingService
from bookings.tasks import auto_complete_bookings
from parking.models import ParkingLot, Slot


class AutoCompleteBookingsTests(TestCase):

    def setUp(self):
        self.user = get_user_model().objects.create_user(username='driver', password='pass12345')
        self.lot = ParkingLot.objects.create(name='MG Road', address='MG Road, Bangalore', latitude=12.9716,
                                             longitude=77.5946, base_price=20, total_slots=2)
        Slot.objects.create(parking=self.lot, slot_number='A1')
        Slot.objects.create(parking=self.lot, slot_number='A2')

    def test_completes_only_expired_bookings(self):
        now = timezone.now()
        expired = BookingService.create_booking(self.user, self.lot, 2, start_time=now - timedelta(hours=3))
        running = BookingService.create_booking(self.user, self.lot, 2, start_time=now - timedelta(minutes=30))

        self.assertEqual(auto_complete_bookings(), 1)

        self.assertEqual(Booking.objects.get(id=expired.id).status, 'completed')
        self.assertEqual(Booking.objects.get(id=running.id).status, 'active')

        history = BookingHistory.objects.get()
        self.assertEqual(history.duration_minutes, 120)

        self.lot.refresh_from_db()
        self.assertEqual(self.lot.occupied_slots, 1)

    def test_nothing_to_do(self):
        self.assertEqual(auto_complete_bookings(), 0)
