import warnings
from datetime import datetime, timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import SimpleTestCase, TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from p2p.models import P2PListing, P2PRentalHistory
from p2p.services import calculate_rental_amount
from p2p.serializers import P2PListingSerializer
from parking.serializers import ParkingLotSerializer
from holiday_calendar.serializers import HolidaySerializer

START = datetime(2025, 10, 27, 9, 0)
PRICES = {'hourly_price': 40, 'daily_price': 300, 'monthly_price': 6000}


def rental(hours=0, **extra):
    return {**PRICES, 'rental_start_time': START, 'rental_end_time': START + timedelta(hours=hours), **extra}


class RentalAmountTests(SimpleTestCase):

    def test_agreed_total_wins(self):
        self.assertEqual(calculate_rental_amount(rental(5, rental_total_price='250.555',
                                                        rental_duration_mode='hourly')), 250.56)

    def test_zero_total_is_ignored(self):
        self.assertEqual(calculate_rental_amount(rental(2, rental_total_price=0)), 80)

    def test_by_mode(self):
        self.assertEqual(calculate_rental_amount(rental(1, rental_duration_mode='hourly', rental_units=3)), 120)
        self.assertEqual(calculate_rental_amount(rental(1, rental_duration_mode='daily', rental_units=2)), 600)
        self.assertEqual(calculate_rental_amount(rental(1, rental_duration_mode='range', rental_units=4)), 1200)
        self.assertEqual(calculate_rental_amount(rental(1, rental_duration_mode='monthly', rental_units=2)), 12000)

    def test_mode_without_units_bills_one_unit(self):
        self.assertEqual(calculate_rental_amount(rental(50, rental_duration_mode='daily')), 300)
        self.assertEqual(calculate_rental_amount(rental(50, rental_duration_mode='daily', rental_units=0)), 300)

    def test_partial_hours_are_billed_in_full(self):
        self.assertEqual(calculate_rental_amount(rental(2.5)), 120)

    def test_exactly_one_day_is_still_hourly(self):
        self.assertEqual(calculate_rental_amount(rental(24)), 960)

    def test_more_than_a_day_bills_days(self):
        self.assertEqual(calculate_rental_amount(rental(36)), 600)

    def test_more_than_thirty_days_bills_months(self):
        self.assertEqual(calculate_rental_amount(rental(45 * 24)), 12000)

    def test_missing_window_bills_one_hour(self):
        self.assertEqual(calculate_rental_amount({**PRICES}), 40)

    def test_end_before_start_bills_one_hour(self):
        self.assertEqual(calculate_rental_amount(rental(-3)), 40)


class P2PTestMixin:

    def setUp(self):
        users = get_user_model().objects
        self.owner = users.create_user(username='owner', password='pass12345', email='owner@example.com')
        self.renter = users.create_user(username='renter', password='pass12345', phone_number='+919876543210')
        self.client = APIClient()

    def create_listing(self, size='car', **extra):
        return P2PListing.objects.create(owner=self.owner, description='Covered driveway',
                                         availability_duration='Weekdays', vehicle_size_allowed=size,
                                         **{**PRICES, **extra})

    def rent_payload(self, hours=3, **extra):
        start = timezone.now() - timedelta(hours=hours)
        return {'rental_start_time': start.isoformat(),
                'rental_end_time': (start + timedelta(hours=hours)).isoformat(), **extra}


class ListingAPITests(P2PTestMixin, TestCase):

    def test_create_listing(self):
        self.client.force_authenticate(self.owner)
        payload = {'description': '  Gated spot  ', 'availability_duration': 'All week',
                   'vehicle_size_allowed': 'suv', 'location_lat': 12.97, 'location_lng': 77.59, **PRICES}

        response = self.client.post('/api/v1/p2p-listings/', payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        listing = P2PListing.objects.get()
        self.assertEqual(listing.owner, self.owner)
        self.assertEqual(listing.owner_email, 'owner@example.com')
        self.assertEqual(listing.description, 'Gated spot')
        self.assertFalse(listing.is_rented)

    def test_prices_must_be_positive(self):
        self.client.force_authenticate(self.owner)
        payload = {'description': 'Spot', 'availability_duration': 'All week', **PRICES, 'daily_price': 0}

        response = self.client.post('/api/v1/p2p-listings/', payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_anonymous_cannot_create(self):
        response = self.client.post('/api/v1/p2p-listings/', {'description': 'Spot'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_list_shows_free_listings_for_vehicle(self):
        self.create_listing('bike')
        car = self.create_listing('car')
        suv = self.create_listing('suv')
        self.create_listing('suv', is_rented=True, rented_by=self.renter)

        response = self.client.get('/api/v1/p2p-listings/', {'vehicle_type': 'car'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertCountEqual([item['id'] for item in response.data['results']], [car.id, suv.id])

        response = self.client.get('/api/v1/p2p-listings/', {'vehicle_type': 'all'})
        self.assertEqual(response.data['count'], 3)

    def test_only_owner_can_update(self):
        listing = self.create_listing()
        url = f'/api/v1/p2p-listings/{listing.id}/'

        self.client.force_authenticate(self.renter)
        self.assertEqual(self.client.patch(url, {'hourly_price': 10}, format='json').status_code,
                         status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(self.owner)
        response = self.client.patch(url, {'hourly_price': 55}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(P2PListing.objects.get().hourly_price, Decimal('55'))

        response = self.client.patch(url, {'hourly_price': -1}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_mine(self):
        self.create_listing()
        self.create_listing(is_rented=True, rented_by=self.renter)
        self.client.force_authenticate(self.owner)

        response = self.client.get('/api/v1/p2p-listings/mine/')
        self.assertEqual(len(response.data), 2)


class RentalFlowTests(P2PTestMixin, TestCase):

    def setUp(self):
        super().setUp()
        self.listing = self.create_listing()
        self.client.force_authenticate(self.renter)

    def rent(self, **extra):
        return self.client.post(f'/api/v1/p2p-listings/{self.listing.id}/rent/', self.rent_payload(**extra),
                                format='json')

    def test_rent(self):
        response = self.rent(rental_duration_mode='hourly', rental_units=3)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['is_rented'])
        self.listing.refresh_from_db()
        self.assertEqual(self.listing.rented_by, self.renter)
        self.assertEqual(str(self.listing.rented_by_phone_number), '+919876543210')

        rentals = self.client.get('/api/v1/p2p-listings/rentals/').data
        self.assertEqual([item['id'] for item in rentals], [self.listing.id])

    def test_cannot_rent_twice(self):
        self.rent()
        other = get_user_model().objects.create_user(username='late', password='pass12345')
        self.client.force_authenticate(other)

        response = self.rent()

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.listing.refresh_from_db()
        self.assertEqual(self.listing.rented_by, self.renter)

    def test_rent_requires_end_after_start(self):
        now = timezone.now()
        response = self.client.post(f'/api/v1/p2p-listings/{self.listing.id}/rent/', {
            'rental_start_time': now.isoformat(), 'rental_end_time': now.isoformat()}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_free_leaves_payment_pending(self):
        self.rent(rental_duration_mode='hourly', rental_units=3)

        response = self.client.post(f'/api/v1/p2p-listings/{self.listing.id}/free/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['amount'], 120)
        self.assertEqual(response.data['payment']['status'], 'pending')

        self.listing.refresh_from_db()
        self.assertFalse(self.listing.is_rented)
        self.assertIsNone(self.listing.rented_by)
        self.assertIsNone(self.listing.rental_duration_mode)

        pending = self.client.get('/api/v1/p2p-payments/pending/').data
        self.assertEqual(len(pending), 1)

        response = self.client.post(f"/api/v1/p2p-payments/{pending[0]['id']}/pay/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'paid')
        self.assertIsNotNone(response.data['paid_at'])

        response = self.client.post(f"/api/v1/p2p-payments/{pending[0]['id']}/pay/")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_pay_and_free(self):
        self.rent(hours=3)

        response = self.client.post(f'/api/v1/p2p-listings/{self.listing.id}/pay_and_free/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['amount'], 120)
        record = P2PRentalHistory.objects.get()
        self.assertEqual(record.status, 'paid')
        self.assertEqual(record.owner, self.owner)
        self.assertEqual(record.amount, Decimal('120'))

    def test_only_renter_can_free(self):
        self.rent()
        self.client.force_authenticate(self.owner)

        response = self.client.post(f'/api/v1/p2p-listings/{self.listing.id}/free/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_free_without_rental(self):
        response = self.client.post(f'/api/v1/p2p-listings/{self.listing.id}/free/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_listing_can_be_rented_again_after_release(self):
        self.rent()
        self.client.post(f'/api/v1/p2p-listings/{self.listing.id}/free/')

        self.assertEqual(self.rent().status_code, status.HTTP_200_OK)

    def test_payments_are_private(self):
        self.rent()
        self.client.post(f'/api/v1/p2p-listings/{self.listing.id}/free/')
        record = P2PRentalHistory.objects.get()

        self.client.force_authenticate(self.owner)
        response = self.client.post(f'/api/v1/p2p-payments/{record.id}/pay/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class PriceFieldTests(SimpleTestCase):

    def test_price_serializers_build_without_warnings(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            listing_fields = P2PListingSerializer().fields
            lot_fields = ParkingLotSerializer().fields
            holiday_fields = HolidaySerializer().fields

        self.assertEqual([str(warning.message) for warning in caught if 'min_value' in str(warning.message)], [])
        self.assertEqual(listing_fields['hourly_price'].min_value, Decimal('0.01'))
        self.assertEqual(lot_fields['base_price'].min_value, Decimal('0.01'))
        self.assertEqual(holiday_fields['multiplier'].min_value, Decimal('0.01'))
