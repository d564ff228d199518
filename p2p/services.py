import logging
import math
from decimal import Decimal

from django.db import transaction
from django.utils import timezone

from utils.exceptions import ListingUnavailable, RentalNotFound, PaymentRecordNotFound
from utils.records import read_field, round_half_up, to_number
from .models import P2PListing, P2PRentalHistory

logger = logging.getLogger(__name__)

HOUR_SECONDS = 60 * 60
DAY_SECONDS = 24 * HOUR_SECONDS
MONTH_DAYS = 30

RENTAL_FIELDS = {
    'is_rented': False,
    'rented_by': None,
    'rented_by_phone_number': None,
    'rental_start_time': None,
    'rental_end_time': None,
    'rental_duration_mode': None,
    'rental_units': None,
    'rental_total_price': None,
}


def calculate_rental_amount(listing):
    """Amount owed for a rental.

    A positive agreed total wins. Otherwise the chosen mode prices the booked
    units, and without a mode the elapsed window picks monthly, daily or
    hourly billing. Partial units are billed in full, at least one unit.
    """
    stored = to_number(read_field(listing, 'rental_total_price'))
    if stored > 0:
        return round_half_up(stored, 2)

    start = read_field(listing, 'rental_start_time')
    end = read_field(listing, 'rental_end_time')
    elapsed = max(0.0, (end - start).total_seconds()) if start and end else 0.0

    hours = max(1, math.ceil(elapsed / HOUR_SECONDS))
    days = max(1, math.ceil(elapsed / DAY_SECONDS))
    months = max(1, math.ceil(days / MONTH_DAYS))
    units = max(1, round_half_up(to_number(read_field(listing, 'rental_units')), 0))

    hourly = to_number(read_field(listing, 'hourly_price'))
    daily = to_number(read_field(listing, 'daily_price'))
    monthly = to_number(read_field(listing, 'monthly_price'))

    mode = read_field(listing, 'rental_duration_mode')
    if mode == 'hourly':
        return round_half_up(hourly * units, 2)
    if mode == 'monthly':
        return round_half_up(monthly * units, 2)
    if mode in ('daily', 'range'):
        return round_half_up(daily * units, 2)

    if elapsed > MONTH_DAYS * DAY_SECONDS:
        return round_half_up(monthly * months, 2)
    if elapsed > DAY_SECONDS:
        return round_half_up(daily * days, 2)
    return round_half_up(hourly * hours, 2)


class P2PRentalService:
    """Renting out private spots: rent, release and settle payments"""

    @staticmethod
    def available():
        return P2PListing.objects.filter(is_rented=False)

    @staticmethod
    def active_rentals(renter):
        return P2PListing.objects.filter(rented_by=renter, is_rented=True).order_by('-rental_start_time')

    @staticmethod
    def rent(listing_id, renter, rental_start_time, rental_end_time,
             rental_duration_mode=None, rental_units=None, rental_total_price=None):
        """Claim a free listing; the is_rented check and the claim are one UPDATE"""
        claimed = P2PListing.objects.filter(id=listing_id, is_rented=False).update(
            is_rented=True,
            rented_by=renter,
            rented_by_phone_number=renter.phone_number,
            rental_start_time=rental_start_time,
            rental_end_time=rental_end_time,
            rental_duration_mode=rental_duration_mode or None,
            rental_units=rental_units or None,
            rental_total_price=rental_total_price or None,
            updated_at=timezone.now(),
        )
        if not claimed:
            logger.warning(f"User {renter.id} could not rent listing {listing_id}: not available")
            raise ListingUnavailable()

        logger.info(f"Listing {listing_id} rented by user {renter.id}")
        return P2PListing.objects.get(id=listing_id)

    @staticmethod
    @transaction.atomic
    def release(listing_id, renter, mark_paid=False):
        """End the renter's rental, record the payment and free the listing"""
        listing = P2PListing.objects.select_for_update().filter(
            id=listing_id, rented_by=renter, is_rented=True
        ).first()
        if listing is None:
            raise RentalNotFound()

        amount = calculate_rental_amount(listing)
        history = P2PRentalHistory.objects.create(
            listing=listing,
            owner_id=listing.owner_id,
            renter=renter,
            renter_phone_number=listing.rented_by_phone_number,
            description=listing.description,
            location_lat=listing.location_lat,
            location_lng=listing.location_lng,
            vehicle_size_allowed=listing.vehicle_size_allowed,
            rental_start_time=listing.rental_start_time,
            rental_end_time=listing.rental_end_time,
            rental_duration_mode=listing.rental_duration_mode,
            rental_units=listing.rental_units,
            amount=Decimal(str(amount)),
            status='paid' if mark_paid else 'pending',
            paid_at=timezone.now() if mark_paid else None,
        )

        for name, value in RENTAL_FIELDS.items():
            setattr(listing, name, value)
        listing.save()

        logger.info(f"Listing {listing.id} released by user {renter.id}: ₹{amount} ({history.status})")
        return listing, history, amount

    @staticmethod
    def pay_pending(record_id, renter):
        updated = P2PRentalHistory.objects.filter(id=record_id, renter=renter, status='pending').update(
            status='paid', paid_at=timezone.now()
        )
        if not updated:
            raise PaymentRecordNotFound()

        logger.info(f"Rental payment {record_id} settled by user {renter.id}")
        return P2PRentalHistory.objects.get(id=record_id)
