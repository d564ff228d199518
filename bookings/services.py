import logging
from decimal import Decimal

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from parking.models import ParkingLot, Slot
from parking.services import ParkingSearchService, SlotAllocationService
from utils.duration_estimator import estimate_duration
from utils.exceptions import SlotUnavailable
from utils.records import round_half_up
from .models import Booking, BookingHistory

logger = logging.getLogger(__name__)


def elapsed_minutes(start_time, end_time):
    """Whole minutes between two datetimes, rounded half-up, never negative"""
    seconds = max(0.0, (end_time - start_time).total_seconds())
    return round_half_up(seconds / 60, 0)


def local_day(moment):
    if timezone.is_aware(moment):
        return timezone.localtime(moment).date()
    return moment.date()


class BookingService:
    """Booking lifecycle: allocate and price, then complete, free or cancel"""

    @staticmethod
    def create_booking(user, parking, duration_hours=1, vehicle=None, start_time=None):
        start_time = start_time or timezone.now()
        vehicle_type = vehicle.vehicle_type if vehicle else 'car'

        with transaction.atomic():
            lot = ParkingLot.objects.select_for_update().get(pk=parking.pk)

            best = SlotAllocationService.best_slot(lot, vehicle_type, duration_hours)
            if best is None:
                logger.warning(f"No {vehicle_type} slot available at parking {lot.id}")
                raise SlotUnavailable()

            slot = Slot.objects.select_for_update().get(pk=best.id)
            if slot.status != 'available':
                raise SlotUnavailable()

            quote, holiday, weekend = ParkingSearchService.quote(lot, duration_hours, local_day(start_time))
            breakdown = quote.breakdown

            slot.status = 'occupied'
            slot.save(update_fields=['status'])
            lot.occupied_slots = min(lot.total_slots, lot.occupied_slots + 1)
            lot.save(update_fields=['occupied_slots', 'updated_at'])

            booking = Booking.objects.create(
                user=user,
                parking=lot,
                slot=slot,
                vehicle=vehicle,
                start_time=start_time,
                duration_hours=duration_hours,
                base_price=lot.base_price,
                final_price=Decimal(str(quote.final_price)),
                applied_multipliers={
                    'holiday': breakdown.holiday_factor,
                    'holiday_name': holiday.holiday_name,
                    'weekend': breakdown.weekend_factor,
                    'occupancy': breakdown.occupancy_factor,
                    'occupancy_rate': breakdown.occupancy_rate,
                    'duration_discount': breakdown.duration_discount,
                    'price_per_hour': quote.price_per_hour,
                },
            )

        logger.info(
            f"Booking {booking.id} created: slot {slot.slot_number} at {lot.name}, "
            f"{duration_hours}h for ₹{quote.final_price} (weekend={weekend})"
        )
        return booking

    @staticmethod
    def release_slot(booking):
        """Free the booked slot and give the capacity back to the lot"""
        if booking.slot_id:
            Slot.objects.filter(pk=booking.slot_id).update(status='available')

        lot = ParkingLot.objects.select_for_update().get(pk=booking.parking_id)
        lot.occupied_slots = max(0, lot.occupied_slots - 1)
        lot.save(update_fields=['occupied_slots', 'updated_at'])

    @staticmethod
    def archive(booking, end_time, duration_minutes, final_price, status):
        return BookingHistory.objects.create(
            user_id=booking.user_id,
            parking_id=booking.parking_id,
            slot_id=booking.slot_id,
            vehicle_id=booking.vehicle_id,
            start_time=booking.start_time,
            end_time=end_time,
            duration_minutes=duration_minutes,
            base_price=booking.base_price,
            final_price=final_price,
            applied_multipliers=booking.applied_multipliers,
            status=status,
        )

    @staticmethod
    @transaction.atomic
    def complete_booking(booking, end_time=None):
        """Mark completed with the measured duration and archive it as payment pending"""
        end_time = end_time or timezone.now()
        minutes = elapsed_minutes(booking.start_time, end_time)

        booking.status = 'completed'
        booking.end_time = end_time
        booking.duration_minutes = minutes
        booking.save(update_fields=['status', 'end_time', 'duration_minutes', 'updated_at'])

        history = BookingService.archive(booking, end_time, minutes, booking.final_price, 'completed')
        BookingService.release_slot(booking)

        logger.info(f"Booking {booking.id} completed after {minutes} minutes")
        return history

    @staticmethod
    @transaction.atomic
    def free_slot(booking, end_time=None):
        """Charge base price for the time actually parked, archive, and drop the booking"""
        end_time = end_time or timezone.now()
        minutes = elapsed_minutes(booking.start_time, end_time)
        final_price = round_half_up(float(booking.base_price) * (minutes / 60), 0)

        BookingService.release_slot(booking)
        history = BookingService.archive(booking, end_time, minutes, Decimal(final_price), 'completed')

        booking_id = booking.id
        booking.delete()

        logger.info(f"Booking {booking_id} freed after {minutes} minutes, charged ₹{final_price}")
        return {
            'success': True,
            'final_price': final_price,
            'duration_minutes': minutes,
            'history_id': history.id,
        }

    @staticmethod
    @transaction.atomic
    def cancel_booking(booking):
        end_time = timezone.now()

        booking.status = 'cancelled'
        booking.end_time = end_time
        booking.save(update_fields=['status', 'end_time', 'updated_at'])

        BookingService.release_slot(booking)
        history = BookingService.archive(booking, end_time, 0, Decimal('0'), 'cancelled')

        logger.info(f"Booking {booking.id} cancelled")
        return history

    @staticmethod
    def pending_payments(user):
        return BookingHistory.objects.filter(user=user, status='completed')

    @staticmethod
    def mark_as_paid(user, history_ids):
        """Move the user's completed history rows to paid; returns how many changed"""
        if not history_ids:
            return 0
        updated = BookingHistory.objects.filter(
            user=user, id__in=history_ids, status='completed'
        ).update(status='paid')
        logger.info(f"User {user.id} paid {updated} booking(s)")
        return updated

    @staticmethod
    def estimate_duration(user, parking_id=None):
        """Duration estimate from the user's and the lot's finished bookings"""
        finished = BookingHistory.objects.filter(status__in=['completed', 'paid'], duration_minutes__gt=0)

        user_samples = list(finished.filter(user=user).values('parking_id', 'duration_minutes'))
        parking_samples = []
        if parking_id is not None:
            parking_samples = list(
                finished.filter(parking_id=parking_id)
                .values('parking_id', 'duration_minutes')[:settings.DURATION_SAMPLE_LIMIT]
            )

        return estimate_duration(user_samples, parking_samples, parking_id)
