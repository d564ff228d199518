# ==================== BOOKINGS/TASKS.PY (CELERY TASKS) ====================
from celery import shared_task
from django.utils import timezone
from .models import Booking
from .services import BookingService
import logging

logger = logging.getLogger(__name__)


@shared_task
def auto_complete_bookings():
    """Automatically complete active bookings whose booked time has run out"""
    now = timezone.now()
    completed = 0

    for booking in Booking.objects.filter(status='active', start_time__lte=now):
        if booking.expected_end_time > now:
            continue
        BookingService.complete_booking(booking, end_time=booking.expected_end_time)
        completed += 1

    logger.info(f"Auto-completed {completed} bookings")
    return completed
