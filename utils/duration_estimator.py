# ==================== UTILS/DURATION_ESTIMATOR.PY ====================
import math

from .records import DurationEstimate, DurationSample, round_half_up

DEFAULT_DURATION_MINUTES = 60

CONFIDENCE_HIGH = 'high'
CONFIDENCE_MEDIUM = 'medium'
CONFIDENCE_LOW = 'low'
CONFIDENCE_NONE = 'none'


def average_duration(samples):
    """Mean duration in minutes over samples with a positive duration, 0 when there are none"""
    durations = [sample.duration_minutes for sample in samples if sample.duration_minutes > 0]
    if not durations:
        return 0
    return sum(durations) / len(durations)


def format_duration(minutes):
    """Render minutes as ``1h 30m``, ``2h`` or ``45m``"""
    if not minutes or minutes <= 0:
        return '0m'
    hours = math.floor(minutes / 60)
    mins = round_half_up(minutes % 60, 0)

    if hours == 0:
        return f"{mins}m"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"


def estimate_duration(user_bookings=(), parking_bookings=(), parking_id=None):
    """Predict how long the user will park.

    Blends the user's history at this lot, the user's overall history and
    the lot's history, falling back tier by tier as data runs out.
    """
    user_samples = _as_samples(user_bookings)
    parking_samples = _as_samples(parking_bookings)
    at_parking = [sample for sample in user_samples if sample.parking_id == parking_id] if parking_id else []

    user_avg = average_duration(user_samples)
    user_at_parking_avg = average_duration(at_parking)
    parking_avg = average_duration(parking_samples)

    if user_at_parking_avg > 0:
        minutes = round_half_up(user_at_parking_avg * 0.6 + user_avg * 0.3 + parking_avg * 0.1, 0)
        confidence = CONFIDENCE_HIGH
        message = f"You usually park for {format_duration(minutes)} here."
    elif user_avg > 0:
        minutes = round_half_up(user_avg * 0.7 + parking_avg * 0.3, 0)
        confidence = CONFIDENCE_MEDIUM
        message = f"You usually park for {format_duration(minutes)}."
    elif parking_avg > 0:
        minutes = round_half_up(parking_avg, 0)
        confidence = CONFIDENCE_LOW
        message = f"Most people park for {format_duration(minutes)} here."
    else:
        minutes = DEFAULT_DURATION_MINUTES
        confidence = CONFIDENCE_NONE
        message = 'No history available. Estimated 1 hour.'

    return DurationEstimate(
        estimated_minutes=minutes,
        estimated_hours=round_half_up(minutes / 60, 1),
        formatted_duration=format_duration(minutes),
        confidence=confidence,
        message=message,
    )


def _as_samples(bookings):
    return [
        booking if isinstance(booking, DurationSample) else DurationSample.from_source(booking)
        for booking in bookings or ()
    ]
