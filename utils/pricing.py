# ==================== UTILS/PRICING.PY ====================
"""
Dynamic pricing.

    price_per_hour = base_price x holiday x weekend x occupancy x duration_discount

Each factor is independent so the breakdown can be shown to the user and
checked on its own.
"""
from .records import PriceBreakdown, PriceQuote, round_half_up, to_number

DEFAULT_BASE_PRICE = 20

WEEKEND_FACTOR = 1.2

HIGH_OCCUPANCY_THRESHOLD = 0.8
HIGH_OCCUPANCY_FACTOR = 1.2
LOW_OCCUPANCY_THRESHOLD = 0.3
LOW_OCCUPANCY_FACTOR = 0.9

LONG_STAY_HOURS = 3
LONG_STAY_DISCOUNT = 0.95


def occupancy_rate(occupied_slots, total_slots):
    total = to_number(total_slots)
    if total <= 0:
        return 0.0
    return to_number(occupied_slots) / total


def occupancy_factor(rate):
    # Rates between the two thresholds (inclusive) are neither surged nor discounted
    if rate > HIGH_OCCUPANCY_THRESHOLD:
        return HIGH_OCCUPANCY_FACTOR
    if rate < LOW_OCCUPANCY_THRESHOLD:
        return LOW_OCCUPANCY_FACTOR
    return 1.0


def duration_discount(duration_hours):
    return LONG_STAY_DISCOUNT if duration_hours > LONG_STAY_HOURS else 1.0


def compute_price(base_price=DEFAULT_BASE_PRICE, duration_hours=1, holiday_multiplier=1.0,
                  is_weekend=False, occupied_slots=0, total_slots=1):
    """Price a stay and return a ``PriceQuote`` with its full breakdown"""
    base_price = to_number(base_price)
    duration_hours = to_number(duration_hours)
    holiday_factor = to_number(holiday_multiplier, 1.0)
    weekend_factor = WEEKEND_FACTOR if is_weekend else 1.0

    rate = occupancy_rate(occupied_slots, total_slots)
    demand_factor = occupancy_factor(rate)
    discount = duration_discount(duration_hours)

    price_per_hour = base_price * holiday_factor * weekend_factor * demand_factor * discount

    return PriceQuote(
        final_price=round_half_up(price_per_hour * duration_hours, 2),
        price_per_hour=round_half_up(price_per_hour, 2),
        breakdown=PriceBreakdown(
            base_price=base_price,
            holiday_factor=holiday_factor,
            weekend_factor=weekend_factor,
            occupancy_factor=demand_factor,
            occupancy_rate=round_half_up(rate * 100, 0),
            duration_discount=discount,
            duration_hours=duration_hours,
        ),
    )
