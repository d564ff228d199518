# ==================== UTILS/PARKING_RANKER.PY ====================
"""
Parking lot ranking.

    score = distance x 0.4 + price x 0.3 - availability x 0.3

Each term is normalised against the largest value in the candidate set.
Availability is subtracted, so more free slots lowers (improves) the score.
Scores are rounded to 3 decimals half away from zero, so an exact tie on a
negative score goes down (-0.0125 becomes -0.013).
"""
import logging
from dataclasses import replace

from .records import ParkingLotRecord, round_half_up

logger = logging.getLogger(__name__)

DISTANCE_WEIGHT = 0.4
PRICE_WEIGHT = 0.3
AVAILABILITY_WEIGHT = 0.3

TAG_BEST_OVERALL = 'Best Overall'
TAG_CHEAPEST = 'Cheapest'
TAG_CLOSEST = 'Closest'

CURRENCY_SYMBOL = '₹'
FALLBACK_EXPLANATION = 'A good alternative nearby.'


def available_slots(lot):
    return max(0, lot.total_slots - lot.occupied_slots)


def _price(lot):
    return lot.dynamic_price_per_hour or 0


def _distance(lot):
    return lot.distance_km or 0


def _normaliser(values):
    # Never below 1 so an all-zero column can't divide by zero
    return max(list(values) + [1])


def _add_tag(lot, tag):
    return replace(lot, tags=lot.tags + (tag,))


def score_parkings(lots, selected=None):
    """Score, sort and tag candidate lots.

    ``selected`` is the lot the user is looking at; every other lot gets an
    ``explanation`` of what it does better.
    """
    lots = [lot if isinstance(lot, ParkingLotRecord) else ParkingLotRecord.from_source(lot) for lot in lots]
    if not lots:
        return []

    max_distance = _normaliser(_distance(lot) for lot in lots)
    max_price = _normaliser(_price(lot) for lot in lots)
    max_available = _normaliser(available_slots(lot) for lot in lots)

    scored = []
    for lot in lots:
        available = available_slots(lot)
        score = (
            _distance(lot) / max_distance * DISTANCE_WEIGHT
            + _price(lot) / max_price * PRICE_WEIGHT
            - available / max_available * AVAILABILITY_WEIGHT
        )
        scored.append(replace(lot, score=round_half_up(score, 3), available_slots=available))

    scored.sort(key=lambda lot: lot.score)

    scored[0] = _add_tag(scored[0], TAG_BEST_OVERALL)

    # min() returns the first of equal values, i.e. the better scored lot
    cheapest = min(range(len(scored)), key=lambda index: _price(scored[index]))
    scored[cheapest] = _add_tag(scored[cheapest], TAG_CHEAPEST)

    closest = min(range(len(scored)), key=lambda index: _distance(scored[index]))
    scored[closest] = _add_tag(scored[closest], TAG_CLOSEST)

    if selected is not None:
        if not isinstance(selected, ParkingLotRecord):
            selected = ParkingLotRecord.from_source(selected)
        scored = [
            lot if lot.id == selected.id else replace(lot, explanation=explain_alternative(lot, selected))
            for lot in scored
        ]

    logger.debug(f"Ranked {len(scored)} parking lots, best is {scored[0].name or scored[0].id}")
    return scored


def explain_alternative(alternative, selected):
    """Sentence describing how ``alternative`` beats ``selected``"""
    parts = []

    price_diff = _price(selected) - _price(alternative)
    if price_diff > 0:
        parts.append(f"{CURRENCY_SYMBOL}{round_half_up(price_diff, 0)} cheaper")

    distance_diff = _distance(selected) - _distance(alternative)
    if distance_diff > 0:
        parts.append(f"{round_half_up(distance_diff, 1):.1f}km closer")

    alternative_available = available_slots(alternative)
    if alternative_available > available_slots(selected):
        parts.append(f"{alternative_available} slots available")

    if not parts:
        return FALLBACK_EXPLANATION
    return f"{alternative.name} is {' and '.join(parts)}."


def best_alternative(lots, exclude_id):
    """First lot in ranked order other than ``exclude_id`` with a free slot"""
    for lot in lots:
        if not isinstance(lot, ParkingLotRecord):
            lot = ParkingLotRecord.from_source(lot)
        if lot.id != exclude_id and available_slots(lot) > 0:
            return lot
    return None
