# ==================== UTILS/SLOT_ALLOCATOR.PY ====================
"""
Slot allocation.

    score = size_compatibility x 0.5 + distance_factor x 0.3 + duration_suitability x 0.2

Lower is better. Undersized slots are penalised, not dropped, so a lot that
only has small slots left still offers something.
"""
import logging
from dataclasses import replace

from .records import SlotRecord, SlotScoreBreakdown, round_half_up

logger = logging.getLogger(__name__)

SIZE_RANK = {'bike': 1, 'car': 2, 'suv': 3}
DEFAULT_RANK = SIZE_RANK['car']

SIZE_WEIGHT = 0.5
DISTANCE_WEIGHT = 0.3
DURATION_WEIGHT = 0.2

PERFECT_FIT = 0.0
OVERSIZED = 0.3
UNDERSIZED = 1.0

SLOT_AVAILABLE = 'available'


def size_rank(size):
    return SIZE_RANK.get(size, DEFAULT_RANK)


def size_compatibility(slot_size, vehicle_type):
    slot_rank = size_rank(slot_size)
    vehicle_rank = size_rank(vehicle_type)
    if slot_rank == vehicle_rank:
        return PERFECT_FIT
    if slot_rank > vehicle_rank:
        return OVERSIZED
    return UNDERSIZED


def duration_suitability(floor, duration_hours):
    """Upper floors cost more for short stays"""
    if duration_hours <= 1:
        return floor * 0.5
    if duration_hours <= 3:
        return floor * 0.3
    return floor * 0.1


def compatible_sizes(vehicle_type):
    """Slot sizes that physically fit ``vehicle_type``, smallest first"""
    vehicle_rank = size_rank(vehicle_type)
    return [size for size, rank in sorted(SIZE_RANK.items(), key=lambda item: item[1]) if rank >= vehicle_rank]


def compatible_slots(slots, vehicle_type):
    """Available slots the vehicle fits in"""
    vehicle_rank = size_rank(vehicle_type)
    return [
        slot for slot in _as_records(slots)
        if slot.status == SLOT_AVAILABLE and size_rank(slot.size) >= vehicle_rank
    ]


def score_slots(slots, vehicle_type='car', duration_hours=1):
    """Score every available slot, best first. Ties keep input order."""
    available = [slot for slot in _as_records(slots) if slot.status == SLOT_AVAILABLE]
    if not available:
        return []

    max_distance = max([slot.distance_from_entrance for slot in available] + [1])

    scored = []
    for slot in available:
        breakdown = SlotScoreBreakdown(
            size_compatibility=size_compatibility(slot.size, vehicle_type),
            distance_factor=slot.distance_from_entrance / max_distance,
            duration_suitability=duration_suitability(slot.floor, duration_hours),
        )
        score = (
            breakdown.size_compatibility * SIZE_WEIGHT
            + breakdown.distance_factor * DISTANCE_WEIGHT
            + breakdown.duration_suitability * DURATION_WEIGHT
        )
        scored.append(replace(slot, score=round_half_up(score, 3), score_breakdown=breakdown))

    # sorted() is stable, so equal scores stay in slot order
    return sorted(scored, key=lambda slot: slot.score)


def allocate_best_slot(slots, vehicle_type='car', duration_hours=1):
    """Pick the best available slot for the vehicle, or None when nothing is free"""
    scored = score_slots(slots, vehicle_type, duration_hours)
    if not scored:
        logger.info(f"No available slot for a {vehicle_type}")
        return None

    best = scored[0]
    logger.debug(f"Allocated slot {best.slot_number or best.id} (score {best.score}) for a {vehicle_type}")
    return best


def _as_records(slots):
    return [slot if isinstance(slot, SlotRecord) else SlotRecord.from_source(slot) for slot in slots]
