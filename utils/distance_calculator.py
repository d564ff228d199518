# ==================== UTILS/DISTANCE_CALCULATOR.PY ====================
import math
from dataclasses import replace

from .records import ParkingLotRecord, round_half_up

EARTH_RADIUS_KM = 6371


def distance_km(lat1, lng1, lat2, lng2):
    """Great-circle distance in kilometers (haversine), rounded to 2 decimals.

    Never raises: a non-finite coordinate gives ``nan``.
    """
    if not all(math.isfinite(value) for value in (lat1, lng1, lat2, lng2)):
        return math.nan

    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    # Float error can push a just past 1 for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return round_half_up(EARTH_RADIUS_KM * c, 2)


def filter_by_radius(lots, center_lat, center_lng, radius_km):
    """Attach ``distance_km`` to every lot and keep the ones inside the radius.

    Returns new ``ParkingLotRecord`` objects sorted by distance, closest first.
    """
    measured = [
        replace(lot, distance_km=distance_km(center_lat, center_lng, lot.latitude, lot.longitude))
        for lot in (_as_record(lot) for lot in lots)
    ]
    nearby = [lot for lot in measured if lot.distance_km <= radius_km]
    return sorted(nearby, key=lambda lot: lot.distance_km)


def _as_record(lot):
    if isinstance(lot, ParkingLotRecord):
        return lot
    return ParkingLotRecord.from_source(lot)
