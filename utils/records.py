# ==================== UTILS/RECORDS.PY ====================
"""
Value records passed into and out of the scoring core.

The core never reads the database. Views and services turn model instances
(or plain JSON-shaped dicts) into these records with ``from_source`` and the
scoring functions hand back new records with the derived fields filled in.
"""
import math
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, Optional, Tuple


def to_number(value, default=0.0):
    """Coerce ``value`` to a finite float, falling back to ``default``"""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError, InvalidOperation):
        return default
    if not math.isfinite(number):
        return default
    return number


def round_half_up(value, places=2):
    """Round half away from zero on the decimal representation of ``value``"""
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    if places <= 0:
        return int(rounded)
    return float(rounded)


def read_field(source, name, default=None):
    """Read ``name`` from a mapping or an object with attributes"""
    if source is None:
        return default
    if isinstance(source, Mapping):
        return source.get(name, default)
    return getattr(source, name, default)


def to_calendar_date(value) -> Optional[date]:
    """Calendar date of a date, datetime or ``YYYY-MM-DD`` string.

    Datetimes keep their own wall-clock date, nothing is shifted to UTC.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


@dataclass(frozen=True)
class ParkingLotRecord:
    id: Any
    name: str = ''
    address: str = ''
    latitude: float = 0.0
    longitude: float = 0.0
    base_price: float = 0.0
    total_slots: int = 0
    occupied_slots: int = 0

    # Derived by the distance filter, pricing and ranking passes
    distance_km: Optional[float] = None
    dynamic_price_per_hour: Optional[float] = None
    available_slots: Optional[int] = None
    score: Optional[float] = None
    tags: Tuple[str, ...] = ()
    explanation: Optional[str] = None

    @classmethod
    def from_source(cls, source) -> 'ParkingLotRecord':
        distance = read_field(source, 'distance_km')
        dynamic_price = read_field(source, 'dynamic_price_per_hour')
        return cls(
            id=read_field(source, 'id'),
            name=read_field(source, 'name') or '',
            address=read_field(source, 'address') or '',
            latitude=to_number(read_field(source, 'latitude')),
            longitude=to_number(read_field(source, 'longitude')),
            base_price=to_number(read_field(source, 'base_price')),
            total_slots=int(to_number(read_field(source, 'total_slots'))),
            occupied_slots=int(to_number(read_field(source, 'occupied_slots'))),
            distance_km=None if distance is None else to_number(distance),
            dynamic_price_per_hour=None if dynamic_price is None else to_number(dynamic_price),
            tags=tuple(read_field(source, 'tags') or ()),
        )

    def as_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['tags'] = list(self.tags)
        return data


@dataclass(frozen=True)
class SlotScoreBreakdown:
    size_compatibility: float
    distance_factor: float
    duration_suitability: float


@dataclass(frozen=True)
class SlotRecord:
    id: Any
    parking_id: Any = None
    slot_number: str = ''
    size: str = 'car'
    status: str = 'available'
    floor: int = 0
    distance_from_entrance: float = 0.0

    score: Optional[float] = None
    score_breakdown: Optional[SlotScoreBreakdown] = None

    @classmethod
    def from_source(cls, source) -> 'SlotRecord':
        return cls(
            id=read_field(source, 'id'),
            parking_id=read_field(source, 'parking_id'),
            slot_number=str(read_field(source, 'slot_number') or ''),
            size=read_field(source, 'size') or 'car',
            status=read_field(source, 'status') or '',
            floor=int(to_number(read_field(source, 'floor'))),
            distance_from_entrance=to_number(read_field(source, 'distance_from_entrance')),
        )

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class HolidayRecord:
    date: Optional[date]
    name: str = ''
    multiplier: Any = None
    is_active: Optional[bool] = True

    @classmethod
    def from_source(cls, source) -> 'HolidayRecord':
        return cls(
            date=to_calendar_date(read_field(source, 'date')),
            name=read_field(source, 'name') or '',
            # Parsed lazily by the resolver so a bad value degrades to the default surge
            multiplier=read_field(source, 'multiplier'),
            is_active=read_field(source, 'is_active', True),
        )

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DurationSample:
    parking_id: Any = None
    duration_minutes: float = 0.0

    @classmethod
    def from_source(cls, source) -> 'DurationSample':
        return cls(
            parking_id=read_field(source, 'parking_id'),
            duration_minutes=to_number(read_field(source, 'duration_minutes')),
        )


@dataclass(frozen=True)
class PriceBreakdown:
    base_price: float
    holiday_factor: float
    weekend_factor: float
    occupancy_factor: float
    occupancy_rate: int
    duration_discount: float
    duration_hours: float


@dataclass(frozen=True)
class PriceQuote:
    final_price: float
    price_per_hour: float
    breakdown: PriceBreakdown

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class HolidayCheck:
    is_holiday: bool = False
    holiday_name: Optional[str] = None
    multiplier: float = 1.0

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DurationEstimate:
    estimated_minutes: int
    estimated_hours: float
    formatted_duration: str
    confidence: str
    message: str = field(default='')

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
