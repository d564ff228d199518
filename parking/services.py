import logging
from dataclasses import replace

from holiday_calendar.services import HolidayService
from utils.distance_calculator import filter_by_radius
from utils.parking_ranker import score_parkings, best_alternative
from utils.pricing import compute_price
from utils.records import ParkingLotRecord, SlotRecord
from utils.slot_allocator import allocate_best_slot, compatible_slots
from .models import ParkingLot

logger = logging.getLogger(__name__)


class ParkingSearchService:
    """Runs parking lots through the distance, pricing and ranking core"""

    @staticmethod
    def quote(lot, duration_hours=1, day=None, holidays=None):
        """Price a stay at ``lot`` on ``day``; returns (quote, holiday check, is weekend)"""
        record = lot if isinstance(lot, ParkingLotRecord) else ParkingLotRecord.from_source(lot)
        holiday, weekend = HolidayService.surge_for(day, holidays)
        quote = compute_price(
            base_price=record.base_price,
            duration_hours=duration_hours,
            holiday_multiplier=holiday.multiplier,
            is_weekend=weekend,
            occupied_slots=record.occupied_slots,
            total_slots=record.total_slots,
        )
        return quote, holiday, weekend

    @staticmethod
    def priced(records, duration_hours=1, day=None):
        """Attach the dynamic hourly price to every record"""
        holidays = HolidayService.active_holidays()
        priced = []
        for record in records:
            quote, _, _ = ParkingSearchService.quote(record, duration_hours, day, holidays)
            priced.append(replace(record, dynamic_price_per_hour=quote.price_per_hour))
        return priced

    @staticmethod
    def nearby(latitude, longitude, radius_km, duration_hours=1, selected_id=None, day=None):
        """Lots within the radius, priced for ``day`` and ranked best first"""
        lots = [ParkingLotRecord.from_source(lot) for lot in ParkingLot.objects.all()]
        in_range = filter_by_radius(lots, latitude, longitude, radius_km)
        priced = ParkingSearchService.priced(in_range, duration_hours, day)

        selected = None
        if selected_id is not None:
            selected = next((lot for lot in priced if lot.id == selected_id), None)

        ranked = score_parkings(priced, selected)
        logger.info(f"Nearby search at ({latitude}, {longitude}) r={radius_km}km: {len(ranked)} lots")
        return ranked

    @staticmethod
    def alternative_to(lot, latitude, longitude, radius_km, duration_hours=1, day=None):
        """Best ranked lot other than ``lot`` that still has a free slot"""
        ranked = ParkingSearchService.nearby(latitude, longitude, radius_km, duration_hours, lot.id, day)
        return best_alternative(ranked, lot.id)


class SlotAllocationService:
    """Slot level queries for a single parking lot"""

    @staticmethod
    def slot_records(lot):
        return [SlotRecord.from_source(slot) for slot in lot.slots.all()]

    @staticmethod
    def best_slot(lot, vehicle_type, duration_hours):
        return allocate_best_slot(SlotAllocationService.slot_records(lot), vehicle_type, duration_hours)

    @staticmethod
    def compatible(lot, vehicle_type):
        return compatible_slots(SlotAllocationService.slot_records(lot), vehicle_type)
