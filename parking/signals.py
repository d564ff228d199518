# ==================== PARKING/SIGNALS.PY (Django Signals) ====================
from django.db.models.signals import pre_save
from django.dispatch import receiver
from .models import ParkingLot
import logging

logger = logging.getLogger(__name__)


@receiver(pre_save, sender=ParkingLot)
def clamp_occupied_slots(sender, instance, **kwargs):
    """Keep occupied_slots within [0, total_slots]"""
    if instance.occupied_slots > instance.total_slots:
        logger.warning(
            f"Parking {instance.pk} occupancy {instance.occupied_slots} exceeds "
            f"{instance.total_slots} slots, clamping"
        )
        instance.occupied_slots = instance.total_slots
    elif instance.occupied_slots < 0:
        instance.occupied_slots = 0
