# parking/models.py

from decimal import Decimal

from django.db import models
from django.core.validators import MinValueValidator


class ParkingLot(models.Model):
    name = models.CharField(max_length=200)
    address = models.CharField(max_length=500)

    # Location info
    latitude = models.FloatField()
    longitude = models.FloatField()

    # Pricing: base rate per hour before the dynamic factors
    base_price = models.DecimalField(
        max_digits=10, decimal_places=2, default=20,
        validators=[MinValueValidator(Decimal('0.01'))]
    )

    # Capacity
    total_slots = models.PositiveIntegerField(default=0)
    occupied_slots = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        indexes = [
            models.Index(fields=['name'], name='parkinglot_name_idx'),
        ]

    def __str__(self):
        return f"{self.name} - {self.address}"

    @property
    def available_slots(self):
        return max(0, self.total_slots - self.occupied_slots)


class Slot(models.Model):
    SIZE_CHOICES = (
        ('bike', 'Bike'),
        ('car', 'Car'),
        ('suv', 'SUV'),
    )
    STATUS_CHOICES = (
        ('available', 'Available'),
        ('occupied', 'Occupied'),
    )

    parking = models.ForeignKey(ParkingLot, on_delete=models.CASCADE, related_name='slots')
    slot_number = models.CharField(max_length=20)
    size = models.CharField(max_length=10, choices=SIZE_CHOICES, default='car')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='available', db_index=True)
    floor = models.PositiveSmallIntegerField(default=0)  # 0 = ground
    distance_from_entrance = models.FloatField(default=0)  # In meters

    class Meta:
        ordering = ['parking', 'slot_number']
        unique_together = ('parking', 'slot_number')

    def __str__(self):
        return f"Slot {self.slot_number} at {self.parking.name}"
