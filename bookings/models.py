from datetime import timedelta

from django.conf import settings
from django.db import models
from django.utils import timezone

from parking.models import ParkingLot, Slot
from users.models import Vehicle


class Booking(models.Model):
    STATUS_CHOICES = (
        ('active', 'Active'),
        ('completed', 'Completed'),
        ('cancelled', 'Cancelled'),
    )

    # Relations
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='bookings')
    parking = models.ForeignKey(ParkingLot, on_delete=models.CASCADE, related_name='bookings')
    slot = models.ForeignKey(Slot, on_delete=models.SET_NULL, null=True, related_name='bookings')
    vehicle = models.ForeignKey(Vehicle, on_delete=models.SET_NULL, null=True, blank=True)

    # Stay
    start_time = models.DateTimeField(default=timezone.now, db_index=True)
    end_time = models.DateTimeField(null=True, blank=True)
    duration_hours = models.FloatField(default=1)
    duration_minutes = models.PositiveIntegerField(default=0)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='active', db_index=True)

    # Pricing, frozen at booking time
    base_price = models.DecimalField(max_digits=10, decimal_places=2)
    final_price = models.DecimalField(max_digits=10, decimal_places=2)
    applied_multipliers = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', 'status'], name='booking_user_status_idx'),
            models.Index(fields=['parking', 'status'], name='booking_parking_status_idx'),
        ]

    def __str__(self):
        return f"Booking {self.id} - {self.user.username} at {self.parking.name}"

    @property
    def expected_end_time(self):
        """When the booked duration runs out"""
        return self.start_time + timedelta(hours=self.duration_hours)


class BookingHistory(models.Model):
    """Archived booking, written when a booking is completed, freed or cancelled"""
    STATUS_CHOICES = (
        ('completed', 'Completed - Payment Pending'),
        ('cancelled', 'Cancelled'),
        ('paid', 'Paid'),
    )

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='booking_history')
    parking = models.ForeignKey(ParkingLot, on_delete=models.CASCADE, related_name='booking_history')
    slot = models.ForeignKey(Slot, on_delete=models.SET_NULL, null=True, blank=True)
    vehicle = models.ForeignKey(Vehicle, on_delete=models.SET_NULL, null=True, blank=True)

    start_time = models.DateTimeField()
    end_time = models.DateTimeField()
    duration_minutes = models.PositiveIntegerField(default=0)

    base_price = models.DecimalField(max_digits=10, decimal_places=2)
    final_price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    applied_multipliers = models.JSONField(default=dict, blank=True)

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='completed', db_index=True)
    archived_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-archived_at', '-id']
        verbose_name_plural = 'Booking history'
        indexes = [
            models.Index(fields=['user', 'status'], name='history_user_status_idx'),
            models.Index(fields=['parking', 'status'], name='history_parking_status_idx'),
        ]

    def __str__(self):
        return f"History {self.id} - {self.user.username} at {self.parking.name} ({self.status})"
