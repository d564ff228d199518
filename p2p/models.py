from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from phonenumber_field.modelfields import PhoneNumberField


VEHICLE_SIZE_CHOICES = (
    ('bike', 'Bike'),
    ('car', 'Car'),
    ('suv', 'SUV'),
)

RENTAL_MODE_CHOICES = (
    ('hourly', 'Hourly'),
    ('daily', 'Daily'),
    ('monthly', 'Monthly'),
    ('range', 'Date Range'),
)


class P2PListing(models.Model):
    """A private parking spot an owner rents out to other users"""
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='p2p_listings')
    owner_email = models.EmailField(blank=True)

    # Location info
    location_lat = models.FloatField(default=0)
    location_lng = models.FloatField(default=0)
    description = models.TextField()
    availability_duration = models.CharField(max_length=100)  # e.g. "Weekdays 9am-6pm"
    vehicle_size_allowed = models.CharField(max_length=10, choices=VEHICLE_SIZE_CHOICES, default='car')

    # Pricing
    hourly_price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal('0.01'))])
    daily_price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal('0.01'))])
    monthly_price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal('0.01'))])

    # Current rental, cleared when the renter frees the spot
    is_rented = models.BooleanField(default=False, db_index=True)
    rented_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='p2p_rentals'
    )
    rented_by_phone_number = PhoneNumberField(null=True, blank=True)
    rental_start_time = models.DateTimeField(null=True, blank=True)
    rental_end_time = models.DateTimeField(null=True, blank=True)
    rental_duration_mode = models.CharField(max_length=10, choices=RENTAL_MODE_CHOICES, null=True, blank=True)
    rental_units = models.PositiveIntegerField(null=True, blank=True)
    rental_total_price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['is_rented', 'vehicle_size_allowed'], name='p2p_rented_size_idx'),
        ]

    def __str__(self):
        return f"P2P {self.id} by {self.owner.username} ({self.vehicle_size_allowed})"


class P2PRentalHistory(models.Model):
    """Payment record written when a rental is released"""
    STATUS_CHOICES = (
        ('pending', 'Pending'),
        ('paid', 'Paid'),
    )

    listing = models.ForeignKey(P2PListing, on_delete=models.SET_NULL, null=True, related_name='rental_history')
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='p2p_earnings')
    renter = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='p2p_payments')
    renter_phone_number = PhoneNumberField(null=True, blank=True)

    # Snapshot of the listing at release time
    description = models.TextField(blank=True)
    location_lat = models.FloatField(default=0)
    location_lng = models.FloatField(default=0)
    vehicle_size_allowed = models.CharField(max_length=10, choices=VEHICLE_SIZE_CHOICES, default='car')
    rental_start_time = models.DateTimeField(null=True, blank=True)
    rental_end_time = models.DateTimeField(null=True, blank=True)
    rental_duration_mode = models.CharField(max_length=10, choices=RENTAL_MODE_CHOICES, null=True, blank=True)
    rental_units = models.PositiveIntegerField(null=True, blank=True)

    amount = models.DecimalField(max_digits=10, decimal_places=2)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='pending', db_index=True)
    paid_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']
        verbose_name_plural = 'P2P rental history'

    def __str__(self):
        return f"Rental {self.id} - {self.renter.username} ₹{self.amount} ({self.status})"
