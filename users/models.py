from django.db import models
from django.contrib.auth.models import AbstractUser
from phonenumber_field.modelfields import PhoneNumberField


class CustomUser(AbstractUser):
    """App user, signed in with a phone number and OTP"""
    phone_number = PhoneNumberField(unique=True, null=True, blank=True)
    full_name = models.CharField(max_length=150, default='User')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.username} ({self.phone_number})"


class Vehicle(models.Model):
    """Vehicles registered by a user; the type drives slot allocation"""
    VEHICLE_TYPE_CHOICES = (
        ('bike', 'Bike'),
        ('car', 'Car'),
        ('suv', 'SUV'),
    )

    user = models.ForeignKey(CustomUser, on_delete=models.CASCADE, related_name='vehicles')
    vehicle_name = models.CharField(max_length=100)
    vehicle_number = models.CharField(max_length=20, db_index=True)
    vehicle_type = models.CharField(max_length=10, choices=VEHICLE_TYPE_CHOICES, default='car')
    is_default = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        unique_together = ('user', 'vehicle_number')
        ordering = ['-is_default', '-created_at']

    def __str__(self):
        return f"{self.user.username} - {self.vehicle_number}"
