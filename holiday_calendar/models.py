from decimal import Decimal

from django.db import models
from django.core.validators import MinValueValidator


class Holiday(models.Model):
    """Calendar date on which parking prices surge"""
    date = models.DateField(db_index=True)
    name = models.CharField(max_length=200)
    multiplier = models.DecimalField(
        max_digits=4, decimal_places=2, default=1.5,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['date', 'id']

    def __str__(self):
        return f"{self.name} ({self.date}) x{self.multiplier}"
