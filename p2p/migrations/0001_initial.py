from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import phonenumber_field.modelfields
from django.conf import settings
from django.db import migrations, models


VEHICLE_SIZES = [('bike', 'Bike'), ('car', 'Car'), ('suv', 'SUV')]
RENTAL_MODES = [('hourly', 'Hourly'), ('daily', 'Daily'), ('monthly', 'Monthly'), ('range', 'Date Range')]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='P2PListing',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('owner_email', models.EmailField(blank=True, max_length=254)),
                ('location_lat', models.FloatField(default=0)),
                ('location_lng', models.FloatField(default=0)),
                ('description', models.TextField()),
                ('availability_duration', models.CharField(max_length=100)),
                ('vehicle_size_allowed', models.CharField(choices=VEHICLE_SIZES, default='car', max_length=10)),
                ('hourly_price', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('daily_price', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('monthly_price', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('is_rented', models.BooleanField(db_index=True, default=False)),
                ('rented_by_phone_number', phonenumber_field.modelfields.PhoneNumberField(blank=True, max_length=128, null=True, region=None)),
                ('rental_start_time', models.DateTimeField(blank=True, null=True)),
                ('rental_end_time', models.DateTimeField(blank=True, null=True)),
                ('rental_duration_mode', models.CharField(blank=True, choices=RENTAL_MODES, max_length=10, null=True)),
                ('rental_units', models.PositiveIntegerField(blank=True, null=True)),
                ('rental_total_price', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='p2p_listings', to=settings.AUTH_USER_MODEL)),
                ('rented_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='p2p_rentals', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['is_rented', 'vehicle_size_allowed'], name='p2p_rented_size_idx')],
            },
        ),
        migrations.CreateModel(
            name='P2PRentalHistory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('renter_phone_number', phonenumber_field.modelfields.PhoneNumberField(blank=True, max_length=128, null=True, region=None)),
                ('description', models.TextField(blank=True)),
                ('location_lat', models.FloatField(default=0)),
                ('location_lng', models.FloatField(default=0)),
                ('vehicle_size_allowed', models.CharField(choices=VEHICLE_SIZES, default='car', max_length=10)),
                ('rental_start_time', models.DateTimeField(blank=True, null=True)),
                ('rental_end_time', models.DateTimeField(blank=True, null=True)),
                ('rental_duration_mode', models.CharField(blank=True, choices=RENTAL_MODES, max_length=10, null=True)),
                ('rental_units', models.PositiveIntegerField(blank=True, null=True)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=10)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('paid', 'Paid')], db_index=True, default='pending', max_length=10)),
                ('paid_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('listing', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='rental_history', to='p2p.p2plisting')),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='p2p_earnings', to=settings.AUTH_USER_MODEL)),
                ('renter', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='p2p_payments', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name_plural': 'P2P rental history',
                'ordering': ['-created_at', '-id'],
            },
        ),
    ]
