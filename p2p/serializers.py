# ==================== P2P/SERIALIZERS.PY ====================
from rest_framework import serializers

from .models import P2PListing, P2PRentalHistory, RENTAL_MODE_CHOICES


class P2PListingSerializer(serializers.ModelSerializer):
    owner_name = serializers.CharField(source='owner.full_name', read_only=True)

    class Meta:
        model = P2PListing
        fields = ['id', 'owner', 'owner_name', 'owner_email', 'location_lat', 'location_lng', 'description',
                  'availability_duration', 'vehicle_size_allowed', 'hourly_price', 'daily_price',
                  'monthly_price', 'is_rented', 'rented_by', 'rented_by_phone_number', 'rental_start_time',
                  'rental_end_time', 'rental_duration_mode', 'rental_units', 'rental_total_price', 'created_at']
        read_only_fields = ['owner', 'is_rented', 'rented_by', 'rented_by_phone_number', 'rental_start_time',
                            'rental_end_time', 'rental_duration_mode', 'rental_units', 'rental_total_price',
                            'created_at']

    def validate(self, data):
        for field in ('hourly_price', 'daily_price', 'monthly_price'):
            if field in data and data[field] <= 0:
                raise serializers.ValidationError("Hourly, daily, and monthly prices must be greater than zero")
        for field in ('description', 'availability_duration'):
            if field in data:
                data[field] = data[field].strip()
        return data


class RentListingSerializer(serializers.Serializer):
    rental_start_time = serializers.DateTimeField()
    rental_end_time = serializers.DateTimeField()
    rental_duration_mode = serializers.ChoiceField(choices=RENTAL_MODE_CHOICES, required=False, allow_null=True)
    rental_units = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    rental_total_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False, allow_null=True
    )

    def validate(self, data):
        if data['rental_end_time'] <= data['rental_start_time']:
            raise serializers.ValidationError("Invalid rental start/end time. End time must be after start time")
        return data


class P2PRentalHistorySerializer(serializers.ModelSerializer):
    class Meta:
        model = P2PRentalHistory
        fields = ['id', 'listing', 'owner', 'renter', 'renter_phone_number', 'description', 'location_lat',
                  'location_lng', 'vehicle_size_allowed', 'rental_start_time', 'rental_end_time',
                  'rental_duration_mode', 'rental_units', 'amount', 'status', 'paid_at', 'created_at']
        read_only_fields = fields
