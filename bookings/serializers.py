# ==================== BOOKINGS/SERIALIZERS.PY ====================
from rest_framework import serializers

from parking.models import ParkingLot
from users.models import Vehicle
from .models import Booking, BookingHistory


class BookingCreateSerializer(serializers.Serializer):
    parking = serializers.PrimaryKeyRelatedField(queryset=ParkingLot.objects.all())
    vehicle_id = serializers.IntegerField(required=False, allow_null=True)
    duration_hours = serializers.FloatField(min_value=0.25, max_value=24 * 30, default=1)
    start_time = serializers.DateTimeField(required=False)

    def validate_vehicle_id(self, value):
        if value is None:
            return value
        user = self.context['request'].user
        if not Vehicle.objects.filter(id=value, user=user).exists():
            raise serializers.ValidationError("Vehicle not found or not registered")
        return value


class BookingSerializer(serializers.ModelSerializer):
    parking_name = serializers.CharField(source='parking.name', read_only=True)
    parking_address = serializers.CharField(source='parking.address', read_only=True)
    slot_number = serializers.CharField(source='slot.slot_number', read_only=True, default=None)
    slot_size = serializers.CharField(source='slot.size', read_only=True, default=None)
    floor = serializers.IntegerField(source='slot.floor', read_only=True, default=None)
    vehicle_number = serializers.CharField(source='vehicle.vehicle_number', read_only=True, default=None)
    expected_end_time = serializers.DateTimeField(read_only=True)

    class Meta:
        model = Booking
        fields = ['id', 'parking', 'parking_name', 'parking_address', 'slot', 'slot_number', 'slot_size',
                  'floor', 'vehicle', 'vehicle_number', 'start_time', 'end_time', 'expected_end_time',
                  'duration_hours', 'duration_minutes', 'status', 'base_price', 'final_price',
                  'applied_multipliers', 'created_at']
        read_only_fields = fields


class BookingHistorySerializer(serializers.ModelSerializer):
    parking_name = serializers.CharField(source='parking.name', read_only=True)
    parking_address = serializers.CharField(source='parking.address', read_only=True)
    vehicle_number = serializers.CharField(source='vehicle.vehicle_number', read_only=True, default=None)

    class Meta:
        model = BookingHistory
        fields = ['id', 'parking', 'parking_name', 'parking_address', 'slot', 'vehicle', 'vehicle_number',
                  'start_time', 'end_time', 'duration_minutes', 'base_price', 'final_price',
                  'applied_multipliers', 'status', 'archived_at']
        read_only_fields = fields


class MarkPaidSerializer(serializers.Serializer):
    ids = serializers.ListField(child=serializers.IntegerField(), allow_empty=True)
