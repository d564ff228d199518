# ==================== PARKING/SERIALIZERS.PY ====================
from rest_framework import serializers
from .models import ParkingLot, Slot


class SlotSerializer(serializers.ModelSerializer):
    class Meta:
        model = Slot
        fields = ['id', 'parking', 'slot_number', 'size', 'status', 'floor', 'distance_from_entrance']


class ParkingLotSerializer(serializers.ModelSerializer):
    available_slots = serializers.IntegerField(read_only=True)

    class Meta:
        model = ParkingLot
        fields = ['id', 'name', 'address', 'latitude', 'longitude', 'base_price',
                  'total_slots', 'occupied_slots', 'available_slots', 'created_at']
        read_only_fields = ['created_at']

    def validate(self, data):
        total = data.get('total_slots', getattr(self.instance, 'total_slots', 0))
        occupied = data.get('occupied_slots', getattr(self.instance, 'occupied_slots', 0))
        if occupied > total:
            raise serializers.ValidationError("Occupied slots cannot exceed total slots")
        return data


class ParkingLotDetailSerializer(ParkingLotSerializer):
    slots = SlotSerializer(many=True, read_only=True)

    class Meta(ParkingLotSerializer.Meta):
        fields = ParkingLotSerializer.Meta.fields + ['slots']


class StayQuerySerializer(serializers.Serializer):
    """Query params shared by the slot and price endpoints"""
    vehicle_type = serializers.ChoiceField(choices=['bike', 'car', 'suv'], default='car')
    duration = serializers.FloatField(min_value=0.01, default=1)
    date = serializers.DateField(required=False)
