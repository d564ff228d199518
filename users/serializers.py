# ==================== USERS/SERIALIZERS.PY ====================
from rest_framework import serializers
from phonenumber_field.serializerfields import PhoneNumberField
from .models import CustomUser, Vehicle


class SendOtpSerializer(serializers.Serializer):
    phone_number = PhoneNumberField()


class VerifyOtpSerializer(serializers.Serializer):
    phone_number = PhoneNumberField()
    otp = serializers.CharField(max_length=10)


class UserProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = CustomUser
        fields = ['id', 'username', 'email', 'full_name', 'phone_number', 'created_at']
        read_only_fields = ['username', 'phone_number', 'created_at']


class VehicleSerializer(serializers.ModelSerializer):
    class Meta:
        model = Vehicle
        fields = ['id', 'vehicle_name', 'vehicle_number', 'vehicle_type', 'is_default', 'created_at']
        read_only_fields = ['created_at']

    def validate_vehicle_number(self, value):
        value = value.strip().upper()
        user = self.context['request'].user
        duplicates = Vehicle.objects.filter(user=user, vehicle_number=value)
        if self.instance is not None:
            duplicates = duplicates.exclude(pk=self.instance.pk)
        if duplicates.exists():
            raise serializers.ValidationError("You have already registered this vehicle number")
        return value
