from rest_framework import serializers
from .models import Holiday


class HolidaySerializer(serializers.ModelSerializer):
    class Meta:
        model = Holiday
        fields = ['id', 'date', 'name', 'multiplier', 'is_active']


class HolidayCheckSerializer(serializers.Serializer):
    is_holiday = serializers.BooleanField()
    holiday_name = serializers.CharField(allow_null=True)
    multiplier = serializers.FloatField()
