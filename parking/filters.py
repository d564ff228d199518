# ============================= PARKING/FILTERS.PY =============================
import django_filters
from .models import ParkingLot


class ParkingLotFilter(django_filters.FilterSet):
    """Filtering for parking lot listings"""

    price_min = django_filters.NumberFilter(
        field_name='base_price',
        lookup_expr='gte',
        label='Minimum Base Price Per Hour'
    )
    price_max = django_filters.NumberFilter(
        field_name='base_price',
        lookup_expr='lte',
        label='Maximum Base Price Per Hour'
    )
    has_availability = django_filters.BooleanFilter(
        method='filter_has_availability',
        label='Has Free Slots'
    )

    class Meta:
        model = ParkingLot
        fields = {
            'name': ['exact', 'icontains'],
            'address': ['icontains'],
        }

    def filter_has_availability(self, queryset, name, value):
        from django.db.models import F
        if value:
            return queryset.filter(occupied_slots__lt=F('total_slots'))
        return queryset.filter(occupied_slots__gte=F('total_slots'))
