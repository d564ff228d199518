# ============================= P2P/FILTERS.PY =============================
import django_filters

from utils.slot_allocator import compatible_sizes
from .models import P2PListing


class P2PListingFilter(django_filters.FilterSet):
    """Filtering for P2P listings"""

    vehicle_type = django_filters.CharFilter(
        method='filter_vehicle_type',
        label='Vehicle Type (bike, car, suv or all)'
    )
    max_hourly_price = django_filters.NumberFilter(
        field_name='hourly_price',
        lookup_expr='lte',
        label='Maximum Hourly Price'
    )

    class Meta:
        model = P2PListing
        fields = ['vehicle_size_allowed']

    def filter_vehicle_type(self, queryset, name, value):
        if not value or value == 'all':
            return queryset
        return queryset.filter(vehicle_size_allowed__in=compatible_sizes(value))
