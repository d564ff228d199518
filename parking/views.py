# ============================= PARKING LOT VIEWS =============================
from django.conf import settings
from rest_framework import viewsets, status, filters
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend

from utils.permissions import IsStaffOrReadOnly
from .models import ParkingLot
from .serializers import ParkingLotSerializer, ParkingLotDetailSerializer, SlotSerializer, StayQuerySerializer
from .filters import ParkingLotFilter
from .services import ParkingSearchService, SlotAllocationService


def read_location(query_params):
    """lat, lng and radius (km) from the query string; raises ValueError/TypeError"""
    latitude = float(query_params.get('lat'))
    longitude = float(query_params.get('lng'))
    radius = float(query_params.get('radius', settings.DEFAULT_SEARCH_RADIUS_KM))
    duration = float(query_params.get('duration', 1))
    return latitude, longitude, radius, duration


class ParkingLotViewSet(viewsets.ModelViewSet):
    """Parking lot listing, search, pricing and slot allocation"""

    queryset = ParkingLot.objects.all()
    permission_classes = [IsStaffOrReadOnly]
    filter_backends = [
        DjangoFilterBackend,  # For custom filters
        filters.SearchFilter,  # For search
        filters.OrderingFilter  # For sorting
    ]
    filterset_class = ParkingLotFilter
    search_fields = ['name', 'address']
    ordering_fields = ['name', 'base_price', 'occupied_slots', 'created_at']
    ordering = ['name']

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return ParkingLotDetailSerializer
        return ParkingLotSerializer

    @action(detail=False, methods=['get'])
    def nearby(self, request):
        """Ranked parking lots near a location
        Query params: lat, lng, radius (km, default 5), duration (hours, default 1),
                      selected (id of the lot the user is looking at, optional)

        Example: /api/v1/parking-lots/nearby/?lat=12.9716&lng=77.5946&radius=5
        """
        try:
            latitude, longitude, radius, duration = read_location(request.query_params)
            selected = request.query_params.get('selected')
            selected = int(selected) if selected else None
        except (TypeError, ValueError):
            return Response(
                {'error': 'Invalid latitude, longitude, radius, duration or selected'},
                status=status.HTTP_400_BAD_REQUEST
            )

        ranked = ParkingSearchService.nearby(latitude, longitude, radius, duration, selected)
        return Response([lot.as_dict() for lot in ranked])

    @action(detail=True, methods=['get'])
    def slots(self, request, pk=None):
        """Slots of this lot, plus how many of them fit the given vehicle type

        Example: /api/v1/parking-lots/1/slots/?vehicle_type=suv
        """
        lot = self.get_object()
        query = StayQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        vehicle_type = query.validated_data['vehicle_type']

        compatible = SlotAllocationService.compatible(lot, vehicle_type)
        return Response({
            'slots': SlotSerializer(lot.slots.all(), many=True).data,
            'vehicle_type': vehicle_type,
            'compatible_count': len(compatible),
        })

    @action(detail=True, methods=['get'])
    def allocate(self, request, pk=None):
        """Best slot for a vehicle type and duration

        Example: /api/v1/parking-lots/1/allocate/?vehicle_type=car&duration=2
        """
        lot = self.get_object()
        query = StayQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        slot = SlotAllocationService.best_slot(
            lot, query.validated_data['vehicle_type'], query.validated_data['duration']
        )
        if slot is None:
            return Response({'slot': None, 'message': 'No compatible slot available.'})
        return Response({'slot': slot.as_dict()})

    @action(detail=True, methods=['get'])
    def price_quote(self, request, pk=None):
        """Dynamic price for a stay at this lot

        Example: /api/v1/parking-lots/1/price_quote/?duration=4&date=2025-10-27
        """
        lot = self.get_object()
        query = StayQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        quote, holiday, weekend = ParkingSearchService.quote(
            lot, query.validated_data['duration'], query.validated_data.get('date')
        )
        return Response({
            **quote.as_dict(),
            'holiday': holiday.as_dict(),
            'is_weekend': weekend,
        })

    @action(detail=True, methods=['get'])
    def best_alternative(self, request, pk=None):
        """Best nearby alternative to this lot, with an explanation

        Example: /api/v1/parking-lots/1/best_alternative/?lat=12.97&lng=77.59&radius=5
        """
        lot = self.get_object()
        try:
            latitude, longitude, radius, duration = read_location(request.query_params)
        except (TypeError, ValueError):
            return Response(
                {'error': 'Invalid latitude, longitude, radius or duration'},
                status=status.HTTP_400_BAD_REQUEST
            )

        alternative = ParkingSearchService.alternative_to(lot, latitude, longitude, radius, duration)
        return Response({'alternative': alternative.as_dict() if alternative else None})
