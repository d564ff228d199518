# ============================= BOOKINGS VIEWS =============================
from rest_framework import viewsets, status, permissions, filters
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend

from users.models import Vehicle
from utils.permissions import IsBookingUser
from .models import Booking, BookingHistory
from .serializers import BookingCreateSerializer, BookingSerializer, BookingHistorySerializer, MarkPaidSerializer
from .services import BookingService


class BookingViewSet(viewsets.ModelViewSet):
    """Booking creation and the active booking lifecycle"""

    serializer_class = BookingSerializer
    permission_classes = [permissions.IsAuthenticated, IsBookingUser]
    http_method_names = ['get', 'post', 'head', 'options']
    filter_backends = [
        DjangoFilterBackend,  # For filtering
        filters.SearchFilter,  # For searching
        filters.OrderingFilter  # For ordering
    ]
    filterset_fields = ['status', 'parking']
    search_fields = ['parking__name', 'parking__address', 'vehicle__vehicle_number']
    ordering_fields = ['created_at', 'start_time', 'final_price']
    ordering = ['-created_at']

    def get_queryset(self):
        return Booking.objects.filter(user=self.request.user).select_related('parking', 'slot', 'vehicle')

    def create(self, request, *args, **kwargs):
        """Book the best slot at a parking

        Body: { "parking": 1, "vehicle_id": 3, "duration_hours": 2, "start_time": "..." }
        """
        serializer = BookingCreateSerializer(data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        vehicle = None
        if data.get('vehicle_id'):
            vehicle = Vehicle.objects.get(id=data['vehicle_id'], user=request.user)

        booking = BookingService.create_booking(
            user=request.user,
            parking=data['parking'],
            duration_hours=data['duration_hours'],
            vehicle=vehicle,
            start_time=data.get('start_time'),
        )
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)

    def get_active_booking(self):
        booking = self.get_object()
        if booking.status != 'active':
            return booking, Response(
                {'error': f'Cannot change a {booking.status} booking'},
                status=status.HTTP_400_BAD_REQUEST
            )
        return booking, None

    @action(detail=False, methods=['get'])
    def active(self, request):
        """Active bookings of the current user"""
        bookings = self.get_queryset().filter(status='active')
        return Response(self.get_serializer(bookings, many=True).data)

    @action(detail=True, methods=['post'])
    def complete(self, request, pk=None):
        """Complete the booking and archive it as payment pending"""
        booking, error = self.get_active_booking()
        if error:
            return error
        history = BookingService.complete_booking(booking)
        return Response({
            'booking': BookingSerializer(booking).data,
            'history': BookingHistorySerializer(history).data,
        })

    @action(detail=True, methods=['post'])
    def free_slot(self, request, pk=None):
        """Leave now: charge base price for the time parked and remove the booking"""
        booking, error = self.get_active_booking()
        if error:
            return error
        return Response(BookingService.free_slot(booking))

    @action(detail=True, methods=['post'])
    def cancel(self, request, pk=None):
        """Cancel a booking"""
        booking, error = self.get_active_booking()
        if error:
            return error
        BookingService.cancel_booking(booking)
        return Response({'message': 'Booking cancelled successfully'})

    @action(detail=False, methods=['get'])
    def duration_estimate(self, request):
        """How long the user is likely to park

        Example: /api/v1/bookings/duration_estimate/?parking=1
        """
        parking_id = request.query_params.get('parking')
        try:
            parking_id = int(parking_id) if parking_id else None
        except ValueError:
            return Response({'error': 'Invalid parking id'}, status=status.HTTP_400_BAD_REQUEST)

        estimate = BookingService.estimate_duration(request.user, parking_id)
        return Response(estimate.as_dict())


class BookingHistoryViewSet(viewsets.ReadOnlyModelViewSet):
    """Archived bookings and their payment state"""

    serializer_class = BookingHistorySerializer
    permission_classes = [permissions.IsAuthenticated]
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_fields = ['status', 'parking']
    ordering_fields = ['archived_at', 'final_price']
    ordering = ['-archived_at', '-id']

    def get_queryset(self):
        return BookingHistory.objects.filter(user=self.request.user).select_related('parking', 'vehicle')

    @action(detail=False, methods=['get'])
    def pending(self, request):
        """Completed bookings waiting for payment"""
        history = BookingService.pending_payments(request.user).select_related('parking', 'vehicle')
        serializer = self.get_serializer(history, many=True)
        total = sum(item.final_price for item in history)
        return Response({'results': serializer.data, 'total_due': total})

    @action(detail=False, methods=['post'])
    def mark_paid(self, request):
        """Mark history rows as paid

        Body: { "ids": [1, 2, 3] }
        """
        serializer = MarkPaidSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        updated = BookingService.mark_as_paid(request.user, serializer.validated_data['ids'])
        return Response({'updated': updated})
