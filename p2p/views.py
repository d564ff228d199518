# ============================= P2P VIEWS =============================
from rest_framework import viewsets, status, permissions, filters
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend

from utils.permissions import IsListingOwnerOrReadOnly
from .filters import P2PListingFilter
from .models import P2PListing, P2PRentalHistory
from .serializers import P2PListingSerializer, RentListingSerializer, P2PRentalHistorySerializer
from .services import P2PRentalService


class P2PListingViewSet(viewsets.ModelViewSet):
    """Private parking spots listed by their owners"""

    serializer_class = P2PListingSerializer
    permission_classes = [permissions.IsAuthenticatedOrReadOnly, IsListingOwnerOrReadOnly]
    filter_backends = [
        DjangoFilterBackend,  # For custom filters
        filters.SearchFilter,  # For search
        filters.OrderingFilter  # For sorting
    ]
    filterset_class = P2PListingFilter
    search_fields = ['description', 'availability_duration']
    ordering_fields = ['created_at', 'hourly_price', 'daily_price', 'monthly_price']
    ordering = ['-created_at']

    def get_queryset(self):
        # Browsing shows free spots only; owners reach rented ones by id or mine/
        if self.action == 'list':
            return P2PRentalService.available()
        return P2PListing.objects.all()

    def perform_create(self, serializer):
        user = self.request.user
        serializer.save(owner=user, owner_email=serializer.validated_data.get('owner_email') or user.email)

    @action(detail=False, methods=['get'], permission_classes=[permissions.IsAuthenticated])
    def mine(self, request):
        """Listings owned by the current user"""
        listings = P2PListing.objects.filter(owner=request.user)
        return Response(self.get_serializer(listings, many=True).data)

    @action(detail=False, methods=['get'], permission_classes=[permissions.IsAuthenticated])
    def rentals(self, request):
        """Listings the current user is renting right now"""
        listings = P2PRentalService.active_rentals(request.user)
        return Response(self.get_serializer(listings, many=True).data)

    @action(detail=True, methods=['post'], permission_classes=[permissions.IsAuthenticated])
    def rent(self, request, pk=None):
        """Rent a free listing

        Body: { "rental_start_time": "...", "rental_end_time": "...",
                "rental_duration_mode": "hourly|daily|monthly|range", "rental_units": 2 }
        """
        serializer = RentListingSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        listing = P2PRentalService.rent(pk, request.user, **serializer.validated_data)
        return Response(self.get_serializer(listing).data)

    @action(detail=True, methods=['post'], permission_classes=[permissions.IsAuthenticated])
    def free(self, request, pk=None):
        """Free the spot now and leave the payment pending"""
        return self.release(request, pk, mark_paid=False)

    @action(detail=True, methods=['post'], permission_classes=[permissions.IsAuthenticated])
    def pay_and_free(self, request, pk=None):
        """Pay for the rental and free the spot"""
        return self.release(request, pk, mark_paid=True)

    def release(self, request, pk, mark_paid):
        listing, history, amount = P2PRentalService.release(pk, request.user, mark_paid=mark_paid)
        return Response({
            'listing': self.get_serializer(listing).data,
            'payment': P2PRentalHistorySerializer(history).data,
            'amount': amount,
        })


class P2PRentalHistoryViewSet(viewsets.ReadOnlyModelViewSet):
    """Rental payment records of the current renter"""

    serializer_class = P2PRentalHistorySerializer
    permission_classes = [permissions.IsAuthenticated]
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_fields = ['status']
    ordering = ['-created_at', '-id']

    def get_queryset(self):
        return P2PRentalHistory.objects.filter(renter=self.request.user)

    @action(detail=False, methods=['get'])
    def pending(self, request):
        """Released rentals still waiting for payment"""
        records = self.get_queryset().filter(status='pending')
        return Response(self.get_serializer(records, many=True).data)

    @action(detail=True, methods=['post'])
    def pay(self, request, pk=None):
        """Settle a pending rental payment"""
        record = P2PRentalService.pay_pending(pk, request.user)
        return Response(self.get_serializer(record).data, status=status.HTTP_200_OK)
