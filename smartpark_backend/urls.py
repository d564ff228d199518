# ==================== SMARTPARK_BACKEND/URLS.PY ====================
from django.contrib import admin
from django.urls import path, include
from rest_framework import permissions
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenRefreshView

from users.views import UserViewSet, VehicleViewSet
from parking.views import ParkingLotViewSet
from holiday_calendar.views import HolidayViewSet
from bookings.views import BookingViewSet, BookingHistoryViewSet
from p2p.views import P2PListingViewSet, P2PRentalHistoryViewSet

# Create router and register viewsets
router = DefaultRouter()
router.register(r'parking-lots', ParkingLotViewSet, basename='parking-lot')
router.register(r'holidays', HolidayViewSet, basename='holiday')
router.register(r'bookings', BookingViewSet, basename='booking')
router.register(r'booking-history', BookingHistoryViewSet, basename='booking-history')
router.register(r'vehicles', VehicleViewSet, basename='vehicle')
router.register(r'p2p-listings', P2PListingViewSet, basename='p2p-listing')
router.register(r'p2p-payments', P2PRentalHistoryViewSet, basename='p2p-payment')

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # API versioning
    path('api/v1/', include([
        # Authentication endpoints
        path('auth/', include([
            path('send-otp/', UserViewSet.as_view({'post': 'send_otp'}), name='send_otp'),
            path('verify-otp/', UserViewSet.as_view({'post': 'verify_otp'}), name='verify_otp'),
            path('token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
            path('profile/', UserViewSet.as_view(
                {'get': 'profile', 'put': 'profile'},
                permission_classes=[permissions.IsAuthenticated]
            ), name='profile'),
        ])),

        # API routes
        path('', include(router.urls)),
    ])),
]
