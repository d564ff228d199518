# ==================== P2P/ADMIN.PY ====================
from django.contrib import admin
from .models import P2PListing, P2PRentalHistory


@admin.register(P2PListing)
class P2PListingAdmin(admin.ModelAdmin):
    list_display = ['id', 'owner', 'vehicle_size_allowed', 'hourly_price', 'daily_price', 'monthly_price',
                    'is_rented', 'rented_by', 'created_at']
    list_filter = ['is_rented', 'vehicle_size_allowed', 'created_at']
    search_fields = ['owner__username', 'description', 'owner_email']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(P2PRentalHistory)
class P2PRentalHistoryAdmin(admin.ModelAdmin):
    list_display = ['id', 'renter', 'owner', 'amount', 'status', 'paid_at', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['renter__username', 'owner__username', 'description']
    readonly_fields = ['created_at']
