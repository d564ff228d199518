# ==================== BOOKINGS/ADMIN.PY ====================
from django.contrib import admin
from .models import Booking, BookingHistory


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'parking', 'slot', 'status', 'start_time', 'duration_hours', 'final_price']
    list_filter = ['status', 'created_at']
    search_fields = ['user__username', 'parking__name', 'vehicle__vehicle_number']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(BookingHistory)
class BookingHistoryAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'parking', 'status', 'duration_minutes', 'final_price', 'archived_at']
    list_filter = ['status', 'archived_at']
    search_fields = ['user__username', 'parking__name']
    readonly_fields = ['archived_at']
