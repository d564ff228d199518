# ==================== PARKING/ADMIN.PY ====================
from django.contrib import admin
from .models import ParkingLot, Slot


class SlotInline(admin.TabularInline):
    model = Slot
    extra = 1


@admin.register(ParkingLot)
class ParkingLotAdmin(admin.ModelAdmin):
    list_display = ['name', 'address', 'base_price', 'total_slots', 'occupied_slots', 'created_at']
    search_fields = ['name', 'address']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [SlotInline]
    fieldsets = (
        ('Basic Info', {'fields': ('name', 'address')}),
        ('Location', {'fields': ('latitude', 'longitude')}),
        ('Pricing', {'fields': ('base_price',)}),
        ('Capacity', {'fields': ('total_slots', 'occupied_slots')}),
        ('Timestamps', {'fields': ('created_at', 'updated_at'), 'classes': ('collapse',)}),
    )


@admin.register(Slot)
class SlotAdmin(admin.ModelAdmin):
    list_display = ['slot_number', 'parking', 'size', 'status', 'floor', 'distance_from_entrance']
    list_filter = ['size', 'status', 'floor']
    search_fields = ['slot_number', 'parking__name']
