from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from .models import CustomUser, Vehicle


@admin.register(CustomUser)
class CustomUserAdmin(UserAdmin):
    list_display = ['username', 'full_name', 'phone_number', 'is_staff', 'created_at']
    search_fields = ['username', 'full_name', 'phone_number']
    fieldsets = UserAdmin.fieldsets + (
        ('SmartPark', {'fields': ('full_name', 'phone_number')}),
    )


@admin.register(Vehicle)
class VehicleAdmin(admin.ModelAdmin):
    list_display = ['vehicle_number', 'vehicle_name', 'vehicle_type', 'user', 'is_default']
    list_filter = ['vehicle_type', 'is_default']
    search_fields = ['vehicle_number', 'vehicle_name', 'user__username']
