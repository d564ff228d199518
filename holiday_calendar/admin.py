from django.contrib import admin
from .models import Holiday


@admin.register(Holiday)
class HolidayAdmin(admin.ModelAdmin):
    list_display = ['name', 'date', 'multiplier', 'is_active']
    list_filter = ['is_active']
    search_fields = ['name']
    date_hierarchy = 'date'
