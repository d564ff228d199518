from datetime import date

from django.conf import settings
from rest_framework import viewsets, status, permissions
from rest_framework.decorators import action
from rest_framework.response import Response

from utils.holiday_resolver import parse_multiplier
from utils.permissions import IsStaffOrReadOnly
from .models import Holiday
from .serializers import HolidaySerializer, HolidayCheckSerializer
from .services import HolidayService


class HolidayViewSet(viewsets.ModelViewSet):
    """Holiday calendar; clients read it, staff maintain it"""
    serializer_class = HolidaySerializer
    permission_classes = [IsStaffOrReadOnly]
    filterset_fields = ['is_active']
    ordering_fields = ['date']

    def get_queryset(self):
        if self.request.user.is_staff:
            return Holiday.objects.all()
        return Holiday.objects.filter(is_active=True)

    @action(detail=False, methods=['get'], permission_classes=[permissions.AllowAny])
    def upcoming(self, request):
        """Active holidays in the next N days

        Example: /api/v1/holidays/upcoming/?days=7
        """
        try:
            days = int(request.query_params.get('days', settings.UPCOMING_HOLIDAY_DAYS))
        except (TypeError, ValueError):
            return Response({'error': 'Invalid days'}, status=status.HTTP_400_BAD_REQUEST)

        holidays = HolidayService.upcoming(days)
        return Response([
            {'date': holiday.date, 'name': holiday.name, 'multiplier': parse_multiplier(holiday.multiplier)}
            for holiday in holidays
        ])

    @action(detail=False, methods=['get'], permission_classes=[permissions.AllowAny])
    def check(self, request):
        """Is the given date (today by default) a holiday?

        Example: /api/v1/holidays/check/?date=2025-10-20
        """
        day = None
        if request.query_params.get('date'):
            try:
                day = date.fromisoformat(request.query_params['date'])
            except ValueError:
                return Response(
                    {'error': 'Invalid date format (use ISO format: 2025-10-27)'},
                    status=status.HTTP_400_BAD_REQUEST
                )

        result = HolidayService.check(day)
        return Response(HolidayCheckSerializer(result).data)
