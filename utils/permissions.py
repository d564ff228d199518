# ==================== UTILS/PERMISSIONS.PY ====================
from rest_framework import permissions


class IsListingOwnerOrReadOnly(permissions.BasePermission):
    """Only the owner of a P2P listing may change it"""

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True
        return obj.owner == request.user


class IsBookingUser(permissions.BasePermission):
    """Permission to check if user is the one who made the booking"""

    def has_object_permission(self, request, view, obj):
        return obj.user == request.user


class IsStaffOrReadOnly(permissions.BasePermission):
    """Anyone can read; only staff can write (parking lots, holidays)"""

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return bool(request.user and request.user.is_staff)
