# ==================== UTILS/EXCEPTIONS.PY ====================
from rest_framework.exceptions import APIException
from rest_framework import status


class SlotUnavailable(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'No compatible slot is available at this parking.'
    default_code = 'slot_unavailable'


class ListingUnavailable(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'This listing is no longer available.'
    default_code = 'listing_unavailable'


class RentalNotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Active rental not found for this user.'
    default_code = 'rental_not_found'


class PaymentRecordNotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Pending payment not found.'
    default_code = 'payment_record_not_found'


class VehicleNotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Vehicle not found or not registered.'
    default_code = 'vehicle_not_found'


class InvalidOtp(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid OTP.'
    default_code = 'invalid_otp'
