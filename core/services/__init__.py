# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .hotel_service import HotelService
from .review_service import ReviewService

__all__ = [
    "HotelService",
    "ReviewService",
]
