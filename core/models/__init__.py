# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - hotel.py: Hotel form input and view schemas
# - review.py: Review form input and view schemas
#
# These models are the contract between the HTML forms and the store.
# =============================================================================

from .review import (
    MAX_RATING,
    MIN_RATING,
    ReviewCreate,
    ReviewResponse,
)

from .hotel import (
    HotelCreate,
    HotelResponse,
)

__all__ = [
    # Review
    "MAX_RATING",
    "MIN_RATING",
    "ReviewCreate",
    "ReviewResponse",
    # Hotel
    "HotelCreate",
    "HotelResponse",
]
