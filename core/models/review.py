# =============================================================================
# core/models/review.py - Review Schemas
# =============================================================================
# Reviews live in their own collection. A hotel points at them by id;
# a review has no pointer back to its hotel.
# =============================================================================

from pydantic import BaseModel, Field

MIN_RATING = 1
MAX_RATING = 5


class ReviewCreate(BaseModel):
    """
    Schema for the `review[...]` form fields.

    Example:
        {"body": "Great breakfast", "rating": 5}
    """

    body: str = Field(
        ...,
        min_length=1,
        description="Review text"
    )

    rating: int = Field(
        ...,
        ge=MIN_RATING,
        le=MAX_RATING,
        description="Star rating"
    )

    model_config = {"str_strip_whitespace": True}


class ReviewResponse(BaseModel):
    """Review as shown on the hotel detail page."""

    id: str
    body: str
    rating: int

    @classmethod
    def from_document(cls, doc: dict) -> "ReviewResponse":
        """Build from a raw MongoDB document."""
        return cls(
            id=str(doc["_id"]),
            body=doc.get("body", ""),
            rating=doc.get("rating", MIN_RATING),
        )
