# =============================================================================
# core/models/hotel.py - Hotel Schemas
# =============================================================================
# These models define the contract for hotel operations:
# - HotelCreate: Validated form input for creating or replacing a hotel
# - HotelResponse: Plain view data handed to the templates
#
# A hotel document stores its reviews as an ordered list of review ids.
# The detail page expands them into full ReviewResponse objects.
# =============================================================================

from pydantic import BaseModel, Field

from .review import ReviewResponse


class HotelCreate(BaseModel):
    """
    Schema for the `hotel[...]` form fields.

    Used for both creation and full-replace updates.

    Example:
        {
            "name": "Seaside Inn",
            "location": "Lisbon, Portugal",
            "price": 120,
            "description": "Rooms with a view of the river",
            "image": "https://example.com/seaside.jpg"
        }
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Hotel name"
    )

    location: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="City / address shown under the name"
    )

    price: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Nightly price"
    )

    description: str = Field(
        ...,
        min_length=1,
        description="Free-text description"
    )

    image: str = Field(
        ...,
        min_length=1,
        description="Image URL"
    )

    model_config = {"str_strip_whitespace": True}


class HotelResponse(BaseModel):
    """
    Schema for returning hotel data to templates.

    `reviews` holds the review ids as stored, unless the hotel was fetched
    with its reviews expanded, in which case `review_details` is filled.
    """

    id: str = Field(..., description="Hotel ObjectId as a string")
    name: str
    location: str
    price: float
    description: str
    image: str

    reviews: list[str] = Field(
        default_factory=list,
        description="Referenced review ids, in insertion order"
    )

    review_details: list[ReviewResponse] = Field(
        default_factory=list,
        description="Expanded reviews (detail page only)"
    )

    @classmethod
    def from_document(
        cls,
        doc: dict,
        review_details: list[ReviewResponse] | None = None,
    ) -> "HotelResponse":
        """Build from a raw MongoDB document."""
        return cls(
            id=str(doc["_id"]),
            name=doc.get("name", ""),
            location=doc.get("location", ""),
            price=doc.get("price", 0),
            description=doc.get("description", ""),
            image=doc.get("image", ""),
            reviews=[str(review_id) for review_id in doc.get("reviews", [])],
            review_details=review_details or [],
        )
