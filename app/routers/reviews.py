# =============================================================================
# app/routers/reviews.py - Review Form Handlers
# =============================================================================
# Reviews have no pages of their own; they are created from and removed
# on the hotel detail page, which both handlers redirect back to.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Request
from fastapi.responses import RedirectResponse

from app.dependencies import DatabaseDep, ReviewFormDep
from app.flash import flash
from core.services.review_service import ReviewService

router = APIRouter()


@router.post("/{hotel_id}/reviews")
async def create_review(
    request: Request,
    hotel_id: Annotated[str, Path(description="Hotel ObjectId")],
    review: ReviewFormDep,
    db: DatabaseDep,
):
    """Attach a new review to the hotel."""
    await ReviewService.create_review(db, hotel_id, review)
    flash(request, "success", "Created review")
    return RedirectResponse(f"/hotels/{hotel_id}", status_code=303)


@router.delete("/{hotel_id}/reviews/{review_id}")
async def delete_review(
    request: Request,
    hotel_id: Annotated[str, Path(description="Hotel ObjectId")],
    review_id: Annotated[str, Path(description="Review ObjectId")],
    db: DatabaseDep,
):
    """Detach and delete a review."""
    await ReviewService.delete_review(db, hotel_id, review_id)
    flash(request, "success", "Deleted review!")
    return RedirectResponse(f"/hotels/{hotel_id}", status_code=303)
