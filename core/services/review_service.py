# =============================================================================
# core/services/review_service.py - Review Business Logic
# =============================================================================
# Reviews are separate documents referenced by id from their hotel.
# Creating or deleting one touches two documents, so each operation orders
# its writes and undoes the first one when the second cannot apply.
# =============================================================================

import logging

from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from lib.mongo_client import HOTELS_COLLECTION, REVIEWS_COLLECTION
from lib.utils import parse_object_id
from core.models.review import ReviewCreate, ReviewResponse
from app.exceptions import HotelNotFoundError, ReviewNotFoundError

logger = logging.getLogger(__name__)


class ReviewService:
    """Service for attaching reviews to hotels and removing them."""

    @staticmethod
    async def create_review(
        db: AsyncDatabase,
        hotel_id: str,
        data: ReviewCreate,
    ) -> ReviewResponse:
        """
        Insert a review and append its id to the hotel.

        If the hotel cannot be updated (gone, or the write fails) the
        inserted review is deleted again before the error propagates.

        Args:
            db: Application database
            hotel_id: Hotel to attach to
            data: Validated form input

        Returns:
            The created review

        Raises:
            HotelNotFoundError: If the id is malformed or no hotel has it
        """
        hotel_oid = parse_object_id(hotel_id)
        if hotel_oid is None:
            raise HotelNotFoundError(hotel_id)

        if not await db[HOTELS_COLLECTION].find_one({"_id": hotel_oid}, {"_id": 1}):
            raise HotelNotFoundError(hotel_id)

        doc = data.model_dump()
        result = await db[REVIEWS_COLLECTION].insert_one(doc)
        doc["_id"] = result.inserted_id

        try:
            update = await db[HOTELS_COLLECTION].update_one(
                {"_id": hotel_oid},
                {"$push": {"reviews": result.inserted_id}},
            )
        except PyMongoError:
            logger.error(f"Failed to attach review {result.inserted_id} to hotel {hotel_id}, removing it")
            await db[REVIEWS_COLLECTION].delete_one({"_id": result.inserted_id})
            raise

        if update.matched_count == 0:
            # Hotel was deleted between the lookup and the push
            await db[REVIEWS_COLLECTION].delete_one({"_id": result.inserted_id})
            raise HotelNotFoundError(hotel_id)

        logger.info(f"Created review {result.inserted_id} for hotel {hotel_id}")
        return ReviewResponse.from_document(doc)

    @staticmethod
    async def delete_review(db: AsyncDatabase, hotel_id: str, review_id: str) -> None:
        """
        Remove a review id from its hotel, then delete the review document.

        Only a review referenced by this hotel is touched. The reference is
        pulled first so a failure in between leaves an orphaned review
        rather than a hotel pointing at nothing.

        Raises:
            HotelNotFoundError: If the hotel id is malformed or unknown
            ReviewNotFoundError: If the review id is malformed or not on this hotel
        """
        hotel_oid = parse_object_id(hotel_id)
        if hotel_oid is None:
            raise HotelNotFoundError(hotel_id)

        review_oid = parse_object_id(review_id)
        if review_oid is None:
            raise ReviewNotFoundError(review_id)

        update = await db[HOTELS_COLLECTION].update_one(
            {"_id": hotel_oid, "reviews": review_oid},
            {"$pull": {"reviews": review_oid}},
        )
        if update.matched_count == 0:
            if not await db[HOTELS_COLLECTION].find_one({"_id": hotel_oid}, {"_id": 1}):
                raise HotelNotFoundError(hotel_id)
            raise ReviewNotFoundError(review_id)

        result = await db[REVIEWS_COLLECTION].delete_one({"_id": review_oid})
        if result.deleted_count == 0:
            logger.warning(f"Review {review_id} was referenced by hotel {hotel_id} but already gone")

        logger.info(f"Deleted review {review_id} from hotel {hotel_id}")
