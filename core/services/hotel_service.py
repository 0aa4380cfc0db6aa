# =============================================================================
# core/services/hotel_service.py - Hotel Business Logic
# =============================================================================
# Handles hotel CRUD operations against the `hotels` collection.
# Separates HTTP concerns from database logic.
# =============================================================================

import logging

from pymongo import ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase

from lib.mongo_client import HOTELS_COLLECTION, REVIEWS_COLLECTION
from lib.utils import parse_object_id
from core.models.hotel import HotelCreate, HotelResponse
from core.models.review import ReviewResponse
from app.exceptions import HotelNotFoundError

logger = logging.getLogger(__name__)


class HotelService:
    """
    Service for hotel operations.

    Every method takes the database explicitly; nothing is cached between
    requests.
    """

    @staticmethod
    async def list_hotels(db: AsyncDatabase) -> list[HotelResponse]:
        """Return every hotel, in store order."""
        cursor = db[HOTELS_COLLECTION].find({})
        return [HotelResponse.from_document(doc) async for doc in cursor]

    @staticmethod
    async def create_hotel(db: AsyncDatabase, data: HotelCreate) -> HotelResponse:
        """
        Insert a new hotel with an empty review list.

        Args:
            db: Application database
            data: Validated form input

        Returns:
            The created hotel
        """
        doc = {**data.model_dump(), "reviews": []}

        result = await db[HOTELS_COLLECTION].insert_one(doc)
        doc["_id"] = result.inserted_id

        logger.info(f"Created hotel: {result.inserted_id}")
        return HotelResponse.from_document(doc)

    @staticmethod
    async def get_hotel(db: AsyncDatabase, hotel_id: str) -> HotelResponse:
        """
        Get a hotel by ID without expanding its reviews.

        Raises:
            HotelNotFoundError: If the id is malformed or no hotel has it
        """
        object_id = parse_object_id(hotel_id)
        if object_id is None:
            raise HotelNotFoundError(hotel_id)

        doc = await db[HOTELS_COLLECTION].find_one({"_id": object_id})
        if not doc:
            raise HotelNotFoundError(hotel_id)

        return HotelResponse.from_document(doc)

    @staticmethod
    async def get_hotel_with_reviews(db: AsyncDatabase, hotel_id: str) -> HotelResponse:
        """
        Get a hotel with its referenced reviews expanded.

        Reviews come back in the hotel's insertion order. Ids whose review
        document no longer exists are skipped.

        Raises:
            HotelNotFoundError: If the id is malformed or no hotel has it
        """
        object_id = parse_object_id(hotel_id)
        if object_id is None:
            raise HotelNotFoundError(hotel_id)

        doc = await db[HOTELS_COLLECTION].find_one({"_id": object_id})
        if not doc:
            raise HotelNotFoundError(hotel_id)

        review_ids = doc.get("reviews", [])
        cursor = db[REVIEWS_COLLECTION].find({"_id": {"$in": review_ids}})
        found = {review["_id"]: review async for review in cursor}

        missing = [str(review_id) for review_id in review_ids if review_id not in found]
        if missing:
            logger.warning(f"Hotel {hotel_id} references missing reviews: {missing}")

        reviews = [
            ReviewResponse.from_document(found[review_id])
            for review_id in review_ids
            if review_id in found
        ]
        return HotelResponse.from_document(doc, review_details=reviews)

    @staticmethod
    async def update_hotel(
        db: AsyncDatabase,
        hotel_id: str,
        data: HotelCreate,
    ) -> HotelResponse:
        """
        Replace all editable fields of a hotel. Its reviews are kept.

        Raises:
            HotelNotFoundError: If the id is malformed or no hotel has it
        """
        object_id = parse_object_id(hotel_id)
        if object_id is None:
            raise HotelNotFoundError(hotel_id)

        doc = await db[HOTELS_COLLECTION].find_one_and_update(
            {"_id": object_id},
            {"$set": data.model_dump()},
            return_document=ReturnDocument.AFTER,
        )
        if not doc:
            raise HotelNotFoundError(hotel_id)

        logger.info(f"Updated hotel: {hotel_id}")
        return HotelResponse.from_document(doc)

    @staticmethod
    async def delete_hotel(db: AsyncDatabase, hotel_id: str) -> HotelResponse:
        """
        Delete a hotel and then the reviews it referenced.

        The two deletes are not atomic. If the second fails the reviews are
        orphaned but no hotel points at them.

        Raises:
            HotelNotFoundError: If the id is malformed or no hotel has it
        """
        object_id = parse_object_id(hotel_id)
        if object_id is None:
            raise HotelNotFoundError(hotel_id)

        doc = await db[HOTELS_COLLECTION].find_one_and_delete({"_id": object_id})
        if not doc:
            raise HotelNotFoundError(hotel_id)

        review_ids = doc.get("reviews", [])
        if review_ids:
            result = await db[REVIEWS_COLLECTION].delete_many({"_id": {"$in": review_ids}})
            logger.info(f"Deleted {result.deleted_count} reviews of hotel {hotel_id}")

        logger.info(f"Deleted hotel: {hotel_id}")
        return HotelResponse.from_document(doc)
