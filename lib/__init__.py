# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - mongo_client.py: Async MongoDB connection wrapper
# - utils.py: Shared utilities (ObjectId parsing)
# =============================================================================

from lib.mongo_client import (
    HOTELS_COLLECTION,
    REVIEWS_COLLECTION,
    MongoClient,
    MongoClientError,
)
from lib.utils import parse_object_id

__all__ = [
    # MongoDB
    "HOTELS_COLLECTION",
    "REVIEWS_COLLECTION",
    "MongoClient",
    "MongoClientError",
    # Utils
    "parse_object_id",
]
