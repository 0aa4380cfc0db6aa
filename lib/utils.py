# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from bson import ObjectId
from bson.errors import InvalidId


# =============================================================================
# ObjectId Utilities
# =============================================================================

def parse_object_id(value: str | ObjectId) -> ObjectId | None:
    """
    Parse a path parameter into an ObjectId.

    Args:
        value: 24-character hex string or ObjectId

    Returns:
        The ObjectId, or None if the value is not a valid id

    Example:
        parse_object_id("65a1f0c2e4b0a1b2c3d4e5f6")  # ObjectId(...)
        parse_object_id("not-an-id")                 # None
    """
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None
