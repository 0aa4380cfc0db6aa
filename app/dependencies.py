# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

import re
from typing import Annotated, Any

from fastapi import Depends, Request
from pymongo.asynchronous.database import AsyncDatabase

from core.models import HotelCreate, ReviewCreate
from core.validation import validate_payload
from lib.mongo_client import MongoClient

# hotel[name] -> ("hotel", "name"); a[b][c] -> ("a", "b", "c")
_BRACKET_KEY = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])+)$")


def get_database(request: Request) -> AsyncDatabase:
    """
    Get the application database.

    The client is created in the lifespan handler and kept on app.state.
    """
    mongo: MongoClient = request.app.state.mongo
    return mongo.db


def parse_nested_form(items: list[tuple[str, Any]]) -> dict[str, Any]:
    """
    Expand bracketed form keys into nested dicts.

    Example:
        [("hotel[name]", "Inn"), ("hotel[price]", "10")]
        -> {"hotel": {"name": "Inn", "price": "10"}}

    Keys without brackets are kept as-is. Repeated keys keep the last value.
    """
    result: dict[str, Any] = {}

    for key, value in items:
        match = _BRACKET_KEY.match(key)
        if not match:
            result[key] = value
            continue

        parts = [match.group(1), *re.findall(r"\[([^\[\]]*)\]", match.group(2))]
        node = result
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value

    return result


async def get_form_payload(request: Request) -> dict[str, Any]:
    """Read the urlencoded body as a nested dict."""
    form = await request.form()
    return parse_nested_form(list(form.multi_items()))


FormPayload = Annotated[dict[str, Any], Depends(get_form_payload)]


async def get_hotel_form(payload: FormPayload) -> HotelCreate:
    """Validate the `hotel[...]` fields of the submitted form."""
    return validate_payload(HotelCreate, payload, "hotel")


async def get_review_form(payload: FormPayload) -> ReviewCreate:
    """Validate the `review[...]` fields of the submitted form."""
    return validate_payload(ReviewCreate, payload, "review")


# Type aliases for dependency injection
DatabaseDep = Annotated[AsyncDatabase, Depends(get_database)]
HotelFormDep = Annotated[HotelCreate, Depends(get_hotel_form)]
ReviewFormDep = Annotated[ReviewCreate, Depends(get_review_form)]
