#!/usr/bin/env python3
# =============================================================================
# scripts/seed_hotels.py - Sample Data Loader
# =============================================================================
# Wipes the hotels and reviews collections and inserts a handful of sample
# hotels for local development.
#
# Usage:
#   poetry run python scripts/seed_hotels.py
#
# Prerequisites:
#   - MongoDB must be running (MONGODB_URL in .env or the default localhost)
# =============================================================================

import asyncio
import os
import random
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from app.config import settings
from core.models import HotelCreate
from core.services import HotelService
from lib.mongo_client import HOTELS_COLLECTION, REVIEWS_COLLECTION, MongoClient

CITIES = [
    "Lisbon, Portugal",
    "Kyoto, Japan",
    "Cape Town, South Africa",
    "Oaxaca, Mexico",
    "Tallinn, Estonia",
    "Hobart, Australia",
]

PREFIXES = ["Harbour", "Old Town", "Garden", "Summit", "Riverside", "Lantern"]
SUFFIXES = ["Inn", "Lodge", "Hotel", "Guesthouse", "Suites"]


def sample_hotel(index: int) -> HotelCreate:
    """Build one sample hotel."""
    return HotelCreate(
        name=f"{random.choice(PREFIXES)} {random.choice(SUFFIXES)}",
        location=CITIES[index % len(CITIES)],
        price=random.randint(40, 300),
        description="Comfortable rooms, friendly staff and a short walk to the centre.",
        image=f"https://picsum.photos/seed/checkinn-{index}/800/600",
    )


async def seed(count: int) -> None:
    mongo = MongoClient(settings.MONGODB_URL, settings.MONGODB_DATABASE)
    await mongo.connect()

    try:
        await mongo.db[REVIEWS_COLLECTION].delete_many({})
        await mongo.db[HOTELS_COLLECTION].delete_many({})

        for index in range(count):
            hotel = await HotelService.create_hotel(mongo.db, sample_hotel(index))
            print(f"  + {hotel.name} ({hotel.location})")
    finally:
        await mongo.close()


def main():
    """Seed the database."""
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 12

    print("=" * 60)
    print("CheckInn Seed")
    print("=" * 60)
    print(f"Database: {settings.MONGODB_DATABASE}")
    print()

    asyncio.run(seed(count))

    print()
    print(f"Inserted {count} hotels")


if __name__ == "__main__":
    main()
