"""
TripRepository - the trip collection.

One document per trip, keyed by trip id. Every write replaces the whole
document: a single writer, last write wins.
"""

from typing import List, Optional
from datetime import datetime, timezone
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.config import settings
from app.models.trip import Trip
from app.models.trip_document import TripInDB


class TripRepository:
    """Repository for stored trips."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[settings.TRIPS_COLLECTION]

    async def list_trips(self) -> List[TripInDB]:
        """All trips, newest first."""
        cursor = self.collection.find({}).sort("created_at", -1)
        docs = await cursor.to_list(None)
        return [TripInDB(**doc) for doc in docs]

    async def get_trip(self, trip_id: str) -> Optional[TripInDB]:
        doc = await self.collection.find_one({"_id": trip_id})
        if not doc:
            return None
        return TripInDB(**doc)

    async def insert_trip(self, trip: Trip, read_only: bool = False) -> TripInDB:
        stored = TripInDB.from_trip(trip, read_only=read_only)
        await self.collection.insert_one(stored.to_document())
        return stored

    async def replace_trip(self, stored: TripInDB, trip: Trip) -> TripInDB:
        """Store a new value for an existing trip."""
        updated = stored.model_copy(update={
            "trip": trip,
            "updated_at": datetime.now(timezone.utc)
        })
        await self.collection.replace_one(
            {"_id": stored.id},
            updated.to_document(),
            upsert=True
        )
        return updated

    async def set_read_only(self, stored: TripInDB, read_only: bool) -> TripInDB:
        updated = stored.model_copy(update={
            "read_only": read_only,
            "updated_at": datetime.now(timezone.utc)
        })
        await self.collection.update_one(
            {"_id": stored.id},
            {"$set": {"read_only": read_only, "updated_at": updated.updated_at}}
        )
        return updated

    async def delete_trip(self, trip_id: str) -> bool:
        result = await self.collection.delete_one({"_id": trip_id})
        return result.deleted_count > 0
