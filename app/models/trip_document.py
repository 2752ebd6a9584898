from datetime import datetime

from pydantic import BaseModel, Field, ConfigDict

from app.models.base import _utcnow
from app.models.trip import Trip


class TripInDB(BaseModel):
    """Stored trip: the trip value plus collection metadata."""
    id: str = Field(alias="_id")
    trip: Trip
    read_only: bool = False
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True
    )

    @classmethod
    def from_trip(cls, trip: Trip, read_only: bool = False) -> "TripInDB":
        return cls(id=trip.id, trip=trip, read_only=read_only)

    def to_document(self) -> dict:
        doc = self.model_dump(by_alias=True, exclude={"trip"})
        doc["trip"] = self.trip.model_dump(mode="json", by_alias=True, exclude_none=True)
        return doc
