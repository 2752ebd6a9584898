"""Request/response schemas for trips, members and expenses."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.base import CamelModel
from app.models.trip import Amount, Trip
from app.models.trip_document import TripInDB


class TripCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class TripUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)


class TripResponse(BaseModel):
    """A trip as stored, with its collection metadata."""
    trip: Trip
    read_only: bool = False
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_stored(cls, stored: TripInDB) -> "TripResponse":
        return cls(
            trip=stored.trip,
            read_only=stored.read_only,
            created_at=stored.created_at,
            updated_at=stored.updated_at
        )


class MemberAdd(BaseModel):
    name: str


class ExpenseDraft(CamelModel):
    """Expense as entered by a person or drafted by the parser, before validation."""
    description: str = ""
    amount: Optional[Amount] = None
    payer_id: Optional[str] = None
    involved_member_ids: Optional[List[str]] = None


class ParseExpenseRequest(BaseModel):
    text: str = Field(..., min_length=1)
