"""
TripService - edits to the trip collection.

Every change builds a new Trip value and stores it whole; nothing mutates a
trip that a caller may still hold.
"""

import logging
from datetime import date, datetime, timezone
from typing import List

from app.models.base import generate_id
from app.models.trip import Expense, Member, Trip
from app.models.trip_document import TripInDB
from app.repositories.trip_repo import TripRepository
from app.schemas.trip import ExpenseDraft
from app.utils.expense_validation import validate_expense_draft

logger = logging.getLogger(__name__)

COVER_IMAGE_URL = "https://picsum.photos/seed/{seed}/{width}/{height}"


class TripNotFoundError(LookupError):
    pass


class ReadOnlyTripError(Exception):
    """Trip was imported from a share link and has not been unlocked."""
    pass


class BlankNameError(ValueError):
    pass


def require_name(name: str, what: str) -> str:
    name = (name or "").strip()
    if not name:
        raise BlankNameError(f"{what} name is required")
    return name


def cover_image_for(seed: str, width: int = 600, height: int = 400) -> str:
    return COVER_IMAGE_URL.format(seed=seed, width=width, height=height)


class TripService:
    def __init__(self, repo: TripRepository):
        self.repo = repo

    async def list_trips(self) -> List[TripInDB]:
        return await self.repo.list_trips()

    async def get(self, trip_id: str) -> TripInDB:
        stored = await self.repo.get_trip(trip_id)
        if stored is None:
            raise TripNotFoundError(f"Trip '{trip_id}' not found")
        return stored

    async def get_editable(self, trip_id: str) -> TripInDB:
        stored = await self.get(trip_id)
        if stored.read_only:
            raise ReadOnlyTripError(f"Trip '{trip_id}' is read-only")
        return stored

    async def create_trip(self, name: str) -> TripInDB:
        name = require_name(name, "Trip")
        trip = Trip(
            id=generate_id(),
            name=name,
            cover_image=cover_image_for(name),
            start_date=date.today(),
            members=[],
            expenses=[]
        )
        stored = await self.repo.insert_trip(trip)
        logger.info("Created trip %s", trip.id)
        return stored

    async def rename_trip(self, trip_id: str, name: str) -> TripInDB:
        name = require_name(name, "Trip")
        stored = await self.get_editable(trip_id)
        trip = stored.trip.model_copy(update={"name": name})
        return await self.repo.replace_trip(stored, trip)

    async def delete_trip(self, trip_id: str) -> None:
        if not await self.repo.delete_trip(trip_id):
            raise TripNotFoundError(f"Trip '{trip_id}' not found")
        logger.info("Deleted trip %s", trip_id)

    async def enable_editing(self, trip_id: str) -> TripInDB:
        stored = await self.get(trip_id)
        if not stored.read_only:
            return stored
        return await self.repo.set_read_only(stored, False)

    # Members

    async def add_member(self, trip_id: str, name: str) -> TripInDB:
        name = require_name(name, "Member")

        stored = await self.get_editable(trip_id)
        member = Member(id=generate_id(), name=name)
        trip = stored.trip.model_copy(update={"members": [*stored.trip.members, member]})
        return await self.repo.replace_trip(stored, trip)

    async def remove_member(self, trip_id: str, member_id: str) -> TripInDB:
        """
        Remove a member. Their expenses are left as recorded: payments they
        made stop counting and shares listed for them are dropped, while
        expenses shared by everyone now split over whoever remains.
        """
        stored = await self.get_editable(trip_id)
        if stored.trip.find_member(member_id) is None:
            raise TripNotFoundError(f"Member '{member_id}' not found")

        members = [m for m in stored.trip.members if m.id != member_id]
        trip = stored.trip.model_copy(update={"members": members})
        return await self.repo.replace_trip(stored, trip)

    # Expenses

    async def add_expense(self, trip_id: str, draft: ExpenseDraft) -> TripInDB:
        stored = await self.get_editable(trip_id)
        valid = validate_expense_draft(draft, stored.trip)

        expense = Expense(
            id=generate_id(),
            description=valid.description,
            amount=valid.amount,
            payer_id=valid.payer_id,
            date=datetime.now(timezone.utc),
            involved_member_ids=valid.involved_member_ids
        )
        # Newest first
        trip = stored.trip.model_copy(update={"expenses": [expense, *stored.trip.expenses]})
        return await self.repo.replace_trip(stored, trip)

    async def update_expense(self, trip_id: str, expense_id: str, draft: ExpenseDraft) -> TripInDB:
        stored = await self.get_editable(trip_id)
        current = stored.trip.find_expense(expense_id)
        if current is None:
            raise TripNotFoundError(f"Expense '{expense_id}' not found")

        valid = validate_expense_draft(draft, stored.trip)
        replacement = current.model_copy(update={
            "description": valid.description,
            "amount": valid.amount,
            "payer_id": valid.payer_id,
            "involved_member_ids": valid.involved_member_ids
        })
        expenses = [replacement if e.id == expense_id else e for e in stored.trip.expenses]
        trip = stored.trip.model_copy(update={"expenses": expenses})
        return await self.repo.replace_trip(stored, trip)

    async def delete_expense(self, trip_id: str, expense_id: str) -> TripInDB:
        stored = await self.get_editable(trip_id)
        if stored.trip.find_expense(expense_id) is None:
            raise TripNotFoundError(f"Expense '{expense_id}' not found")

        expenses = [e for e in stored.trip.expenses if e.id != expense_id]
        trip = stored.trip.model_copy(update={"expenses": expenses})
        return await self.repo.replace_trip(stored, trip)
