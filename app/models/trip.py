"""
Trip model - the unit of sharing.

Design principles:
- A trip owns its members and expenses; nothing else references them
- Members are identified by id, names may repeat
- Expenses are kept newest first
- An expense without involved members is shared by everyone currently in the
  trip, resolved whenever balances are computed
- Values are replaced, never mutated in place (model_copy on every change)
"""

from datetime import date, datetime
from typing import List, Optional, Union

from pydantic import Field

from app.models.base import CamelModel

Amount = Union[int, float]


class Member(CamelModel):
    id: str
    name: str


class Expense(CamelModel):
    id: str
    description: str
    amount: Amount  # Whole VND, kept as given
    payer_id: str
    date: datetime
    involved_member_ids: Optional[List[str]] = None  # None or [] means everyone


class Trip(CamelModel):
    id: str = Field(..., min_length=1)
    name: str = ""
    cover_image: str = ""
    start_date: Optional[date] = None
    members: List[Member] = []
    expenses: List[Expense] = []

    def member_ids(self) -> List[str]:
        return [member.id for member in self.members]

    def find_member(self, member_id: str) -> Optional[Member]:
        return next((m for m in self.members if m.id == member_id), None)

    def find_expense(self, expense_id: str) -> Optional[Expense]:
        return next((e for e in self.expenses if e.id == expense_id), None)
