"""Expense entry validation, shared by manual entry and parser drafts."""
from typing import List, Optional

from app.models.trip import Trip
from app.schemas.trip import ExpenseDraft


class ExpenseValidationError(ValueError):
    """Raised when an expense draft cannot be recorded."""
    pass


def validate_description(description: str) -> str:
    description = (description or "").strip()
    if not description:
        raise ExpenseValidationError("Expense description is required")
    return description


def validate_amount(amount) -> int:
    """
    Amounts are whole, positive VND.
    A float is accepted only when it has no fractional part.
    """
    if amount is None or isinstance(amount, bool):
        raise ExpenseValidationError("Expense amount is required")
    if isinstance(amount, float):
        if not amount.is_integer():
            raise ExpenseValidationError(f"Expense amount must be a whole number: {amount}")
        amount = int(amount)
    if amount <= 0:
        raise ExpenseValidationError(f"Expense amount must be positive: {amount}")
    return amount


def validate_payer(payer_id, trip: Trip) -> str:
    if not payer_id:
        raise ExpenseValidationError("Expense payer is required")
    if trip.find_member(payer_id) is None:
        raise ExpenseValidationError(f"Payer '{payer_id}' is not a member of this trip")
    return payer_id


def validate_involved(involved_member_ids, trip: Trip) -> Optional[List[str]]:
    """
    None means everyone in the trip at the time balances are computed and is
    kept as None; the trip must have at least one member. An explicit list
    loses duplicates, keeps its order and must name current members only.
    """
    if involved_member_ids is None:
        if not trip.members:
            raise ExpenseValidationError("Add members to the trip before recording expenses")
        return None

    involved = list(dict.fromkeys(involved_member_ids))
    if not involved:
        raise ExpenseValidationError("At least one member must share this expense")

    current = set(trip.member_ids())
    unknown = [member_id for member_id in involved if member_id not in current]
    if unknown:
        raise ExpenseValidationError(
            f"Involved members are not in this trip: {', '.join(unknown)}"
        )
    return involved


def validate_expense_draft(draft: ExpenseDraft, trip: Trip) -> ExpenseDraft:
    """Validate a draft against the trip's current members and return it normalized."""
    return ExpenseDraft(
        description=validate_description(draft.description),
        amount=validate_amount(draft.amount),
        payer_id=validate_payer(draft.payer_id, trip),
        involved_member_ids=validate_involved(draft.involved_member_ids, trip)
    )
