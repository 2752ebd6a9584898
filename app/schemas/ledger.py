from typing import List, Optional
from pydantic import BaseModel

from app.models.trip import Member


class LedgerRow(BaseModel):
    """One member's position in a trip."""
    member: Member
    paid: float = 0.0
    consumed: float = 0.0
    balance: float = 0.0  # paid - consumed; negative means the member owes


class LedgerReportRow(LedgerRow):
    """Ledger row with its share of the trip total, in percent."""
    paid_share: float = 0.0
    consumed_share: float = 0.0


class LedgerSummary(BaseModel):
    """Balances plus trip-wide aggregates."""
    balances: List[LedgerReportRow]
    total_spent: float
    average_per_member: float
    top_spender: Optional[LedgerReportRow] = None
    consumption_ranking: List[LedgerReportRow]
