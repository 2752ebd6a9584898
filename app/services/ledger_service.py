"""
LedgerService - who paid what, who used what.

Core algorithm:
1. Start every current member at paid = consumed = 0
2. Credit each expense amount in full to its payer
3. Split each expense evenly over its involved members (everyone when none
   are listed) and charge each share to that member
4. balance = paid - consumed, reported most-indebted first

References to members who are no longer in the trip are skipped: their
payments and shares simply drop out of the per-member totals.
"""

from typing import Dict, List, Optional, Sequence

from app.models.trip import Expense, Member
from app.schemas.ledger import LedgerReportRow, LedgerRow, LedgerSummary


class LedgerService:
    @staticmethod
    def resolve_involved(expense: Expense, member_ids: List[str]) -> List[str]:
        """Involved ids as stored, or every current member when none are listed."""
        if expense.involved_member_ids:
            return list(expense.involved_member_ids)
        return list(member_ids)

    @staticmethod
    def compute_balances(
        members: Sequence[Member],
        expenses: Sequence[Expense]
    ) -> List[LedgerRow]:
        """
        Per-member paid / consumed / balance, sorted ascending by balance.

        Ties keep the original member order. No validation is done on
        amounts; they are summed and divided as given.
        """
        member_ids = [member.id for member in members]
        paid: Dict[str, float] = {member_id: 0 for member_id in member_ids}
        consumed: Dict[str, float] = {member_id: 0 for member_id in member_ids}

        for expense in expenses:
            amount = expense.amount

            if expense.payer_id in paid:
                paid[expense.payer_id] += amount

            involved = LedgerService.resolve_involved(expense, member_ids)
            if not involved:
                # No members to share with
                continue

            split_amount = amount / len(involved)
            for member_id in involved:
                if member_id in consumed:
                    consumed[member_id] += split_amount

        rows = [
            LedgerRow(
                member=member,
                paid=paid[member.id],
                consumed=consumed[member.id],
                balance=paid[member.id] - consumed[member.id]
            )
            for member in members
        ]
        return sorted(rows, key=lambda row: row.balance)

    @staticmethod
    def total_spent(expenses: Sequence[Expense]) -> float:
        """Sum of every expense amount, whoever paid it."""
        return sum((expense.amount for expense in expenses), 0)

    @staticmethod
    def top_spender(rows: Sequence[LedgerRow]) -> Optional[LedgerRow]:
        best: Optional[LedgerRow] = None
        for row in rows:
            if best is None or row.paid > best.paid:
                best = row
        if best is None or best.paid == 0:
            return None
        return best

    @staticmethod
    def summarize(
        members: Sequence[Member],
        expenses: Sequence[Expense]
    ) -> LedgerSummary:
        rows = LedgerService.compute_balances(members, expenses)
        total = LedgerService.total_spent(expenses)
        average = total / len(members) if members else 0.0

        report_rows = [
            LedgerReportRow(
                **row.model_dump(),
                paid_share=(row.paid / total) * 100 if total > 0 else 0.0,
                consumed_share=(row.consumed / total) * 100 if total > 0 else 0.0
            )
            for row in rows
        ]

        # Top spender ties go to the earliest member in the trip
        order = {member.id: index for index, member in enumerate(members)}
        by_member_order = sorted(report_rows, key=lambda row: order[row.member.id])
        top = LedgerService.top_spender(by_member_order)

        return LedgerSummary(
            balances=report_rows,
            total_spent=total,
            average_per_member=average,
            top_spender=top,
            consumption_ranking=sorted(
                report_rows, key=lambda row: row.consumed, reverse=True
            )
        )
