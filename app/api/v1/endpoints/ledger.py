from fastapi import APIRouter, Depends

from app.api.deps import get_trip_service
from app.api.v1.endpoints.errors import DOMAIN_ERRORS, to_http_exception
from app.schemas.ledger import LedgerSummary
from app.services.ledger_service import LedgerService
from app.services.trip_service import TripService

router = APIRouter()


@router.get("/{trip_id}/ledger", response_model=LedgerSummary)
async def get_trip_ledger(trip_id: str, service: TripService = Depends(get_trip_service)):
    """Balances and totals, recomputed from the trip's current members and expenses"""
    try:
        stored = await service.get(trip_id)
    except DOMAIN_ERRORS as exc:
        raise to_http_exception(exc)
    return LedgerService.summarize(stored.trip.members, stored.trip.expenses)
