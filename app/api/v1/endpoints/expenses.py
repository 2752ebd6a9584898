from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_trip_service
from app.api.v1.endpoints.errors import DOMAIN_ERRORS, to_http_exception
from app.schemas.trip import ExpenseDraft, ParseExpenseRequest, TripResponse
from app.services import expense_parser
from app.services.trip_service import TripService

router = APIRouter()


@router.post("/{trip_id}/expenses", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def add_expense(
    trip_id: str,
    draft: ExpenseDraft,
    service: TripService = Depends(get_trip_service)
):
    try:
        return TripResponse.from_stored(await service.add_expense(trip_id, draft))
    except DOMAIN_ERRORS as exc:
        raise to_http_exception(exc)


@router.put("/{trip_id}/expenses/{expense_id}", response_model=TripResponse)
async def update_expense(
    trip_id: str,
    expense_id: str,
    draft: ExpenseDraft,
    service: TripService = Depends(get_trip_service)
):
    try:
        return TripResponse.from_stored(await service.update_expense(trip_id, expense_id, draft))
    except DOMAIN_ERRORS as exc:
        raise to_http_exception(exc)


@router.delete("/{trip_id}/expenses/{expense_id}", response_model=TripResponse)
async def delete_expense(
    trip_id: str,
    expense_id: str,
    service: TripService = Depends(get_trip_service)
):
    try:
        return TripResponse.from_stored(await service.delete_expense(trip_id, expense_id))
    except DOMAIN_ERRORS as exc:
        raise to_http_exception(exc)


@router.post("/{trip_id}/expenses/parse", response_model=ExpenseDraft)
async def parse_expense(
    trip_id: str,
    request: ParseExpenseRequest,
    service: TripService = Depends(get_trip_service)
):
    """
    Draft an expense from free text. Nothing is saved: the draft is meant to
    be reviewed and then posted to the expenses endpoint.
    """
    try:
        stored = await service.get(trip_id)
    except DOMAIN_ERRORS as exc:
        raise to_http_exception(exc)

    members = stored.trip.members
    parsed = await expense_parser.parse_expense(request.text, [m.name for m in members])
    if parsed is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Expense parser unavailable"
        )
    return expense_parser.draft_from_parsed(parsed, members)
