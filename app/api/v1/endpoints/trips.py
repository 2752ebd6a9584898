from typing import List
from fastapi import APIRouter, Depends, status

from app.api.deps import get_trip_service
from app.api.v1.endpoints.errors import DOMAIN_ERRORS, to_http_exception
from app.schemas.trip import MemberAdd, TripCreate, TripResponse, TripUpdate
from app.services.trip_service import TripService

router = APIRouter()


@router.get("/", response_model=List[TripResponse])
async def list_trips(service: TripService = Depends(get_trip_service)):
    """List all trips, newest first"""
    return [TripResponse.from_stored(stored) for stored in await service.list_trips()]


@router.post("/", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(trip_in: TripCreate, service: TripService = Depends(get_trip_service)):
    """Create an empty trip"""
    return TripResponse.from_stored(await service.create_trip(trip_in.name))


@router.get("/{trip_id}", response_model=TripResponse)
async def get_trip(trip_id: str, service: TripService = Depends(get_trip_service)):
    try:
        return TripResponse.from_stored(await service.get(trip_id))
    except DOMAIN_ERRORS as exc:
        raise to_http_exception(exc)


@router.patch("/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_id: str,
    trip_in: TripUpdate,
    service: TripService = Depends(get_trip_service)
):
    try:
        if trip_in.name is None:
            return TripResponse.from_stored(await service.get(trip_id))
        return TripResponse.from_stored(await service.rename_trip(trip_id, trip_in.name))
    except DOMAIN_ERRORS as exc:
        raise to_http_exception(exc)


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trip(trip_id: str, service: TripService = Depends(get_trip_service)):
    try:
        await service.delete_trip(trip_id)
    except DOMAIN_ERRORS as exc:
        raise to_http_exception(exc)


@router.post("/{trip_id}/enable-editing", response_model=TripResponse)
async def enable_editing(trip_id: str, service: TripService = Depends(get_trip_service)):
    """Unlock a trip imported from a share link"""
    try:
        return TripResponse.from_stored(await service.enable_editing(trip_id))
    except DOMAIN_ERRORS as exc:
        raise to_http_exception(exc)


@router.post("/{trip_id}/members", response_model=TripResponse)
async def add_member(
    trip_id: str,
    member_in: MemberAdd,
    service: TripService = Depends(get_trip_service)
):
    try:
        return TripResponse.from_stored(await service.add_member(trip_id, member_in.name))
    except DOMAIN_ERRORS as exc:
        raise to_http_exception(exc)


@router.delete("/{trip_id}/members/{member_id}", response_model=TripResponse)
async def remove_member(
    trip_id: str,
    member_id: str,
    service: TripService = Depends(get_trip_service)
):
    """Remove a member; their recorded expenses are kept as is"""
    try:
        return TripResponse.from_stored(await service.remove_member(trip_id, member_id))
    except DOMAIN_ERRORS as exc:
        raise to_http_exception(exc)
