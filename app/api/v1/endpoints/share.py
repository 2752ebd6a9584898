from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_trip_repository, get_trip_service
from app.api.v1.endpoints.errors import DOMAIN_ERRORS, to_http_exception
from app.core.config import settings
from app.repositories.trip_repo import TripRepository
from app.schemas.share import ShareImportRequest, ShareLinkResponse
from app.schemas.trip import TripResponse
from app.services.share_codec import ShareCodec
from app.services.share_service import build_share_url, extract_token, import_shared_trip
from app.services.trip_service import TripService

router = APIRouter()


@router.post("/trips/{trip_id}/share", response_model=ShareLinkResponse)
async def create_share_link(trip_id: str, service: TripService = Depends(get_trip_service)):
    """Read-only share link for a trip"""
    try:
        stored = await service.get(trip_id)
        url = build_share_url(settings.PUBLIC_BASE_URL, stored.trip)
    except DOMAIN_ERRORS as exc:
        raise to_http_exception(exc)
    return ShareLinkResponse(token=ShareCodec.encode(stored.trip), url=url)


@router.post("/share/import", response_model=TripResponse)
async def import_share_link(
    request: ShareImportRequest,
    repo: TripRepository = Depends(get_trip_repository)
):
    """Add the trip from a share link to the collection, read-only"""
    token = request.token
    if request.url:
        token = extract_token(request.url)
        if token is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Not a share link"
            )

    try:
        return TripResponse.from_stored(await import_shared_trip(repo, token))
    except DOMAIN_ERRORS as exc:
        raise to_http_exception(exc)
