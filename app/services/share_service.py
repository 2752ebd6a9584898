"""
Share links: the URL guard around ShareCodec and importing shared trips.

The codec itself knows nothing about URLs; the fragment marker and the
length limit live here.
"""

import logging
from typing import Optional

from app.core.config import settings
from app.models.trip import Trip
from app.models.trip_document import TripInDB
from app.repositories.trip_repo import TripRepository
from app.services.share_codec import ShareCodec

logger = logging.getLogger(__name__)


class ShareLinkTooLongError(Exception):
    def __init__(self, length: int, limit: int):
        super().__init__(f"Share link is {length} characters, limit is {limit}")
        self.length = length
        self.limit = limit


class ShareDecodeError(ValueError):
    """Token could not be turned back into a trip."""
    pass


def build_share_url(
    base_url: str,
    trip: Trip,
    marker: Optional[str] = None,
    max_length: Optional[int] = None
) -> str:
    """Base URL (any existing fragment dropped) + marker + token, length checked."""
    marker = marker or settings.SHARE_FRAGMENT_MARKER
    limit = max_length or settings.SHARE_URL_MAX_LENGTH

    url = base_url.split("#", 1)[0] + marker + ShareCodec.encode(trip)
    if len(url) > limit:
        raise ShareLinkTooLongError(len(url), limit)
    return url


def extract_token(url_or_fragment: str, marker: Optional[str] = None) -> Optional[str]:
    """Token after the share marker, or None when the marker is missing."""
    marker = marker or settings.SHARE_FRAGMENT_MARKER
    if marker not in url_or_fragment:
        return None
    return url_or_fragment.split(marker, 1)[1]


async def import_shared_trip(repo: TripRepository, token: str) -> TripInDB:
    """
    Add a shared trip to the collection, read-only.

    A trip whose id is already present is returned as stored, not
    overwritten. An undecodable token raises ShareDecodeError before
    anything is written.
    """
    trip = ShareCodec.decode(token)
    if trip is None:
        raise ShareDecodeError("Invalid share link")

    existing = await repo.get_trip(trip.id)
    if existing is not None:
        logger.info("Shared trip %s already present, keeping stored copy", trip.id)
        return existing

    stored = await repo.insert_trip(trip, read_only=True)
    logger.info("Imported shared trip %s", trip.id)
    return stored
