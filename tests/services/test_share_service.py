import pytest

from app.models.trip import Trip
from app.services.share_codec import ShareCodec
from app.services.share_service import (
    ShareDecodeError,
    ShareLinkTooLongError,
    build_share_url,
    extract_token,
    import_shared_trip,
)


def test_build_share_url_appends_marker_and_token(sample_trip):
    url = build_share_url("https://trips.example/app", sample_trip)

    assert url == "https://trips.example/app#share=" + ShareCodec.encode(sample_trip)


def test_build_share_url_drops_existing_fragment(sample_trip):
    url = build_share_url("https://trips.example/#share=old", sample_trip)

    assert url.count("#") == 1
    assert url.startswith("https://trips.example/#share=")


def test_build_share_url_rejects_long_urls(sample_trip):
    with pytest.raises(ShareLinkTooLongError) as exc_info:
        build_share_url("https://trips.example/", sample_trip, max_length=50)

    assert exc_info.value.limit == 50
    assert exc_info.value.length > 50


def test_extract_token_round_trips_with_build(sample_trip):
    url = build_share_url("https://trips.example/", sample_trip)

    assert ShareCodec.decode(extract_token(url)) == sample_trip


def test_extract_token_from_fragment_only():
    assert extract_token("#share=abc=") == "abc="


def test_extract_token_without_marker():
    assert extract_token("https://trips.example/#other=1") is None


@pytest.mark.asyncio
async def test_import_adds_trip_read_only(repo, sample_trip):
    stored = await import_shared_trip(repo, ShareCodec.encode(sample_trip))

    assert stored.read_only is True
    assert stored.trip == sample_trip
    assert (await repo.get_trip(sample_trip.id)).read_only is True


@pytest.mark.asyncio
async def test_import_keeps_existing_trip(repo, sample_trip):
    await repo.insert_trip(sample_trip)
    changed = sample_trip.model_copy(update={"name": "Renamed elsewhere"})

    stored = await import_shared_trip(repo, ShareCodec.encode(changed))

    assert stored.trip.name == sample_trip.name
    assert stored.read_only is False


@pytest.mark.asyncio
async def test_import_invalid_token_leaves_collection_untouched(repo):
    with pytest.raises(ShareDecodeError):
        await import_shared_trip(repo, "not-valid-token!!!")

    assert repo.trips == {}


@pytest.mark.asyncio
async def test_import_empty_trip(repo):
    stored = await import_shared_trip(repo, ShareCodec.encode(Trip(id="solo")))

    assert stored.trip.members == []
    assert stored.trip.expenses == []
