from typing import List
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_trip_repository
from app.main import app
from app.models.trip import Member, Trip
from tests.factories import InMemoryTripRepository, make_expense


@pytest.fixture
def members() -> List[Member]:
    return [
        Member(id="a", name="An"),
        Member(id="b", name="Bình"),
        Member(id="c", name="Chi"),
    ]


@pytest.fixture
def sample_trip(members) -> Trip:
    return Trip(
        id="trip01",
        name="Đà Lạt 2024",
        cover_image="https://picsum.photos/seed/dalat/600/400",
        start_date="2024-05-01",
        members=members,
        expenses=[
            make_expense(100, "b", involved=["a", "b"], expense_id="e2", description="Cà phê"),
            make_expense(300, "a", expense_id="e1"),
        ]
    )


@pytest.fixture
def repo() -> InMemoryTripRepository:
    return InMemoryTripRepository()


@pytest.fixture
def mock_db():
    """Motor database double: db[name] always returns the same collection mock."""
    collection = MagicMock()
    collection.insert_one = AsyncMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.replace_one = AsyncMock()
    collection.update_one = AsyncMock()
    collection.delete_one = AsyncMock()
    collection.count_documents = AsyncMock(return_value=0)

    db = MagicMock()
    db.__getitem__.return_value = collection
    db.collection = collection
    return db


@pytest.fixture
def client(repo):
    """TestClient wired to the in-memory repository; startup (MongoDB) is not run."""
    app.dependency_overrides[get_trip_repository] = lambda: repo
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
