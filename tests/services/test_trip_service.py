import pytest

from app.schemas.trip import ExpenseDraft
from app.services.trip_service import (
    BlankNameError,
    ReadOnlyTripError,
    TripNotFoundError,
    TripService,
)
from app.utils.expense_validation import ExpenseValidationError


@pytest.fixture
def service(repo):
    return TripService(repo)


async def _trip_with_members(service, *names):
    stored = await service.create_trip("Hội An")
    for name in names:
        stored = await service.add_member(stored.id, name)
    return stored


@pytest.mark.asyncio
async def test_create_trip(service):
    stored = await service.create_trip("  Hội An  ")

    assert len(stored.trip.id) == 7
    assert stored.trip.name == "Hội An"
    assert stored.trip.cover_image == "https://picsum.photos/seed/Hội An/600/400"
    assert stored.trip.start_date is not None
    assert stored.trip.members == []
    assert stored.read_only is False


@pytest.mark.asyncio
async def test_get_missing_trip(service):
    with pytest.raises(TripNotFoundError):
        await service.get("nope")


@pytest.mark.asyncio
async def test_blank_trip_name_rejected(service):
    with pytest.raises(BlankNameError):
        await service.create_trip("   ")

    assert await service.list_trips() == []


@pytest.mark.asyncio
async def test_rename_to_blank_rejected(service):
    stored = await service.create_trip("Huế")

    with pytest.raises(BlankNameError):
        await service.rename_trip(stored.id, " ")

    assert (await service.get(stored.id)).trip.name == "Huế"


@pytest.mark.asyncio
async def test_add_member_trims_name(service):
    stored = await _trip_with_members(service, "  Lan ")

    assert [m.name for m in stored.trip.members] == ["Lan"]


@pytest.mark.asyncio
async def test_add_blank_member_rejected(service):
    stored = await service.create_trip("Huế")

    with pytest.raises(BlankNameError):
        await service.add_member(stored.id, "   ")


@pytest.mark.asyncio
async def test_add_member_does_not_mutate_previous_value(service):
    before = await service.create_trip("Huế")

    after = await service.add_member(before.id, "Lan")

    assert before.trip.members == []
    assert len(after.trip.members) == 1


@pytest.mark.asyncio
async def test_add_expense_defaults_to_everyone_and_prepends(service):
    stored = await _trip_with_members(service, "Lan", "Minh")
    lan, minh = stored.trip.members

    stored = await service.add_expense(stored.id, ExpenseDraft(
        description="Bánh mì", amount=60000, payer_id=lan.id
    ))
    stored = await service.add_expense(stored.id, ExpenseDraft(
        description="Cà phê", amount=40000.0, payer_id=minh.id, involved_member_ids=[minh.id]
    ))

    first, second = stored.trip.expenses
    assert first.description == "Cà phê"
    assert first.amount == 40000 and isinstance(first.amount, int)
    assert first.involved_member_ids == [minh.id]
    assert second.involved_member_ids is None


@pytest.mark.asyncio
async def test_add_invalid_expense(service):
    stored = await _trip_with_members(service, "Lan")
    lan = stored.trip.members[0]

    with pytest.raises(ExpenseValidationError):
        await service.add_expense(stored.id, ExpenseDraft(description="", amount=10, payer_id=lan.id))

    assert (await service.get(stored.id)).trip.expenses == []


@pytest.mark.asyncio
async def test_update_expense_keeps_id_and_date(service):
    stored = await _trip_with_members(service, "Lan", "Minh")
    lan, minh = stored.trip.members
    stored = await service.add_expense(stored.id, ExpenseDraft(
        description="Taxi", amount=100000, payer_id=lan.id
    ))
    original = stored.trip.expenses[0]

    stored = await service.update_expense(stored.id, original.id, ExpenseDraft(
        description="Grab", amount=120000, payer_id=minh.id, involved_member_ids=[lan.id]
    ))

    updated = stored.trip.expenses[0]
    assert updated.id == original.id
    assert updated.date == original.date
    assert (updated.description, updated.amount, updated.payer_id) == ("Grab", 120000, minh.id)


@pytest.mark.asyncio
async def test_update_missing_expense(service):
    stored = await _trip_with_members(service, "Lan")

    with pytest.raises(TripNotFoundError):
        await service.update_expense(stored.id, "nope", ExpenseDraft(
            description="x", amount=1, payer_id=stored.trip.members[0].id
        ))


@pytest.mark.asyncio
async def test_delete_expense(service):
    stored = await _trip_with_members(service, "Lan")
    stored = await service.add_expense(stored.id, ExpenseDraft(
        description="Vé", amount=50000, payer_id=stored.trip.members[0].id
    ))

    stored = await service.delete_expense(stored.id, stored.trip.expenses[0].id)

    assert stored.trip.expenses == []


@pytest.mark.asyncio
async def test_remove_member_keeps_expenses(service):
    stored = await _trip_with_members(service, "Lan", "Minh")
    lan, minh = stored.trip.members
    stored = await service.add_expense(stored.id, ExpenseDraft(
        description="Phòng", amount=800000, payer_id=minh.id
    ))

    stored = await service.remove_member(stored.id, minh.id)

    assert [m.id for m in stored.trip.members] == [lan.id]
    assert stored.trip.expenses[0].payer_id == minh.id


@pytest.mark.asyncio
async def test_read_only_trip_rejects_edits_until_unlocked(service, repo, sample_trip):
    await repo.insert_trip(sample_trip, read_only=True)

    with pytest.raises(ReadOnlyTripError):
        await service.add_member(sample_trip.id, "Lan")

    stored = await service.enable_editing(sample_trip.id)
    assert stored.read_only is False

    stored = await service.add_member(sample_trip.id, "Lan")
    assert stored.trip.members[-1].name == "Lan"


@pytest.mark.asyncio
async def test_delete_trip(service):
    stored = await service.create_trip("Huế")

    await service.delete_trip(stored.id)

    with pytest.raises(TripNotFoundError):
        await service.delete_trip(stored.id)
