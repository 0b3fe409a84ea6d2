"""Unit tests for the AppointmentService."""

from datetime import timezone

import pytest

from legal_platform.application.schemas import AppointmentCreate, AppointmentUpdate
from legal_platform.application.services import AppointmentService
from legal_platform.domain.entities import AppointmentStatus, UserRole
from legal_platform.infrastructure.repositories import JsonAppointmentRepository
from legal_platform.infrastructure.storage import InMemoryKeyValueStore


@pytest.fixture
def service() -> AppointmentService:
    repository = JsonAppointmentRepository(InMemoryKeyValueStore(), prefix="test")
    return AppointmentService(repository, meet_link_base="https://meet.example.com/")


def _booking(**overrides) -> AppointmentCreate:
    values = dict(
        client_id="1",
        lawyer_id="2",
        client_name="John Client",
        lawyer_name="Sarah Chen",
        date="2026-10-20",
        time="14:30",
        case_type="Family Law",
        notes="Custody question",
    )
    values.update(overrides)
    return AppointmentCreate(**values)


@pytest.mark.asyncio
async def test_create_synthesizes_id_meet_link_and_status(service: AppointmentService):
    appointment = await service.create_appointment(_booking())

    assert appointment.id.startswith("apt_")
    assert appointment.status == AppointmentStatus.PENDING
    assert appointment.duration == 60
    millis = int(appointment.created_at.timestamp() * 1000)
    assert appointment.meet_link == f"https://meet.example.com/meet_{millis}"
    assert appointment.created_at.tzinfo == timezone.utc


@pytest.mark.asyncio
async def test_created_appointment_is_listed_unchanged(service: AppointmentService):
    created = await service.create_appointment(_booking())

    listed = await service.list_appointments("1", UserRole.CLIENT)

    assert listed == [created]
    assert listed[0].notes == "Custody question"


@pytest.mark.asyncio
async def test_listing_is_scoped_by_role(service: AppointmentService):
    await service.create_appointment(_booking(client_id="1", lawyer_id="2"))
    await service.create_appointment(_booking(client_id="7", lawyer_id="2"))

    assert len(await service.list_appointments("1", UserRole.CLIENT)) == 1
    assert len(await service.list_appointments("2", UserRole.LAWYER)) == 2
    assert await service.list_appointments("2", UserRole.CLIENT) == []


@pytest.mark.asyncio
async def test_status_update_leaves_other_fields_unchanged(service: AppointmentService):
    created = await service.create_appointment(_booking())

    updated = await service.update_appointment(
        created.id, AppointmentUpdate(status=AppointmentStatus.CONFIRMED)
    )

    assert updated.status == AppointmentStatus.CONFIRMED
    created.status = AppointmentStatus.CONFIRMED
    assert updated == created


@pytest.mark.asyncio
async def test_accept_reject_cancel(service: AppointmentService):
    first = await service.create_appointment(_booking())
    second = await service.create_appointment(_booking())

    assert (await service.accept(first.id)).status == AppointmentStatus.CONFIRMED
    assert (await service.reject(second.id)).status == AppointmentStatus.CANCELLED
    assert (await service.cancel(first.id)).status == AppointmentStatus.CANCELLED


@pytest.mark.asyncio
async def test_update_unknown_appointment_is_a_no_op(service: AppointmentService):
    await service.create_appointment(_booking())

    assert await service.accept("apt_missing") is None
    assert len(await service.list_appointments("1", UserRole.CLIENT)) == 1


def test_booking_rejects_malformed_date():
    with pytest.raises(ValueError):
        _booking(date="20/10/2026")


@pytest.mark.asyncio
async def test_null_fields_in_a_patch_leave_stored_values_alone(service: AppointmentService):
    created = await service.create_appointment(_booking())

    updated = await service.update_appointment(
        created.id, AppointmentUpdate(status=None, date=None, notes="Bring ID")
    )
    listed = await service.list_appointments("1", UserRole.CLIENT)

    assert updated.status == AppointmentStatus.PENDING
    assert updated.date == "2026-10-20"
    assert updated.notes == "Bring ID"
    assert listed == [updated]
