"""Unit tests for the CaseService and TaskService."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from legal_platform.application.schemas import CaseCreate, CaseUpdate, TaskCreate, TaskUpdate
from legal_platform.application.services import CaseService, TaskService
from legal_platform.domain.entities import CasePriority, CaseStatus, TaskStatus, UserRole
from legal_platform.infrastructure.repositories import JsonCaseRepository, JsonTaskRepository
from legal_platform.infrastructure.storage import InMemoryKeyValueStore


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def case_service(store: InMemoryKeyValueStore) -> CaseService:
    return CaseService(JsonCaseRepository(store, prefix="test"))


@pytest.fixture
def task_service(store: InMemoryKeyValueStore) -> TaskService:
    return TaskService(JsonTaskRepository(store, prefix="test"))


def _case(**overrides) -> CaseCreate:
    values = dict(
        client_id="1",
        lawyer_id="2",
        client_name="John Client",
        lawyer_name="Sarah Chen",
        title="Contract Review",
        description="Review of supplier agreement",
        type="Corporate Law",
    )
    values.update(overrides)
    return CaseCreate(**values)


def _task(**overrides) -> TaskCreate:
    values = dict(
        case_id="case_1",
        title="Sign engagement letter",
        assigned_to="1",
        assigned_by="2",
        due_date=datetime.now(timezone.utc) + timedelta(days=7),
    )
    values.update(overrides)
    return TaskCreate(**values)


@pytest.mark.asyncio
async def test_create_case_defaults(case_service: CaseService):
    case = await case_service.create_case(_case())

    assert case.id.startswith("case_")
    assert case.status == CaseStatus.ACTIVE
    assert case.priority == CasePriority.MEDIUM
    assert case.progress == 0
    assert case.documents == []
    assert case.tasks == []
    assert case.created_at == case.updated_at


@pytest.mark.asyncio
async def test_list_cases_by_role(case_service: CaseService):
    created = await case_service.create_case(_case())

    assert await case_service.list_cases("1", UserRole.CLIENT) == [created]
    assert await case_service.list_cases("2", UserRole.LAWYER) == [created]
    assert await case_service.list_cases("1", UserRole.LAWYER) == []


@pytest.mark.asyncio
async def test_update_case_refreshes_updated_at(case_service: CaseService):
    created = await case_service.create_case(_case())

    updated = await case_service.update_case(created.id, CaseUpdate(progress=40))

    assert updated.progress == 40
    assert updated.updated_at >= created.updated_at
    assert updated.created_at == created.created_at
    assert updated.title == created.title


@pytest.mark.asyncio
async def test_get_case(case_service: CaseService):
    created = await case_service.create_case(_case())
    assert await case_service.get_case(created.id) == created
    assert await case_service.get_case("case_missing") is None


@pytest.mark.asyncio
async def test_update_unknown_case_is_a_no_op(
    case_service: CaseService, store: InMemoryKeyValueStore
):
    await case_service.create_case(_case())
    raw_before = await store.get_item("test_cases")

    assert await case_service.update_case("case_missing", CaseUpdate(progress=99)) is None
    assert await store.get_item("test_cases") == raw_before


def test_case_progress_is_bounded():
    with pytest.raises(ValidationError):
        _case(progress=101)
    with pytest.raises(ValidationError):
        CaseUpdate(progress=-1)


@pytest.mark.asyncio
async def test_tasks_assigned_to_and_by(task_service: TaskService):
    mine = await task_service.create_task(_task(assigned_to="1", assigned_by="2"))
    lawyers_own = await task_service.create_task(_task(assigned_to="2", assigned_by="2"))

    assert await task_service.list_tasks("1") == [mine]
    assert await task_service.list_tasks_assigned_by("2") == [mine, lawyers_own]


@pytest.mark.asyncio
async def test_set_task_status_changes_only_status(task_service: TaskService):
    created = await task_service.create_task(_task())

    updated = await task_service.set_task_status(created.id, TaskStatus.COMPLETED)

    assert updated.status == TaskStatus.COMPLETED
    assert updated.due_date == created.due_date
    assert updated.title == created.title


@pytest.mark.asyncio
async def test_update_task_fields(task_service: TaskService):
    created = await task_service.create_task(_task())

    updated = await task_service.update_task(created.id, TaskUpdate(title="Sign and return"))

    assert updated.title == "Sign and return"
    assert updated.status == TaskStatus.PENDING


@pytest.mark.asyncio
async def test_null_task_title_is_ignored(task_service: TaskService):
    created = await task_service.create_task(_task())

    updated = await task_service.update_task(created.id, TaskUpdate(title=None, description="Now"))

    assert updated.title == "Sign engagement letter"
    assert updated.description == "Now"
    assert await task_service.list_tasks("1") == [updated]


@pytest.mark.asyncio
async def test_null_case_fields_are_ignored(case_service: CaseService):
    created = await case_service.create_case(_case())

    updated = await case_service.update_case(created.id, CaseUpdate(title=None, status=None, progress=10))

    assert updated.title == "Contract Review"
    assert updated.status == created.status
    assert updated.progress == 10
    assert await case_service.get_case(created.id) == updated
