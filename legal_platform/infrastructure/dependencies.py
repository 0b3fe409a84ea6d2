"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, HTTPException, Request, status

from legal_platform.config import get_settings
from legal_platform.application.interfaces import KeyValueStore
from legal_platform.application.services import (
    AppointmentService,
    CaseService,
    DemoSeeder,
    DocumentService,
    LawyerDirectoryService,
    MessageService,
    NotificationService,
    SessionService,
    TaskService,
)
from legal_platform.application.services.demo_data import demo_lawyers, demo_users
from legal_platform.domain.entities import SessionContext
from legal_platform.infrastructure.repositories import (
    JsonAppointmentRepository,
    JsonCaseRepository,
    JsonDocumentRepository,
    JsonMessageRepository,
    JsonNotificationRepository,
    JsonTaskRepository,
    KeyValueSessionRepository,
)


def get_key_value_store(request: Request) -> KeyValueStore:
    """The store built by the application factory (``app.state.store``)."""
    return request.app.state.store


def build_session_service(store: KeyValueStore) -> SessionService:
    settings = get_settings()
    return SessionService(
        repository=KeyValueSessionRepository(store, settings.storage_prefix),
        roster=demo_users(),
        demo_password=settings.demo_password,
    )


def build_demo_seeder(store: KeyValueStore) -> DemoSeeder:
    """Seeder wired to every collection of ``store``; also used at startup."""
    prefix = get_settings().storage_prefix
    return DemoSeeder(
        session_service=build_session_service(store),
        appointments=JsonAppointmentRepository(store, prefix),
        cases=JsonCaseRepository(store, prefix),
        tasks=JsonTaskRepository(store, prefix),
        messages=JsonMessageRepository(store, prefix),
        notifications=JsonNotificationRepository(store, prefix),
        documents=JsonDocumentRepository(store, prefix),
    )


async def get_session_service(
    store: KeyValueStore = Depends(get_key_value_store),
) -> AsyncGenerator[SessionService, None]:
    """Provides a SessionService bound to the current user/token keys."""
    yield build_session_service(store)


async def require_session(
    service: SessionService = Depends(get_session_service),
) -> SessionContext:
    """Route guard: the current session, or 401 when nobody is signed in."""
    session = await service.get_session()
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return session


async def get_appointment_service(
    store: KeyValueStore = Depends(get_key_value_store),
) -> AsyncGenerator[AppointmentService, None]:
    """Provides an AppointmentService instance with its repository wired up."""
    settings = get_settings()
    repository = JsonAppointmentRepository(store, settings.storage_prefix)
    yield AppointmentService(repository, meet_link_base=settings.meet_link_base)


async def get_case_service(
    store: KeyValueStore = Depends(get_key_value_store),
) -> AsyncGenerator[CaseService, None]:
    repository = JsonCaseRepository(store, get_settings().storage_prefix)
    yield CaseService(repository)


async def get_task_service(
    store: KeyValueStore = Depends(get_key_value_store),
) -> AsyncGenerator[TaskService, None]:
    repository = JsonTaskRepository(store, get_settings().storage_prefix)
    yield TaskService(repository)


async def get_message_service(
    store: KeyValueStore = Depends(get_key_value_store),
) -> AsyncGenerator[MessageService, None]:
    repository = JsonMessageRepository(store, get_settings().storage_prefix)
    yield MessageService(repository)


async def get_notification_service(
    store: KeyValueStore = Depends(get_key_value_store),
) -> AsyncGenerator[NotificationService, None]:
    repository = JsonNotificationRepository(store, get_settings().storage_prefix)
    yield NotificationService(repository)


async def get_document_service(
    store: KeyValueStore = Depends(get_key_value_store),
) -> AsyncGenerator[DocumentService, None]:
    repository = JsonDocumentRepository(store, get_settings().storage_prefix)
    yield DocumentService(repository)


async def get_demo_seeder(
    store: KeyValueStore = Depends(get_key_value_store),
) -> AsyncGenerator[DemoSeeder, None]:
    yield build_demo_seeder(store)


async def get_lawyer_directory_service() -> AsyncGenerator[LawyerDirectoryService, None]:
    yield LawyerDirectoryService(demo_lawyers())
