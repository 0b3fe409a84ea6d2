"""Demo seeder — fills empty collections with example records for a signed-in user."""

import logging
from datetime import datetime, timezone

from legal_platform.application.interfaces import (
    AppointmentRepository,
    CaseRepository,
    DocumentRepository,
    MessageRepository,
    NotificationRepository,
    TaskRepository,
)
from legal_platform.application.services import demo_data
from legal_platform.application.services.session_service import SessionService

logger = logging.getLogger(__name__)


class DemoSeeder:
    """Seeds each collection independently, and only while it is empty.

    Running it again over populated collections writes nothing, so it is
    safe to call on every startup. A partially seeded store (some
    collections filled by real use first) is left as is.
    """

    def __init__(
        self,
        session_service: SessionService,
        appointments: AppointmentRepository,
        cases: CaseRepository,
        tasks: TaskRepository,
        messages: MessageRepository,
        notifications: NotificationRepository,
        documents: DocumentRepository,
    ):
        self._session_service = session_service
        self._appointments = appointments
        self._cases = cases
        self._tasks = tasks
        self._messages = messages
        self._notifications = notifications
        self._documents = documents

    async def seed(self, now: datetime | None = None) -> list[str]:
        """Seed every empty collection. Returns the names of the collections written.

        Does nothing without a current user.
        """
        user = await self._session_service.get_current_user()
        if user is None:
            logger.debug("No current user — skipping demo seeding")
            return []

        now = now or datetime.now(timezone.utc)
        plan = [
            ("appointments", self._appointments, demo_data.demo_appointments(now)),
            ("cases", self._cases, demo_data.demo_cases(now)),
            ("tasks", self._tasks, demo_data.demo_tasks(now)),
            ("messages", self._messages, demo_data.demo_messages(now)),
            ("notifications", self._notifications, demo_data.demo_notifications(now, user.id)),
            ("documents", self._documents, demo_data.demo_documents(now, user.id)),
        ]

        seeded: list[str] = []
        for name, repository, fixtures in plan:
            if await repository.seed_if_empty(fixtures):
                seeded.append(name)

        if seeded:
            logger.info("Seeded demo data for user %s: %s", user.id, ", ".join(seeded))
        return seeded
