from .key_value_store import KeyValueStore
from .session_repository import SessionRepository
from .collection_repository import CollectionRepository
from .appointment_repository import AppointmentRepository
from .case_repository import CaseRepository
from .task_repository import TaskRepository
from .message_repository import MessageRepository
from .notification_repository import NotificationRepository
from .document_repository import DocumentRepository

__all__ = [
    "KeyValueStore",
    "SessionRepository",
    "CollectionRepository",
    "AppointmentRepository",
    "CaseRepository",
    "TaskRepository",
    "MessageRepository",
    "NotificationRepository",
    "DocumentRepository",
]
