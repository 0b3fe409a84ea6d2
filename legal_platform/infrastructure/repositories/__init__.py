from .appointment_repository import JsonAppointmentRepository
from .case_repository import JsonCaseRepository
from .document_repository import JsonDocumentRepository
from .json_collection_repository import JsonCollectionRepository
from .message_repository import JsonMessageRepository
from .notification_repository import JsonNotificationRepository
from .session_repository import KeyValueSessionRepository
from .task_repository import JsonTaskRepository

__all__ = [
    "JsonAppointmentRepository",
    "JsonCaseRepository",
    "JsonDocumentRepository",
    "JsonCollectionRepository",
    "JsonMessageRepository",
    "JsonNotificationRepository",
    "KeyValueSessionRepository",
    "JsonTaskRepository",
]
