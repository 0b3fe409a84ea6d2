from .user import User, UserRole, SessionContext, AuthResult
from .appointment import Appointment, AppointmentStatus
from .case import Case, CaseStatus, CasePriority
from .task import Task, TaskStatus
from .chat_message import ChatMessage
from .document import Document, DOCUMENT_FOLDERS, DEFAULT_FOLDER
from .notification import Notification, NotificationType
from .lawyer import Lawyer

__all__ = [
    "User",
    "UserRole",
    "SessionContext",
    "AuthResult",
    "Appointment",
    "AppointmentStatus",
    "Case",
    "CaseStatus",
    "CasePriority",
    "Task",
    "TaskStatus",
    "ChatMessage",
    "Document",
    "DOCUMENT_FOLDERS",
    "DEFAULT_FOLDER",
    "Notification",
    "NotificationType",
    "Lawyer",
]
