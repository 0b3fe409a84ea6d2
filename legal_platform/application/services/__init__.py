from .session_service import SessionService
from .appointment_service import AppointmentService
from .case_service import CaseService
from .task_service import TaskService
from .message_service import MessageService
from .notification_service import NotificationService
from .document_service import DocumentService
from .demo_seeder import DemoSeeder
from .lawyer_directory_service import LawyerDirectoryService

__all__ = [
    "SessionService",
    "AppointmentService",
    "CaseService",
    "TaskService",
    "MessageService",
    "NotificationService",
    "DocumentService",
    "DemoSeeder",
    "LawyerDirectoryService",
]
