from .auth import AuthResponse, LoginRequest, ProfileUpdate, SignupRequest, UserResponse
from .appointment import AppointmentCreate, AppointmentUpdate, AppointmentResponse
from .case import CaseCreate, CaseUpdate, CaseResponse
from .task import TaskCreate, TaskUpdate, TaskResponse, TaskSchema
from .message import MessageCreate, MessageResponse, MessageSend
from .notification import NotificationCreate, NotificationResponse
from .document import DocumentUpload, DocumentResponse, DocumentSchema
from .lawyer import BookingRequest, LawyerResponse

__all__ = [
    "AuthResponse",
    "LoginRequest",
    "ProfileUpdate",
    "SignupRequest",
    "UserResponse",
    "AppointmentCreate",
    "AppointmentUpdate",
    "AppointmentResponse",
    "CaseCreate",
    "CaseUpdate",
    "CaseResponse",
    "TaskCreate",
    "TaskUpdate",
    "TaskResponse",
    "TaskSchema",
    "MessageCreate",
    "MessageResponse",
    "MessageSend",
    "NotificationCreate",
    "NotificationResponse",
    "DocumentUpload",
    "DocumentResponse",
    "DocumentSchema",
    "BookingRequest",
    "LawyerResponse",
]
