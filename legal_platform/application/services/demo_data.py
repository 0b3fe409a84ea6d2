"""Fixed demo identities and the example records seeded for them.

Two identities exist: client ``"1"`` (John Client) and lawyer ``"2"``
(Sarah Chen). Every fixture cross-references those ids and the single
demo case ``case_1``.
"""

from datetime import datetime, timedelta, timezone

from legal_platform.domain.entities import (
    Appointment,
    AppointmentStatus,
    Case,
    CasePriority,
    CaseStatus,
    ChatMessage,
    Document,
    Lawyer,
    Notification,
    NotificationType,
    Task,
    TaskStatus,
    User,
    UserRole,
)

DEMO_CLIENT_ID = "1"
DEMO_LAWYER_ID = "2"
DEMO_CASE_ID = "case_1"

_CLIENT_NAME = "John Client"
_LAWYER_NAME = "Sarah Chen"
_PRACTICE_AREA = "Criminal Law"


def demo_users() -> list[User]:
    """The roster that login and signup check against."""
    now = datetime.now(timezone.utc)
    return [
        User(
            id=DEMO_CLIENT_ID,
            name=_CLIENT_NAME,
            email="client@demo.com",
            role=UserRole.CLIENT,
            phone="+1 234 567 8900",
            address="123 Main St, New York, NY",
            created_at=now,
        ),
        User(
            id=DEMO_LAWYER_ID,
            name=_LAWYER_NAME,
            email="lawyer@demo.com",
            role=UserRole.LAWYER,
            specialty=_PRACTICE_AREA,
            experience=12,
            rating=4.9,
            fees="$300/hour",
            bio="Experienced criminal defense attorney with a track record of successful cases.",
            phone="+1 234 567 8901",
            address="456 Law St, New York, NY",
            created_at=now,
        ),
    ]


def demo_lawyers() -> list[Lawyer]:
    """The public directory. Sarah Chen shares the id of the demo lawyer account."""
    photo = "/api/placeholder/300/300"
    weekdays = ["Mon", "Tue", "Wed", "Thu", "Fri"]
    return [
        Lawyer(
            id=DEMO_LAWYER_ID,
            name=_LAWYER_NAME,
            photo=photo,
            specialty=_PRACTICE_AREA,
            experience=12,
            rating=4.9,
            location="New York, NY",
            bio="Experienced criminal defense attorney with a track record of successful cases.",
            availability=list(weekdays),
            fees="$300/hour",
        ),
        Lawyer(
            id="3",
            name="Michael Rodriguez",
            photo=photo,
            specialty="Civil Law",
            experience=8,
            rating=4.8,
            location="Los Angeles, CA",
            bio="Civil litigation specialist focusing on personal injury and contract disputes.",
            availability=["Mon", "Wed", "Fri"],
            fees="$250/hour",
        ),
        Lawyer(
            id="4",
            name="Emily Johnson",
            photo=photo,
            specialty="Family Law",
            experience=10,
            rating=4.9,
            location="Chicago, IL",
            bio="Compassionate family law attorney helping clients through difficult transitions.",
            availability=["Tue", "Thu", "Sat"],
            fees="$275/hour",
        ),
        Lawyer(
            id="5",
            name="David Kumar",
            photo=photo,
            specialty="Corporate Law",
            experience=15,
            rating=4.7,
            location="San Francisco, CA",
            bio="Corporate attorney specializing in business formation and intellectual property.",
            availability=list(weekdays),
            fees="$400/hour",
        ),
        Lawyer(
            id="6",
            name="Lisa Thompson",
            photo=photo,
            specialty="Immigration Law",
            experience=9,
            rating=4.8,
            location="Miami, FL",
            bio=(
                "Immigration attorney helping individuals and families navigate "
                "complex legal processes."
            ),
            availability=["Mon", "Wed", "Thu", "Fri"],
            fees="$200/hour",
        ),
        Lawyer(
            id="7",
            name="Robert Wilson",
            photo=photo,
            specialty="Real Estate Law",
            experience=11,
            rating=4.6,
            location="Austin, TX",
            bio="Real estate attorney with expertise in property transactions and zoning law.",
            availability=["Tue", "Wed", "Thu", "Fri"],
            fees="$225/hour",
        ),
    ]


def demo_appointments(now: datetime) -> list[Appointment]:
    return [
        Appointment(
            id="apt_1",
            client_id=DEMO_CLIENT_ID,
            lawyer_id=DEMO_LAWYER_ID,
            client_name=_CLIENT_NAME,
            lawyer_name=_LAWYER_NAME,
            date=(now + timedelta(days=1)).date().isoformat(),
            time="10:00",
            duration=60,
            status=AppointmentStatus.CONFIRMED,
            meet_link="https://meet.google.com/demo-meeting-1",
            notes="Initial consultation for criminal case",
            case_type=_PRACTICE_AREA,
            created_at=now,
        ),
        Appointment(
            id="apt_2",
            client_id=DEMO_CLIENT_ID,
            lawyer_id=DEMO_LAWYER_ID,
            client_name=_CLIENT_NAME,
            lawyer_name=_LAWYER_NAME,
            date=(now - timedelta(days=1)).date().isoformat(),
            time="14:00",
            duration=45,
            status=AppointmentStatus.COMPLETED,
            meet_link="https://meet.google.com/demo-meeting-2",
            notes="Case review and strategy discussion",
            case_type=_PRACTICE_AREA,
            created_at=now - timedelta(days=2),
        ),
    ]


def demo_cases(now: datetime) -> list[Case]:
    return [
        Case(
            id=DEMO_CASE_ID,
            client_id=DEMO_CLIENT_ID,
            lawyer_id=DEMO_LAWYER_ID,
            client_name=_CLIENT_NAME,
            lawyer_name=_LAWYER_NAME,
            title="Criminal Defense Case",
            description="Defense against criminal charges related to financial fraud allegations.",
            type=_PRACTICE_AREA,
            status=CaseStatus.ACTIVE,
            priority=CasePriority.HIGH,
            progress=65,
            created_at=now - timedelta(weeks=1),
            updated_at=now,
        ),
    ]


def demo_tasks(now: datetime) -> list[Task]:
    return [
        Task(
            id="task_1",
            case_id=DEMO_CASE_ID,
            title="Upload Financial Documents",
            description=(
                "Please upload all financial documents related to the case "
                "including bank statements and tax returns."
            ),
            assigned_to=DEMO_CLIENT_ID,
            assigned_by=DEMO_LAWYER_ID,
            due_date=now + timedelta(weeks=1),
            status=TaskStatus.PENDING,
            created_at=now,
        ),
        Task(
            id="task_2",
            case_id=DEMO_CASE_ID,
            title="Prepare Case Summary",
            description="Prepare comprehensive case summary for court filing.",
            assigned_to=DEMO_LAWYER_ID,
            assigned_by=DEMO_LAWYER_ID,
            due_date=now + timedelta(days=3),
            status=TaskStatus.PENDING,
            created_at=now,
        ),
    ]


def demo_messages(now: datetime) -> list[ChatMessage]:
    return [
        ChatMessage(
            id="msg_1",
            case_id=DEMO_CASE_ID,
            sender_id=DEMO_LAWYER_ID,
            sender_name=_LAWYER_NAME,
            sender_role=UserRole.LAWYER,
            message=(
                "Hello John, I hope you're doing well. I've reviewed your case "
                "details and we have a strong defense strategy."
            ),
            timestamp=now - timedelta(hours=1),
            is_read=True,
        ),
        ChatMessage(
            id="msg_2",
            case_id=DEMO_CASE_ID,
            sender_id=DEMO_CLIENT_ID,
            sender_name=_CLIENT_NAME,
            sender_role=UserRole.CLIENT,
            message=(
                "Thank you Sarah. I'm feeling more confident about this. "
                "What documents do you need from me?"
            ),
            timestamp=now - timedelta(minutes=30),
            is_read=True,
        ),
        ChatMessage(
            id="msg_3",
            case_id=DEMO_CASE_ID,
            sender_id=DEMO_LAWYER_ID,
            sender_name=_LAWYER_NAME,
            sender_role=UserRole.LAWYER,
            message=(
                "I've assigned you a task to upload the financial documents. "
                "Please check your task list."
            ),
            timestamp=now - timedelta(minutes=15),
            is_read=False,
        ),
    ]


def demo_notifications(now: datetime, user_id: str) -> list[Notification]:
    """Notifications addressed to whoever is signed in when seeding runs."""
    return [
        Notification(
            id="notif_1",
            user_id=user_id,
            title="New Message",
            message=f"You have a new message from {_LAWYER_NAME}",
            type=NotificationType.MESSAGE,
            is_read=False,
            created_at=now - timedelta(minutes=15),
            link=f"/chat/{DEMO_CASE_ID}",
        ),
        Notification(
            id="notif_2",
            user_id=user_id,
            title="Task Assigned",
            message="New task: Upload Financial Documents",
            type=NotificationType.TASK,
            is_read=False,
            created_at=now - timedelta(minutes=30),
            link="/tasks",
        ),
        Notification(
            id="notif_3",
            user_id=user_id,
            title="Appointment Confirmed",
            message=f"Your appointment with {_LAWYER_NAME} has been confirmed",
            type=NotificationType.APPOINTMENT,
            is_read=True,
            created_at=now - timedelta(days=1),
            link="/appointments",
        ),
    ]


def demo_documents(now: datetime, uploader_id: str) -> list[Document]:
    """The example file listing of the demo case, one file per main folder."""
    return [
        Document(
            id="doc_1",
            case_id=DEMO_CASE_ID,
            name="Case_Summary.pdf",
            type="application/pdf",
            size=1_024_000,
            uploaded_by=uploader_id,
            uploaded_at=now - timedelta(days=1),
            url="/mock/documents/case_summary.pdf",
            folder="court-filings",
        ),
        Document(
            id="doc_2",
            case_id=DEMO_CASE_ID,
            name="Evidence_Photos.zip",
            type="application/zip",
            size=5_120_000,
            uploaded_by=uploader_id,
            uploaded_at=now - timedelta(days=2),
            url="/mock/documents/evidence_photos.zip",
            folder="evidence",
        ),
        Document(
            id="doc_3",
            case_id=DEMO_CASE_ID,
            name="Client_Statement.docx",
            type="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            size=256_000,
            uploaded_by=uploader_id,
            uploaded_at=now - timedelta(days=3),
            url="/mock/documents/client_statement.docx",
            folder="client-documents",
        ),
        Document(
            id="doc_4",
            case_id=DEMO_CASE_ID,
            name="Legal_Precedent_Research.pdf",
            type="application/pdf",
            size=2_048_000,
            uploaded_by=DEMO_LAWYER_ID,
            uploaded_at=now - timedelta(days=4),
            url="/mock/documents/legal_research.pdf",
            folder="legal-research",
        ),
        Document(
            id="doc_5",
            case_id=DEMO_CASE_ID,
            name="Contract_Agreement.pdf",
            type="application/pdf",
            size=512_000,
            uploaded_by=DEMO_LAWYER_ID,
            uploaded_at=now - timedelta(days=5),
            url="/mock/documents/contract.pdf",
            folder="contracts",
        ),
    ]
