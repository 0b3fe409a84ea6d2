"""Unit tests for chat, notification and document services."""

import pytest
from pydantic import ValidationError

from legal_platform.application.schemas import (
    DocumentSchema,
    DocumentUpload,
    MessageCreate,
    NotificationCreate,
)
from legal_platform.application.services import (
    DocumentService,
    MessageService,
    NotificationService,
)
from legal_platform.domain.entities import NotificationType, UserRole
from legal_platform.infrastructure.repositories import (
    JsonDocumentRepository,
    JsonMessageRepository,
    JsonNotificationRepository,
)
from legal_platform.infrastructure.storage import InMemoryKeyValueStore


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def messages(store: InMemoryKeyValueStore) -> MessageService:
    return MessageService(JsonMessageRepository(store, prefix="test"))


@pytest.fixture
def notifications(store: InMemoryKeyValueStore) -> NotificationService:
    return NotificationService(JsonNotificationRepository(store, prefix="test"))


@pytest.fixture
def documents(store: InMemoryKeyValueStore) -> DocumentService:
    return DocumentService(JsonDocumentRepository(store, prefix="test"))


def _message(sender_id: str, text: str, case_id: str = "case_1") -> MessageCreate:
    role = UserRole.CLIENT if sender_id == "1" else UserRole.LAWYER
    return MessageCreate(
        case_id=case_id,
        sender_id=sender_id,
        sender_name="John Client" if sender_id == "1" else "Sarah Chen",
        sender_role=role,
        message=text,
    )


# ── Messages ──────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_send_message_defaults_to_unread(messages: MessageService):
    message = await messages.send_message(_message("2", "Hello"))

    assert message.id.startswith("msg_")
    assert message.is_read is False
    assert message.attachments is None
    assert await messages.list_messages("case_1") == [message]


@pytest.mark.asyncio
async def test_messages_are_listed_per_case_in_send_order(messages: MessageService):
    await messages.send_message(_message("2", "one"))
    await messages.send_message(_message("1", "other case", case_id="case_9"))
    await messages.send_message(_message("1", "two"))

    assert [m.message for m in await messages.list_messages("case_1")] == ["one", "two"]


@pytest.mark.asyncio
async def test_mark_case_read_skips_own_messages(messages: MessageService):
    await messages.send_message(_message("2", "from lawyer"))
    await messages.send_message(_message("1", "from client"))

    changed = await messages.mark_case_read("case_1", reader_id="1")
    again = await messages.mark_case_read("case_1", reader_id="1")

    assert changed == 1
    assert again == 0
    by_sender = {m.sender_id: m.is_read for m in await messages.list_messages("case_1")}
    assert by_sender == {"2": True, "1": False}


@pytest.mark.asyncio
async def test_message_attachments_are_stored(
    messages: MessageService, documents: DocumentService
):
    document = await documents.upload_document(
        "case_1",
        "1",
        DocumentUpload(name="Lease.pdf", type="application/pdf", size=10, url="/mock/lease.pdf"),
    )
    data = _message("1", "See attached").model_copy(
        update={"attachments": [DocumentSchema.model_validate(document, from_attributes=True)]}
    )

    message = await messages.send_message(data)

    stored = (await messages.list_messages("case_1"))[0]
    assert stored.attachments[0].name == "Lease.pdf"
    assert stored.attachments[0] == document
    assert stored == message


# ── Notifications ─────────────────────────────────────────────────


def _notification(user_id: str = "1") -> NotificationCreate:
    return NotificationCreate(
        user_id=user_id,
        title="Task Assigned",
        message="New task: Sign engagement letter",
        type=NotificationType.TASK,
        link="/tasks",
    )


@pytest.mark.asyncio
async def test_mark_read_flips_only_is_read_and_is_idempotent(
    notifications: NotificationService,
):
    created = await notifications.create_notification(_notification())

    first = await notifications.mark_read(created.id)
    second = await notifications.mark_read(created.id)

    assert first.is_read is True
    assert second.is_read is True
    created.is_read = True
    assert first == created
    assert second == created


@pytest.mark.asyncio
async def test_notifications_scoped_to_user(notifications: NotificationService):
    await notifications.create_notification(_notification("1"))
    await notifications.create_notification(_notification("2"))

    listed = await notifications.list_notifications("1")

    assert [n.user_id for n in listed] == ["1"]


@pytest.mark.asyncio
async def test_unread_count(notifications: NotificationService):
    first = await notifications.create_notification(_notification())
    await notifications.create_notification(_notification())

    assert await notifications.unread_count("1") == 2
    await notifications.mark_read(first.id)
    assert await notifications.unread_count("1") == 1


@pytest.mark.asyncio
async def test_mark_read_unknown_id(notifications: NotificationService):
    assert await notifications.mark_read("notif_missing") is None


# ── Documents ─────────────────────────────────────────────────────


async def _upload(documents: DocumentService, name: str, folder: str, case_id: str = "case_1"):
    return await documents.upload_document(
        case_id,
        "1",
        DocumentUpload(name=name, type="application/pdf", size=1, url=f"/mock/{name}", folder=folder),
    )


@pytest.mark.asyncio
async def test_upload_defaults_folder_and_stamps_metadata(documents: DocumentService):
    document = await documents.upload_document(
        "case_1",
        "1",
        DocumentUpload(name="Notes.txt", type="text/plain", size=42, url="/mock/notes.txt"),
    )

    assert document.id.startswith("doc_")
    assert document.folder == "client-documents"
    assert document.uploaded_by == "1"
    assert await documents.list_documents("case_1") == [document]


@pytest.mark.asyncio
async def test_list_documents_filters(documents: DocumentService):
    await _upload(documents, "Case_Summary.pdf", "court-filings")
    await _upload(documents, "Contract_Agreement.pdf", "contracts")
    await _upload(documents, "Other_Summary.pdf", "contracts", case_id="case_2")

    by_name = await documents.list_documents("case_1", search="summary")
    by_folder = await documents.list_documents("case_1", folder="contracts")
    everything = await documents.list_documents("case_1", folder="all")

    assert [d.name for d in by_name] == ["Case_Summary.pdf"]
    assert [d.name for d in by_folder] == ["Contract_Agreement.pdf"]
    assert len(everything) == 2


def test_upload_rejects_unknown_folder():
    with pytest.raises(ValidationError):
        DocumentUpload(name="a.pdf", type="application/pdf", size=1, url="/a.pdf", folder="misc")
