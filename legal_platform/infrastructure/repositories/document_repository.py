"""Concrete repository for Document metadata stored under the documents key."""

from typing import Any

from legal_platform.application.interfaces import DocumentRepository
from legal_platform.domain.entities import DEFAULT_FOLDER, Document
from legal_platform.infrastructure.repositories.json_collection_repository import (
    JsonCollectionRepository,
)
from legal_platform.infrastructure.repositories.record_codec import parse_datetime, required


def document_from_record(record: dict[str, Any]) -> Document:
    """Map stored record → Document. Also used for embedded copies and attachments."""
    return Document(
        id=required(record, "id"),
        case_id=required(record, "caseId"),
        name=required(record, "name"),
        type=required(record, "type"),
        size=required(record, "size"),
        uploaded_by=required(record, "uploadedBy"),
        uploaded_at=parse_datetime(required(record, "uploadedAt")),
        url=required(record, "url"),
        folder=record.get("folder") or DEFAULT_FOLDER,
    )


class JsonDocumentRepository(JsonCollectionRepository[Document], DocumentRepository):
    collection = "documents"
    entity_name = "Document"

    def _to_entity(self, record: dict[str, Any]) -> Document:
        return document_from_record(record)

    async def list_for_case(self, case_id: str) -> list[Document]:
        return await self._filter(lambda doc: doc.case_id == case_id)
