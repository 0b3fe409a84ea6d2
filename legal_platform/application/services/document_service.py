"""Application service (use case) for case document listings and uploads."""

from legal_platform.application.interfaces import DocumentRepository
from legal_platform.application.schemas.document import DocumentUpload
from legal_platform.domain.entities import Document

ALL_FOLDERS = "all"


class DocumentService:
    """Persists uploaded document metadata per case and filters the listing."""

    def __init__(self, repository: DocumentRepository):
        self._repository = repository

    async def list_documents(
        self,
        case_id: str,
        *,
        search: str | None = None,
        folder: str | None = None,
    ) -> list[Document]:
        """Documents of a case, narrowed by name substring and folder.

        ``search`` matches case-insensitively; ``folder`` of None or
        ``"all"`` disables folder filtering.
        """
        documents = await self._repository.list_for_case(case_id)
        if search:
            needle = search.lower()
            documents = [d for d in documents if needle in d.name.lower()]
        if folder and folder != ALL_FOLDERS:
            documents = [d for d in documents if d.folder == folder]
        return documents

    async def upload_document(
        self, case_id: str, uploaded_by: str, data: DocumentUpload
    ) -> Document:
        document = Document(
            case_id=case_id,
            name=data.name,
            type=data.type,
            size=data.size,
            uploaded_by=uploaded_by,
            url=data.url,
            folder=data.folder,
        )
        return await self._repository.create(document)
