"""Domain entity for case documents."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from legal_platform.domain.identifiers import new_id

DEFAULT_FOLDER = "client-documents"

DOCUMENT_FOLDERS = (
    "evidence",
    "contracts",
    "correspondence",
    "court-filings",
    "legal-research",
    "client-documents",
)


@dataclass
class Document:
    """Metadata for an uploaded file; the bytes themselves live elsewhere."""

    case_id: str
    name: str
    type: str  # MIME type, e.g. "application/pdf"
    size: int  # bytes
    uploaded_by: str
    url: str
    folder: str = DEFAULT_FOLDER
    id: str = field(default_factory=lambda: new_id("doc"))
    uploaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
