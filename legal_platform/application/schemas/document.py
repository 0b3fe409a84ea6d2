"""Pydantic DTOs for the Document feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from legal_platform.domain.entities import DEFAULT_FOLDER, DOCUMENT_FOLDERS

_FOLDER_PATTERN = "^(" + "|".join(DOCUMENT_FOLDERS) + ")$"


class DocumentUpload(BaseModel):
    """Metadata for a file handed over by the upload widget."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Case_Summary.pdf"])
    type: str = Field(..., examples=["application/pdf"])
    size: int = Field(..., ge=0)
    url: str = Field(..., examples=["/mock/documents/case_summary.pdf"])
    folder: str = Field(DEFAULT_FOLDER, pattern=_FOLDER_PATTERN)


class DocumentSchema(BaseModel):
    """A complete document record, as embedded in cases and message attachments."""

    id: str
    case_id: str
    name: str
    type: str
    size: int
    uploaded_by: str
    uploaded_at: datetime
    url: str
    folder: str

    model_config = {"from_attributes": True}


class DocumentResponse(DocumentSchema):
    """Schema returned to the client."""
