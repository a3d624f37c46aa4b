"""
Pydantic models for API request/response validation.
"""

from pydantic import BaseModel, Field

from .preview import LinkPreview


class PreviewRequest(BaseModel):
    """Extract a preview from markup supplied by the caller."""
    html: str = Field(..., description="HTML document to extract from")
    url: str | None = Field(
        default=None,
        description="Source URL of the document, used to select a site profile",
    )


class LinkPreviewResponse(BaseModel):
    """Link preview metadata."""
    title: str | None = None
    description: str | None = None
    domain: str | None = None
    image_url: str | None = None

    @classmethod
    def from_preview(cls, preview: LinkPreview) -> "LinkPreviewResponse":
        return cls(**preview.to_dict())


class StatusResponse(BaseModel):
    status: str
    version: str
    profiles: list[str]
