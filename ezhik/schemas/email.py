"""Email builder request/response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from ezhik.services.email_renderer.models import EmailDocument


class EmailGenerateRequest(BaseModel):
    """Email document as sent by the builder frontend.

    Blocks are kept as loose mappings; each renderer reads its own fields
    and falls back to defaults for anything missing or mistyped.
    """

    type: str = ""
    subject: str = ""
    preheader: str = ""
    theme: dict[str, Any] | None = None
    blocks: list[dict[str, Any]] = Field(default_factory=list)

    def to_document(self) -> EmailDocument:
        return EmailDocument.from_payload(self.model_dump())


class AIGenerateRequest(BaseModel):
    """Prompt for the fixed header + hero template."""

    prompt: str = ""
    type: str = ""


class EmailGenerateResponse(BaseModel):
    html: str
    id: str


class UploadResponse(BaseModel):
    url: str
