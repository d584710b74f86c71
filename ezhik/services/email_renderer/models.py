"""Input and output types of the email renderer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ezhik.services.email_renderer.fields import FieldBag

DEFAULT_SUBJECT = "Email"
DEFAULT_PREHEADER = "Узнайте больше"


@dataclass(frozen=True)
class Block:
    """One typed, independently enable-able content unit."""

    type: str
    enabled: bool = False
    data: FieldBag = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Block:
        block_type = payload.get("type")
        enabled = payload.get("enabled")
        data = payload.get("data")
        return cls(
            type=block_type if isinstance(block_type, str) else "",
            # Only a literal JSON `true` enables a block.
            enabled=enabled is True,
            data=data if isinstance(data, Mapping) else {},
        )


@dataclass(frozen=True)
class EmailDocument:
    """Everything needed to render one email."""

    subject: str = ""
    preheader: str = ""
    theme: Mapping[str, Any] | None = None
    blocks: tuple[Block, ...] = ()

    @property
    def resolved_subject(self) -> str:
        return self.subject or DEFAULT_SUBJECT

    @property
    def resolved_preheader(self) -> str:
        return self.preheader or DEFAULT_PREHEADER

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> EmailDocument:
        """Build a document from a decoded JSON body, dropping malformed blocks."""
        subject = payload.get("subject")
        preheader = payload.get("preheader")
        theme = payload.get("theme")
        raw_blocks = payload.get("blocks")
        blocks = (
            tuple(Block.from_payload(item) for item in raw_blocks if isinstance(item, Mapping))
            if isinstance(raw_blocks, list | tuple)
            else ()
        )
        return cls(
            subject=subject if isinstance(subject, str) else "",
            preheader=preheader if isinstance(preheader, str) else "",
            theme=theme if isinstance(theme, Mapping) else None,
            blocks=blocks,
        )


@dataclass(frozen=True)
class RenderedOutput:
    """Rendered HTML plus the identifier assigned to it."""

    html: str
    id: str
