"""Build an email document from a free-text prompt."""

from __future__ import annotations

from ezhik.services.email_renderer.models import (
    DEFAULT_PREHEADER,
    DEFAULT_SUBJECT,
    Block,
    EmailDocument,
)
from ezhik.services.email_renderer.theme import DEFAULT_ACCENT, DEFAULT_PRIMARY

PROMPT_BRAND = "BRAND"
PROMPT_TITLE = "Заголовок"


def compose_from_prompt(prompt: str) -> EmailDocument:
    """Fixed two-block template: a header and a hero whose description is the prompt."""
    return EmailDocument(
        subject=DEFAULT_SUBJECT,
        preheader=DEFAULT_PREHEADER,
        theme={"primary": DEFAULT_PRIMARY, "accent": DEFAULT_ACCENT},
        blocks=(
            Block(type="header", enabled=True, data={"logo": PROMPT_BRAND}),
            Block(type="hero", enabled=True, data={"title": PROMPT_TITLE, "description": prompt}),
        ),
    )
