"""Deterministic table-based HTML renderer for email documents."""

from ezhik.services.email_renderer.assembler import assemble, render_email
from ezhik.services.email_renderer.models import Block, EmailDocument, RenderedOutput
from ezhik.services.email_renderer.registry import BlockRenderer, BlockRendererRegistry, registry
from ezhik.services.email_renderer.theme import Theme, resolve_theme

__all__ = [
    "Block",
    "BlockRenderer",
    "BlockRendererRegistry",
    "EmailDocument",
    "RenderedOutput",
    "Theme",
    "assemble",
    "registry",
    "render_email",
    "resolve_theme",
]
