"""Assemble a complete table-based email document from blocks."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ezhik.core.ids import generate_document_id
from ezhik.services.email_renderer import blocks as _blocks  # noqa: F401  (registers renderers)
from ezhik.services.email_renderer.markup import safe_text
from ezhik.services.email_renderer.models import EmailDocument, RenderedOutput
from ezhik.services.email_renderer.registry import BlockRendererRegistry, registry
from ezhik.services.email_renderer.theme import Theme, resolve_theme

logger = logging.getLogger(__name__)

CONTENT_TABLE_OPEN = (
    '<table role="presentation" cellpadding="0" cellspacing="0" border="0" width="600" '
    'style="max-width:600px;">'
)

FOOTER_ROW = (
    '<tr><td style="background:#1a1a2e; color:#6a7a8a; padding:28px 32px; text-align:center; font-size:12px;">'
    '© 2026 Компания · <a href="#" style="color:#4a5a6a;">Отписаться</a>'
    "</td></tr>"
)

DOCUMENT_CLOSE = "</table></td></tr></table></body></html>"


def _document_head(subject: str, preheader: str, theme: Theme) -> str:
    return (
        '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.0 Transitional//EN">\n'
        '<html lang="ru">\n'
        "<head>\n"
        '<meta http-equiv="Content-Type" content="text/html; charset=utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"<title>{safe_text(subject)}</title>\n"
        "<style>\n"
        "body, table, td { font-family: Arial, Helvetica, sans-serif; }\n"
        "</style>\n"
        "</head>\n"
        f'<body style="margin:0; padding:0; background-color:{theme.background};">\n'
        f'<div style="display:none; font-size:0; line-height:0; max-height:0; overflow:hidden; '
        f'color:{theme.background};">{safe_text(preheader)}&nbsp;&nbsp;</div>\n'
        '<table role="presentation" cellpadding="0" cellspacing="0" border="0" width="100%" '
        f'style="background-color:{theme.background};">\n'
        '<tr><td align="center" style="padding:28px 15px;">'
    )


def render_fragments(
    document: EmailDocument,
    theme: Theme,
    block_registry: BlockRendererRegistry = registry,
) -> list[str]:
    """Fragments for the enabled blocks, in document order."""
    fragments: list[str] = []
    for block in document.blocks:
        if not block.enabled:
            continue
        fragment = block_registry.render(block.type, block.data, theme)
        if fragment:
            fragments.append(fragment)
    return fragments


def assemble(
    document: EmailDocument,
    block_registry: BlockRendererRegistry = registry,
) -> str:
    """Render ``document`` into one self-contained HTML string."""
    theme = resolve_theme(document.theme)
    fragments = render_fragments(document, theme, block_registry)

    logger.debug(
        "Email assembled",
        extra={"blocks_total": len(document.blocks), "blocks_rendered": len(fragments)},
    )

    parts = [
        _document_head(document.resolved_subject, document.resolved_preheader, theme),
        CONTENT_TABLE_OPEN,
        *fragments,
        FOOTER_ROW,
        DOCUMENT_CLOSE,
    ]
    return "\n".join(parts)


def render_email(
    document: EmailDocument,
    block_registry: BlockRendererRegistry = registry,
    id_factory: Callable[[], str] = generate_document_id,
) -> RenderedOutput:
    """Assemble the document and attach a freshly generated identifier."""
    return RenderedOutput(html=assemble(document, block_registry), id=id_factory())
