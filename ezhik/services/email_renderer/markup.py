"""Small HTML helpers shared by block renderers."""

from __future__ import annotations

from html import escape
from typing import Any
from urllib.parse import quote

GRID_COLUMNS = 3
ROW_BREAK = "</tr><tr>"

_UNSAFE_URL_SCHEMES = ("javascript:", "vbscript:")


def safe_text(value: Any) -> str:
    if value is None:
        return ""
    return escape(str(value), quote=True)


def multiline_text(value: Any) -> str:
    return safe_text(value).replace("\r\n", "\n").replace("\n", "<br>")


def safe_url(value: Any, default: str = "#") -> str:
    url = str(value or "").strip()
    if not url:
        return safe_text(default)
    # Browsers drop control characters and whitespace before reading the scheme.
    compact = "".join(ch for ch in url if ch > " " and ch != "\x7f").lower()
    if compact.startswith(_UNSAFE_URL_SCHEMES):
        return "#"
    return safe_text(url)


def url_component(value: str, safe: str = "") -> str:
    """Percent-encode ``value`` for use inside a URL; lone surrogates are encoded too."""
    return quote(value, safe=safe, errors="surrogatepass")


def block_row(block_type: str, inner: str, style: str = "background:white; padding:24px 32px;") -> str:
    """Wrap block markup in the single content-table row every block emits."""
    return f'<tr data-block-type="{safe_text(block_type)}"><td style="{style}">{inner}</td></tr>'


def grid_rows(cells: list[str]) -> str:
    """Lay out cells three per row inside a full-width table.

    A row break goes before item ``i`` when ``i % 3 == 0 and i > 0``.
    """
    parts: list[str] = []
    for index, cell in enumerate(cells):
        if index % GRID_COLUMNS == 0 and index > 0:
            parts.append(ROW_BREAK)
        parts.append(cell)
    return (
        '<table role="presentation" cellpadding="0" cellspacing="0" border="0" width="100%">'
        f"<tr>{''.join(parts)}</tr></table>"
    )


def grid_cell(inner: str) -> str:
    return f'<td width="33%" valign="top" style="padding:8px; text-align:center;">{inner}</td>'


def button(text: str, url: str, color: str, text_color: str = "white") -> str:
    return (
        f'<a href="{url}" style="display:inline-block; background:{color}; color:{text_color}; '
        f'padding:14px 28px; text-decoration:none; border-radius:4px;">{text}</a>'
    )
