"""Structural blocks: headings, text, images and spacing."""

from __future__ import annotations

from typing import Any

from ezhik.services.email_renderer.defaults import FOOTER_LINKS, PLACEHOLDER_IMAGE
from ezhik.services.email_renderer.fields import get_int_text, get_mapping_list, get_str
from ezhik.services.email_renderer.markup import (
    block_row,
    button,
    multiline_text,
    safe_text,
    safe_url,
)
from ezhik.services.email_renderer.registry import registry
from ezhik.services.email_renderer.theme import Theme, is_safe_color

_ALIGNMENTS = {"left", "center", "right"}


def _color(data: Any, name: str, default: str) -> str:
    value = get_str(data, name, default)
    return value if is_safe_color(value) else default


def _align(data: Any, default: str) -> str:
    value = get_str(data, "align", default)
    return value if value in _ALIGNMENTS else default


@registry.register("header")
def render_header(data: Any, theme: Theme) -> str:
    logo = safe_text(get_str(data, "logo", "BRAND"))
    background = _color(data, "background", "#0d1f3c")
    return block_row(
        "header",
        logo,
        f"background:{background}; color:white; padding:22px 32px; font-size:20px; font-weight:bold;",
    )


@registry.register("hero")
def render_hero(data: Any, theme: Theme) -> str:
    title = safe_text(get_str(data, "title", "Заголовок"))
    description = multiline_text(get_str(data, "description", "Описание"))
    image = get_str(data, "image")
    button_text = get_str(data, "button_text")

    parts: list[str] = []
    if image:
        parts.append(
            f'<img src="{safe_url(image)}" alt="" width="536" '
            'style="display:block; width:100%; max-width:536px; margin:0 auto 24px; border:0;">'
        )
    parts.append(
        f'<div style="font-size:28px; font-weight:bold; color:{theme.primary}; margin-bottom:16px;">{title}</div>'
    )
    parts.append(f'<div style="color:#666; margin-bottom:24px;">{description}</div>')
    if button_text:
        parts.append(button(safe_text(button_text), safe_url(get_str(data, "url")), theme.accent))
    return block_row("hero", "".join(parts), "background:white; padding:32px; text-align:center;")


@registry.register("text")
def render_text(data: Any, theme: Theme) -> str:
    content = multiline_text(get_str(data, "content", "Текст"))
    align = _align(data, "left")
    return block_row(
        "text",
        content,
        f"background:white; padding:24px 32px; color:{theme.primary}; line-height:1.6; text-align:{align};",
    )


@registry.register("button")
def render_button(data: Any, theme: Theme) -> str:
    text = safe_text(get_str(data, "text", "Кнопка"))
    url = safe_url(get_str(data, "url"))
    return block_row(
        "button",
        button(text, url, theme.accent),
        "background:white; padding:0 32px 32px; text-align:center;",
    )


@registry.register("divider")
def render_divider(data: Any, theme: Theme) -> str:
    color = _color(data, "color", "#e5e5e5")
    return block_row(
        "divider",
        f'<div style="border-top:1px solid {color}; font-size:0; line-height:0;">&nbsp;</div>',
        "background:white; padding:8px 32px;",
    )


@registry.register("spacer")
def render_spacer(data: Any, theme: Theme) -> str:
    height = min(max(get_int_text(data, "height", 32), 1), 200)
    return block_row(
        "spacer",
        "&nbsp;",
        f"background:white; height:{height}px; font-size:0; line-height:0;",
    )


@registry.register("columns")
def render_columns(data: Any, theme: Theme) -> str:
    left = multiline_text(get_str(data, "left", "Левая колонка"))
    right = multiline_text(get_str(data, "right", "Правая колонка"))
    cell_style = f"padding:0 8px; color:{theme.primary}; line-height:1.5;"
    inner = (
        '<table role="presentation" cellpadding="0" cellspacing="0" border="0" width="100%"><tr>'
        f'<td width="50%" valign="top" style="{cell_style}">{left}</td>'
        f'<td width="50%" valign="top" style="{cell_style}">{right}</td>'
        "</tr></table>"
    )
    return block_row("columns", inner, "background:white; padding:24px 24px;")


@registry.register("image")
def render_image(data: Any, theme: Theme) -> str:
    src = safe_url(get_str(data, "src", PLACEHOLDER_IMAGE))
    alt = safe_text(get_str(data, "alt", "Изображение"))
    link = get_str(data, "url")
    image = (
        f'<img src="{src}" alt="{alt}" width="600" '
        'style="display:block; width:100%; max-width:600px; height:auto; border:0;">'
    )
    if link:
        image = f'<a href="{safe_url(link)}">{image}</a>'
    return block_row("image", image, "background:white; padding:0;")


@registry.register("html")
def render_raw_html(data: Any, theme: Theme) -> str:
    # Trusted passthrough: the markup is embedded exactly as supplied.
    markup = get_str(data, "html")
    if not markup:
        return ""
    return block_row("html", markup, "background:white; padding:24px 32px;")


@registry.register("logo")
def render_logo(data: Any, theme: Theme) -> str:
    src = get_str(data, "src")
    text = safe_text(get_str(data, "text", "LOGO"))
    align = _align(data, "center")
    if src:
        inner = f'<img src="{safe_url(src)}" alt="{text}" height="48" style="display:inline-block; height:48px; border:0;">'
    else:
        inner = f'<span style="font-size:24px; font-weight:bold; letter-spacing:2px; color:{theme.primary};">{text}</span>'
    return block_row("logo", inner, f"background:white; padding:24px 32px; text-align:{align};")


@registry.register("banner")
def render_banner(data: Any, theme: Theme) -> str:
    text = safe_text(get_str(data, "text", "Скидка 20% на всё"))
    background = _color(data, "background", theme.accent)
    return block_row(
        "banner",
        text,
        f"background:{background}; color:white; padding:20px 32px; text-align:center; "
        "font-size:20px; font-weight:bold;",
    )


@registry.register("footer")
def render_footer(data: Any, theme: Theme) -> str:
    company = safe_text(get_str(data, "company", "Компания"))
    address = safe_text(get_str(data, "address", "Москва, Россия"))
    text = safe_text(
        get_str(data, "text", "Вы получили это письмо, потому что подписаны на рассылку.")
    )
    links = " · ".join(
        f'<a href="{safe_url(get_str(link, "url"))}" style="color:{theme.accent};">'
        f'{safe_text(get_str(link, "label"))}</a>'
        for link in get_mapping_list(data, "links", FOOTER_LINKS)
    )
    inner = (
        f'<div style="font-weight:bold; color:{theme.primary}; margin-bottom:6px;">{company}</div>'
        f'<div style="margin-bottom:6px;">{address}</div>'
        f'<div style="margin-bottom:10px;">{text}</div>'
        f"<div>{links}</div>"
    )
    return block_row(
        "footer",
        inner,
        "background:#fafafa; color:#888; padding:24px 32px; text-align:center; font-size:12px;",
    )
