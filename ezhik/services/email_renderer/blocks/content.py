"""Content blocks built from repeated items: lists, grids and tiers."""

from __future__ import annotations

from typing import Any

from ezhik.services.email_renderer.defaults import (
    CARD_ITEMS,
    FAQ_ITEMS,
    FEATURE_ITEMS,
    GALLERY_IMAGES,
    LIST_ITEMS,
    PRICING_ITEMS,
    STATS_ITEMS,
    STEP_ITEMS,
    TESTIMONIAL_ITEMS,
)
from ezhik.services.email_renderer.fields import (
    get_bool,
    get_mapping_list,
    get_str,
    get_str_list,
)
from ezhik.services.email_renderer.markup import (
    block_row,
    button,
    grid_cell,
    grid_rows,
    multiline_text,
    safe_text,
    safe_url,
)
from ezhik.services.email_renderer.registry import registry
from ezhik.services.email_renderer.theme import Theme


def _item_str(item: Any, name: str, default: str = "") -> str:
    return safe_text(get_str(item, name, default))


@registry.register("quote")
def render_quote(data: Any, theme: Theme) -> str:
    text = multiline_text(get_str(data, "text", "Лучший способ предсказать будущее — создать его."))
    author = safe_text(get_str(data, "author", "Питер Друкер"))
    inner = (
        f'<div style="border-left:4px solid {theme.accent}; padding:8px 0 8px 20px;">'
        f'<div style="font-size:18px; font-style:italic; color:{theme.primary}; line-height:1.5;">«{text}»</div>'
        f'<div style="margin-top:12px; color:#888;">— {author}</div>'
        "</div>"
    )
    return block_row("quote", inner)


@registry.register("testimonial")
def render_testimonial(data: Any, theme: Theme) -> str:
    entries: list[str] = []
    for item in get_mapping_list(data, "items", TESTIMONIAL_ITEMS):
        role = _item_str(item, "role")
        signature = _item_str(item, "author", "Клиент") + (f", {role}" if role else "")
        entries.append(
            '<div style="background:#f7f7f9; border-radius:8px; padding:20px; margin-bottom:12px;">'
            f'<div style="color:{theme.primary}; line-height:1.5;">«{_item_str(item, "text")}»</div>'
            f'<div style="margin-top:10px; color:#888; font-size:13px;">{signature}</div>'
            "</div>"
        )
    return block_row("testimonial", "".join(entries))


@registry.register("list")
def render_list(data: Any, theme: Theme) -> str:
    title = get_str(data, "title")
    tag = "ol" if get_bool(data, "ordered") else "ul"
    items = "".join(
        f'<li style="margin-bottom:6px;">{safe_text(item)}</li>'
        for item in get_str_list(data, "items", LIST_ITEMS)
    )
    heading = (
        f'<div style="font-size:18px; font-weight:bold; color:{theme.primary}; margin-bottom:12px;">'
        f"{safe_text(title)}</div>"
        if title
        else ""
    )
    return block_row(
        "list",
        f'{heading}<{tag} style="margin:0; padding-left:20px; color:{theme.primary}; line-height:1.5;">{items}</{tag}>',
    )


@registry.register("steps")
def render_steps(data: Any, theme: Theme) -> str:
    rows: list[str] = []
    for number, item in enumerate(get_mapping_list(data, "items", STEP_ITEMS), start=1):
        rows.append(
            "<tr>"
            '<td width="48" valign="top" style="padding:0 12px 16px 0;">'
            f'<div style="width:36px; height:36px; line-height:36px; border-radius:18px; background:{theme.accent}; '
            f'color:white; text-align:center; font-weight:bold;">{number}</div></td>'
            '<td valign="top" style="padding:0 0 16px;">'
            f'<div style="font-weight:bold; color:{theme.primary};">{_item_str(item, "title")}</div>'
            f'<div style="color:#666; font-size:14px;">{_item_str(item, "text")}</div></td>'
            "</tr>"
        )
    inner = (
        '<table role="presentation" cellpadding="0" cellspacing="0" border="0" width="100%">'
        f"{''.join(rows)}</table>"
    )
    return block_row("steps", inner)


@registry.register("faq")
def render_faq(data: Any, theme: Theme) -> str:
    title = safe_text(get_str(data, "title", "Частые вопросы"))
    entries = "".join(
        '<div style="margin-bottom:16px;">'
        f'<div style="font-weight:bold; color:{theme.primary}; margin-bottom:4px;">{_item_str(item, "question")}</div>'
        f'<div style="color:#666; line-height:1.5;">{_item_str(item, "answer")}</div>'
        "</div>"
        for item in get_mapping_list(data, "items", FAQ_ITEMS)
    )
    inner = (
        f'<div style="font-size:20px; font-weight:bold; color:{theme.primary}; margin-bottom:16px;">{title}</div>'
        f"{entries}"
    )
    return block_row("faq", inner)


@registry.register("features")
def render_features(data: Any, theme: Theme) -> str:
    cells = [
        grid_cell(
            f'<div style="font-size:28px;">{_item_str(item, "icon")}</div>'
            f'<div style="font-weight:bold; color:{theme.primary}; margin:8px 0 4px;">{_item_str(item, "title")}</div>'
            f'<div style="color:#666; font-size:13px;">{_item_str(item, "text")}</div>'
        )
        for item in get_mapping_list(data, "items", FEATURE_ITEMS)
    ]
    return block_row("features", grid_rows(cells), "background:white; padding:24px 24px;")


@registry.register("cards")
def render_cards(data: Any, theme: Theme) -> str:
    cells: list[str] = []
    for item in get_mapping_list(data, "items", CARD_ITEMS):
        image = get_str(item, "image")
        image_html = (
            f'<img src="{safe_url(image)}" alt="" width="160" '
            'style="display:block; width:100%; max-width:160px; margin:0 auto 8px; border:0;">'
            if image
            else ""
        )
        title = _item_str(item, "title")
        url = get_str(item, "url")
        title_html = (
            f'<a href="{safe_url(url)}" style="color:{theme.primary}; text-decoration:none;">{title}</a>'
            if url
            else title
        )
        cells.append(
            grid_cell(
                f"{image_html}"
                f'<div style="font-weight:bold; color:{theme.primary}; margin-bottom:4px;">{title_html}</div>'
                f'<div style="color:#666; font-size:13px;">{_item_str(item, "text")}</div>'
            )
        )
    return block_row("cards", grid_rows(cells), "background:white; padding:24px 24px;")


@registry.register("gallery")
def render_gallery(data: Any, theme: Theme) -> str:
    cells = [
        grid_cell(
            f'<img src="{safe_url(src)}" alt="" width="170" '
            'style="display:block; width:100%; max-width:170px; border:0; border-radius:4px;">'
        )
        for src in get_str_list(data, "images", GALLERY_IMAGES)
    ]
    return block_row("gallery", grid_rows(cells), "background:white; padding:16px 24px;")


@registry.register("stats")
def render_stats(data: Any, theme: Theme) -> str:
    items = get_mapping_list(data, "items", STATS_ITEMS)
    width = max(100 // len(items), 1)
    cells = "".join(
        f'<td width="{width}%" style="text-align:center; padding:8px;">'
        f'<div style="font-size:28px; font-weight:bold; color:{theme.accent};">{_item_str(item, "value")}</div>'
        f'<div style="color:#888; font-size:13px;">{_item_str(item, "label")}</div>'
        "</td>"
        for item in items
    )
    inner = (
        '<table role="presentation" cellpadding="0" cellspacing="0" border="0" width="100%">'
        f"<tr>{cells}</tr></table>"
    )
    return block_row("stats", inner)


@registry.register("pricing")
def render_pricing(data: Any, theme: Theme) -> str:
    tiers = get_mapping_list(data, "items", PRICING_ITEMS)
    width = max(100 // len(tiers), 1)
    columns: list[str] = []
    for tier in tiers:
        features = "".join(
            f'<div style="padding:4px 0; color:#666; font-size:13px;">{safe_text(feature)}</div>'
            for feature in get_str_list(tier, "features", ())
        )
        columns.append(
            f'<td class="pricing-col" width="{width}%" valign="top" '
            'style="padding:16px 8px; text-align:center; border:1px solid #eee;">'
            f'<div style="font-weight:bold; color:{theme.primary}; margin-bottom:8px;">{_item_str(tier, "name")}</div>'
            f'<div style="font-size:24px; font-weight:bold; color:{theme.accent};">{_item_str(tier, "price")}'
            f'<span style="font-size:13px; color:#888;">{_item_str(tier, "period")}</span></div>'
            f'<div style="margin:12px 0;">{features}</div>'
            + button(
                _item_str(tier, "button_text", "Выбрать"),
                safe_url(get_str(tier, "url")),
                theme.accent,
            )
            + "</td>"
        )
    inner = (
        '<table role="presentation" cellpadding="0" cellspacing="0" border="0" width="100%">'
        f"<tr>{''.join(columns)}</tr></table>"
    )
    return block_row("pricing", inner)
