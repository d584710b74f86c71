"""Blocks that ask the reader to do something."""

from __future__ import annotations

from typing import Any

from ezhik.services.email_renderer.defaults import FORM_FIELDS, SURVEY_OPTIONS
from ezhik.services.email_renderer.fields import get_str, get_str_list
from ezhik.services.email_renderer.markup import (
    block_row,
    button,
    multiline_text,
    safe_text,
    safe_url,
    url_component,
)
from ezhik.services.email_renderer.registry import registry
from ezhik.services.email_renderer.theme import Theme, is_safe_color

_ALERT_COLORS = {
    "info": ("#e7f0ff", "#2f6fed"),
    "success": ("#e6f7ee", "#1f9d55"),
    "warning": ("#fff6e5", "#d98c00"),
    "error": ("#fdecec", "#d93025"),
}

_SHARE_TARGETS = (
    ("Telegram", "https://t.me/share/url?url=", "#229ed9"),
    ("VK", "https://vk.com/share.php?url=", "#0077ff"),
    ("WhatsApp", "https://wa.me/?text=", "#25d366"),
)


@registry.register("cta")
def render_cta(data: Any, theme: Theme) -> str:
    title = safe_text(get_str(data, "title", "Готовы начать?"))
    text = multiline_text(get_str(data, "text", "Присоединяйтесь уже сегодня"))
    button_text = safe_text(get_str(data, "button_text", "Начать"))
    inner = (
        f'<div style="font-size:22px; font-weight:bold; color:{theme.primary}; margin-bottom:8px;">{title}</div>'
        f'<div style="color:#666; margin-bottom:20px;">{text}</div>'
        + button(button_text, safe_url(get_str(data, "url")), theme.accent)
    )
    return block_row("cta", inner, "background:#f7f8ff; padding:32px; text-align:center;")


@registry.register("event")
def render_event(data: Any, theme: Theme) -> str:
    title = safe_text(get_str(data, "title", "Онлайн-вебинар"))
    date = safe_text(get_str(data, "date", "15 марта 2026"))
    time = safe_text(get_str(data, "time", "19:00"))
    location = safe_text(get_str(data, "location", "Онлайн"))
    button_text = safe_text(get_str(data, "button_text", "Зарегистрироваться"))
    inner = (
        f'<div style="border:1px solid #eee; border-top:4px solid {theme.accent}; border-radius:6px; padding:20px;">'
        f'<div style="font-size:20px; font-weight:bold; color:{theme.primary}; margin-bottom:12px;">{title}</div>'
        f'<div style="color:#555; margin-bottom:4px;">📅 {date} · {time}</div>'
        f'<div style="color:#555; margin-bottom:16px;">📍 {location}</div>'
        + button(button_text, safe_url(get_str(data, "url")), theme.accent)
        + "</div>"
    )
    return block_row("event", inner)


@registry.register("alert")
def render_alert(data: Any, theme: Theme) -> str:
    text = multiline_text(get_str(data, "text", "Важное уведомление"))
    level = get_str(data, "level", "info")
    background, border = _ALERT_COLORS.get(level, _ALERT_COLORS["info"])
    inner = (
        f'<div style="background:{background}; border-left:4px solid {border}; padding:14px 16px; '
        f'color:#333; border-radius:4px;">{text}</div>'
    )
    return block_row("alert", inner, "background:white; padding:16px 32px;")


@registry.register("form")
def render_form(data: Any, theme: Theme) -> str:
    title = safe_text(get_str(data, "title", "Обратная связь"))
    button_text = safe_text(get_str(data, "button_text", "Отправить"))
    fields = "".join(
        '<div style="border:1px solid #ddd; border-radius:4px; padding:10px 12px; margin-bottom:10px; '
        f'color:#999; text-align:left;">{safe_text(label)}</div>'
        for label in get_str_list(data, "fields", FORM_FIELDS)
    )
    inner = (
        f'<div style="font-size:20px; font-weight:bold; color:{theme.primary}; margin-bottom:16px;">{title}</div>'
        f"{fields}"
        + button(button_text, safe_url(get_str(data, "url")), theme.accent)
    )
    return block_row("form", inner, "background:white; padding:24px 32px; text-align:center;")


@registry.register("badge")
def render_badge(data: Any, theme: Theme) -> str:
    text = safe_text(get_str(data, "text", "NEW"))
    color = get_str(data, "color", theme.accent)
    if not is_safe_color(color):
        color = theme.accent
    inner = (
        f'<span style="display:inline-block; background:{color}; color:white; font-size:12px; '
        f'font-weight:bold; padding:4px 12px; border-radius:12px; letter-spacing:1px;">{text}</span>'
    )
    return block_row("badge", inner, "background:white; padding:12px 32px; text-align:center;")


@registry.register("survey")
def render_survey(data: Any, theme: Theme) -> str:
    question = safe_text(get_str(data, "question", "Как вам наш сервис?"))
    base_url = get_str(data, "url", "#")
    options: list[str] = []
    for option in get_str_list(data, "options", SURVEY_OPTIONS):
        if base_url and base_url != "#":
            separator = "&" if "?" in base_url else "?"
            href = safe_url(f"{base_url}{separator}answer={url_component(option)}")
        else:
            href = "#"
        options.append(
            f'<a href="{href}" style="display:inline-block; margin:4px; padding:10px 18px; '
            f'border:1px solid {theme.accent}; color:{theme.accent}; text-decoration:none; '
            f'border-radius:4px;">{safe_text(option)}</a>'
        )
    inner = (
        f'<div style="font-size:18px; font-weight:bold; color:{theme.primary}; margin-bottom:16px;">{question}</div>'
        f"<div>{''.join(options)}</div>"
    )
    return block_row("survey", inner, "background:white; padding:24px 32px; text-align:center;")


@registry.register("download")
def render_download(data: Any, theme: Theme) -> str:
    title = safe_text(get_str(data, "title", "Скачать файл"))
    file_name = safe_text(get_str(data, "file_name", "presentation.pdf"))
    size = safe_text(get_str(data, "size", "2.4 MB"))
    button_text = safe_text(get_str(data, "button_text", "Скачать"))
    inner = (
        '<table role="presentation" cellpadding="0" cellspacing="0" border="0" width="100%" '
        'style="border:1px solid #eee; border-radius:6px;"><tr>'
        '<td style="padding:16px; font-size:28px;" width="48">📄</td>'
        '<td style="padding:16px 0;">'
        f'<div style="font-weight:bold; color:{theme.primary};">{title}</div>'
        f'<div style="color:#888; font-size:13px;">{file_name} · {size}</div></td>'
        '<td style="padding:16px; text-align:right;">'
        + button(button_text, safe_url(get_str(data, "url")), theme.accent)
        + "</td></tr></table>"
    )
    return block_row("download", inner)


@registry.register("share")
def render_share(data: Any, theme: Theme) -> str:
    title = safe_text(get_str(data, "title", "Поделитесь с друзьями"))
    target = url_component(get_str(data, "url", "https://example.com"))
    links = "".join(
        f'<a href="{safe_text(prefix + target)}" style="display:inline-block; margin:4px; padding:8px 16px; '
        f'background:{color}; color:white; text-decoration:none; border-radius:4px; font-size:13px;">{name}</a>'
        for name, prefix, color in _SHARE_TARGETS
    )
    inner = (
        f'<div style="color:{theme.primary}; font-weight:bold; margin-bottom:12px;">{title}</div>'
        f"<div>{links}</div>"
    )
    return block_row("share", inner, "background:white; padding:24px 32px; text-align:center;")


@registry.register("gift")
def render_gift(data: Any, theme: Theme) -> str:
    title = safe_text(get_str(data, "title", "Подарок для вас"))
    text = multiline_text(get_str(data, "text", "Используйте промокод при следующем заказе"))
    code = safe_text(get_str(data, "code", "GIFT2026"))
    button_text = safe_text(get_str(data, "button_text", "Получить подарок"))
    inner = (
        '<div style="font-size:40px;">🎁</div>'
        f'<div style="font-size:22px; font-weight:bold; color:{theme.primary}; margin:8px 0;">{title}</div>'
        f'<div style="color:#666; margin-bottom:16px;">{text}</div>'
        f'<div style="display:inline-block; border:2px dashed {theme.accent}; padding:10px 24px; '
        f'font-size:20px; font-weight:bold; letter-spacing:3px; color:{theme.accent}; margin-bottom:20px;">{code}</div>'
        "<div>"
        + button(button_text, safe_url(get_str(data, "url")), theme.accent)
        + "</div>"
    )
    return block_row("gift", inner, "background:#fffaf2; padding:32px; text-align:center;")
