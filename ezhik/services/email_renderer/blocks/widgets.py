"""Static visual widgets: counters, meters, codes and media previews."""

from __future__ import annotations

from typing import Any

from ezhik.services.email_renderer.defaults import PLACEHOLDER_VIDEO
from ezhik.services.email_renderer.fields import get_int_text, get_str
from ezhik.services.email_renderer.markup import block_row, button, safe_text, safe_url, url_component
from ezhik.services.email_renderer.registry import registry
from ezhik.services.email_renderer.theme import Theme

QR_ENDPOINT = "https://api.qrserver.com/v1/create-qr-code/"
BARCODE_ENDPOINT = "https://barcodeapi.org/api/128/"
MAX_RATING = 5


def progress_percent(current: int, total: int) -> int:
    """Whole-number completion percentage, clamped to 0..100."""
    if total <= 0:
        return 0
    return min(max(round(current * 100 / total), 0), 100)


def _time_cell(value: str, label: str, theme: Theme) -> str:
    return (
        '<td style="padding:0 6px; text-align:center;">'
        f'<div style="background:{theme.primary}; color:white; font-size:28px; font-weight:bold; '
        f'padding:12px 16px; border-radius:6px;">{safe_text(value)}</div>'
        f'<div style="color:#888; font-size:12px; margin-top:6px;">{label}</div>'
        "</td>"
    )


@registry.register("countdown")
def render_countdown(data: Any, theme: Theme) -> str:
    title = safe_text(get_str(data, "title", "До конца акции"))
    cells = (
        _time_cell(get_str(data, "days", "03"), "дней", theme)
        + _time_cell(get_str(data, "hours", "12"), "часов", theme)
        + _time_cell(get_str(data, "minutes", "45"), "минут", theme)
    )
    inner = (
        f'<div style="font-size:18px; font-weight:bold; color:{theme.primary}; margin-bottom:16px;">{title}</div>'
        '<table role="presentation" cellpadding="0" cellspacing="0" border="0" align="center">'
        f"<tr>{cells}</tr></table>"
    )
    return block_row("countdown", inner, "background:white; padding:24px 32px; text-align:center;")


@registry.register("timer")
def render_timer(data: Any, theme: Theme) -> str:
    label = safe_text(get_str(data, "label", "Осталось"))
    time = safe_text(get_str(data, "time", "23:59:59"))
    inner = (
        f'<span style="color:#888; margin-right:12px;">{label}</span>'
        f'<span style="font-family:\'Courier New\', monospace; font-size:28px; font-weight:bold; '
        f'color:{theme.accent}; letter-spacing:2px;">{time}</span>'
    )
    return block_row("timer", inner, "background:white; padding:20px 32px; text-align:center;")


@registry.register("progress")
def render_progress(data: Any, theme: Theme) -> str:
    title = safe_text(get_str(data, "title", "Ваш прогресс"))
    current = get_int_text(data, "current", 3)
    total = get_int_text(data, "total", 5)
    percent = progress_percent(current, total)
    inner = (
        '<table role="presentation" cellpadding="0" cellspacing="0" border="0" width="100%"><tr>'
        f'<td style="color:{theme.primary}; font-weight:bold; padding-bottom:8px;">{title}</td>'
        f'<td style="color:#888; text-align:right; padding-bottom:8px;">{current} / {total}</td>'
        "</tr></table>"
        '<div style="background:#eee; border-radius:6px; height:12px; overflow:hidden;">'
        f'<div style="background:{theme.accent}; width:{percent}%; height:12px;"></div></div>'
        f'<div style="color:#888; font-size:13px; margin-top:6px; text-align:right;">{percent}%</div>'
    )
    return block_row("progress", inner)


@registry.register("rating")
def render_rating(data: Any, theme: Theme) -> str:
    title = safe_text(get_str(data, "title", "Оцените нас"))
    rating = min(max(get_int_text(data, "rating", MAX_RATING), 0), MAX_RATING)
    url = get_str(data, "url")
    stars: list[str] = []
    for value in range(1, MAX_RATING + 1):
        color = "#f5b301" if value <= rating else "#ddd"
        star = f'<span style="font-size:32px; color:{color};">★</span>'
        if url:
            separator = "&" if "?" in url else "?"
            star = f'<a href="{safe_url(f"{url}{separator}rating={value}")}" style="text-decoration:none;">{star}</a>'
        stars.append(star)
    inner = (
        f'<div style="font-size:18px; font-weight:bold; color:{theme.primary}; margin-bottom:8px;">{title}</div>'
        f"<div>{''.join(stars)}</div>"
    )
    return block_row("rating", inner, "background:white; padding:24px 32px; text-align:center;")


@registry.register("qr")
def render_qr(data: Any, theme: Theme) -> str:
    payload = get_str(data, "data", "https://example.com")
    size = min(max(get_int_text(data, "size", 150), 50), 500)
    caption = safe_text(get_str(data, "caption", "Отсканируйте QR-код"))
    src = f"{QR_ENDPOINT}?size={size}x{size}&data={url_component(payload)}"
    inner = (
        f'<img src="{safe_text(src)}" alt="QR" width="{size}" height="{size}" '
        'style="display:inline-block; border:0;">'
        f'<div style="color:#888; font-size:13px; margin-top:8px;">{caption}</div>'
    )
    return block_row("qr", inner, "background:white; padding:24px 32px; text-align:center;")


@registry.register("barcode")
def render_barcode(data: Any, theme: Theme) -> str:
    code = get_str(data, "code", "4600000000000")
    caption = safe_text(get_str(data, "caption", "Покажите штрихкод на кассе"))
    src = f"{BARCODE_ENDPOINT}{url_component(code)}"
    inner = (
        f'<img src="{safe_text(src)}" alt="{safe_text(code)}" width="300" '
        'style="display:inline-block; max-width:300px; border:0;">'
        f'<div style="font-family:\'Courier New\', monospace; letter-spacing:3px; color:{theme.primary}; '
        f'margin-top:6px;">{safe_text(code)}</div>'
        f'<div style="color:#888; font-size:13px; margin-top:4px;">{caption}</div>'
    )
    return block_row("barcode", inner, "background:white; padding:24px 32px; text-align:center;")


@registry.register("seal")
def render_seal(data: Any, theme: Theme) -> str:
    text = safe_text(get_str(data, "text", "Гарантия качества"))
    subtitle = safe_text(get_str(data, "subtitle", "100%"))
    inner = (
        f'<div style="display:inline-block; width:120px; height:120px; border-radius:60px; '
        f'border:4px double {theme.accent}; text-align:center;">'
        f'<div style="font-size:26px; font-weight:bold; color:{theme.accent}; padding-top:30px;">{subtitle}</div>'
        f'<div style="font-size:11px; color:{theme.primary}; padding:4px 10px 0;">{text}</div>'
        "</div>"
    )
    return block_row("seal", inner, "background:white; padding:24px 32px; text-align:center;")


@registry.register("video")
def render_video(data: Any, theme: Theme) -> str:
    url = safe_url(get_str(data, "url"))
    thumbnail = safe_url(get_str(data, "thumbnail", PLACEHOLDER_VIDEO))
    title = safe_text(get_str(data, "title", "Смотреть видео"))
    inner = (
        f'<a href="{url}" style="display:block; text-decoration:none;">'
        f'<img src="{thumbnail}" alt="{title}" width="536" '
        'style="display:block; width:100%; max-width:536px; border:0; border-radius:6px;"></a>'
        '<div style="margin-top:16px;">'
        + button(f"▶ {title}", url, theme.accent)
        + "</div>"
    )
    return block_row("video", inner, "background:white; padding:24px 32px; text-align:center;")
