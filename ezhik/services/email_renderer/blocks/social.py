"""Social network embeds and link rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ezhik.services.email_renderer.defaults import SOCIAL_LINKS
from ezhik.services.email_renderer.fields import get_mapping_list, get_str
from ezhik.services.email_renderer.markup import block_row, button, safe_text, safe_url
from ezhik.services.email_renderer.registry import registry
from ezhik.services.email_renderer.theme import Theme

NETWORK_COLORS = {
    "instagram": "#e1306c",
    "telegram": "#229ed9",
    "youtube": "#ff0000",
    "spotify": "#1db954",
    "discord": "#5865f2",
    "vk": "#0077ff",
    "whatsapp": "#25d366",
}


@dataclass(frozen=True)
class SocialEmbedRenderer:
    """Branded card linking to a profile or channel on one network."""

    block_type: str
    label: str
    icon: str
    default_url: str
    default_title: str

    @property
    def color(self) -> str:
        return NETWORK_COLORS[self.block_type]

    def render(self, data: Any, theme: Theme) -> str:
        url = safe_url(get_str(data, "url", self.default_url))
        title = safe_text(get_str(data, "title", self.default_title))
        inner = (
            f'<div style="border:1px solid #eee; border-left:4px solid {self.color}; border-radius:6px; padding:20px;">'
            f'<div style="font-size:13px; color:{self.color}; font-weight:bold; margin-bottom:6px;">'
            f"{self.icon} {self.label}</div>"
            f'<div style="font-size:18px; font-weight:bold; color:{theme.primary}; margin-bottom:16px;">{title}</div>'
            + button("Перейти", url, self.color)
            + "</div>"
        )
        return block_row(self.block_type, inner)


SOCIAL_EMBEDS = (
    SocialEmbedRenderer("instagram", "Instagram", "📷", "https://instagram.com/", "Подписывайтесь на наш Instagram"),
    SocialEmbedRenderer("telegram", "Telegram", "✈️", "https://t.me/", "Наш канал в Telegram"),
    SocialEmbedRenderer("youtube", "YouTube", "▶️", "https://youtube.com/", "Смотрите нас на YouTube"),
    SocialEmbedRenderer("spotify", "Spotify", "🎧", "https://open.spotify.com/", "Слушайте в Spotify"),
    SocialEmbedRenderer("discord", "Discord", "🎮", "https://discord.com/", "Присоединяйтесь к Discord"),
)

for _embed in SOCIAL_EMBEDS:
    registry.add(_embed.block_type, _embed)


@registry.register("social")
def render_social_links(data: Any, theme: Theme) -> str:
    links: list[str] = []
    for link in get_mapping_list(data, "links", SOCIAL_LINKS):
        network = get_str(link, "network", "Link")
        color = NETWORK_COLORS.get(network.lower(), theme.accent)
        links.append(
            f'<a href="{safe_url(get_str(link, "url"))}" style="display:inline-block; margin:4px; '
            f'padding:8px 16px; background:{color}; color:white; text-decoration:none; '
            f'border-radius:16px; font-size:13px;">{safe_text(network)}</a>'
        )
    return block_row("social", "".join(links), "background:white; padding:20px 32px; text-align:center;")
