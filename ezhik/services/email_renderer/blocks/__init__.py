"""Block renderers; importing this package registers every block type."""

from ezhik.services.email_renderer.blocks import actions, content, layout, social, widgets

__all__ = ["actions", "content", "layout", "social", "widgets"]
