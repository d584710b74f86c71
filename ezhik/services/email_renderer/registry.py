"""Dispatch from block type tag to renderer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from ezhik.services.email_renderer.theme import Theme

RenderFunction = Callable[[Any, Theme], str]


class BlockRenderer(Protocol):
    """Turns one block's field bag into an HTML table row."""

    def render(self, data: Any, theme: Theme) -> str: ...


@dataclass(frozen=True)
class FunctionRenderer:
    """Adapts a plain ``(data, theme) -> str`` function to :class:`BlockRenderer`."""

    func: RenderFunction

    def render(self, data: Any, theme: Theme) -> str:
        return self.func(data, theme)


class BlockRendererRegistry:
    """Mapping of type tag to renderer; unknown tags render nothing."""

    def __init__(self) -> None:
        self._renderers: dict[str, BlockRenderer] = {}

    def add(self, block_type: str, renderer: BlockRenderer) -> None:
        if block_type in self._renderers:
            raise ValueError(f"Renderer already registered for block type: {block_type}")
        self._renderers[block_type] = renderer

    def register(self, block_type: str) -> Callable[[RenderFunction], RenderFunction]:
        """Decorator that registers a plain render function under ``block_type``."""

        def decorator(func: RenderFunction) -> RenderFunction:
            self.add(block_type, FunctionRenderer(func))
            return func

        return decorator

    def get(self, block_type: str) -> BlockRenderer | None:
        return self._renderers.get(block_type)

    def __contains__(self, block_type: object) -> bool:
        return block_type in self._renderers

    @property
    def block_types(self) -> list[str]:
        return sorted(self._renderers)

    def render(self, block_type: str, data: Any, theme: Theme) -> str:
        renderer = self._renderers.get(block_type)
        if renderer is None:
            return ""
        return renderer.render(data, theme)


registry = BlockRendererRegistry()
