"""Prompt construction and fallbacks around the text-generation client."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "бизнес"
DEFAULT_SYSTEM_PROMPT = "Ты полезный AI-ассистент. Отвечай на русском языке."

NO_IDEA_FALLBACK = "No idea generated today, try again!"
NO_RESPONSE_FALLBACK = "No response from AI"

PSX_IDEA_PROMPT = (
    "Generate a unique PSX-style 3D asset idea. Think retro low-poly aesthetic from "
    "PlayStation 1 era: pixelated textures, affine texture warping, no perspective "
    "correction, 16-bit color palette. Suggest specific objects like: retro electronics, "
    "vending machines, household items, packaging, street objects. Keep it practical for "
    "a solo 3D artist. Return only the idea text, no extra fluff."
)

GENERIC_IDEA_PROMPT = (
    "Generate a unique and creative project idea for the category: {category}. "
    "The idea should be innovative and interesting for an 18-year-old developer and "
    "3D artist. Return only the idea text, no extra fluff."
)

CODE_PROMPT = (
    "Generate working code in {language} for: {task}. Return only the code, no "
    "explanations. Include comments if needed. Make it complete and runnable."
)


class TextGenerator(Protocol):
    async def complete(self, prompt: str, system_prompt: str | None = None) -> str | None: ...


def build_idea_prompt(category: str) -> str:
    if category == "psx":
        return PSX_IDEA_PROMPT
    return GENERIC_IDEA_PROMPT.format(category=category)


def build_code_prompt(language: str, task: str) -> str:
    return CODE_PROMPT.format(language=language, task=task)


class IdeaService:
    """Idea, chat and code generation on top of a chat-completions client."""

    def __init__(self, generator: TextGenerator) -> None:
        self.generator = generator

    async def generate_idea(self, category: str = DEFAULT_CATEGORY) -> str:
        content = await self.generator.complete(build_idea_prompt(category))
        logger.info("Idea generated", extra={"category": category, "empty": content is None})
        return content or NO_IDEA_FALLBACK

    async def chat(self, prompt: str, system_prompt: str | None = None) -> str:
        content = await self.generator.complete(prompt, system_prompt or DEFAULT_SYSTEM_PROMPT)
        return content or NO_RESPONSE_FALLBACK

    async def generate_code(self, language: str, task: str) -> str | None:
        """Generated code, or ``None`` when the model returned nothing."""
        content = await self.generator.complete(build_code_prompt(language, task))
        logger.info("Code generated", extra={"language": language, "empty": content is None})
        return content
