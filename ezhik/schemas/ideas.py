"""Idea, chat, code and download schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class IdeaResponse(BaseModel):
    idea: str
    category: str


class StatsResponse(BaseModel):
    count: int


class FeedbackRequest(BaseModel):
    idea: str = Field(min_length=1)
    feedback: str = Field(min_length=1)


class StatusResponse(BaseModel):
    status: str


class AIRequest(BaseModel):
    """Free-form prompt with an optional system prompt override."""

    model_config = ConfigDict(populate_by_name=True)

    prompt: str = Field(min_length=1)
    system_prompt: str = Field(default="", alias="systemPrompt")


class AIResponse(BaseModel):
    response: str


class CodeRequest(BaseModel):
    language: str = ""
    task: str = ""


class CodeResponse(BaseModel):
    code: str


class YouTubeRequest(BaseModel):
    url: str = Field(min_length=1)
    quality: str = ""
