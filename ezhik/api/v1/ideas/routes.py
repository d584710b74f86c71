"""Idea generation, AI chat and code generation endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Query, status

from ezhik.api.dependencies import IdeaServiceDep, StatsDep
from ezhik.api.v1.ideas.constants import FEEDBACK_OK_STATUS, NO_CODE_DETAIL
from ezhik.core.exceptions import ExternalAPIError
from ezhik.schemas.ideas import (
    AIRequest,
    AIResponse,
    CodeRequest,
    CodeResponse,
    FeedbackRequest,
    IdeaResponse,
    StatsResponse,
    StatusResponse,
)
from ezhik.services.ideas import DEFAULT_CATEGORY

logger = logging.getLogger(__name__)

router = APIRouter()


def _upstream_error(exc: ExternalAPIError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=exc.message)


@router.get("/idea", response_model=IdeaResponse, summary="Generate a project idea")
async def get_idea(
    service: IdeaServiceDep,
    stats: StatsDep,
    category: str = Query(default=DEFAULT_CATEGORY),
) -> IdeaResponse:
    """Generate an idea for the category and count it."""
    try:
        idea = await service.generate_idea(category)
    except ExternalAPIError as exc:
        raise _upstream_error(exc) from exc
    stats.increment()
    return IdeaResponse(idea=idea, category=category)


@router.get("/stats", response_model=StatsResponse, summary="Generated idea count")
async def get_stats(stats: StatsDep) -> StatsResponse:
    return StatsResponse(count=stats.count)


@router.post("/feedback", response_model=StatusResponse, summary="Record idea feedback")
async def send_feedback(payload: FeedbackRequest) -> StatusResponse:
    logger.info("Feedback received", extra={"idea": payload.idea, "feedback": payload.feedback})
    return StatusResponse(status=FEEDBACK_OK_STATUS)


@router.post("/ai", response_model=AIResponse, summary="Free-form AI chat")
async def handle_ai(payload: AIRequest, service: IdeaServiceDep) -> AIResponse:
    try:
        response = await service.chat(payload.prompt, payload.system_prompt)
    except ExternalAPIError as exc:
        raise _upstream_error(exc) from exc
    return AIResponse(response=response)


@router.post("/code", response_model=CodeResponse, summary="Generate code")
async def generate_code(payload: CodeRequest, service: IdeaServiceDep) -> CodeResponse:
    try:
        code = await service.generate_code(payload.language, payload.task)
    except ExternalAPIError as exc:
        raise _upstream_error(exc) from exc
    if code is None:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=NO_CODE_DETAIL)
    return CodeResponse(code=code)
