"""Reusable API dependencies shared across routes."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from ezhik.core.exceptions import APIKeyMissingError
from ezhik.integrations.asset_storage import LocalAssetStore
from ezhik.integrations.groq_client import GroqClient
from ezhik.integrations.video_downloader import VideoDownloader
from ezhik.services.ideas import IdeaService
from ezhik.services.stats import StatsCounter


async def get_groq_client() -> AsyncGenerator[GroqClient, None]:
    try:
        client = GroqClient()
    except APIKeyMissingError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=exc.message,
        ) from exc
    async with client:
        yield client


def get_idea_service(client: Annotated[GroqClient, Depends(get_groq_client)]) -> IdeaService:
    return IdeaService(client)


def get_stats_counter(request: Request) -> StatsCounter:
    return request.app.state.stats


def get_asset_store() -> LocalAssetStore:
    return LocalAssetStore()


def get_video_downloader() -> VideoDownloader:
    return VideoDownloader()


IdeaServiceDep = Annotated[IdeaService, Depends(get_idea_service)]
StatsDep = Annotated[StatsCounter, Depends(get_stats_counter)]
AssetStoreDep = Annotated[LocalAssetStore, Depends(get_asset_store)]
VideoDownloaderDep = Annotated[VideoDownloader, Depends(get_video_downloader)]
