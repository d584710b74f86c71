"""Video download endpoint backed by yt-dlp."""

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse
from starlette.background import BackgroundTask

from ezhik.api.dependencies import VideoDownloaderDep
from ezhik.core.exceptions import VideoDownloadError
from ezhik.schemas.ideas import YouTubeRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/youtube-dl", summary="Download a video", response_class=FileResponse)
async def download_youtube(payload: YouTubeRequest, downloader: VideoDownloaderDep) -> FileResponse:
    """Download the video and stream it back as an attachment.

    The temp file is removed shortly after the response has been sent.
    """
    try:
        path = await downloader.download(payload.url, payload.quality)
    except VideoDownloadError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=exc.message,
        ) from exc

    return FileResponse(
        path,
        media_type="application/octet-stream",
        filename=path.name,
        background=BackgroundTask(downloader.cleanup_later, path),
    )
