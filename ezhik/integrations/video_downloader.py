"""Wrapper around the external yt-dlp executable."""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path

from ezhik.config import Settings, settings
from ezhik.core.exceptions import VideoDownloadError
from ezhik.core.ids import generate_id

logger = logging.getLogger(__name__)

QUALITY_FORMATS = {
    "worst": "worst[height<=720]",
    "best": "best[height<=1080]",
    "audio": "bestaudio",
}
DEFAULT_QUALITY = "worst"


def resolve_format(quality: str | None) -> str:
    """Map a quality keyword to a yt-dlp format selector; unknown values mean `worst`."""
    return QUALITY_FORMATS.get(quality or DEFAULT_QUALITY, QUALITY_FORMATS[DEFAULT_QUALITY])


class VideoDownloader:
    """Download a video into a temp directory and hand back the file path."""

    def __init__(self, app_settings: Settings | None = None) -> None:
        self.settings = app_settings or settings

    def build_command(self, url: str, quality: str | None, output_path: Path) -> list[str]:
        return [
            self.settings.ytdlp_binary,
            "-f",
            resolve_format(quality),
            "-o",
            str(output_path),
            "--no-warnings",
            url,
        ]

    def _output_path(self) -> Path:
        tmp_dir = Path(self.settings.ytdlp_tmp_dir)
        tmp_dir.mkdir(parents=True, exist_ok=True)
        return tmp_dir / f"video_{int(time.time())}_{generate_id(4)}.mp4"

    async def download(self, url: str, quality: str | None = None) -> Path:
        output_path = self._output_path()
        command = self.build_command(url, quality, output_path)

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except OSError as exc:
            raise VideoDownloadError(f"Failed to start downloader: {exc}") from exc

        try:
            stdout, _ = await asyncio.wait_for(
                process.communicate(),
                timeout=self.settings.ytdlp_timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            process.kill()
            await process.wait()
            raise VideoDownloadError("Downloader timed out") from exc

        output = (stdout or b"").decode("utf-8", errors="replace")
        if process.returncode != 0:
            logger.error(
                "yt-dlp failed",
                extra={"url": url, "returncode": process.returncode, "output": output[-2000:]},
            )
            raise VideoDownloadError(
                f"Failed to download video: exit status {process.returncode}",
                output=output,
            )

        if not output_path.is_file():
            raise VideoDownloadError("Video file not found", output=output)

        logger.info("Video downloaded", extra={"url": url, "path": str(output_path)})
        return output_path

    async def cleanup_later(self, path: Path) -> None:
        """Remove a served file after the configured delay."""
        await asyncio.sleep(self.settings.ytdlp_cleanup_delay_seconds)
        path.unlink(missing_ok=True)
        logger.debug("Downloaded video removed", extra={"path": str(path)})
