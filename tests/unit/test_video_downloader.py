"""Tests for the yt-dlp subprocess wrapper."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest

from ezhik.core.exceptions import VideoDownloadError
from ezhik.integrations import video_downloader
from ezhik.integrations.video_downloader import VideoDownloader, resolve_format


def _settings(tmp_path: Path) -> SimpleNamespace:
    return SimpleNamespace(
        ytdlp_binary="yt-dlp",
        ytdlp_tmp_dir=tmp_path / "yt",
        ytdlp_timeout_seconds=5,
        ytdlp_cleanup_delay_seconds=0,
    )


class _FakeProcess:
    def __init__(self, returncode: int, output: bytes, on_run: Any = None) -> None:
        self.returncode = returncode
        self._output = output
        self._on_run = on_run

    async def communicate(self) -> tuple[bytes, None]:
        if self._on_run is not None:
            self._on_run()
        return self._output, None


@pytest.mark.parametrize(
    ("quality", "expected"),
    [
        ("worst", "worst[height<=720]"),
        ("best", "best[height<=1080]"),
        ("audio", "bestaudio"),
        ("", "worst[height<=720]"),
        (None, "worst[height<=720]"),
        ("8k", "worst[height<=720]"),
    ],
)
def test_resolve_format(quality: str | None, expected: str) -> None:
    assert resolve_format(quality) == expected


def test_build_command_places_url_last(tmp_path: Path) -> None:
    downloader = VideoDownloader(app_settings=_settings(tmp_path))

    command = downloader.build_command("https://youtu.be/x", "best", tmp_path / "out.mp4")

    assert command == [
        "yt-dlp",
        "-f",
        "best[height<=1080]",
        "-o",
        str(tmp_path / "out.mp4"),
        "--no-warnings",
        "https://youtu.be/x",
    ]


@pytest.mark.asyncio
async def test_download_returns_created_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    downloader = VideoDownloader(app_settings=_settings(tmp_path))
    captured: dict[str, Any] = {}

    async def _fake_exec(*command: str, **kwargs: Any) -> _FakeProcess:
        captured["command"] = command
        output_path = Path(command[command.index("-o") + 1])
        return _FakeProcess(0, b"done", on_run=lambda: output_path.write_bytes(b"video"))

    monkeypatch.setattr(video_downloader.asyncio, "create_subprocess_exec", _fake_exec)

    path = await downloader.download("https://youtu.be/x")

    assert path.read_bytes() == b"video"
    assert path.parent == tmp_path / "yt"
    assert path.name.startswith("video_") and path.suffix == ".mp4"
    assert captured["command"][2] == "worst[height<=720]"


@pytest.mark.asyncio
async def test_download_raises_on_nonzero_exit(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    downloader = VideoDownloader(app_settings=_settings(tmp_path))

    async def _fake_exec(*command: str, **kwargs: Any) -> _FakeProcess:
        return _FakeProcess(1, b"ERROR: unsupported URL")

    monkeypatch.setattr(video_downloader.asyncio, "create_subprocess_exec", _fake_exec)

    with pytest.raises(VideoDownloadError) as exc_info:
        await downloader.download("https://example.com/nope")

    assert "unsupported URL" in exc_info.value.output


@pytest.mark.asyncio
async def test_download_raises_when_file_missing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    downloader = VideoDownloader(app_settings=_settings(tmp_path))

    async def _fake_exec(*command: str, **kwargs: Any) -> _FakeProcess:
        return _FakeProcess(0, b"")

    monkeypatch.setattr(video_downloader.asyncio, "create_subprocess_exec", _fake_exec)

    with pytest.raises(VideoDownloadError):
        await downloader.download("https://youtu.be/x")


@pytest.mark.asyncio
async def test_download_raises_when_binary_missing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    downloader = VideoDownloader(app_settings=_settings(tmp_path))

    async def _fake_exec(*command: str, **kwargs: Any) -> _FakeProcess:
        raise FileNotFoundError("yt-dlp")

    monkeypatch.setattr(video_downloader.asyncio, "create_subprocess_exec", _fake_exec)

    with pytest.raises(VideoDownloadError):
        await downloader.download("https://youtu.be/x")


@pytest.mark.asyncio
async def test_cleanup_later_removes_file(tmp_path: Path) -> None:
    downloader = VideoDownloader(app_settings=_settings(tmp_path))
    target = tmp_path / "video.mp4"
    target.write_bytes(b"v")

    await downloader.cleanup_later(target)
    await downloader.cleanup_later(target)

    assert not target.exists()
