"""Endpoint tests for the HTTP API."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from ezhik.api.dependencies import get_asset_store, get_idea_service, get_video_downloader
from ezhik.api.v1.email.constants import UPLOAD_CHUNK_BYTES
from ezhik.api.v1.email.routes import _read_limited
from ezhik.config import settings
from ezhik.core.exceptions import AssetTooLargeError, ExternalAPIError, VideoDownloadError
from ezhik.integrations.asset_storage import LocalAssetStore
from ezhik.main import create_app
from ezhik.services.ideas import IdeaService


class _FakeGenerator:
    def __init__(self, reply: str | None = "Generated", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str | None]] = []

    async def complete(self, prompt: str, system_prompt: str | None = None) -> str | None:
        self.calls.append((prompt, system_prompt))
        if self.error is not None:
            raise self.error
        return self.reply


def _client_with_generator(generator: _FakeGenerator) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_idea_service] = lambda: IdeaService(generator)
    return TestClient(app)


def _store(tmp_path: Path, max_bytes: int = 1_000) -> LocalAssetStore:
    return LocalAssetStore(
        app_settings=SimpleNamespace(storage_dir=tmp_path / "storage", upload_max_bytes=max_bytes)
    )


def test_health_reports_version() -> None:
    with TestClient(create_app()) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": settings.app_version}


def test_generate_renders_blocks_in_order() -> None:
    body = {
        "type": "promo",
        "subject": "Sale",
        "blocks": [
            {"type": "header", "enabled": True, "data": {"logo": "ACME"}},
            {"type": "text", "enabled": False, "data": {"content": "Hidden"}},
            {"type": "button", "enabled": True, "data": {"text": "Buy"}},
        ],
    }

    with TestClient(create_app()) as client:
        response = client.post("/api/generate", json=body)

    assert response.status_code == 200
    payload = response.json()
    assert payload["id"].startswith("email_")
    assert len(payload["id"]) == len("email_") + 8
    assert payload["html"].count("data-block-type=") == 2
    assert payload["html"].index("ACME") < payload["html"].index(">Buy</a>")
    assert "Hidden" not in payload["html"]
    assert "<title>Sale</title>" in payload["html"]


def test_generate_accepts_empty_document() -> None:
    with TestClient(create_app()) as client:
        response = client.post("/api/generate", json={})

    assert response.status_code == 200
    assert "<title>Email</title>" in response.json()["html"]


def test_ai_generate_uses_fixed_template() -> None:
    with TestClient(create_app()) as client:
        response = client.post("/api/ai-generate", json={"prompt": "Скидки 20%"})

    assert response.status_code == 200
    html = response.json()["html"]
    assert "Скидки 20%" in html
    assert '<tr data-block-type="header">' in html
    assert '<tr data-block-type="hero">' in html


def test_idea_increments_stats() -> None:
    generator = _FakeGenerator("Pixel vending machine")

    with _client_with_generator(generator) as client:
        first = client.get("/api/idea", params={"category": "psx"})
        client.get("/api/idea")
        stats = client.get("/api/stats")

    assert first.status_code == 200
    assert first.json() == {"idea": "Pixel vending machine", "category": "psx"}
    assert "PlayStation" in generator.calls[0][0]
    assert "бизнес" in generator.calls[1][0]
    assert stats.json() == {"count": 2}


def test_stats_are_per_application() -> None:
    with _client_with_generator(_FakeGenerator()) as client:
        client.get("/api/idea")

    with TestClient(create_app()) as client:
        assert client.get("/api/stats").json() == {"count": 0}


def test_idea_upstream_failure_returns_502_and_does_not_count() -> None:
    generator = _FakeGenerator(error=ExternalAPIError("Groq", "HTTP 500"))

    with _client_with_generator(generator) as client:
        response = client.get("/api/idea")
        stats = client.get("/api/stats")

    assert response.status_code == 502
    assert stats.json() == {"count": 0}


def test_ai_endpoints_return_503_without_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "groq_api_key", None)

    with TestClient(create_app()) as client:
        idea = client.get("/api/idea")
        chat = client.post("/api/ai", json={"prompt": "hi"})

    assert idea.status_code == 503
    assert chat.status_code == 503


def test_ai_chat_accepts_camel_case_system_prompt() -> None:
    generator = _FakeGenerator("Ответ")

    with _client_with_generator(generator) as client:
        response = client.post("/api/ai", json={"prompt": "hi", "systemPrompt": "Be terse"})

    assert response.status_code == 200
    assert response.json() == {"response": "Ответ"}
    assert generator.calls == [("hi", "Be terse")]


def test_ai_chat_requires_prompt() -> None:
    with _client_with_generator(_FakeGenerator()) as client:
        response = client.post("/api/ai", json={"prompt": ""})

    assert response.status_code == 422


def test_code_returns_502_when_model_is_silent() -> None:
    with _client_with_generator(_FakeGenerator(None)) as client:
        empty = client.post("/api/code", json={"language": "Go", "task": "hello"})

    with _client_with_generator(_FakeGenerator("fmt.Println(1)")) as client:
        ok = client.post("/api/code", json={"language": "Go", "task": "hello"})

    assert empty.status_code == 502
    assert ok.json() == {"code": "fmt.Println(1)"}


def test_feedback_requires_both_fields() -> None:
    with TestClient(create_app()) as client:
        ok = client.post("/api/feedback", json={"idea": "x", "feedback": "like"})
        missing = client.post("/api/feedback", json={"idea": "x"})

    assert ok.json() == {"status": "ok"}
    assert missing.status_code == 422


def test_upload_then_serve_from_storage(tmp_path: Path) -> None:
    app = create_app()
    store = _store(tmp_path)
    app.dependency_overrides[get_asset_store] = lambda: store

    with TestClient(app) as client:
        upload = client.post("/api/upload", files={"image": ("cat.jpg", b"jpeg-bytes", "image/jpeg")})
        url = upload.json()["url"]
        served = client.get(url)
        missing = client.get("/storage/nope.png")
        traversal = client.get("/storage/..%2F..%2Fetc%2Fpasswd")

    assert upload.status_code == 200
    assert url.startswith("/storage/") and url.endswith(".jpg")
    assert served.status_code == 200
    assert served.content == b"jpeg-bytes"
    assert served.headers["content-type"].startswith("image/jpeg")
    assert missing.status_code == 404
    assert traversal.status_code == 404


def test_upload_without_file_returns_400(tmp_path: Path) -> None:
    app = create_app()
    app.dependency_overrides[get_asset_store] = lambda: _store(tmp_path)

    with TestClient(app) as client:
        response = client.post("/api/upload", data={"other": "x"})

    assert response.status_code == 400
    assert response.json() == {"detail": "No file"}


def test_upload_too_large_returns_413(tmp_path: Path) -> None:
    app = create_app()
    app.dependency_overrides[get_asset_store] = lambda: _store(tmp_path, max_bytes=3)

    with TestClient(app) as client:
        response = client.post("/api/upload", files={"image": ("a.png", b"12345", "image/png")})

    assert response.status_code == 413


class _FakeDownloader:
    def __init__(self, path: Path | None, error: Exception | None = None) -> None:
        self.path = path
        self.error = error
        self.cleaned: list[Path] = []
        self.calls: list[tuple[str, str]] = []

    async def download(self, url: str, quality: str | None = None) -> Path:
        self.calls.append((url, quality or ""))
        if self.error is not None:
            raise self.error
        assert self.path is not None
        return self.path

    async def cleanup_later(self, path: Path) -> None:
        self.cleaned.append(path)


def test_youtube_download_streams_file_and_schedules_cleanup(tmp_path: Path) -> None:
    video = tmp_path / "video_1_abcd.mp4"
    video.write_bytes(b"mp4-bytes")
    downloader = _FakeDownloader(video)
    app = create_app()
    app.dependency_overrides[get_video_downloader] = lambda: downloader

    with TestClient(app) as client:
        response = client.post("/api/youtube-dl", json={"url": "https://youtu.be/x", "quality": "best"})

    assert response.status_code == 200
    assert response.content == b"mp4-bytes"
    assert "video_1_abcd.mp4" in response.headers["content-disposition"]
    assert downloader.calls == [("https://youtu.be/x", "best")]
    assert downloader.cleaned == [video]


def test_youtube_download_failure_returns_500() -> None:
    downloader = _FakeDownloader(None, error=VideoDownloadError("Failed to download video: exit status 1"))
    app = create_app()
    app.dependency_overrides[get_video_downloader] = lambda: downloader

    with TestClient(app) as client:
        failed = client.post("/api/youtube-dl", json={"url": "https://youtu.be/x"})
        invalid = client.post("/api/youtube-dl", json={"url": ""})

    assert failed.status_code == 500
    assert "exit status 1" in failed.json()["detail"]
    assert invalid.status_code == 422


def test_frontend_files_served_from_configured_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "index.html").write_text("<h1>Ezhik</h1>", encoding="utf-8")
    monkeypatch.setattr(settings, "frontend_dir", tmp_path)

    with TestClient(create_app()) as client:
        index = client.get("/")
        script = client.get("/app.js")

    assert index.status_code == 200
    assert "<h1>Ezhik</h1>" in index.text
    assert script.status_code == 404




class _ChunkedUpload:
    def __init__(self, chunk: bytes, chunks: int) -> None:
        self.chunk = chunk
        self.remaining = chunks
        self.reads = 0

    async def read(self, size: int = -1) -> bytes:
        self.reads += 1
        if self.remaining == 0:
            return b""
        self.remaining -= 1
        return self.chunk


@pytest.mark.asyncio
async def test_read_limited_stops_once_limit_is_exceeded() -> None:
    upload = _ChunkedUpload(b"x" * UPLOAD_CHUNK_BYTES, chunks=50)

    with pytest.raises(AssetTooLargeError):
        await _read_limited(upload, UPLOAD_CHUNK_BYTES + 1)

    assert upload.reads == 2
    assert upload.remaining == 48


@pytest.mark.asyncio
async def test_read_limited_returns_whole_payload_within_limit() -> None:
    upload = _ChunkedUpload(b"ab", chunks=3)

    assert await _read_limited(upload, 6) == b"ababab"
