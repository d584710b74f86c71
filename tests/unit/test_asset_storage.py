"""Tests for local upload storage."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from ezhik.core.exceptions import AssetNotFoundError, AssetTooLargeError, InvalidAssetPathError
from ezhik.integrations.asset_storage import LocalAssetStore, content_type_for


def _store(tmp_path: Path, max_bytes: int = 1_000) -> LocalAssetStore:
    settings = SimpleNamespace(storage_dir=tmp_path / "storage", upload_max_bytes=max_bytes)
    return LocalAssetStore(app_settings=settings)


@pytest.mark.asyncio
async def test_save_keeps_extension_and_round_trips(tmp_path: Path) -> None:
    store = _store(tmp_path)

    stored = await store.save("photo.PNG", b"png-bytes")

    assert stored.filename.endswith(".PNG")
    assert len(stored.filename) == len("abcdefghijkl.PNG")
    assert stored.url == f"/storage/{stored.filename}"
    assert stored.byte_size == 9
    assert (tmp_path / "storage" / stored.filename).read_bytes() == b"png-bytes"

    data, content_type = await store.load(stored.filename)
    assert data == b"png-bytes"
    assert content_type == "image/png"


@pytest.mark.asyncio
async def test_save_rejects_oversized_payload(tmp_path: Path) -> None:
    store = _store(tmp_path, max_bytes=4)

    with pytest.raises(AssetTooLargeError):
        await store.save("big.jpg", b"12345")
    assert not (tmp_path / "storage").exists()


@pytest.mark.asyncio
async def test_load_missing_file_raises_not_found(tmp_path: Path) -> None:
    store = _store(tmp_path)

    with pytest.raises(AssetNotFoundError):
        await store.load("missing.png")


@pytest.mark.parametrize("path", ["../secret.txt", "a/../../secret.txt", "", "/", "..\\secret.txt", "a\x00.png"])
def test_resolve_path_rejects_escapes(tmp_path: Path, path: str) -> None:
    store = _store(tmp_path)
    (tmp_path / "secret.txt").write_text("nope")

    with pytest.raises(InvalidAssetPathError):
        store.resolve_path(path)


def test_resolve_path_strips_leading_slash(tmp_path: Path) -> None:
    store = _store(tmp_path)

    assert store.resolve_path("/img.png") == (tmp_path / "storage" / "img.png").resolve()


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("a.jpg", "image/jpeg"),
        ("a.JPEG", "image/jpeg"),
        ("a.png", "image/png"),
        ("a.gif", "image/gif"),
        ("a.webp", "application/octet-stream"),
        ("noext", "application/octet-stream"),
    ],
)
def test_content_type_for(path: str, expected: str) -> None:
    assert content_type_for(path) == expected
