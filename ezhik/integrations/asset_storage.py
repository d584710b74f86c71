"""Local-disk storage for images uploaded into email blocks."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from ezhik.config import Settings, settings
from ezhik.core.exceptions import (
    AssetNotFoundError,
    AssetTooLargeError,
    InvalidAssetPathError,
)
from ezhik.core.ids import generate_asset_filename

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "/storage/"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

_EXTENSION_TO_MIME = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
}


def content_type_for(path: str) -> str:
    """Infer a content type from the file extension."""
    return _EXTENSION_TO_MIME.get(PurePosixPath(path).suffix.lower(), DEFAULT_CONTENT_TYPE)


@dataclass(frozen=True)
class StoredAsset:
    filename: str
    url: str
    byte_size: int


class LocalAssetStore:
    """Persist uploads under a storage root and resolve them back to bytes."""

    def __init__(self, app_settings: Settings | None = None, root: Path | None = None) -> None:
        self.settings = app_settings or settings
        self.root = Path(root or self.settings.storage_dir)

    @property
    def max_bytes(self) -> int:
        return self.settings.upload_max_bytes

    async def save(self, original_filename: str | None, payload: bytes) -> StoredAsset:
        """Store ``payload`` under a generated name that keeps the original extension."""
        limit = self.max_bytes
        if len(payload) > limit:
            raise AssetTooLargeError(len(payload), limit)

        filename = generate_asset_filename(original_filename)
        await asyncio.to_thread(self._write, filename, payload)

        logger.info(
            "Asset stored",
            extra={"asset_filename": filename, "byte_size": len(payload)},
        )
        return StoredAsset(filename=filename, url=f"{PUBLIC_PREFIX}{filename}", byte_size=len(payload))

    async def load(self, path: str) -> tuple[bytes, str]:
        """Return the stored bytes and their content type.

        The requested path is canonicalized before lookup; anything that
        resolves outside the storage root is rejected.
        """
        target = self.resolve_path(path)
        if not target.is_file():
            raise AssetNotFoundError(path)
        data = await asyncio.to_thread(target.read_bytes)
        return data, content_type_for(target.name)

    def resolve_path(self, path: str) -> Path:
        relative = path.replace("\\", "/").lstrip("/")
        if not relative or "\x00" in relative:
            raise InvalidAssetPathError(path)

        root = self.root.resolve()
        target = (root / relative).resolve()
        if target == root or not target.is_relative_to(root):
            raise InvalidAssetPathError(path)
        return target

    def _write(self, filename: str, payload: bytes) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        (self.root / filename).write_bytes(payload)
