"""Short random identifiers for generated documents and uploaded assets."""

from __future__ import annotations

import secrets
from pathlib import PurePath

_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"

DOCUMENT_ID_PREFIX = "email_"
DOCUMENT_ID_LENGTH = 8
ASSET_NAME_LENGTH = 12


def generate_id(length: int) -> str:
    """Generate a lowercase alphanumeric identifier of the given length."""
    return "".join(secrets.choice(_ALPHABET) for _ in range(max(length, 0)))


def generate_document_id() -> str:
    """Identifier returned alongside rendered email HTML."""
    return f"{DOCUMENT_ID_PREFIX}{generate_id(DOCUMENT_ID_LENGTH)}"


def generate_asset_filename(original_filename: str | None) -> str:
    """Random storage name that keeps the extension of the uploaded file."""
    suffix = PurePath(original_filename or "").suffix
    return f"{generate_id(ASSET_NAME_LENGTH)}{suffix}"
