"""Email builder endpoints: render, prompt-to-email and image upload."""

import logging

from fastapi import APIRouter, File, HTTPException, UploadFile, status

from ezhik.api.dependencies import AssetStoreDep
from ezhik.api.v1.email.constants import NO_FILE_DETAIL, UPLOAD_CHUNK_BYTES
from ezhik.core.exceptions import AssetTooLargeError
from ezhik.schemas.email import (
    AIGenerateRequest,
    EmailGenerateRequest,
    EmailGenerateResponse,
    UploadResponse,
)
from ezhik.services.email_composer import compose_from_prompt
from ezhik.services.email_renderer import render_email

logger = logging.getLogger(__name__)

router = APIRouter()


async def _read_limited(upload: UploadFile, limit: int) -> bytes:
    """Read an upload in chunks, stopping as soon as it exceeds ``limit`` bytes."""
    buffer = bytearray()
    while chunk := await upload.read(UPLOAD_CHUNK_BYTES):
        buffer.extend(chunk)
        if len(buffer) > limit:
            raise AssetTooLargeError(len(buffer), limit)
    return bytes(buffer)


@router.post("/generate", response_model=EmailGenerateResponse, summary="Render email HTML")
async def generate_email(payload: EmailGenerateRequest) -> EmailGenerateResponse:
    """Render the posted document into table-based HTML."""
    output = render_email(payload.to_document())
    logger.info(
        "Email generated",
        extra={"email_id": output.id, "blocks": len(payload.blocks)},
    )
    return EmailGenerateResponse(html=output.html, id=output.id)


@router.post("/ai-generate", response_model=EmailGenerateResponse, summary="Render email from prompt")
async def ai_generate_email(payload: AIGenerateRequest) -> EmailGenerateResponse:
    output = render_email(compose_from_prompt(payload.prompt))
    logger.info("Email generated from prompt", extra={"email_id": output.id, "type": payload.type})
    return EmailGenerateResponse(html=output.html, id=output.id)


@router.post("/upload", response_model=UploadResponse, summary="Upload an image")
async def upload_image(
    store: AssetStoreDep,
    image: UploadFile | None = File(default=None),
) -> UploadResponse:
    """Store an uploaded image and return the URL to place in a block."""
    if image is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=NO_FILE_DETAIL)

    try:
        payload = await _read_limited(image, store.max_bytes)
        stored = await store.save(image.filename, payload)
    except AssetTooLargeError as exc:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=exc.message,
        ) from exc
    finally:
        await image.close()

    return UploadResponse(url=stored.url)
