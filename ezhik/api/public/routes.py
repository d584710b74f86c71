"""Unprefixed routes: stored uploads and the static frontend."""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Response, status
from fastapi.responses import FileResponse

from ezhik.api.dependencies import AssetStoreDep
from ezhik.config import settings
from ezhik.core.exceptions import AssetNotFoundError, InvalidAssetPathError

router = APIRouter()

FRONTEND_FILES = {
    "/": "index.html",
    "/style.css": "style.css",
    "/app.js": "app.js",
}


@router.get("/storage/{path:path}", summary="Serve an uploaded asset")
async def serve_asset(path: str, store: AssetStoreDep) -> Response:
    try:
        data, content_type = await store.load(path)
    except (AssetNotFoundError, InvalidAssetPathError) as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc
    return Response(content=data, media_type=content_type)


def _frontend_endpoint(filename: str):
    async def serve_frontend_file() -> FileResponse:
        target = Path(settings.frontend_dir) / filename
        if not target.is_file():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return FileResponse(target)

    return serve_frontend_file


for _route_path, _filename in FRONTEND_FILES.items():
    router.add_api_route(
        _route_path,
        _frontend_endpoint(_filename),
        methods=["GET"],
        include_in_schema=False,
    )
