"""API v1 router aggregator."""

from fastapi import APIRouter

from ezhik.api.v1.email import routes as email
from ezhik.api.v1.ideas import routes as ideas
from ezhik.api.v1.media import routes as media

api_router = APIRouter()

api_router.include_router(ideas.router, tags=["Ideas"])
api_router.include_router(email.router, tags=["Email Builder"])
api_router.include_router(media.router, tags=["Media"])
