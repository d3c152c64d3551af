"""Top-level API router — aggregates the endpoint routers."""

from fastapi import APIRouter

from articles_api.presentation.api.endpoints.articles import router as articles_router
from articles_api.presentation.api.endpoints.health import router as health_router

router = APIRouter()
router.include_router(health_router)
router.include_router(articles_router)
