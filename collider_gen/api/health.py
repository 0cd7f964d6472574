"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from collider_gen import __version__
from collider_gen.engine.registry import get_registry
from collider_gen.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        builders_registered=get_registry().count,
    )


@router.get("/kinds")
async def kinds() -> dict[str, str]:
    return {spec.kind.value: spec.description for spec in get_registry().all()}
