"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from palmsight import __version__
from palmsight.engine.pipeline import STAGES
from palmsight.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, stages=len(STAGES))
