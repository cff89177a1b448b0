"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "1.0.0"
    stages: int = 0


class InterpretResponse(BaseModel):
    data: dict[str, Any]
    processing_time_ms: float = 0.0
