"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class KeypointModel(BaseModel):
    x: float
    y: float


class PredictionModel(BaseModel):
    """One detector prediction. Only points, confidence and detection_id are used."""

    points: list[KeypointModel] = Field(default_factory=list)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    detection_id: str = ""
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    class_: str | None = Field(default=None, alias="class")
    class_id: int | None = None

    model_config = {"populate_by_name": True, "extra": "ignore"}

    def to_record(self) -> dict[str, Any]:
        return {
            "points": [p.model_dump() for p in self.points],
            "confidence": self.confidence,
            "detection_id": self.detection_id,
        }


class InterpretRequest(BaseModel):
    predictions: list[PredictionModel] = Field(default_factory=list, description="Detector predictions; the first is read")
    age_now: int | None = Field(default=None, ge=0, le=130, description="Current age, anchors the timeline")
    seed: int | None = Field(default=None, description="Seed for the randomized phrase pick")
