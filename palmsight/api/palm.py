"""POST /api/palm/interpret — palm reading from detector keypoints."""

from __future__ import annotations

import logging
import random
import time

from fastapi import APIRouter, HTTPException

from palmsight.config import settings
from palmsight.engine.context import KeypointSet
from palmsight.engine.pipeline import create_pipeline
from palmsight.models.requests import InterpretRequest
from palmsight.models.responses import InterpretResponse
from palmsight.utils.geometry import EmptyInputError

logger = logging.getLogger(__name__)

router = APIRouter()

NO_PALM_MESSAGE = "No palm detected in the image. Please ensure the palm is clearly visible."


@router.post("/palm/interpret", response_model=InterpretResponse)
async def interpret_palm_reading(req: InterpretRequest) -> InterpretResponse:
    if not req.predictions:
        raise HTTPException(status_code=400, detail=NO_PALM_MESSAGE)

    start = time.perf_counter()
    keypoints = KeypointSet.from_prediction(req.predictions[0].to_record())

    seed = req.seed if req.seed is not None else settings.random_seed
    rng = random.Random(seed) if seed is not None else None
    age_now = req.age_now if req.age_now is not None else settings.default_age_now

    try:
        result = create_pipeline().run(keypoints, age_now=age_now, rng=rng)
    except EmptyInputError as e:
        logger.info("Rejected prediction %s: %s", keypoints.detection_id or "<unnamed>", e)
        raise HTTPException(status_code=400, detail=NO_PALM_MESSAGE) from e

    elapsed = (time.perf_counter() - start) * 1000
    return InterpretResponse(data=result.to_dict(), processing_time_ms=round(elapsed, 1))
