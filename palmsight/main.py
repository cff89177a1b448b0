"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from palmsight import __version__
from palmsight.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.palmsight_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="PalmSight",
        description="Palm keypoint interpretation engine — geometry-driven palm readings",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from palmsight.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
