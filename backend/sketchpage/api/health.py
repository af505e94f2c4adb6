"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from sketchpage.models.responses import HealthResponse
from sketchpage.models.scene import ELEMENT_MODELS

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        element_kinds=sorted(ELEMENT_MODELS),
    )
