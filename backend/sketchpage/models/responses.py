"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    element_kinds: list[str] = Field(default_factory=list)


class ConvertResponse(BaseModel):
    width: int
    height: int
    scale: float
    offset_x: float
    offset_y: float
    background_color: str = "#ffffff"
    element_count: int = 0
    rendered_count: int = 0
    skipped_count: int = 0
    font_urls: list[str] = Field(default_factory=list)
    html: str = ""
    processing_time_ms: float = 0.0


class ErrorResponse(BaseModel):
    error: str
    code: str
