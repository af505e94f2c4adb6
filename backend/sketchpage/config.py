"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    sketchpage_env: str = "development"
    sketchpage_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Canvas fitting
    max_canvas_width: int = 2000
    max_canvas_height: int = 3000
    # Output is always a reduction of the scene, never 1:1
    max_scale: float = 0.4
    bounds_margin: float = 50.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
