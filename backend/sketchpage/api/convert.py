"""POST /api/convert — scene upload → canvas-sized HTML page."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse

from sketchpage.config import Settings
from sketchpage.dependencies import get_settings
from sketchpage.engine.pipeline import load_scene, render_scene
from sketchpage.errors import ConversionError
from sketchpage.models.layout import ConversionResult
from sketchpage.models.responses import ConvertResponse, ErrorResponse

router = APIRouter()


def _run(body: bytes, settings: Settings) -> tuple[ConversionResult, int]:
    try:
        scene = load_scene(body)
        return render_scene(scene, settings), len(scene.elements)
    except ConversionError as exc:
        detail = ErrorResponse(error=exc.message, code=exc.code).model_dump()
        raise HTTPException(status_code=400, detail=detail) from exc


@router.post("/convert", response_class=HTMLResponse)
async def convert(request: Request, settings: Settings = Depends(get_settings)) -> HTMLResponse:
    body = await request.body()
    result, _ = await run_in_threadpool(_run, body, settings)
    return HTMLResponse(
        content=result.html,
        headers={
            "X-Canvas-Width": str(result.layout.width),
            "X-Canvas-Height": str(result.layout.height),
        },
    )


@router.post("/convert/layout", response_model=ConvertResponse)
async def convert_layout(request: Request, settings: Settings = Depends(get_settings)) -> ConvertResponse:
    start = time.perf_counter()

    body = await request.body()
    result, element_count = await run_in_threadpool(_run, body, settings)

    elapsed = (time.perf_counter() - start) * 1000
    layout = result.layout
    return ConvertResponse(
        width=layout.width,
        height=layout.height,
        scale=layout.scale,
        offset_x=layout.offset_x,
        offset_y=layout.offset_y,
        background_color=result.background_color,
        element_count=element_count,
        rendered_count=result.rendered,
        skipped_count=result.skipped,
        font_urls=result.font_urls,
        html=result.html,
        processing_time_ms=round(elapsed, 1),
    )
