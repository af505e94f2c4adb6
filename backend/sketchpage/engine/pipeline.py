"""Conversion pipeline — raw scene text → fully laid-out HTML page.

recover → decode → bounds → scale → render each element → assemble page.
Every call is self-contained; nothing is cached between conversions.
"""

from __future__ import annotations

import logging
import time

import numpy as np

from sketchpage.config import Settings, settings as default_settings
from sketchpage.engine.decoder import decode_scene
from sketchpage.engine.fonts import extract_custom_fonts
from sketchpage.engine.layout import build_layout, compute_bounds
from sketchpage.engine.recovery import clean_raw_text, extract_balanced_object
from sketchpage.engine.renderer import render_element
from sketchpage.markup.document import build_document
from sketchpage.models.layout import ConversionResult
from sketchpage.models.scene import Scene

logger = logging.getLogger(__name__)


def load_scene(raw: str | bytes) -> Scene:
    """Recover and decode a scene from an uploaded buffer."""
    text = extract_balanced_object(clean_raw_text(raw))
    return decode_scene(text)


def render_scene(
    scene: Scene,
    settings: Settings | None = None,
    rng: np.random.Generator | None = None,
) -> ConversionResult:
    """Lay out and render a decoded scene."""
    cfg = settings or default_settings

    bounds = compute_bounds(scene.elements, margin=cfg.bounds_margin)
    layout = build_layout(bounds, cfg)
    fonts = extract_custom_fonts(scene.elements)

    primitives = [render_element(el, layout, scene.files, fonts, rng) for el in scene.elements]
    result = ConversionResult(
        layout=layout,
        primitives=primitives,
        background_color=scene.background_color,
        font_urls=list(fonts.urls),
    )
    result.skipped = len(primitives) - result.rendered
    result.html = build_document(primitives, layout, scene.background_color, fonts.urls)
    return result


def convert(
    raw: str | bytes,
    settings: Settings | None = None,
    rng: np.random.Generator | None = None,
) -> ConversionResult:
    """Run the full pipeline. Raises ConversionError; never returns partial output."""
    start = time.perf_counter()

    scene = load_scene(raw)
    result = render_scene(scene, settings, rng)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Converted %d elements (%d skipped) onto %dx%d canvas in %.1fms",
        len(scene.elements),
        result.skipped,
        result.layout.width,
        result.layout.height,
        elapsed,
    )
    return result
