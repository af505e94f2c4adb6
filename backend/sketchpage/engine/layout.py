"""Bounds and scale — fit the scene onto a fixed-size canvas.

Bounds use each element's declared box (x, y, width, height). Stroke point
clouds are not consulted here; the stroke renderer positions itself from its
own points relative to the same offset.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np

from sketchpage.config import Settings, settings as default_settings
from sketchpage.errors import EmptyGeometry
from sketchpage.models.layout import Bounds, CanvasLayout
from sketchpage.models.scene import BaseElement

logger = logging.getLogger(__name__)

# Defaults mirrored in Settings; kept here so the functions are usable standalone.
DEFAULT_MARGIN = 50.0
DEFAULT_MAX_WIDTH = 2000
DEFAULT_MAX_HEIGHT = 3000
DEFAULT_MAX_SCALE = 0.4


def compute_bounds(elements: Sequence[BaseElement], margin: float = DEFAULT_MARGIN) -> Bounds:
    """Bounding box of all finite elements, grown by ``margin`` on every side."""
    finite = [el for el in elements if el.is_finite]
    dropped = len(elements) - len(finite)
    if dropped:
        logger.warning("Excluding %d element(s) with non-finite geometry from bounds", dropped)
    if not finite:
        raise EmptyGeometry("No elements with finite geometry to lay out")

    boxes = np.array([(el.x, el.y, el.x + el.width, el.y + el.height) for el in finite])
    bounds = Bounds(
        min_x=float(boxes[:, 0].min()) - margin,
        min_y=float(boxes[:, 1].min()) - margin,
        max_x=float(boxes[:, 2].max()) + margin,
        max_y=float(boxes[:, 3].max()) + margin,
    )
    if not (math.isfinite(bounds.width) and math.isfinite(bounds.height)):
        raise EmptyGeometry("Scene extent overflows the float range")
    return bounds


def resolve_scale(
    raw_width: float,
    raw_height: float,
    max_width: float = DEFAULT_MAX_WIDTH,
    max_height: float = DEFAULT_MAX_HEIGHT,
    max_scale: float = DEFAULT_MAX_SCALE,
) -> float:
    """Largest aspect-preserving scale fitting the caps, never above ``max_scale``.

    A zero height counts as "wider than the cap", so the width branch is taken
    and nothing divides by zero.
    """
    if raw_height == 0 or raw_width / raw_height > max_width / max_height:
        fit = max_width / raw_width if raw_width > 0 else max_scale
    else:
        fit = max_height / raw_height
    return min(fit, max_scale)


def build_layout(bounds: Bounds, settings: Settings | None = None) -> CanvasLayout:
    """Resolve scale and canvas pixel size for a bounding box."""
    cfg = settings or default_settings
    scale = resolve_scale(
        bounds.width,
        bounds.height,
        max_width=cfg.max_canvas_width,
        max_height=cfg.max_canvas_height,
        max_scale=cfg.max_scale,
    )
    layout = CanvasLayout(
        scale=scale,
        width=math.ceil(bounds.width * scale),
        height=math.ceil(bounds.height * scale),
        offset_x=-bounds.min_x,
        offset_y=-bounds.min_y,
    )
    logger.debug(
        "Layout: %.0fx%.0f scene units → %dx%d px (scale %.4f)",
        bounds.width,
        bounds.height,
        layout.width,
        layout.height,
        scale,
    )
    return layout
