"""Element renderer — one scene element → one absolutely positioned HTML fragment.

All geometry leaves this module in canvas pixels. Box geometry is rounded with
``CanvasLayout.px``; stroke paths are scaled as floats and drawn in an SVG
whose viewBox is already in pixels, so nothing is scaled twice.

Elements that cannot be drawn (unknown kind, dangling image reference,
non-finite geometry, stroke without points) render as ``""``.
"""

from __future__ import annotations

import html
import logging
from collections.abc import Mapping

import numpy as np

from sketchpage.engine.fonts import HANDWRITTEN_CODE, FontRegistry, resolve_font_family
from sketchpage.engine.strokes import polyline_path, synthesize_layers
from sketchpage.models.layout import CanvasLayout
from sketchpage.models.scene import (
    BaseElement,
    EllipseElement,
    FileBlob,
    FreehandElement,
    ImageElement,
    RectangleElement,
    TextElement,
)

logger = logging.getLogger(__name__)

# Excalidraw renders text at 1.25 line height.
_LINE_HEIGHT = 1.25


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


def _num(v: float) -> str:
    s = f"{v:.2f}".rstrip("0").rstrip(".")
    return "0" if s == "-0" else s


def _base_style(el: BaseElement, layout: CanvasLayout) -> str:
    left = layout.px(el.x + layout.offset_x)
    top = layout.px(el.y + layout.offset_y)
    return f"position:absolute;left:{left}px;top:{top}px;opacity:{_num(el.opacity / 100)};"


def _box_style(el: BaseElement, layout: CanvasLayout) -> str:
    return f"width:{layout.px(el.width)}px;height:{layout.px(el.height)}px;"


def render_text(el: TextElement, layout: CanvasLayout, fonts: FontRegistry | None = None) -> str:
    style = (
        _base_style(el, layout)
        + _box_style(el, layout)
        + f"color:{el.stroke_color};"
        + f"font-size:{layout.px(el.font_size)}px;"
        + f"line-height:{_LINE_HEIGHT};"
        + f"font-family:{resolve_font_family(el, fonts)};"
    )
    if el.font_family == HANDWRITTEN_CODE:
        style += "font-style:normal;font-weight:normal;"
    style += "white-space:pre;"
    # html.escape leaves spaces, tabs and newlines untouched; white-space:pre keeps them
    return f'<div style="{_attr(style)}">{html.escape(el.text, quote=False)}</div>'


def render_shape(el: RectangleElement | EllipseElement, layout: CanvasLayout) -> str:
    border = max(1, layout.px(el.stroke_width))
    style = (
        _base_style(el, layout)
        + _box_style(el, layout)
        + "box-sizing:border-box;"
        + f"border:{border}px solid {el.stroke_color};"
        + f"background:{el.background_color or 'transparent'};"
    )
    if isinstance(el, EllipseElement):
        style += "border-radius:50%;"
    return f'<div style="{_attr(style)}"></div>'


def render_freehand(
    el: FreehandElement,
    layout: CanvasLayout,
    rng: np.random.Generator | None = None,
) -> str:
    if not el.points:
        logger.debug("Skipping freedraw %s: no points", el.id)
        return ""

    pts = np.asarray(el.points, dtype=np.float64)
    lo = pts.min(axis=0)
    extent = (pts.max(axis=0) - lo) * layout.scale

    # Jitter is applied in scene units, then everything is scaled once
    layers = synthesize_layers(pts - lo, el.roughness, rng)
    stroke_width = el.stroke_width * layout.scale

    left = layout.px(el.x + layout.offset_x + lo[0])
    top = layout.px(el.y + layout.offset_y + lo[1])
    w, h = _num(extent[0]), _num(extent[1])

    paths = "".join(
        f'<path d="{polyline_path(layer * layout.scale)}" fill="none"'
        f' stroke="{_attr(el.stroke_color)}" stroke-width="{_num(stroke_width)}"'
        ' stroke-linecap="round" stroke-linejoin="round" />'
        for layer in layers
    )
    style = (
        f"position:absolute;left:{left}px;top:{top}px;"
        f"opacity:{_num(el.opacity / 100)};overflow:visible;"
    )
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" style="{_attr(style)}"'
        f' width="{w}" height="{h}" viewBox="0 0 {w} {h}">{paths}</svg>'
    )


def render_image(el: ImageElement, layout: CanvasLayout, files: Mapping[str, FileBlob]) -> str:
    blob = files.get(el.file_id) if el.file_id else None
    if blob is None or not blob.data_url:
        logger.warning("Skipping image %s: no embedded data for file %r", el.id, el.file_id)
        return ""
    style = _base_style(el, layout) + _box_style(el, layout) + "object-fit:contain;"
    return f'<img style="{_attr(style)}" src="{_attr(blob.data_url)}" />'


def render_element(
    el: BaseElement,
    layout: CanvasLayout,
    files: Mapping[str, FileBlob] | None = None,
    fonts: FontRegistry | None = None,
    rng: np.random.Generator | None = None,
) -> str:
    """Render one element, or ``""`` when it cannot be drawn."""
    if not el.is_finite:
        logger.warning("Skipping %s %s: non-finite geometry", el.type or "element", el.id)
        return ""

    match el:
        case TextElement():
            return render_text(el, layout, fonts)
        case RectangleElement() | EllipseElement():
            return render_shape(el, layout)
        case FreehandElement():
            return render_freehand(el, layout, rng)
        case ImageElement():
            return render_image(el, layout, files or {})
        case _:
            logger.debug("Skipping unsupported element type %r", el.type)
            return ""
