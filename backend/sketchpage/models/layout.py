"""Derived canvas geometry and conversion output."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned scene bounding box, margin included."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class CanvasLayout:
    """Mapping from scene coordinates to canvas pixels.

    A scene point ``(x, y)`` lands at ``((x + offset_x) * scale,
    (y + offset_y) * scale)``; the offsets make every in-bounds point
    non-negative.
    """

    scale: float
    width: int
    height: int
    offset_x: float
    offset_y: float

    def px(self, value: float) -> int:
        """Scene length → canvas pixels, rounded half-up."""
        return math.floor(value * self.scale + 0.5)


@dataclass
class ConversionResult:
    """Everything the rasterizer needs, fully resolved."""

    layout: CanvasLayout
    # One fragment per scene element, in paint order; "" for dropped elements
    primitives: list[str] = field(default_factory=list)
    background_color: str = "#ffffff"
    font_urls: list[str] = field(default_factory=list)
    html: str = ""
    skipped: int = 0

    @property
    def rendered(self) -> int:
        return sum(1 for p in self.primitives if p)
