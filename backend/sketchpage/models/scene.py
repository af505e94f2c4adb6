"""Decoded scene document model.

Field names are snake_case in Python and camelCase on the wire
(``strokeColor``, ``fileId``, ...), matching the Excalidraw export format.
"""

from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

DEFAULT_BACKGROUND = "#ffffff"
DEFAULT_STROKE_COLOR = "#1e1e1e"


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class FileBlob(_WireModel):
    """Embedded binary payload, referenced by image elements."""

    id: str | None = None
    mime_type: str | None = None
    data_url: str | None = Field(default=None, alias="dataURL")


class BaseElement(_WireModel):
    """Fields shared by every drawable element."""

    type: str = ""
    id: str | None = None
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    opacity: float = 100.0
    stroke_color: str = DEFAULT_STROKE_COLOR
    background_color: str = "transparent"

    @model_validator(mode="before")
    @classmethod
    def _null_is_default(cls, data):
        # Exports carry null for unset fields (extents of fresh elements, roughness, ...)
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def _numbers(self) -> tuple[float, ...]:
        return (
            self.x,
            self.y,
            self.width,
            self.height,
            self.opacity,
            self.x + self.width,
            self.y + self.height,
        )

    @property
    def is_finite(self) -> bool:
        """True when every numeric field, and the far edge of the box, is finite."""
        return all(math.isfinite(v) for v in self._numbers())


class TextElement(BaseElement):
    type: Literal["text"] = "text"
    text: str = ""
    font_size: float = 20.0
    font_family: int | str = 1
    custom_font_family: str | None = None

    def _numbers(self) -> tuple[float, ...]:
        return (*super()._numbers(), self.font_size)


class RectangleElement(BaseElement):
    type: Literal["rectangle"] = "rectangle"
    stroke_width: float = 1.0

    def _numbers(self) -> tuple[float, ...]:
        return (*super()._numbers(), self.stroke_width)


class EllipseElement(BaseElement):
    type: Literal["ellipse"] = "ellipse"
    stroke_width: float = 1.0

    def _numbers(self) -> tuple[float, ...]:
        return (*super()._numbers(), self.stroke_width)


class FreehandElement(BaseElement):
    type: Literal["freedraw"] = "freedraw"
    # Relative to the element's own (x, y)
    points: list[tuple[float, float]] = Field(default_factory=list)
    roughness: float = 1.0
    stroke_width: float = 1.0

    def _numbers(self) -> tuple[float, ...]:
        # Absolute coordinates, so x + point cannot overflow either
        coords = (c for px, py in self.points for c in (px, py, self.x + px, self.y + py))
        return (*super()._numbers(), self.roughness, self.stroke_width, *coords)


class ImageElement(BaseElement):
    type: Literal["image"] = "image"
    file_id: str | None = None


class UnknownElement(BaseElement):
    """Any kind this converter does not draw (arrows, lines, frames, ...)."""


ELEMENT_MODELS: dict[str, type[BaseElement]] = {
    "text": TextElement,
    "rectangle": RectangleElement,
    "ellipse": EllipseElement,
    "freedraw": FreehandElement,
    "image": ImageElement,
}


class Scene(BaseModel):
    """A decoded drawing: elements in paint order plus embedded files."""

    model_config = ConfigDict(frozen=True)

    elements: list[BaseElement] = Field(default_factory=list)
    files: dict[str, FileBlob] = Field(default_factory=dict)
    background_color: str = DEFAULT_BACKGROUND
