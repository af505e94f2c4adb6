"""Scene decoder — relaxed JSON text → typed Scene.

Uses json5 so hand-edited exports with trailing commas, single quotes,
unquoted keys or comments still load.
"""

from __future__ import annotations

import logging
from typing import Any

import json5
from pydantic import ValidationError

from sketchpage.errors import DecodeError, EmptyScene
from sketchpage.models.scene import (
    DEFAULT_BACKGROUND,
    ELEMENT_MODELS,
    BaseElement,
    FileBlob,
    Scene,
    UnknownElement,
)

logger = logging.getLogger(__name__)


def parse_element(raw: dict[str, Any]) -> BaseElement:
    """Validate one raw element dict into the model for its ``type``."""
    kind = raw.get("type")
    model = ELEMENT_MODELS.get(kind, UnknownElement) if isinstance(kind, str) else UnknownElement
    return model.model_validate(raw)


def decode_scene(text: str) -> Scene:
    """Parse recovered object text into a Scene.

    Raises DecodeError on malformed text or structure, EmptyScene when the
    scene has no elements.
    """
    try:
        data = json5.loads(text)
    except ValueError as e:
        raise DecodeError(f"Invalid scene data: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(f"Scene must be an object, got {type(data).__name__}")

    raw_elements = data.get("elements") or []
    raw_files = data.get("files") or {}
    if not isinstance(raw_elements, list):
        raise DecodeError("'elements' must be an array")
    if not isinstance(raw_files, dict):
        raise DecodeError("'files' must be an object")

    if not raw_elements:
        raise EmptyScene("No elements found")

    elements: list[BaseElement] = []
    for i, raw in enumerate(raw_elements):
        if not isinstance(raw, dict):
            raise DecodeError(f"Element {i} is not an object")
        try:
            elements.append(parse_element(raw))
        except ValidationError as e:
            raise DecodeError(f"Element {i} ({raw.get('type', '?')}): {e}") from e

    files: dict[str, FileBlob] = {}
    for file_id, raw in raw_files.items():
        if not isinstance(raw, dict):
            logger.warning("Dropping file %s: entry is not an object", file_id)
            continue
        try:
            files[file_id] = FileBlob.model_validate(raw)
        except ValidationError as e:
            raise DecodeError(f"File {file_id}: {e}") from e

    background = DEFAULT_BACKGROUND
    app_state = data.get("appState")
    if isinstance(app_state, dict) and isinstance(app_state.get("viewBackgroundColor"), str):
        background = app_state["viewBackgroundColor"]

    logger.debug("Decoded scene: %d elements, %d files", len(elements), len(files))
    return Scene(elements=elements, files=files, background_color=background)
