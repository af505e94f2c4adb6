"""SketchPage scene → canvas layout engine."""

from sketchpage.engine.pipeline import convert, load_scene, render_scene
from sketchpage.engine.renderer import render_element
from sketchpage.engine.strokes import generate_rough_paths

__all__ = [
    "convert",
    "load_scene",
    "render_scene",
    "render_element",
    "generate_rough_paths",
]
