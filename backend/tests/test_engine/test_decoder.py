"""Tests for the relaxed-JSON scene decoder."""

from __future__ import annotations

import math

import pytest

from sketchpage.engine.decoder import decode_scene, parse_element
from sketchpage.errors import DecodeError, EmptyScene
from sketchpage.models.scene import (
    EllipseElement,
    FreehandElement,
    ImageElement,
    RectangleElement,
    TextElement,
    UnknownElement,
)
from tests.conftest import EMPTY_SCENE, MIXED_SCENE, RECT_SCENE


def test_decode_strict_json():
    scene = decode_scene(RECT_SCENE)
    assert len(scene.elements) == 1
    rect = scene.elements[0]
    assert isinstance(rect, RectangleElement)
    assert (rect.x, rect.y, rect.width, rect.height) == (0, 0, 100, 50)
    assert rect.stroke_width == 2
    assert scene.files == {}
    assert scene.background_color == "#ffffff"


def test_decode_relaxed_syntax_preserves_order():
    scene = decode_scene(MIXED_SCENE)
    kinds = [type(el) for el in scene.elements]
    assert kinds == [TextElement, EllipseElement, FreehandElement, ImageElement, UnknownElement]
    assert scene.elements[4].type == "arrow"
    assert scene.background_color == "#fafafa"


def test_decode_text_fields():
    text = decode_scene(MIXED_SCENE).elements[0]
    assert text.text == "Hello  {world}\n  indented"
    assert text.font_size == 20
    assert text.font_family == 1


def test_decode_files():
    scene = decode_scene(MIXED_SCENE)
    assert scene.files["img1"].data_url == "data:image/png;base64,iVBORw0KGgo="
    assert scene.files["img1"].mime_type == "image/png"
    assert scene.elements[3].file_id == "img1"


def test_missing_files_defaults_to_empty():
    scene = decode_scene('{"elements": [{"type": "ellipse", "x": 1, "y": 2}]}')
    assert scene.files == {}
    assert scene.elements[0].width == 0


def test_empty_elements():
    with pytest.raises(EmptyScene):
        decode_scene(EMPTY_SCENE)


def test_missing_elements():
    with pytest.raises(EmptyScene):
        decode_scene('{"files": {}}')


def test_malformed_text():
    with pytest.raises(DecodeError) as info:
        decode_scene('{"elements": [1, 2,, 3]}')
    assert info.value.code == "DecodeError"


def test_elements_not_a_list():
    with pytest.raises(DecodeError):
        decode_scene('{"elements": {"type": "text"}}')


def test_element_with_bad_field_type():
    with pytest.raises(DecodeError):
        decode_scene('{"elements": [{"type": "rectangle", "x": "left"}]}')


def test_non_object_file_entry_is_dropped():
    scene = decode_scene('{"elements": [{"type": "image", "fileId": "a"}], "files": {"a": "oops"}}')
    assert scene.files == {}


def test_non_finite_numbers_are_accepted():
    scene = decode_scene("{elements: [{type: 'rectangle', x: Infinity, y: NaN}]}")
    rect = scene.elements[0]
    assert math.isinf(rect.x)
    assert not rect.is_finite


def test_parse_element_defaults():
    el = parse_element({"type": "freedraw", "points": [[0, 0]]})
    assert isinstance(el, FreehandElement)
    assert el.roughness == 1
    assert el.opacity == 100
    assert el.points == [(0.0, 0.0)]


def test_parse_element_null_extent():
    el = parse_element({"type": "text", "x": 5, "y": 5, "width": None, "height": None})
    assert el.width == 0
    assert el.height == 0


def test_non_string_type_is_a_decode_error():
    with pytest.raises(DecodeError):
        decode_scene('{"elements": [{"type": 7}]}')


@pytest.mark.parametrize(
    ("raw", "field", "default"),
    [
        ({"type": "freedraw", "points": [[0, 0]], "roughness": None}, "roughness", 1.0),
        ({"type": "rectangle", "strokeWidth": None}, "stroke_width", 1.0),
        ({"type": "ellipse", "strokeWidth": None}, "stroke_width", 1.0),
        ({"type": "text", "fontSize": None}, "font_size", 20.0),
        ({"type": "text", "fontFamily": None}, "font_family", 1),
        ({"type": "image", "opacity": None}, "opacity", 100.0),
        ({"type": "image", "strokeColor": None}, "stroke_color", "#1e1e1e"),
    ],
)
def test_null_field_takes_default(raw, field, default):
    assert getattr(parse_element(raw), field) == default


def test_null_fields_do_not_abort_decode():
    scene = decode_scene(
        '{"elements": [{"type": "rectangle", "strokeWidth": null}, {"type": "freedraw", "roughness": null}]}'
    )
    assert len(scene.elements) == 2
