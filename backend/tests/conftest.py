"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest


# Single 100x50 rectangle at the origin. Bounds (-50,-50)-(150,100), scale 0.4.
RECT_SCENE = (
    '{"type":"excalidraw","version":2,"elements":[{"type":"rectangle","id":"r1",'
    '"x":0,"y":0,"width":100,"height":50,"strokeColor":"#1e1e1e",'
    '"backgroundColor":"transparent","strokeWidth":2,"opacity":100}],"files":{}}'
)

# Hand-edited export: comments, unquoted keys, single quotes, trailing commas.
# Bounds (-50,-50)-(550,430) → 600x480 scene units → 240x192 px at scale 0.4.
MIXED_SCENE = r"""{
  // exported by hand
  type: 'excalidraw',
  elements: [
    {type: 'text', id: 't1', x: 100, y: 100, width: 200, height: 25,
     text: 'Hello  {world}\n  indented', fontSize: 20, fontFamily: 1, strokeColor: '#1e1e1e',},
    {type: 'ellipse', id: 'e1', x: 400, y: 100, width: 100, height: 100, strokeWidth: 1,
     strokeColor: '#e03131', backgroundColor: '#ffc9c9',},
    {type: 'freedraw', id: 'f1', x: 100, y: 300, width: 50, height: 20,
     points: [[0, 0], [10, 5], [50, 20]], roughness: 1, strokeWidth: 2, strokeColor: '#000000'},
    {type: 'image', id: 'i1', x: 300, y: 300, width: 100, height: 80, fileId: 'img1'},
    {type: 'arrow', id: 'a1', x: 0, y: 0, width: 10, height: 10},
  ],
  files: {
    img1: {id: 'img1', mimeType: 'image/png', dataURL: 'data:image/png;base64,iVBORw0KGgo='},
  },
  appState: {viewBackgroundColor: '#fafafa'},
}"""

# Image pointing at a file that is not embedded.
DANGLING_IMAGE_SCENE = (
    '{"elements":['
    '{"type":"image","id":"i1","x":0,"y":0,"width":100,"height":100,"fileId":"missing"},'
    '{"type":"rectangle","id":"r1","x":0,"y":0,"width":100,"height":100}'
    '],"files":{}}'
)

EMPTY_SCENE = '{"type":"excalidraw","elements":[],"files":{}}'


@pytest.fixture
def rect_scene() -> str:
    return RECT_SCENE


@pytest.fixture
def mixed_scene() -> str:
    return MIXED_SCENE


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)
