"""Hand-drawn stroke synthesis.

A freehand stroke is drawn as its exact polyline plus up to two "sketch"
layers: copies of the polyline whose points (all but the first) are nudged by
uniform random noise. Layer count and noise amplitude both grow with the
element's roughness.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Never more than two sketch layers on top of the main line.
_MAX_SKETCH_LAYERS = 2

# Jitter amplitude j = min(roughness * 0.8, 1.2); noise is drawn from (-j/2, j/2).
_JITTER_PER_ROUGHNESS = 0.8
_MAX_JITTER = 1.2


def jitter_amplitude(roughness: float) -> float:
    return min(roughness * _JITTER_PER_ROUGHNESS, _MAX_JITTER)


def sketch_layer_count(roughness: float) -> int:
    if math.isnan(roughness) or roughness <= 0:
        return 0
    if roughness >= _MAX_SKETCH_LAYERS:
        return _MAX_SKETCH_LAYERS
    return math.ceil(roughness)


def synthesize_layers(
    points: ArrayLike,
    roughness: float,
    rng: np.random.Generator | None = None,
) -> list[NDArray[np.float64]]:
    """Main polyline followed by 0-2 independently jittered copies.

    Each returned array is Nx2. Pass a seeded ``rng`` for reproducible output.
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if len(pts) == 0:
        raise ValueError("A stroke needs at least one point")

    layers = [pts.copy()]
    extra = sketch_layer_count(roughness)
    if extra == 0:
        return layers

    rng = rng or np.random.default_rng()
    half = jitter_amplitude(roughness) / 2
    for _ in range(extra):
        layer = pts.copy()
        # uniform() excludes its high end; nudge the low end so both are open
        layer[1:] += rng.uniform(np.nextafter(-half, 0), half, size=(len(pts) - 1, 2))
        layers.append(layer)
    return layers


def _fmt(v: float) -> str:
    s = f"{v:.3f}".rstrip("0").rstrip(".")
    return "0" if s == "-0" else s


def polyline_path(points: NDArray[np.float64]) -> str:
    """SVG path data ``M x y L x y ...`` through every point."""
    first, rest = points[0], points[1:]
    d = f"M {_fmt(first[0])} {_fmt(first[1])}"
    for x, y in rest:
        d += f" L {_fmt(x)} {_fmt(y)}"
    return d


def generate_rough_paths(
    points: ArrayLike,
    roughness: float,
    rng: np.random.Generator | None = None,
) -> list[str]:
    """Path strings for the main line and its sketch layers (1-3 entries)."""
    return [polyline_path(layer) for layer in synthesize_layers(points, roughness, rng)]
