"""Conversion failures surfaced to the caller.

Every failure that aborts a conversion is a ``ConversionError`` carrying a
stable ``code`` tag and a human-readable message. Per-element problems
(dangling image references, unknown kinds, non-finite geometry) never raise;
the renderer drops the element instead.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for all conversion failures."""

    code = "ConversionError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoObjectStart(ConversionError):
    """The input contains no ``{`` at all."""

    code = "NoObjectStart"


class UnbalancedObject(ConversionError):
    """The input ends before the first object literal is closed."""

    code = "UnbalancedObject"


class DecodeError(ConversionError):
    """The recovered object is not valid relaxed JSON or not a scene."""

    code = "DecodeError"


class EmptyScene(ConversionError):
    """The scene decoded fine but has no elements."""

    code = "EmptyScene"


class EmptyGeometry(ConversionError):
    """No element has usable geometry to compute bounds from."""

    code = "EmptyGeometry"
