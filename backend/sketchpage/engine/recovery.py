"""Object recovery — pull the first balanced ``{...}`` literal out of noisy text.

Uploaded scene files arrive with a BOM, stray null bytes, or junk around the
actual object (shell prompts, log prefixes, trailing garbage). The scan here is
a single forward pass that treats quoted literals as opaque so braces inside
strings never affect nesting.
"""

from __future__ import annotations

import logging

from sketchpage.errors import NoObjectStart, UnbalancedObject

logger = logging.getLogger(__name__)

_BOM = "﻿"
_QUOTES = ('"', "'")


def clean_raw_text(raw: str | bytes) -> str:
    """Decode bytes and strip a leading BOM and every null byte."""
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    if raw.startswith(_BOM):
        raw = raw[len(_BOM):]
    return raw.replace("\0", "")


def extract_balanced_object(text: str) -> str:
    """Return ``text`` from the first ``{`` through its matching ``}``.

    Raises NoObjectStart when there is no ``{`` and UnbalancedObject when the
    buffer ends first, including inside an unterminated string literal.
    """
    start = text.find("{")
    if start == -1:
        raise NoObjectStart("No JSON object start found")

    depth = 0
    quote = ""
    escaped = False

    for i in range(start, len(text)):
        c = text[i]

        if quote:
            if escaped:
                escaped = False
            elif c == "\\":
                escaped = True
            elif c == quote:
                quote = ""
            continue

        if c in _QUOTES:
            quote = c
        elif c == "{":
            depth += 1
        elif c == "}":
            depth -= 1
            if depth == 0:
                if start or i + 1 < len(text):
                    logger.debug(
                        "Trimmed %d leading and %d trailing chars around object",
                        start,
                        len(text) - i - 1,
                    )
                return text[start:i + 1]

    raise UnbalancedObject("Unbalanced JSON: input ended before the object was closed")
