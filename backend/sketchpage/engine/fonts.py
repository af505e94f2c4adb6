"""Font resolution for text elements.

Excalidraw stores the font as a small integer code. Codes map to fixed CSS
font stacks; anything unknown falls back to the handwritten stack. A text
element may also name a ``customFontFamily``, which is put in front of the
code's base family and, when it looks like a web font, fetched from Google
Fonts by the rendered page.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from urllib.parse import quote_plus

from sketchpage.models.scene import BaseElement, TextElement

HANDWRITTEN_CODE = 1
HANDWRITTEN_STACK = 'Virgil, Kalam, Caveat, "Comic Neue", "Comic Sans MS", "Marker Felt", cursive'
DEFAULT_STACK = 'Virgil, Kalam, Caveat, "Comic Neue", cursive'

FONT_STACKS: dict[int, str] = {
    1: HANDWRITTEN_STACK,
    2: "Helvetica, Arial, sans-serif",
    3: "Courier New, monospace",
    4: "Georgia, serif",
    5: "Arial, sans-serif",
}

# First family of each stack, used behind a custom family.
FONT_BASE_NAMES: dict[int, str] = {
    1: "Virgil",
    2: "Helvetica",
    3: "Courier New",
    4: "Georgia",
    5: "Arial",
}

COMMON_WEB_FONTS = frozenset({
    "Inter", "Roboto", "Open Sans", "Lato", "Montserrat", "Poppins",
    "Raleway", "Nunito", "Ubuntu", "Playfair Display", "Merriweather",
    "Oswald", "Source Sans Pro", "Slabo", "Oxygen", "Bitter", "PT Sans",
})

_SINGLE_WORD_RE = re.compile(r"^[a-zA-Z]+$")

GOOGLE_FONTS_URL = "https://fonts.googleapis.com/css2?family={family}:wght@400;700&display=swap"


@dataclass
class FontRegistry:
    """Custom stacks keyed by ``"<code>-<custom>"`` (or a string family) plus web font URLs."""

    stacks: dict[str, str] = field(default_factory=dict)
    urls: list[str] = field(default_factory=list)


def _font_key(el: TextElement) -> str:
    if el.custom_font_family:
        return f"{el.font_family}-{el.custom_font_family}"
    return str(el.font_family)


def google_font_url(family: str) -> str:
    return GOOGLE_FONTS_URL.format(family=quote_plus(family))


def extract_custom_fonts(elements: Sequence[BaseElement]) -> FontRegistry:
    """Collect custom font stacks and web font stylesheet URLs from text elements."""
    registry = FontRegistry()
    for el in elements:
        if not isinstance(el, TextElement):
            continue

        custom = el.custom_font_family
        if el.font_family and custom:
            base = "sans-serif"
            if isinstance(el.font_family, int):
                base = FONT_BASE_NAMES.get(el.font_family, base)
            registry.stacks[_font_key(el)] = f"{custom}, {base}"
            if custom in COMMON_WEB_FONTS or _SINGLE_WORD_RE.match(custom):
                url = google_font_url(custom)
                if url not in registry.urls:
                    registry.urls.append(url)

        if isinstance(el.font_family, str) and el.font_family:
            registry.stacks.setdefault(el.font_family, el.font_family)

    return registry


def resolve_font_family(el: TextElement, registry: FontRegistry | None = None) -> str:
    """CSS font-family for a text element. Code 1 is always handwritten."""
    if el.font_family == HANDWRITTEN_CODE:
        return HANDWRITTEN_STACK
    custom = registry.stacks.get(_font_key(el)) if registry else None
    if custom:
        return custom
    if isinstance(el.font_family, int):
        return FONT_STACKS.get(el.font_family, DEFAULT_STACK)
    return el.font_family or DEFAULT_STACK
