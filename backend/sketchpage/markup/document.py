"""Write the final HTML page around rendered primitives.

The page is a bare body holding one relatively positioned box of exactly the
canvas size; every primitive is absolutely positioned inside it, so a
rasterizer can print it 1:1 with zero margins.
"""

from __future__ import annotations

import html
from collections.abc import Sequence

from sketchpage.models.layout import CanvasLayout

_VIRGIL_SOURCES = [
    "https://cdn.jsdelivr.net/gh/excalidraw/excalidraw@master/packages/excalidraw/assets/font/Virgil.woff2",
    "https://raw.githubusercontent.com/excalidraw/excalidraw/master/packages/excalidraw/assets/font/Virgil.woff2",
]

_FALLBACK_FAMILIES = ["Comic+Neue", "Kalam", "Caveat"]


def _font_styles() -> str:
    imports = "\n".join(
        f"@import url('https://fonts.googleapis.com/css2?family={family}:wght@400;700&display=swap');"
        for family in _FALLBACK_FAMILIES
    )
    sources = ",\n       ".join(
        ["local('Virgil')"] + [f"url('{url}') format('woff2')" for url in _VIRGIL_SOURCES]
    )
    return (
        f"{imports}\n"
        "@font-face {\n"
        "  font-family: 'Virgil';\n"
        f"  src: {sources};\n"
        "  font-weight: normal;\n"
        "  font-style: normal;\n"
        "  font-display: swap;\n"
        "}\n"
        "* { -webkit-font-smoothing: antialiased; -moz-osx-font-smoothing: grayscale; }"
    )


def build_document(
    primitives: Sequence[str],
    layout: CanvasLayout,
    background_color: str = "#ffffff",
    font_urls: Sequence[str] = (),
    title: str = "",
) -> str:
    """Generate a standalone HTML page from rendered primitives."""
    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '<meta charset="utf-8">',
    ]
    if title:
        lines.append(f"<title>{html.escape(title)}</title>")
    lines.append(
        f"<style>@page {{ size: {layout.width}px {layout.height}px; margin: 0; }}"
        " html, body { margin: 0; padding: 0; }</style>"
    )
    for url in font_urls:
        lines.append(f'<link rel="stylesheet" href="{html.escape(url, quote=True)}">')
    lines.append(f"<style>\n{_font_styles()}\n</style>")
    lines.append("</head>")
    lines.append(f'<body style="background:{html.escape(background_color, quote=True)}">')
    lines.append(
        f'<div style="position:relative;overflow:hidden;'
        f'width:{layout.width}px;height:{layout.height}px">'
    )
    lines.extend(p for p in primitives if p)
    lines.append("</div>")
    lines.append("</body>")
    lines.append("</html>")
    return "\n".join(lines)
