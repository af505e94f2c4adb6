"""SketchPage — hand-drawn scene exports → fixed-canvas HTML pages."""
