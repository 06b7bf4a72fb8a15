"""Tab-aware text measurement, viewport, scrollbar and draw-operation model for an editor view."""

__version__ = "0.1.0"

__all__ = [
    "columns",
    "geometry",
    "interaction",
    "renderer",
    "scrollbars",
    "utils",
    "viewport",
    "widget",
]