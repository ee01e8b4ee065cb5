"""First-break pick files, shot browsing, control points, statics files and synthetic first breaks."""

__version__ = "0.1.0"

__all__ = [
    "records",
    "controlfile",
    "selection",
    "shotindex",
    "statics",
    "colorscale",
    "params",
    "picking",
    "extract",
    "synthetic",
    "cli",
]