"""Monochrome bitmap drawing, image import and C array code export."""

__version__ = "0.1.0"

__all__ = [
    "canvas",
    "codeexport",
    "frame",
    "highlighter",
    "imageimport",
    "imageinfo",
    "interpreter",
    "view",
]