"""Turning raster images into monochrome frames."""

from __future__ import annotations

import os
from enum import IntEnum
from pathlib import Path

from PIL import Image

from cbitmap.frame import Frame

Rgba = tuple[int, int, int, int]

# A pixel read from outside the scaled image is an invalid colour:
# fully opaque, with zero lightness.
_OUTSIDE: Rgba = (0, 0, 0, 255)

_ACTIVE = (255, 255, 255)
_INACTIVE = (0, 0, 0)


class ImportMode(IntEnum):
    """Rule deciding which image pixels become set bitmap pixels."""

    BY_TRANSPARENCY = 0
    BY_TRANSPARENCY_50P = 1
    BY_COLOR = 2
    BY_COLOR_REVERSE = 3


class ImageFormatError(ValueError):
    """Raised when an image cannot be loaded or does not suit the import mode."""


def _lightness(red: int, green: int, blue: int) -> int:
    return (max(red, green, blue) + min(red, green, blue)) // 2


def pixel_is_set(mode: ImportMode, rgba: Rgba) -> bool:
    """Decide whether a pixel colour counts as set under the given mode."""
    red, green, blue, alpha = rgba
    mode = ImportMode(mode)
    if mode is ImportMode.BY_TRANSPARENCY:
        return alpha == 255
    if mode is ImportMode.BY_TRANSPARENCY_50P:
        return alpha > 127
    if mode is ImportMode.BY_COLOR:
        return _lightness(red, green, blue) < 127
    return _lightness(red, green, blue) >= 127


def check_format(path: str | os.PathLike[str], mode: ImportMode) -> None:
    """Reject JPEG files for the transparency modes, since JPEG has no alpha."""
    suffix = Path(path).suffix.lstrip(".").lower()
    if suffix in ("jpg", "jpeg") and ImportMode(mode) in (
        ImportMode.BY_TRANSPARENCY,
        ImportMode.BY_TRANSPARENCY_50P,
    ):
        raise ImageFormatError(
            f"Selected mode doesn't support {suffix.upper()} format"
        )


def load_image(path: str | os.PathLike[str]) -> Image.Image:
    """Load an image file as RGBA.

    SVG files cannot be rasterised here and are reported as failed loads.
    """
    if str(path).lower().endswith(".svg"):
        raise ImageFormatError("Failed to load SVG file")
    try:
        with Image.open(path) as image:
            image.load()
            return image.convert("RGBA")
    except (OSError, ValueError) as error:
        raise ImageFormatError("Failed to load image") from error


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError("Invalid image dimensions")


def _fit_size(source: tuple[int, int], width: int, height: int) -> tuple[int, int]:
    source_width, source_height = source
    scaled_width = height * source_width // source_height
    if scaled_width <= width:
        return (scaled_width, height)
    return (width, width * source_height // source_width)


def image_to_frame(
    image: Image.Image, width: int, height: int, mode: ImportMode
) -> Frame:
    """Scale an image into width x height, keeping its aspect, and binarise it.

    Pixels beyond the scaled image count as opaque black.
    """
    _check_size(width, height)
    rgba = image.convert("RGBA")
    scaled_width, scaled_height = _fit_size(rgba.size, width, height)
    frame = Frame.blank(width, height)
    if scaled_width <= 0 or scaled_height <= 0:
        outside = pixel_is_set(mode, _OUTSIDE)
        frame.data = [outside] * len(frame)
        return frame

    scaled = rgba.resize((scaled_width, scaled_height), Image.BILINEAR)
    pixels = scaled.load()
    for y in range(height):
        for x in range(width):
            inside = x < scaled_width and y < scaled_height
            colour = pixels[x, y] if inside else _OUTSIDE
            frame.set(x, y, pixel_is_set(mode, colour))
    return frame


def preview_image(
    image: Image.Image, width: int, height: int, mode: ImportMode
) -> Image.Image:
    """Stretch an image to width x height and render set pixels white on black."""
    _check_size(width, height)
    scaled = image.convert("RGBA").resize((width, height), Image.BILINEAR)
    preview = Image.new("RGB", (width, height), _INACTIVE)
    preview.putdata(
        [_ACTIVE if pixel_is_set(mode, colour) else _INACTIVE for colour in scaled.getdata()]
    )
    return preview


def keep_aspect(
    source_width: int, source_height: int, width: int, height: int, changed: str
) -> tuple[int, int]:
    """Adjust the dimension not changed so the source's aspect ratio is kept.

    ``changed`` is ``"width"`` or ``"height"``; returns the new (width, height).
    """
    aspect = source_width / source_height
    if changed == "width":
        return (width, int(width / aspect))
    if changed == "height":
        return (int(height * aspect), height)
    raise ValueError(f"changed must be 'width' or 'height', not {changed!r}")