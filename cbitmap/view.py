"""Zoom state of the view holding the canvas, and the labels shown for it."""

from __future__ import annotations

from collections.abc import Callable

DEFAULT_MINIMUM = 0.1
DEFAULT_MAXIMUM = 10.0
ZOOM_IN_FACTOR = 1.1
ZOOM_OUT_FACTOR = 0.9
# The canvas is first shown at four times its pixel size.
BASE_SCALE = 400


class ZoomView:
    """A bounded zoom level changed by wheel steps."""

    def __init__(
        self, minimum: float = DEFAULT_MINIMUM, maximum: float = DEFAULT_MAXIMUM
    ) -> None:
        self.minimum = DEFAULT_MINIMUM
        self.maximum = DEFAULT_MAXIMUM
        self.set_zoom_range(minimum, maximum)
        self.zoom = 1.0
        self.zoom_listeners: list[Callable[[float], None]] = []

    def set_zoom_range(self, minimum: float, maximum: float) -> None:
        """Set the bounds later zoom changes are held within."""
        if minimum > maximum:
            raise ValueError(f"invalid zoom range: {minimum} > {maximum}")
        self.minimum = minimum
        self.maximum = maximum

    def _clamp(self, zoom: float) -> float:
        return max(self.minimum, min(zoom, self.maximum))

    def _changed(self) -> None:
        for listener in self.zoom_listeners:
            listener(self.zoom)

    def reset(self) -> float:
        """Return to a zoom of 1."""
        self.zoom = 1.0
        self._changed()
        return self.zoom

    def set_zoom(self, zoom: float) -> float:
        """Set the zoom, held within the range; return the zoom applied."""
        self.zoom = self._clamp(zoom)
        self._changed()
        return self.zoom

    def wheel(self, delta_y: int) -> float:
        """Zoom in for a positive wheel delta, out otherwise; return the new zoom."""
        factor = ZOOM_IN_FACTOR if delta_y > 0 else ZOOM_OUT_FACTOR
        self.zoom = self._clamp(self.zoom * factor)
        self._changed()
        return self.zoom


def zoom_label(zoom: float) -> str:
    """Percentage shown for a zoom level, relative to the canvas pixels."""
    return f"{int(zoom * BASE_SCALE)}%"


def resolution_label(width: int, height: int) -> str:
    """Text shown for the bitmap resolution."""
    return f"{width}*{height}"