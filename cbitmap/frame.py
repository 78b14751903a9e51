"""Binary bitmap frames and the drawing modes that act on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class PenMode(IntEnum):
    """Shape drawn by a pen stroke."""

    NONE = 0
    FREE = 1
    LINE = 2
    RECTANGLE = 3
    CIRCLE = 4


class FillMode(IntEnum):
    """How closed shapes are filled."""

    NONE = 0
    SOLID = 1
    ALTERNATE = 2


class ActionMode(IntEnum):
    """What a stroke does to the frame."""

    NONE = 0
    PEN = 1
    ERASER = 2
    SELECTION = 3


@dataclass
class Frame:
    """A monochrome bitmap stored row by row as a flat list of booleans."""

    width: int = 0
    height: int = 0
    data: list[bool] = field(default_factory=list)

    @classmethod
    def blank(cls, width: int, height: int) -> Frame:
        """Return a frame of the given size with every pixel off."""
        if width < 0 or height < 0:
            raise ValueError(f"invalid frame size: {width}x{height}")
        return cls(width, height, [False] * (width * height))

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def is_empty(self) -> bool:
        """True when either dimension is zero or negative."""
        return self.width <= 0 or self.height <= 0

    @property
    def is_consistent(self) -> bool:
        """True when the pixel data matches the stated dimensions."""
        return self.width * self.height == len(self.data)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} frame"
            )
        return y * self.width + x

    def get(self, x: int, y: int) -> bool:
        """Return the pixel at column x, row y."""
        return self.data[self._index(x, y)]

    def set(self, x: int, y: int, value: bool) -> None:
        """Set the pixel at column x, row y."""
        self.data[self._index(x, y)] = bool(value)

    def clear(self) -> None:
        """Turn every pixel off, keeping the size."""
        self.data = [False] * len(self.data)

    def _check_same_length(self, other: Frame) -> None:
        if len(other.data) != len(self.data):
            raise ValueError(
                f"frame lengths differ: {len(self.data)} and {len(other.data)}"
            )

    def merge(self, other: Frame) -> Frame:
        """Turn on every pixel that is on in other; return self."""
        self._check_same_length(other)
        self.data = [a or b for a, b in zip(self.data, other.data)]
        return self

    def subtract(self, other: Frame) -> Frame:
        """Turn off every pixel that is on in other; return self."""
        self._check_same_length(other)
        self.data = [a and not b for a, b in zip(self.data, other.data)]
        return self

    def __iadd__(self, other: Frame) -> Frame:
        return self.merge(other)

    def __isub__(self, other: Frame) -> Frame:
        return self.subtract(other)

    def copy(self) -> Frame:
        """Return an independent copy."""
        return Frame(self.width, self.height, list(self.data))

    def __len__(self) -> int:
        return len(self.data)