"""Editable monochrome canvas with shape drawing, preview merging and undo."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from cbitmap.frame import ActionMode, FillMode, Frame, PenMode

Point = tuple[int, int]

DEFAULT_WIDTH = 128
DEFAULT_HEIGHT = 64
UNDO_LIMIT = 15


def format_position(pos: Point) -> str:
    """Format a pixel position as ``(x, y)``."""
    x, y = pos
    return f"({x}, {y})"


def format_line(p1: Point, p2: Point) -> str:
    """Format a line between two positions."""
    return f"{format_position(p1)}->{format_position(p2)}"


def format_rect(p1: Point, p2: Point) -> str:
    """Format a rectangle spanned by two corners, with its pixel size."""
    width = abs(p2[0] - p1[0]) + 1
    height = abs(p2[1] - p1[1]) + 1
    return f"{format_line(p1, p2)}, {width}x{height}"


def _radius(center: Point, edge: Point) -> int:
    dx = edge[0] - center[0]
    dy = edge[1] - center[1]
    return math.isqrt(dx * dx + dy * dy)


def format_circle(center: Point, edge: Point) -> str:
    """Format a circle given by its centre and a point on its edge."""
    return f"{format_line(center, edge)}, r={_radius(center, edge)}"


@dataclass(frozen=True)
class _Change:
    before: Frame
    after: Frame


class UndoStack:
    """A bounded history of frame changes."""

    def __init__(self, limit: int = UNDO_LIMIT) -> None:
        if limit < 0:
            raise ValueError(f"invalid undo limit: {limit}")
        self.limit = limit
        self._changes: list[_Change] = []
        self._index = 0

    def push(self, before: Frame, after: Frame) -> None:
        """Record a change, discarding anything that could have been redone."""
        del self._changes[self._index:]
        self._changes.append(_Change(before.copy(), after.copy()))
        if self.limit and len(self._changes) > self.limit:
            del self._changes[: len(self._changes) - self.limit]
        self._index = len(self._changes)

    def undo(self) -> Frame | None:
        """Step back; return the frame to restore, or None if nothing to undo."""
        if not self.can_undo():
            return None
        self._index -= 1
        return self._changes[self._index].before.copy()

    def redo(self) -> Frame | None:
        """Step forward; return the frame to restore, or None if nothing to redo."""
        if not self.can_redo():
            return None
        change = self._changes[self._index]
        self._index += 1
        return change.after.copy()

    def clear(self) -> None:
        """Forget the whole history."""
        self._changes.clear()
        self._index = 0

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._changes)

    def __len__(self) -> int:
        return len(self._changes)


class Canvas:
    """A binary bitmap that is drawn on with pen strokes and shapes.

    Strokes are drawn into a preview frame first and merged into the frame
    when the stroke ends; each merge that changes the frame is undoable.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        self.frame = Frame.blank(width, height)
        self.preview = Frame.blank(width, height)
        self._last_state = Frame.blank(width, height)
        self.undo_stack = UndoStack(UNDO_LIMIT)

        self.pen_mode = PenMode.FREE
        self.fill_mode = FillMode.NONE
        self.action_mode = ActionMode.PEN
        self.show_grid = True

        self.is_drawing = False
        self._start_pos: Point = (0, 0)
        self._last_pos: Point = (0, 0)

        self.status = ""
        self.status_listeners: list[Callable[[str], None]] = []
        self.size_listeners: list[Callable[[int, int], None]] = []

    @property
    def width(self) -> int:
        return self.frame.width

    @property
    def height(self) -> int:
        return self.frame.height

    @property
    def size(self) -> tuple[int, int]:
        return self.frame.size

    def resize(self, width: int, height: int) -> None:
        """Change the bitmap size, blanking it and dropping the undo history."""
        if (width, height) == self.frame.size:
            return
        self.frame = Frame.blank(width, height)
        self.preview = Frame.blank(width, height)
        self._last_state = Frame.blank(width, height)
        self.undo_stack.clear()
        for listener in self.size_listeners:
            listener(width, height)

    def clear(self) -> None:
        """Turn every pixel of the frame off."""
        self.frame.clear()

    def load_frame(self, frame: Frame) -> None:
        """Replace the bitmap with a copy of frame."""
        if not frame.is_consistent:
            raise ValueError("frame data size does not match dimensions")
        self.undo_stack.clear()
        self.resize(frame.width, frame.height)
        self.frame.data = list(frame.data)

    # Export

    def export_bytes(self) -> bytes:
        """Pack all pixels, most significant bit first, into bytes."""
        return bytes(self._pack(8))

    def export_words(self) -> list[int]:
        """Pack all pixels, most significant bit first, into 32-bit words."""
        return self._pack(32)

    def _pack(self, bits: int) -> list[int]:
        words = []
        for start in range(0, len(self.frame.data), bits):
            chunk = self.frame.data[start:start + bits]
            word = 0
            for position, bit in enumerate(chunk):
                if bit:
                    word |= 1 << (bits - 1 - position)
            words.append(word)
        return words

    def export_padded(self) -> bytes:
        """Pack pixels row by row, each row padded to whole bytes, MSB first."""
        width, height = self.frame.size
        bytes_per_row = (width + 7) // 8
        result = bytearray(bytes_per_row * height)
        for y in range(height):
            row = self.frame.data[y * width:(y + 1) * width]
            for x, bit in enumerate(row):
                if bit:
                    result[y * bytes_per_row + x // 8] |= 1 << (7 - x % 8)
        return bytes(result)

    # Drawing into the preview

    def draw_pixel(self, x: int, y: int) -> None:
        """Mark a pixel in the preview; points outside the bitmap are ignored."""
        if 0 <= x < self.preview.width and 0 <= y < self.preview.height:
            # Marked even when erasing: the merge decides what it means.
            self.preview.set(x, y, True)

    def draw_line(self, p1: Point, p2: Point) -> None:
        """Draw a Bresenham line between two points, both included."""
        x0, y0 = p1
        x1, y1 = p2
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        while True:
            self.draw_pixel(x0, y0)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x0 += sx
            if e2 < dx:
                err += dx
                y0 += sy

    def draw_rectangle(self, p1: Point, p2: Point) -> None:
        """Draw a rectangle with corners p1 and p2 in the current fill mode."""
        x1, x2 = sorted((p1[0], p2[0]))
        y1, y2 = sorted((p1[1], p2[1]))
        if self.fill_mode is FillMode.SOLID:
            for y in range(y1, y2 + 1):
                for x in range(x1, x2 + 1):
                    self.draw_pixel(x, y)
        elif self.fill_mode is FillMode.NONE:
            for x in range(x1, x2 + 1):
                self.draw_pixel(x, y1)
                self.draw_pixel(x, y2)
            for y in range(y1 + 1, y2):
                self.draw_pixel(x1, y)
                self.draw_pixel(x2, y)

    def draw_circle(self, center: Point, radius: int) -> None:
        """Draw a midpoint circle, filled when the fill mode is solid."""
        if radius < 0:
            return
        cx, cy = center
        x, y, err = radius, 0, 0
        while x >= y:
            for px, py in (
                (x, y), (y, x), (-y, x), (-x, y),
                (-x, -y), (-y, -x), (y, -x), (x, -y),
            ):
                self.draw_pixel(cx + px, cy + py)
            if err <= 0:
                y += 1
                err += 2 * y + 1
            if err > 0:
                x -= 1
                err -= 2 * x + 1
        if self.fill_mode is FillMode.SOLID:
            for dy in range(-radius, radius + 1):
                for dx in range(-radius, radius + 1):
                    if dx * dx + dy * dy <= radius * radius:
                        self.draw_pixel(cx + dx, cy + dy)

    def merge_preview(self) -> None:
        """Apply the preview to the frame according to the action mode."""
        if self.action_mode is ActionMode.PEN:
            self.frame.merge(self.preview)
        elif self.action_mode is ActionMode.ERASER:
            self.frame.subtract(self.preview)
        else:
            return
        self.preview.clear()
        self._save_state()

    # Undo

    def _save_state(self) -> None:
        if self.frame.data != self._last_state.data:
            self.undo_stack.push(self._last_state, self.frame)
            self._last_state = self.frame.copy()

    def _restore_frame(self, frame: Frame | None) -> None:
        if frame is None or frame.is_empty:
            return
        self.frame = frame.copy()
        self._last_state = frame.copy()

    def undo(self) -> None:
        """Revert the last change to the frame, if any."""
        self._restore_frame(self.undo_stack.undo())

    def redo(self) -> None:
        """Reapply the last undone change, if any."""
        self._restore_frame(self.undo_stack.redo())

    # Pointer interaction, in bitmap coordinates

    def _update_status(self, status: str) -> None:
        if status != self.status:
            self.status = status
            for listener in self.status_listeners:
                listener(status)

    def press(self, x: int, y: int) -> None:
        """Start a stroke at a bitmap position."""
        self.is_drawing = True
        self._start_pos = self._last_pos = (x, y)
        status = ""
        if self.pen_mode is PenMode.FREE:
            self.draw_pixel(x, y)
        if self.pen_mode in (PenMode.FREE, PenMode.LINE, PenMode.RECTANGLE, PenMode.CIRCLE):
            status = format_position(self._start_pos)
        self._update_status(status)

    def move(self, x: int, y: int) -> None:
        """Continue a stroke, or just report the position when not drawing."""
        current = (x, y)
        status = ""
        if not self.is_drawing:
            status = format_position(current)
        elif self.pen_mode is PenMode.FREE:
            status = format_position(current)
            self.draw_line(self._last_pos, current)
            self._last_pos = current
        elif self.pen_mode is PenMode.LINE:
            status = format_line(self._start_pos, current)
            self.preview.clear()
            self.draw_line(self._start_pos, current)
        elif self.pen_mode is PenMode.RECTANGLE:
            status = format_rect(self._start_pos, current)
            self.preview.clear()
            self.draw_rectangle(self._start_pos, current)
        elif self.pen_mode is PenMode.CIRCLE:
            status = format_circle(self._start_pos, current)
            self.preview.clear()
            self.draw_circle(self._start_pos, _radius(self._start_pos, current))
        self._update_status(status)

    def release(self, x: int, y: int) -> None:
        """Finish a stroke at a bitmap position and merge it into the frame."""
        if not self.is_drawing:
            return
        self.move(x, y)
        self._update_status(format_position((x, y)))
        self.is_drawing = False
        self.merge_preview()

    # Geometry

    def widget_to_bitmap(
        self, x: int, y: int, widget_width: int, widget_height: int
    ) -> Point:
        """Map a position on a widget of the given size to a bitmap pixel."""
        width, height = self.frame.size
        if width <= 0 or height <= 0:
            return (0, 0)
        bx = x * width // widget_width
        by = y * height // widget_height
        return (min(max(bx, 0), width - 1), min(max(by, 0), height - 1))

    def valid_geometry(self, width: int, height: int) -> tuple[int, int]:
        """Largest size within width x height that keeps the bitmap's aspect."""
        aspect = self.frame.width / self.frame.height
        new_height = int(width / aspect)
        if new_height > height:
            new_height = height
            width = int(height * aspect)
        return (width, new_height)

    def generate_geometry(self) -> tuple[int, int, int, int]:
        """Placement of the canvas in its scene as (x, y, width, height)."""
        width, height = self.frame.size
        return (2 * width, 2 * height, 4 * width, 4 * height)

    def scene_rect(self) -> tuple[int, int, int, int]:
        """Extent of the scene holding the canvas as (x, y, width, height)."""
        width, height = self.frame.size
        return (0, 0, 8 * width, 8 * height)