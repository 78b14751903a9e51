"""Conversion between a canvas and C array source code."""

from __future__ import annotations

import re
from enum import IntEnum

from cbitmap.canvas import Canvas
from cbitmap.frame import Frame


class CodeMode(IntEnum):
    """Layout of the generated array."""

    CONTINUOUS = 0
    PADDED = 1
    PADDED_VERTICAL = 2


class InterpreterError(ValueError):
    """Raised when source code cannot be turned into a frame."""


_ARRAY_RE = re.compile(
    r"^(?:const\s+)?(?:unsigned\s+char|uint8_t)\s+(\w+)_(\d+)x(\d*)\[\d*\]\s*=\s*\{([^}]+)\};",
    re.MULTILINE | re.DOTALL | re.ASCII,
)
_TYPE_RE = re.compile(r"\b(unsigned char|uint8_t)\b", re.ASCII)
_TYPE_SECTION_RE = re.compile(r"\s+\w+\[", re.ASCII)
_HEX_RE = re.compile(r"\b0x([0-9a-fA-F]{1,2})\b", re.ASCII)


def _section(text: str) -> str:
    """Return the text between the first and second array declarators."""
    parts = _TYPE_SECTION_RE.split(text)
    return parts[1] if len(parts) > 1 else ""


def parse_padded_frame(text: str) -> Frame:
    """Parse a row-padded, MSB-first ``uint8_t`` array into a frame."""
    if not text:
        raise InterpreterError("Empty content")

    match = _ARRAY_RE.search(text)
    if match is None:
        raise InterpreterError("Invalid array format")

    width = int(match.group(2))
    height = int(match.group(3)) if match.group(3) else 0
    data_text = match.group(4)

    if _TYPE_RE.search(text) is None:
        raise InterpreterError(f"Unknown type: {_section(text)}")

    values = [int(hex_match.group(1), 16) for hex_match in _HEX_RE.finditer(data_text)]

    bytes_per_row = (width + 7) // 8
    expected = bytes_per_row * height
    if len(values) != expected:
        raise InterpreterError(
            f"Data size mismatch. Expected {expected} bytes, got {len(values)}"
        )

    data = [
        bool(values[y * bytes_per_row + x // 8] & (1 << (7 - x % 8)))
        for y in range(height)
        for x in range(width)
    ]
    return Frame(width, height, data)


class Interpreter:
    """Writes a canvas as C source and reads C source back into it."""

    def __init__(self, canvas: Canvas) -> None:
        self.canvas = canvas

    def to_string(self, mode: CodeMode = CodeMode.PADDED) -> str:
        """Return the canvas as source code in the given layout."""
        if mode is CodeMode.PADDED:
            return self.to_string_padded()
        if mode is CodeMode.PADDED_VERTICAL:
            return self.to_string_padded_vertical()
        return ""

    def parse_string(self, text: str, mode: CodeMode = CodeMode.PADDED) -> None:
        """Load source code in the given layout into the canvas."""
        if mode is CodeMode.PADDED:
            self.parse_string_padded(text)

    def to_string_padded(self) -> str:
        """Return the canvas as a row-padded ``uint8_t`` array declaration."""
        width, height = self.canvas.size
        code = f"const uint8_t frame_{width}x{height}[] = {{\n    "
        code += "".join(f"0x{byte:02x}, " for byte in self.canvas.export_padded())
        return code[:-2] + "\n};"

    def parse_string_padded(self, text: str) -> None:
        """Parse a row-padded array and load it into the canvas."""
        frame = parse_padded_frame(text)
        try:
            self.canvas.load_frame(frame)
        except ValueError as error:
            raise InterpreterError("Failed to load frame data") from error

    def to_string_padded_vertical(self) -> str:
        """Return the canvas in the vertical padded layout, which produces no code."""
        return ""