"""Image information: properties, dialog labels, alignment and new images."""

from __future__ import annotations

from enum import IntEnum

from cbitmap.frame import Frame


class Page(IntEnum):
    """Pages of the image information dialog."""

    PROPERTY = 0
    DISPLAY_SETTINGS = 1
    NEW_IMAGE = 2
    ADJUST = 3


class UIElement(IntEnum):
    """Buttons whose text depends on the current page."""

    APPLY = 0
    EXIT = 1


class Alignment(IntEnum):
    """Anchor of the image when adjusting its size, in row-major order."""

    TOP_LEFT = 0
    TOP = 1
    TOP_RIGHT = 2
    LEFT = 3
    CENTER = 4
    RIGHT = 5
    BOTTOM_LEFT = 6
    BOTTOM = 7
    BOTTOM_RIGHT = 8


_LABELS: dict[Page, dict[UIElement, str]] = {
    Page.PROPERTY: {UIElement.APPLY: "", UIElement.EXIT: "&Exit"},
    Page.DISPLAY_SETTINGS: {UIElement.APPLY: "&Apply", UIElement.EXIT: "&Cancel"},
    Page.NEW_IMAGE: {UIElement.APPLY: "&Create", UIElement.EXIT: "&Cancel"},
    Page.ADJUST: {UIElement.APPLY: "&Apply", UIElement.EXIT: "&Cancle"},
}

# Icons around the chosen anchor, indexed by the offset from it.
_ICONS = (
    "arrow-tl", "arrow-up", "arrow-tr",
    "arrow-left", "position", "arrow-right",
    "arrow-bl", "arrow-down", "arrow-br",
)


def button_label(page: Page | int, element: UIElement | int) -> str:
    """Return the text of a button on the given page.

    Pages outside the known set give ``"[ERROR]"``.
    """
    try:
        labels = _LABELS[Page(page)]
    except ValueError:
        return "[ERROR]"
    return labels[UIElement(element)]


def byte_length(width: int, height: int) -> int:
    """Number of bytes of a row-padded bitmap of the given size."""
    return ((width + 7) // 8) * height


def describe(width: int, height: int) -> tuple[str, str]:
    """Return the size and length lines shown for a bitmap."""
    return (
        f"Size: {width}*{height}",
        f"Length: {byte_length(width, height)}B",
    )


def alignment_icons(alignment: Alignment | int) -> list[str | None]:
    """Icon names for the nine alignment buttons when one of them is chosen.

    The chosen button shows the position mark, its neighbours arrows pointing
    away from it, and the other buttons no icon.
    """
    row, column = divmod(int(Alignment(alignment)), 3)
    icons: list[str | None] = [None] * 9
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            x, y = row + dx, column + dy
            if 0 <= x < 3 and 0 <= y < 3:
                icons[x * 3 + y] = _ICONS[dx * 3 + dy + 4]
    return icons


def new_frame(width: int, height: int) -> Frame:
    """Return a blank frame for a new image, rejecting non-positive sizes."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid Size: {width}*{height}")
    return Frame.blank(width, height)