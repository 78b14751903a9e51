"""Labels and file handling for exporting and importing bitmap source code."""

from __future__ import annotations

import os
from enum import Enum, IntEnum


class DialogMode(IntEnum):
    """Whether code is being written out or read in."""

    EXPORT = 0
    IMPORT = 1


class ButtonName(Enum):
    """User-visible elements whose text depends on the dialog mode."""

    COPY_PASTE = "copy_paste"
    SAVE_LOAD = "save_load"
    EXIT_IMPORT = "exit_import"
    COPY_PASTE_NOTIFY = "copy_paste_notify"
    IMPORT_NOTIFY = "import_notify"
    WINDOW_TITLE = "window_title"


_LABELS: dict[DialogMode, dict[ButtonName, str]] = {
    DialogMode.EXPORT: {
        ButtonName.COPY_PASTE: "&Copy",
        ButtonName.SAVE_LOAD: "&Save",
        ButtonName.EXIT_IMPORT: "&Exit",
        ButtonName.IMPORT_NOTIFY: "&Exit",
        ButtonName.COPY_PASTE_NOTIFY: "Copied!",
        ButtonName.WINDOW_TITLE: "Export to Code / File",
    },
    DialogMode.IMPORT: {
        ButtonName.COPY_PASTE: "&Paste",
        ButtonName.SAVE_LOAD: "&Load",
        ButtonName.EXIT_IMPORT: "&Import",
        ButtonName.COPY_PASTE_NOTIFY: "Pasted!",
        ButtonName.IMPORT_NOTIFY: "Success",
        ButtonName.WINDOW_TITLE: "Import from Code / File",
    },
}


def element_name(mode: DialogMode, name: ButtonName) -> str:
    """Return the text shown for an element in the given mode."""
    return _LABELS[DialogMode(mode)][ButtonName(name)]


def save_code(path: str | os.PathLike[str], text: str) -> None:
    """Write source code to a file as UTF-8, line endings untouched."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def load_code(path: str | os.PathLike[str]) -> str:
    """Read source code from a UTF-8 file."""
    with open(path, "rb") as handle:
        return handle.read().decode("utf-8", errors="replace")