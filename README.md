# cbitmap

A library for drawing monochrome bitmaps, such as the screen of a 128×64 OLED
display. It turns them into C arrays that a microcontroller can use, and reads
those arrays back in.

## Install

```
pip install cbitmap
```

Image import needs Pillow, which is installed along with the package.

## Modules

- `cbitmap.frame`: `Frame`, a pixel grid stored as a flat list of booleans, one
  row after another. It offers `blank`, `get`, `set`, `clear`, `merge`,
  `subtract` and `copy`. The module also defines the `PenMode`, `FillMode` and
  `ActionMode` enums.
- `cbitmap.canvas`: `Canvas` holds the drawing state. Pixels, lines, rectangles
  and circles are drawn into a preview frame first. `merge_preview` then applies
  that preview to the frame, turning pixels on in pen mode and off in eraser
  mode. Every change is recorded in an `UndoStack`, which keeps 15 steps.
  `press`, `move` and `release` handle a stroke in bitmap coordinates, and
  `status` holds the position text for that stroke. The export methods are
  `export_bytes`, `export_words` and `export_padded`. All three write the most
  significant bit first. The helpers `format_position`, `format_line`,
  `format_rect` and `format_circle` build the status strings.
- `cbitmap.interpreter`: `Interpreter` writes a canvas as a
  `const uint8_t frame_WxH[] = {...};` array and loads such an array into a
  canvas. `parse_padded_frame` reads an array straight into a `Frame`. If the
  input is malformed, both raise `InterpreterError`.
- `cbitmap.highlighter`: `CodeHighlighter` splits C source, line by line, into
  `Span`s of a `TokenKind`. Each kind has a colour and a weight. The highlighter
  follows `/* */` comments and raw strings across lines.
- `cbitmap.imageimport`: `load_image` opens an image with Pillow.
  `image_to_frame` scales the image to fit and binarises it, and `preview_image`
  draws the result white on black. A pixel counts as set either by its
  transparency or by its lightness, as chosen by `ImportMode`. `check_format`
  rejects JPEG files for the transparency modes.
- `cbitmap.imageinfo`: the size and byte-length description of a bitmap, the
  dialog button labels, the alignment icon layout, and `new_frame`.
- `cbitmap.view`: `ZoomView` holds a zoom level within bounds and changes it by
  wheel steps. `zoom_label` and `resolution_label` give the text shown for the
  zoom and for the bitmap size.
- `cbitmap.codeexport`: dialog labels for export and import, plus `save_code`
  and `load_code` for reading and writing code files.

## Example

```python
from cbitmap.canvas import Canvas
from cbitmap.interpreter import Interpreter, parse_padded_frame

canvas = Canvas(16, 8)
canvas.draw_line((0, 0), (15, 7))
canvas.merge_preview()

code = Interpreter(canvas).to_string_padded()
print(code)

frame = parse_padded_frame(code)
assert frame == canvas.frame
```

Each pixel takes one bit, with the most significant bit first. Every row is
padded to a whole number of bytes.

## What it does not do

- There is no window, editor screen or command to run. The package holds the
  drawing, export and import logic, and a program that uses it supplies its own
  user interface.
- Only the row-padded layout (`CodeMode.PADDED`) is supported.
  `CodeMode.CONTINUOUS` and `CodeMode.PADDED_VERTICAL` produce no code, and
  parsing in those modes does nothing.
- SVG files are not rasterised. `load_image` raises `ImageFormatError` for them.
- `FillMode.ALTERNATE` draws nothing for rectangles.

## Tests

```
pip install cbitmap[test]
pytest
```