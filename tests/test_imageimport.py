import pytest
from PIL import Image

from cbitmap.imageimport import (
    ImageFormatError,
    ImportMode,
    check_format,
    image_to_frame,
    keep_aspect,
    load_image,
    pixel_is_set,
    preview_image,
)


def _split_image(width, height):
    """Left half black, right half white, fully opaque."""
    image = Image.new("RGBA", (width, height), (255, 255, 255, 255))
    for y in range(height):
        for x in range(width // 2):
            image.putpixel((x, y), (0, 0, 0, 255))
    return image


@pytest.mark.parametrize(
    "mode, rgba, expected",
    [
        (ImportMode.BY_TRANSPARENCY, (0, 0, 0, 255), True),
        (ImportMode.BY_TRANSPARENCY, (0, 0, 0, 254), False),
        (ImportMode.BY_TRANSPARENCY_50P, (0, 0, 0, 128), True),
        (ImportMode.BY_TRANSPARENCY_50P, (0, 0, 0, 127), False),
        (ImportMode.BY_COLOR, (0, 0, 0, 255), True),
        (ImportMode.BY_COLOR, (255, 255, 255, 255), False),
        (ImportMode.BY_COLOR_REVERSE, (0, 0, 0, 255), False),
        (ImportMode.BY_COLOR_REVERSE, (255, 255, 255, 255), True),
    ],
)
def test_pixel_is_set(mode, rgba, expected):
    assert pixel_is_set(mode, rgba) is expected


def test_colour_modes_are_complementary():
    for value in range(0, 256, 5):
        rgba = (value, value // 2, 255 - value, 255)
        assert pixel_is_set(ImportMode.BY_COLOR, rgba) != pixel_is_set(
            ImportMode.BY_COLOR_REVERSE, rgba
        )


@pytest.mark.parametrize("name", ["photo.jpg", "photo.JPEG"])
@pytest.mark.parametrize(
    "mode", [ImportMode.BY_TRANSPARENCY, ImportMode.BY_TRANSPARENCY_50P]
)
def test_check_format_rejects_jpeg_for_transparency(name, mode):
    with pytest.raises(ImageFormatError, match="doesn't support"):
        check_format(name, mode)


def test_check_format_message_names_format():
    with pytest.raises(ImageFormatError) as info:
        check_format("a.jpeg", ImportMode.BY_TRANSPARENCY)
    assert "JPEG" in str(info.value)


def test_load_image_round_trip(tmp_path):
    path = tmp_path / "pic.png"
    source = _split_image(6, 3)
    source.save(path)
    loaded = load_image(path)
    assert loaded.size == (6, 3)
    assert loaded.mode == "RGBA"
    assert list(loaded.getdata()) == list(source.getdata())


def test_load_image_rejects_garbage(tmp_path):
    path = tmp_path / "bad.png"
    path.write_bytes(b"not an image")
    with pytest.raises(ImageFormatError):
        load_image(path)


def test_load_image_rejects_svg(tmp_path):
    path = tmp_path / "icon.svg"
    path.write_text("<svg/>")
    with pytest.raises(ImageFormatError, match="SVG"):
        load_image(path)


def test_image_to_frame_same_size():
    frame = image_to_frame(_split_image(8, 4), 8, 4, ImportMode.BY_COLOR)
    assert (frame.width, frame.height) == (8, 4)
    for y in range(4):
        assert [frame.get(x, y) for x in range(8)] == [True] * 4 + [False] * 4


def test_image_to_frame_reverse_mode_inverts():
    image = _split_image(8, 4)
    normal = image_to_frame(image, 8, 4, ImportMode.BY_COLOR)
    reverse = image_to_frame(image, 8, 4, ImportMode.BY_COLOR_REVERSE)
    assert reverse.data == [not bit for bit in normal.data]


def test_image_to_frame_outside_scaled_area_is_opaque_black():
    white = Image.new("RGBA", (4, 2), (255, 255, 255, 255))
    frame = image_to_frame(white, 4, 4, ImportMode.BY_COLOR)
    assert [frame.get(x, y) for y in range(2) for x in range(4)] == [False] * 8
    assert [frame.get(x, y) for y in range(2, 4) for x in range(4)] == [True] * 8


def test_image_to_frame_transparency():
    image = Image.new("RGBA", (4, 4), (0, 0, 0, 0))
    image.putpixel((1, 2), (10, 20, 30, 255))
    frame = image_to_frame(image, 4, 4, ImportMode.BY_TRANSPARENCY)
    assert frame.get(1, 2) is True
    assert sum(frame.data) == 1


@pytest.mark.parametrize("width, height", [(0, 4), (4, 0), (-1, 3)])
def test_image_to_frame_rejects_invalid_size(width, height):
    with pytest.raises(ValueError, match="Invalid image dimensions"):
        image_to_frame(_split_image(4, 4), width, height, ImportMode.BY_COLOR)


def test_preview_matches_frame_when_aspect_kept():
    image = _split_image(8, 4)
    frame = image_to_frame(image, 8, 4, ImportMode.BY_COLOR)
    preview = preview_image(image, 8, 4, ImportMode.BY_COLOR)
    assert preview.size == (8, 4)
    expected = [(255, 255, 255) if bit else (0, 0, 0) for bit in frame.data]
    assert list(preview.getdata()) == expected


def test_preview_uses_only_black_and_white():
    image = Image.new("RGBA", (5, 7), (100, 150, 200, 180))
    preview = preview_image(image, 3, 9, ImportMode.BY_TRANSPARENCY_50P)
    assert preview.size == (3, 9)
    assert set(preview.getdata()) <= {(0, 0, 0), (255, 255, 255)}


def test_keep_aspect_width_changed():
    assert keep_aspect(200, 100, 50, 999, "width") == (50, 25)


def test_keep_aspect_height_changed():
    assert keep_aspect(200, 100, 999, 30, "height") == (60, 30)


def test_keep_aspect_square_source_is_identity():
    assert keep_aspect(16, 16, 37, 1, "width") == (37, 37)


def test_keep_aspect_rejects_unknown_dimension():
    with pytest.raises(ValueError):
        keep_aspect(2, 1, 4, 2, "depth")