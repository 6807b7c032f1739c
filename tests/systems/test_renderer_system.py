import io

import pytest
from PIL import Image

from identicon.errors import EncodingError, PrecondApplicationError
from identicon.renderer import draw_image, render_canvas
from identicon.systems.pixel_map import build_pixel_map
from tests.test_utils import make_image

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
TRANSPARENT = (0, 0, 0, 0)


def test_render_canvas_size_and_mode() -> None:
    img = render_canvas(build_pixel_map(make_image(color=(1, 2, 3))))
    assert img.size == (250, 250)
    assert img.mode == "RGBA"


def test_render_canvas_fills_half_open_rectangles() -> None:
    image = build_pixel_map(make_image(color=(60, 120, 180), grid=[(60, 2), (60, 7)]))
    img = render_canvas(image)
    fill = (60, 120, 180, 255)
    # Cell 2: x in [100, 150), y in [0, 50)
    assert img.getpixel((100, 0)) == fill
    assert img.getpixel((149, 49)) == fill
    assert img.getpixel((150, 0)) == TRANSPARENT
    # Cell 7: x in [100, 150), y in [50, 100)
    assert img.getpixel((100, 50)) == fill
    assert img.getpixel((149, 99)) == fill
    assert img.getpixel((99, 50)) == TRANSPARENT
    assert img.getpixel((100, 100)) == TRANSPARENT
    assert img.getpixel((0, 0)) == TRANSPARENT


def test_render_canvas_empty_pixel_map_is_background_only() -> None:
    img = render_canvas(make_image(color=(9, 9, 9)))
    assert img.getextrema() == ((0, 0), (0, 0), (0, 0), (0, 0))


def test_render_canvas_without_color_raises() -> None:
    with pytest.raises(PrecondApplicationError):
        render_canvas(make_image(grid=[(60, 2)]))


def test_render_canvas_without_pixel_map_raises() -> None:
    """A grid whose pixel map was never built must not render as background."""
    with pytest.raises(PrecondApplicationError):
        render_canvas(make_image(color=(60, 120, 180), grid=[(60, 2), (60, 7)]))


def test_draw_image_returns_png() -> None:
    data = draw_image(build_pixel_map(make_image(color=(1, 2, 3), grid=[(2, 12)])))
    assert data.startswith(PNG_SIGNATURE)
    with Image.open(io.BytesIO(data)) as img:
        assert img.format == "PNG"
        assert img.size == (250, 250)
        assert img.getpixel((125, 125)) == (1, 2, 3, 255)


def test_draw_image_without_color_raises() -> None:
    with pytest.raises(PrecondApplicationError):
        draw_image(make_image())


def test_draw_image_wraps_encoder_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_save(self: Image.Image, fp: object, format: str | None = None, **params: object) -> None:
        raise OSError("encoder unavailable")

    monkeypatch.setattr(Image.Image, "save", broken_save)
    with pytest.raises(EncodingError) as excinfo:
        draw_image(make_image(color=(1, 2, 3)))
    assert isinstance(excinfo.value.__cause__, OSError)
