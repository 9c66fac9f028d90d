import pytest

from phototool.loupe_layout import Rect, loupe_image_rect


def test_reserves_twenty_four_twenty_fifths():
    rect = loupe_image_rect(1000, 800)
    assert int(rect.width) == 960
    assert int(rect.height) == 768


def test_image_is_centred():
    rect = loupe_image_rect(1000, 800)
    assert rect == Rect(20.0, 16.0, 960.0, 768.0)


def test_tiny_body_clamps_to_one_unit():
    rect = loupe_image_rect(0, 0)
    assert rect.width == 1.0
    assert rect.height == 1.0
    assert rect.x == pytest.approx(-0.5)
    assert rect.y == pytest.approx(-0.5)


@pytest.mark.parametrize("width,height", [(500, 300), (1280, 800), (25, 50)])
def test_band_fits_inside_body(width, height):
    rect = loupe_image_rect(width, height)
    assert rect.x >= 0 and rect.y >= 0
    assert rect.x + rect.width == pytest.approx(width - rect.x)
    assert rect.y + rect.height == pytest.approx(height - rect.y)
    assert rect.width < width and rect.height < height