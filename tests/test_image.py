import pytest

from raytrace.color import RGBColor
from raytrace.image import Image
from raytrace.samplers import ViewPlane

HEADER_END = "255\n"


def _body(text):
    return text.split(HEADER_END, 1)[1]


def test_header():
    assert Image(3, 2).to_ppm().startswith("P3\n3 2\n255\n")


def test_single_white_pixel():
    image = Image(1, 1)
    image.set_pixel(0, 0, RGBColor(1.0))
    assert image.to_ppm() == "P3\n1 1\n255\n255 255 255 "


def test_blank_image_is_black():
    black = RGBColor().to_ppm_string()
    assert _body(Image(3, 2).to_ppm()) == black * 6


def test_pixels_written_row_by_row():
    image = Image(2, 2)
    white = RGBColor(1.0)
    red = RGBColor(1.0, 0.0, 0.0)
    image.set_pixel(1, 0, white)
    image.set_pixel(0, 1, red)
    black = RGBColor()
    expected = "".join(c.to_ppm_string() for c in (black, white, red, black))
    assert _body(image.to_ppm()) == expected


def test_set_pixel_copies_color():
    image = Image(1, 1)
    color = RGBColor(1.0)
    image.set_pixel(0, 0, color)
    color.r = 0.0
    assert _body(image.to_ppm()) == RGBColor(1.0).to_ppm_string()


@pytest.mark.parametrize("x, y", [(2, 0), (0, 2), (-1, 0)])
def test_set_pixel_out_of_range(x, y):
    with pytest.raises(IndexError):
        Image(2, 2).set_pixel(x, y, RGBColor(1.0))


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Image(-1, 2)


def test_from_viewplane_uses_resolution():
    image = Image.from_viewplane(ViewPlane(hres=4, vres=3))
    assert image.to_ppm().startswith("P3\n4 3\n")
    assert _body(image.to_ppm()) == RGBColor().to_ppm_string() * 12


def test_write_ppm_round_trip(tmp_path):
    image = Image(2, 1)
    image.set_pixel(0, 0, RGBColor(0.5, 0.25, 1.0))
    path = tmp_path / "out.ppm"
    image.write_ppm(path)
    assert path.read_text(encoding="ascii") == image.to_ppm()