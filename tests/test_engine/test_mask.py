"""Tests for the binary mask builder."""

import numpy as np
import pytest
from PIL import Image

from collider_gen.engine.context import PixelMask
from collider_gen.engine.mask import UnsupportedFormat, build_mask, load_image
from tests.conftest import TWO_SQUARES, make_mask, mask_to_rgba


class TestAlphaFormats:
    def test_rgba(self, two_squares_image):
        mask = build_mask(two_squares_image)
        assert mask == make_mask(TWO_SQUARES)

    def test_faintest_alpha_is_opaque(self):
        img = mask_to_rgba(make_mask(TWO_SQUARES), alpha=1)
        assert build_mask(img).opaque_count == 8

    def test_zero_alpha_is_transparent(self):
        img = Image.new("RGBA", (3, 2), (255, 255, 255, 0))
        assert build_mask(img).is_empty

    def test_luminance_alpha(self):
        img = Image.new("LA", (3, 2), (0, 0))
        img.putpixel((1, 0), (255, 5))
        mask = build_mask(img)
        assert mask.data.tolist() == [[False, True, False], [False, False, False]]

    def test_palette_with_transparency(self):
        img = Image.new("P", (2, 2), 0)
        img.putpalette([0, 0, 0, 255, 0, 0])
        img.info["transparency"] = 0
        img.putpixel((0, 1), 1)
        mask = build_mask(img)
        assert mask.data.tolist() == [[False, False], [True, False]]


class TestLuminanceFormats:
    def test_grayscale(self):
        img = Image.new("L", (2, 2), 0)
        img.putpixel((0, 1), 10)
        assert build_mask(img).data.tolist() == [[False, False], [True, False]]

    def test_bilevel(self):
        img = Image.new("1", (2, 2), 0)
        img.putpixel((1, 1), 255)
        assert build_mask(img).data.tolist() == [[False, False], [False, True]]


class TestUnsupported:
    @pytest.mark.parametrize("mode", ["RGB", "CMYK", "YCbCr"])
    def test_no_opacity_channel(self, mode):
        with pytest.raises(UnsupportedFormat):
            build_mask(Image.new(mode, (4, 4)))

    def test_palette_without_transparency(self):
        with pytest.raises(UnsupportedFormat):
            build_mask(Image.new("P", (2, 2)))

    def test_three_channel_array(self):
        with pytest.raises(UnsupportedFormat):
            build_mask(np.zeros((2, 2, 3), dtype=np.uint8))

    def test_not_an_image(self):
        with pytest.raises(UnsupportedFormat):
            build_mask("sprite.png")

    def test_is_a_value_error(self):
        assert issubclass(UnsupportedFormat, ValueError)


class TestArrays:
    def test_plain_2d(self):
        arr = np.array([[0, 3], [0, 0]], dtype=np.uint8)
        assert build_mask(arr).data.tolist() == [[False, True], [False, False]]

    def test_rgba_array_reads_last_channel(self):
        arr = np.zeros((2, 2, 4), dtype=np.uint8)
        arr[..., :3] = 255
        arr[1, 1, 3] = 7
        assert build_mask(arr).data.tolist() == [[False, False], [False, True]]

    def test_single_channel_array(self):
        arr = np.zeros((2, 3, 1), dtype=np.uint8)
        arr[0, 2, 0] = 1
        assert build_mask(arr).opaque_count == 1


def test_pixel_mask_passes_through(square_mask):
    assert build_mask(square_mask) is square_mask


def test_mask_is_read_only(two_squares_image):
    mask = build_mask(two_squares_image)
    with pytest.raises(ValueError):
        mask.data[0, 0] = True


def test_mask_requires_2d():
    with pytest.raises(ValueError):
        PixelMask(np.zeros((2, 2, 2), dtype=bool))


def test_from_array_uses_the_opacity_rule():
    arr = np.array([[0, 2], [-1, 0]])
    mask = PixelMask.from_array(arr)
    assert mask.data.tolist() == [[False, True], [False, False]]
    assert mask == build_mask(arr)
    assert (mask.width, mask.height) == (2, 2)


def test_load_image(tmp_path, two_squares_image):
    path = tmp_path / "sprite.png"
    two_squares_image.save(path)
    img = load_image(path)
    assert img.mode == "RGBA"
    assert build_mask(img) == make_mask(TWO_SQUARES)
