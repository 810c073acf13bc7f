# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""Tests for pixel input normalization and image loading."""

import numpy as np
import pytest

from palettekit.schema import RGB
from palettekit.measure.pixels import as_pixel_array, load_pixels


class TestAsPixelArray:

    def test_sequence_of_tuples(self):
        arr = as_pixel_array([(1, 2, 3), RGB(4, 5, 6)])
        assert arr.shape == (2, 3)
        assert arr.dtype == np.uint8
        np.testing.assert_array_equal(arr, [[1, 2, 3], [4, 5, 6]])

    def test_image_shape_flattened(self):
        img = np.zeros((4, 5, 3), dtype=np.uint8)
        assert as_pixel_array(img).shape == (20, 3)

    def test_empty(self):
        assert as_pixel_array([]).shape == (0, 3)

    def test_bad_shape_raises(self):
        with pytest.raises(ValueError, match="Expected"):
            as_pixel_array(np.zeros((10, 4), dtype=np.uint8))

    def test_out_of_range_raises(self):
        with pytest.raises(ValueError, match="0-255"):
            as_pixel_array([(0, 0, 300)])

    def test_float_array_rejected(self):
        with pytest.raises(ValueError, match="integers"):
            as_pixel_array(np.array([[0.5, 0.2, 0.9]]))

    def test_float_tuples_rejected(self):
        with pytest.raises(ValueError, match="integers"):
            as_pixel_array([(200.7, 40.2, 40.0)])

    def test_signed_integer_array_accepted(self):
        arr = as_pixel_array(np.array([[200, 40, 40]], dtype=np.int32))
        assert arr.dtype == np.uint8
        np.testing.assert_array_equal(arr, [[200, 40, 40]])


class TestLoadPixels:

    def test_array_downsampled(self):
        pytest.importorskip("PIL")
        img = np.full((300, 400, 3), [10, 20, 30], dtype=np.uint8)
        pixels = load_pixels(img)
        assert pixels.shape == (200 * 150, 3)
        np.testing.assert_array_equal(pixels[0], [10, 20, 30])

    def test_small_image_untouched(self):
        pytest.importorskip("PIL")
        img = np.zeros((20, 30, 3), dtype=np.uint8)
        assert load_pixels(img).shape == (600, 3)

    def test_downsampling_disabled(self):
        pytest.importorskip("PIL")
        img = np.zeros((300, 400, 3), dtype=np.uint8)
        assert load_pixels(img, max_size=0).shape == (120000, 3)

    def test_file_path(self, tmp_path):
        Image = pytest.importorskip("PIL.Image")
        path = tmp_path / "swatch.png"
        Image.fromarray(np.full((10, 10, 3), [200, 40, 40], dtype=np.uint8)).save(path)
        pixels = load_pixels(path)
        assert pixels.shape == (100, 3)
        np.testing.assert_array_equal(pixels[0], [200, 40, 40])

    def test_wrong_dtype_raises(self):
        pytest.importorskip("PIL")
        with pytest.raises(ValueError, match="uint8"):
            load_pixels(np.zeros((5, 5, 3), dtype=np.float32))

    def test_wrong_type_raises(self):
        pytest.importorskip("PIL")
        with pytest.raises(TypeError):
            load_pixels(42)
