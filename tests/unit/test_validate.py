"""Unit tests for image comparison and scaling-attack metrics."""

import math

import numpy as np
import pytest

from pyfastresize.errors import InvalidInput, ShapeMismatch
from pyfastresize.image import PixelBuffer
from pyfastresize.validate import (
    compare_images,
    diff_mask,
    diff_metrics,
    down_up_metrics,
    psnr_from_mse,
)


@pytest.mark.unit
class TestCompareImages:

    @pytest.mark.parametrize("fixture", ["gray_image", "rgb_image", "rgba_image"])
    def test_self_comparison(self, fixture, request):
        img = request.getfixturevalue(fixture)
        d = compare_images(img, img)
        assert d.different_values == 0
        assert d.max_abs_diff == 0
        assert d.identical

    def test_counts_values_not_pixels(self):
        a = PixelBuffer(2, 1, 3, [0, 0, 0, 10, 10, 10])
        b = PixelBuffer(2, 1, 3, [0, 5, 0, 10, 10, 250])
        d = compare_images(a, b)
        assert d.different_values == 2
        assert d.max_abs_diff == 240

    def test_full_range_difference(self):
        a = PixelBuffer(1, 1, 1, [0])
        b = PixelBuffer(1, 1, 1, [255])
        assert compare_images(a, b).max_abs_diff == 255

    @pytest.mark.parametrize("other", [(3, 2, 1), (2, 3, 1), (2, 2, 3)])
    def test_shape_mismatch(self, other):
        with pytest.raises(ShapeMismatch):
            compare_images(PixelBuffer(2, 2, 1), PixelBuffer(*other))

    def test_diff_mask(self):
        a = PixelBuffer(2, 2, 3)
        b = PixelBuffer.from_array(np.array(
            [[[0, 0, 0], [0, 0, 1]], [[0, 0, 0], [0, 0, 0]]], dtype=np.uint8
        ))
        np.testing.assert_array_equal(diff_mask(a, b), [[False, True], [False, False]])


@pytest.mark.unit
class TestDiffMetrics:

    def test_known_values(self):
        a = PixelBuffer(2, 2, 1, [0, 0, 0, 0])
        b = PixelBuffer(2, 2, 1, [2, 0, 0, 4])
        m = diff_metrics(a, b)
        assert m.mae == pytest.approx(1.5)
        assert m.rmse == pytest.approx(math.sqrt(5.0))
        assert m.psnr == pytest.approx(20 * math.log10(255) - 10 * math.log10(5.0))
        assert m.max_abs == 4

    def test_identical_images(self, rgb_image):
        m = diff_metrics(rgb_image, rgb_image.copy())
        assert (m.mae, m.rmse, m.max_abs) == (0.0, 0.0, 0)
        assert m.psnr == math.inf

    def test_psnr_from_mse(self):
        assert psnr_from_mse(0.0) == math.inf
        assert psnr_from_mse(255.0 ** 2) == pytest.approx(0.0, abs=1e-12)

    def test_shape_mismatch(self):
        with pytest.raises(ShapeMismatch):
            diff_metrics(PixelBuffer(1, 1, 1), PixelBuffer(1, 1, 3))


@pytest.mark.unit
class TestDownUpMetrics:

    @pytest.mark.parametrize("down,up", [
        ("nearest", "nearest"), ("bilinear", "bilinear"), ("nearest", "bilinear"),
    ])
    def test_no_op_round_trip(self, rgb_image, down, up):
        m = down_up_metrics(rgb_image, rgb_image.width, rgb_image.height, down, up)
        assert (m.mae, m.rmse, m.max_abs) == (0.0, 0.0, 0)
        assert m.psnr == math.inf

    def test_real_round_trip_loses_information(self, rgb_image):
        m = down_up_metrics(rgb_image, 9, 6, "nearest", "bilinear")
        assert m.mae > 0.0
        assert m.rmse >= m.mae
        assert 0.0 < m.psnr < math.inf
        assert 0 < m.max_abs <= 255

    def test_constant_image_survives(self, test_data_manager):
        img = test_data_manager.constant_image(42)
        m = down_up_metrics(img, 2, 2, "bilinear", "bilinear")
        assert m.max_abs == 0

    @pytest.mark.parametrize("size", [(0, 4), (4, 0), (-3, 2), (2.5, 2), ("4", 4)])
    def test_invalid_down_size(self, rgb_image, size):
        with pytest.raises(InvalidInput):
            down_up_metrics(rgb_image, *size)

    def test_rejects_non_buffer(self):
        with pytest.raises(TypeError):
            down_up_metrics(np.zeros((4, 4, 3), dtype=np.uint8), 2, 2)
