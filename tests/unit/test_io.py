"""Unit tests for image file I/O and benchmark plotting."""

import numpy as np
import pytest
from PIL import Image

from pyfastresize.bench import append_bench_result, summarize
from pyfastresize.errors import InvalidShape
from pyfastresize.image import PixelBuffer
from pyfastresize.io import buffer_to_image, image_to_buffer, load_image, save_image
from pyfastresize.misc import group_by_backend, plot_bench_csv, speedup_table


@pytest.mark.unit
class TestImageIO:

    @pytest.mark.parametrize("fixture", ["gray_image", "rgb_image", "rgba_image"])
    def test_png_is_lossless(self, fixture, request, tmp_path):
        img = request.getfixturevalue(fixture)
        path = save_image(img, tmp_path / "nested" / "img.png")
        assert path.exists()
        assert load_image(path) == img

    def test_jpeg_drops_alpha(self, rgba_image, tmp_path):
        path = save_image(rgba_image, tmp_path / "img.jpg", jpg_quality=90)
        loaded = load_image(path)
        assert loaded.channels == 3
        assert (loaded.width, loaded.height) == (rgba_image.width, rgba_image.height)

    def test_force_channels(self, rgb_image, tmp_path):
        path = save_image(rgb_image, tmp_path / "img.png")
        assert load_image(path, 1).channels == 1
        assert load_image(path, 4).channels == 4
        assert load_image(path, 4).as_array()[:, :, 3].min() == 255

    def test_bad_channels(self, rgb_image, tmp_path):
        path = save_image(rgb_image, tmp_path / "img.png")
        with pytest.raises(InvalidShape):
            load_image(path, 2)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_image(tmp_path / "missing.png")

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "junk.png"
        path.write_bytes(b"not an image")
        with pytest.raises(OSError):
            load_image(path)

    def test_mode_mapping(self):
        assert image_to_buffer(Image.new("L", (3, 2))).channels == 1
        assert image_to_buffer(Image.new("RGB", (3, 2))).channels == 3
        assert image_to_buffer(Image.new("RGBA", (3, 2))).channels == 4
        assert image_to_buffer(Image.new("LA", (3, 2))).channels == 4
        assert image_to_buffer(Image.new("CMYK", (3, 2))).channels == 3

    def test_sixteen_bit_gray(self):
        arr = np.array([[0, 65535], [257, 32896]], dtype=np.uint16)
        buf = image_to_buffer(Image.fromarray(arr))
        assert buf.channels == 1
        np.testing.assert_array_equal(buf.as_array()[:, :, 0], [[0, 255], [1, 128]])

    def test_buffer_to_image_modes(self, gray_image, rgba_image):
        assert buffer_to_image(gray_image).mode == "L"
        assert buffer_to_image(rgba_image).mode == "RGBA"
        assert buffer_to_image(PixelBuffer(2, 2, 3)).size == (2, 2)

    def test_save_rejects_arrays(self, tmp_path):
        with pytest.raises(TypeError):
            save_image(np.zeros((2, 2, 3), dtype=np.uint8), tmp_path / "x.png")


@pytest.mark.unit
class TestBenchPlot:

    @pytest.fixture
    def csv_pair(self, tmp_path):
        seq, par = tmp_path / "seq.csv", tmp_path / "par.csv"
        for w, s_ms, p_ms in [(64, 4.0, 1.0), (32, 1.0, 0.5)]:
            append_bench_result(seq, "seq", w, w, 3, 1, summarize([s_ms, s_ms]))
            append_bench_result(par, "par", w, w, 3, 1, summarize([p_ms, p_ms]))
        return seq, par

    def test_speedup_table(self, csv_pair):
        from pyfastresize.bench import read_csv_rows

        seq, par = csv_pair
        table = speedup_table(read_csv_rows(seq), read_csv_rows(par))
        assert [(t["out_w"], t["speedup"]) for t in table] == [(32, 2.0), (64, 4.0)]

    def test_group_by_backend_sorts_by_size(self, csv_pair):
        from pyfastresize.bench import read_csv_rows

        rows = read_csv_rows(csv_pair[0]) + read_csv_rows(csv_pair[1])
        groups = group_by_backend(rows)
        assert set(groups) == {"seq", "par"}
        assert [r["out_w"] for r in groups["seq"]] == ["32", "64"]

    def test_plot_writes_figure(self, csv_pair, tmp_path):
        out = plot_bench_csv(list(csv_pair), tmp_path / "figs" / "bench.png")
        assert out.exists() and out.stat().st_size > 0
        with Image.open(out) as im:
            assert im.format == "PNG"

    def test_plot_requires_rows(self, tmp_path):
        empty = tmp_path / "empty.csv"
        empty.write_text("backend,out_w,out_h,channels,inner_reps,mean_ms,stddev_ms,min_ms,max_ms\n")
        with pytest.raises(ValueError):
            plot_bench_csv(empty, tmp_path / "x.png")
