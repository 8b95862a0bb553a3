"""
Pytest configuration and fixtures for PyFastResize test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import os
import sys
import pytest
import numpy as np


MARKERS = {
    "unit": "fast, isolated tests of one module",
    "integration": "tests chaining several modules or the CLI",
    "importtest": "module import checks",
    "slow": "tests that take noticeably longer (benchmark loops, large images)",
    "taichi": "tests that start the Taichi CPU runtime",
}


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        # Anything that asks for the Taichi runtime is a row-parallel test
        if "require_taichi" in getattr(item, "fixturenames", ()):
            item.add_marker("taichi")

        # Mark import tests for easy selection
        if "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture
def require_taichi():
    """Skip test if the Taichi CPU runtime cannot start."""
    from pyfastresize.rastermanip import backend_availability

    status = backend_availability()
    if not status.row_parallel:
        pytest.skip(f"Taichi CPU runtime unavailable: {status.reason}")
    return True


class TestDataManager:
    """Helper class for building synthetic test images."""

    @staticmethod
    def random_image(width=37, height=23, channels=3, seed=42):
        """Uniform random values, reproducible through ``seed``."""
        from pyfastresize.image import PixelBuffer

        rng = np.random.default_rng(seed)
        values = rng.integers(0, 256, size=(height, width, channels), dtype=np.uint8)
        return PixelBuffer.from_array(values)

    @staticmethod
    def gradient_image(width=16, height=12, channels=3):
        """Horizontal ramp in channel 0, vertical ramp in the others."""
        from pyfastresize.image import PixelBuffer

        arr = np.zeros((height, width, channels), dtype=np.uint8)
        xs = np.linspace(0, 255, width).round().astype(np.uint8)
        ys = np.linspace(0, 255, height).round().astype(np.uint8)
        arr[:, :, 0] = xs[np.newaxis, :]
        for c in range(1, channels):
            arr[:, :, c] = ys[:, np.newaxis]
        return PixelBuffer.from_array(arr)

    @staticmethod
    def checkerboard(width=8, height=8, cell=2, channels=1):
        """Black/white checkerboard with square cells of ``cell`` pixels."""
        from pyfastresize.image import PixelBuffer

        yy, xx = np.mgrid[0:height, 0:width]
        board = (((xx // cell) + (yy // cell)) % 2 * 255).astype(np.uint8)
        arr = np.repeat(board[:, :, np.newaxis], channels, axis=2)
        return PixelBuffer.from_array(arr)

    @staticmethod
    def constant_image(value, width=9, height=7, channels=4):
        from pyfastresize.image import PixelBuffer

        return PixelBuffer.from_array(np.full((height, width, channels), value, dtype=np.uint8))

    @staticmethod
    def write_png(buffer, path):
        """Save ``buffer`` as PNG through the package writer and return the path."""
        from pyfastresize.io import save_image

        return save_image(buffer, path)


@pytest.fixture
def test_data_manager():
    """Provide access to test data creation utilities."""
    return TestDataManager()


@pytest.fixture(scope="session")
def rgb_image():
    """Odd-sized random RGB image."""
    return TestDataManager.random_image(37, 23, 3, seed=42)


@pytest.fixture(scope="session")
def gray_image():
    return TestDataManager.random_image(19, 31, 1, seed=7)


@pytest.fixture(scope="session")
def rgba_image():
    return TestDataManager.random_image(24, 17, 4, seed=3)


@pytest.fixture
def png_file(tmp_path, rgb_image):
    """RGB PNG on disk, for CLI and I/O tests."""
    return TestDataManager.write_png(rgb_image, tmp_path / "input.png")
