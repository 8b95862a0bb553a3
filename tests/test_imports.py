"""
Import tests for all PyFastResize modules and submodules.

These tests ensure that all modules can be imported without errors,
which is crucial for detecting import-related issues early.

Tests are marked with @pytest.mark.importtest for selective running.
"""
import pytest


class TestMainPackageImports:
    """Test imports for the main pyfastresize package."""

    @pytest.mark.importtest
    def test_main_package_import(self):
        """Test that the main pyfastresize package can be imported."""
        import pyfastresize
        assert hasattr(pyfastresize, '__version__')
        assert hasattr(pyfastresize, '__all__')

    @pytest.mark.importtest
    def test_constants_import(self):
        """Test that constants module can be imported."""
        import pyfastresize.constants
        assert pyfastresize.constants.VALID_CHANNELS == (1, 3, 4)

    @pytest.mark.importtest
    def test_errors_import(self):
        import pyfastresize.errors as err
        assert issubclass(err.InvalidShape, err.ResizeError)
        assert issubclass(err.ResizeError, ValueError)
        assert issubclass(err.BackendUnavailable, RuntimeError)

    @pytest.mark.importtest
    def test_top_level_shortcuts(self):
        import pyfastresize as pfr
        assert pfr.resize is pfr.rastermanip.resize
        assert pfr.PixelBuffer is pfr.image.PixelBuffer


class TestCoreImports:
    """Test imports for image and rastermanip modules."""

    @pytest.mark.importtest
    def test_image_import(self):
        import pyfastresize.image
        assert hasattr(pyfastresize.image, 'PixelBuffer')

    @pytest.mark.importtest
    def test_rastermanip_import(self):
        import pyfastresize.rastermanip
        for name in ('resize', 'map_coord', 'resize_nearest_seq', 'resize_bilinear_par',
                     'backend_availability', 'resolve_backend'):
            assert hasattr(pyfastresize.rastermanip, name)

    @pytest.mark.importtest
    def test_rastermanip_submodules_import(self):
        import pyfastresize.rastermanip.coords
        import pyfastresize.rastermanip.sequential
        import pyfastresize.rastermanip.parallel
        import pyfastresize.rastermanip.resizing
        assert pyfastresize.rastermanip.parallel is not None


class TestToolingImports:
    """Test imports for bench, validate, io and misc modules."""

    @pytest.mark.importtest
    def test_bench_import(self):
        import pyfastresize.bench
        assert hasattr(pyfastresize.bench, 'benchmark_resize')
        assert hasattr(pyfastresize.bench, 'run_experiment')

    @pytest.mark.importtest
    def test_validate_import(self):
        import pyfastresize.validate
        assert hasattr(pyfastresize.validate, 'compare_images')
        assert hasattr(pyfastresize.validate, 'down_up_metrics')

    @pytest.mark.importtest
    def test_io_import(self):
        import pyfastresize.io
        assert hasattr(pyfastresize.io, 'load_image')
        assert hasattr(pyfastresize.io, 'save_image')

    @pytest.mark.importtest
    def test_misc_import(self):
        import pyfastresize.misc
        assert hasattr(pyfastresize.misc, 'plot_bench_csv')


class TestCLIImports:
    """Test imports for CLI modules."""

    @pytest.mark.importtest
    def test_cli_init_import(self):
        """Test CLI package import."""
        import pyfastresize.cli
        assert 'experiment' in pyfastresize.cli.__all__

    @pytest.mark.importtest
    def test_cli_lazy_attributes(self):
        import click
        import pyfastresize.cli
        for name in pyfastresize.cli.__all__:
            assert isinstance(getattr(pyfastresize.cli, name), click.Command)

    @pytest.mark.importtest
    def test_cli_unknown_attribute(self):
        import pyfastresize.cli
        with pytest.raises(AttributeError):
            pyfastresize.cli.does_not_exist
