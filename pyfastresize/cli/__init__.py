"""
Command Line Interface for PyFastResize

This module provides command line utilities for PyFastResize, enabling
resizing, benchmarking and validation from the terminal without writing
Python scripts.

Available Commands:
- run: Resize an image file and save the result
- bench: Benchmark one resize configuration
- benchset: Benchmark a geometric sweep of output sizes
- validate: Check sequential vs row-parallel equivalence (exit 3 on mismatch)
- attack: Downscale -> upscale distortion metrics
- experiment: Automatic validation + sweep protocol
- plot_bench: Plot benchmark CSV files

Author: B.G.
"""

_CLI_SUBMODULES = {
    "run": (".resize_commands", "run"),
    "validate": (".resize_commands", "validate"),
    "attack": (".resize_commands", "attack"),
    "bench": (".bench_commands", "bench"),
    "benchset": (".bench_commands", "benchset"),
    "experiment": (".bench_commands", "experiment"),
    "plot_bench": (".bench_commands", "plot_bench"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
