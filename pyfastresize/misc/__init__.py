"""
Miscellaneous utilities for PyFastResize.

Post-processing of benchmark CSV files: plotting and speedup tables.

Author: B.G.
"""

from .bench_plot import group_by_backend, plot_bench_csv, speedup_table

__all__ = ["plot_bench_csv", "speedup_table", "group_by_backend"]
