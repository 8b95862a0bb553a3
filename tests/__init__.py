"""
Test suite for PyFastResize package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for individual functions and classes
- Integration tests for complete workflows
- Row-parallel (Taichi CPU) backend equivalence tests

Run with: pytest
"""
