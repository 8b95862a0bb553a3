#!/usr/bin/env python3
"""
Test runner script for PyFastResize.

Shortcuts for the test suites (imports, unit, integration) and for the
marker-based selections used while working on the backends.
"""
import argparse
import os
import subprocess
import sys

SUITES = {
    "imports": (["tests/test_imports.py"], "Import tests"),
    "unit": (["tests/unit/"], "Unit tests"),
    "integration": (["tests/integration/"], "Integration tests"),
}


def run_pytest(args, description):
    """Run pytest with ``args`` from the repository root; True on success."""
    print(f"-> {description}")
    env = dict(os.environ)
    root = os.path.dirname(os.path.abspath(__file__))
    env["PYTHONPATH"] = root + os.pathsep + env.get("PYTHONPATH", "")
    result = subprocess.run([sys.executable, "-m", "pytest"] + args, cwd=root, env=env)
    return result.returncode == 0


def main():
    parser = argparse.ArgumentParser(
        description="PyFastResize test runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py --imports          # Import tests only
  python run_tests.py --unit             # Unit tests only
  python run_tests.py --integration      # Integration tests only
  python run_tests.py --all              # Every suite, one after another
  python run_tests.py --fast             # Skip tests marked slow
  python run_tests.py --parallel         # Row-parallel backend tests only
  python run_tests.py --no-taichi        # Everything that runs without Taichi
  python run_tests.py -k bilinear        # Forward a -k expression to pytest
        """,
    )

    suite = parser.add_mutually_exclusive_group()
    suite.add_argument("--imports", action="store_true", help="Run import tests only")
    suite.add_argument("--unit", action="store_true", help="Run unit tests only")
    suite.add_argument("--integration", action="store_true", help="Run integration tests only")
    suite.add_argument("--all", action="store_true", help="Run all suites in sequence")
    suite.add_argument("--fast", action="store_true", help="Exclude slow tests")
    suite.add_argument("--parallel", action="store_true", help="Run row-parallel backend tests only")
    suite.add_argument("--no-taichi", action="store_true", help="Exclude tests that need Taichi")
    parser.add_argument("-k", dest="keyword", default=None, help="pytest -k expression")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--coverage", action="store_true", help="Run with coverage report")

    args = parser.parse_args()

    base = ["-v" if args.verbose else "-q", "--disable-warnings"]
    if args.coverage:
        base += ["--cov=pyfastresize", "--cov-report=html", "--cov-report=term"]
    if args.keyword:
        base += ["-k", args.keyword]

    if args.all:
        print("Running complete test suite...")
        success = True
        for paths, description in SUITES.values():
            success = run_pytest(base + paths, description) and success
    elif args.imports or args.unit or args.integration:
        name = "imports" if args.imports else "unit" if args.unit else "integration"
        paths, description = SUITES[name]
        success = run_pytest(base + paths, description)
    elif args.fast:
        success = run_pytest(base + ["-m", "not slow"], "Fast tests")
    elif args.parallel:
        success = run_pytest(base + ["-m", "taichi"], "Row-parallel backend tests")
    elif args.no_taichi:
        success = run_pytest(base + ["-m", "not taichi"], "Tests without Taichi")
    else:
        paths = SUITES["imports"][0] + SUITES["unit"][0]
        success = run_pytest(base + paths, "Basic test suite (imports + unit tests)")

    print("\nAll tests passed!" if success else "\nSome tests failed!")
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
