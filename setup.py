from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pyfastresize",
    version="0.0.1",
    author="Boris Gailleton",
    author_email="boris.gailleton@univ-rennes.fr",
    description="Sequential and row-parallel image resampling with benchmarking tools",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["pyfastresize", "pyfastresize.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Graphics",
        "Topic :: Scientific/Engineering :: Image Processing",
    ],
    python_requires=">=3.10",
    install_requires=[
        "taichi>=1.4.0",
        "numpy>=1.20.0",
        "matplotlib>=3.3.0",
        "click>=7.0",
        "pillow>=8.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    keywords="image resize resampling bilinear nearest parallel benchmark taichi",
    entry_points={
        "console_scripts": [
            "pfr-run=pyfastresize.cli.resize_commands:run",
            "pfr-validate=pyfastresize.cli.resize_commands:validate",
            "pfr-attack=pyfastresize.cli.resize_commands:attack",
            "pfr-bench=pyfastresize.cli.bench_commands:bench",
            "pfr-benchset=pyfastresize.cli.bench_commands:benchset",
            "pfr-experiment=pyfastresize.cli.bench_commands:experiment",
            "pfr-plot-bench=pyfastresize.cli.bench_commands:plot_bench",
        ],
    },
)
