"""
Project-wide constants for PyFastResize.

Centralizes the numeric types used by the Taichi kernels and the defaults
shared by the benchmarking harness, the image I/O helpers and the command
line interface. Per-call settings (threads, method, backend, run counts) are
always explicit arguments; the values below only provide their defaults.

Author: B.G.
"""

import taichi as ti

# Taichi types used by the row-parallel kernels. Float math is carried out
# in double precision so that the parallel kernels and the NumPy reference
# evaluate the exact same IEEE operations.
FLOAT_TYPE_TI = ti.f64
PIXEL_TYPE_TI = ti.u8

# Supported channel layouts: gray, RGB, RGBA
VALID_CHANNELS = (1, 3, 4)

# Largest value a channel byte can hold
PIXEL_MAX = 255

# Execution defaults (0 threads => runtime picks)
DEFAULT_THREADS = 0
DEFAULT_WARMUP_RUNS = 2
DEFAULT_MEASURED_RUNS = 10
DEFAULT_INNER_REPS = 1

# Image writer defaults
DEFAULT_PNG_COMPRESSION = 3  # 0..9
DEFAULT_JPG_QUALITY = 95  # 1..100

# Measurement sink
DEFAULT_CSV_PATH = "benchmark_results.csv"
BENCH_CSV_HEADER = (
    "backend,out_w,out_h,channels,inner_reps,mean_ms,stddev_ms,min_ms,max_ms"
)
ATTACK_CSV_HEADER = (
    "backend,src_w,src_h,down_w,down_h,down_method,up_method,mae,rmse,psnr,max_abs"
)

# Automatic experiment protocol (pfr-experiment)
EXPERIMENT_INPUT = "test_1.png"
EXPERIMENT_METHOD = "bilinear"
EXPERIMENT_THREADS = 12
EXPERIMENT_INNER_REPS = 10
EXPERIMENT_VALIDATION_SIZE = (896, 896)
EXPERIMENT_BASE_SIZE = (512, 512)
EXPERIMENT_STEPS = 6
EXPERIMENT_SCALE = 1.5
EXPERIMENT_WARMUP = 2
EXPERIMENT_RUNS = 20
EXPERIMENT_SEQ_CSV = "bench_seq.csv"
EXPERIMENT_PAR_CSV = "bench_par.csv"
