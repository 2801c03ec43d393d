"""
Configuration settings for dsakit maintenance tooling.

Centralized configuration for the CLI, reports and benchmarks.
The library itself reads nothing from here.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE_ROOT = PROJECT_ROOT / "dsakit"
OUTPUT_ROOT = Path(os.getenv("DSAKIT_OUTPUT_ROOT", str(PROJECT_ROOT / "output")))
MANIFEST_PATH = Path(os.getenv("DSAKIT_MANIFEST_PATH", str(OUTPUT_ROOT / "manifest.json")))

# Report names (CSV + _metadata.json under OUTPUT_ROOT)
SURFACE_REPORT_NAME = "public_surface"
BENCH_REPORT_NAME = "sort_benchmark"

# Benchmarks
BENCH_SEED = int(os.getenv("DSAKIT_BENCH_SEED", "42"))  # Same data on every run
BENCH_SIZES = [1000, 5000, 10000]
BENCH_REPEATS = 3  # Best of N
INSERTION_SORT_BENCH_LIMIT = 5000  # O(n^2); skipped above this size

# Logging
LOG_LEVEL = os.getenv("DSAKIT_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = os.getenv("DSAKIT_LOG_FILE", "dsakit.log")
