"""
Benchmarks for 0/1/2/3-D linear interpolation.

Each dimensionality is timed twice: once through its specialized
interpolator (``Interp1D`` etc.) and once through ``InterpND`` on the
same random data, so the summary shows what the dedicated kernels buy.

Run with ``python -m ninterp.benchmark``; a ``benchmark_summary.txt``
is written to the current working directory containing:

* Wall-clock timing (total)
* Per-case timing (total, calls, average per query)
* Hardware and Python / NumPy / Numba version info
"""

import os
import platform
import sys
import time
from datetime import datetime

import numba
import numpy as np

from ninterp.core.extrapolate import Extrapolate
from ninterp.core.logger import get_logger
from ninterp.interpolator import Interp0D, Interp1D, Interp2D, Interp3D, InterpND
from ninterp.strategy import Linear

log = get_logger(__name__)

RANDOM_SEED = 1234567890


# ── Per-case profiler ────────────────────────────────────────────────

_profile_accum: dict = {}  # label -> {"total": float, "calls": int}
_wall_time = None  # seconds spent in the last run_benchmarks() call


def profile_start():
    """Return a timestamp for use with :func:`profile_record`."""
    return time.perf_counter()


def profile_record(label, start_time, calls=1):
    """Accumulate elapsed time since *start_time* under *label*."""
    elapsed = time.perf_counter() - start_time
    if label not in _profile_accum:
        _profile_accum[label] = {"total": 0.0, "calls": 0}
    _profile_accum[label]["total"] += elapsed
    _profile_accum[label]["calls"] += calls


def get_profile_data():
    """Return a copy of the accumulated profile data."""
    return {k: dict(v) for k, v in _profile_accum.items()}


def reset_profile():
    """Forget all accumulated profile data and the last wall time."""
    global _wall_time
    _profile_accum.clear()
    _wall_time = None


# ── Cases ────────────────────────────────────────────────────────────

def _cases(rng, n_grid):
    """Yield ``(label, interpolator)`` pairs; each pair of cases shares its data."""
    axis = np.arange(n_grid, dtype=np.float64)
    yield "0D", Interp0D(0.5)
    yield "0D_multi", InterpND([], 0.5)
    for ndim, cls in ((1, Interp1D), (2, Interp2D), (3, Interp3D)):
        values = rng.uniform(0.0, 1.0, size=(n_grid,) * ndim)
        grid = [axis] * ndim
        yield f"{ndim}D", cls(*grid, values, strategy=Linear, extrapolate=Extrapolate.error())
        yield f"{ndim}D_multi", InterpND(grid, values, strategy=Linear, extrapolate=Extrapolate.error())


def run_benchmarks(seed=RANDOM_SEED, n_grid=100, n_points=1_000, repeat=1):
    """
    Time linear interpolation for every case.

    Parameters
    ----------
    seed : int
        Seed for the grid values and query points.
    n_grid : int
        Coordinates per axis (the 3-D cases hold ``n_grid**3`` values).
    n_points : int
        Random in-range queries per case and repetition.
    repeat : int
        Repetitions per case.

    Returns
    -------
    dict
        ``label -> {"total": seconds, "calls": int}``.
    """
    global _wall_time
    reset_profile()
    rng = np.random.default_rng(seed)
    wall_start = time.perf_counter()
    for label, interp in _cases(rng, n_grid):
        points = rng.uniform(0.0, n_grid - 1, size=(n_points, interp.ndim()))
        if n_points:
            # first query compiles the kernels
            interp.interpolate(points[0])
        for _ in range(repeat):
            t0 = profile_start()
            for point in points:
                interp.interpolate(point)
            profile_record(label, t0, calls=n_points)
        log.debug("benchmark case %s done", label)
    _wall_time = time.perf_counter() - wall_start
    return get_profile_data()


# ── Hardware detection ───────────────────────────────────────────────

def _cpu_info():
    """Return a short CPU description."""
    try:
        with open("/proc/cpuinfo", "r") as f:
            for line in f:
                if line.startswith("model name"):
                    return line.split(":", 1)[1].strip()
    except (OSError, IndexError):
        pass
    return platform.processor() or "unknown"


def _mem_info():
    """Return total RAM in GB."""
    try:
        with open("/proc/meminfo", "r") as f:
            for line in f:
                if line.startswith("MemTotal"):
                    kb = int(line.split()[1])
                    return f"{kb / 1024 / 1024:.1f} GB"
    except (OSError, ValueError):
        pass
    return "unknown"


# ── Summary writer ───────────────────────────────────────────────────

def write_summary(filename="benchmark_summary.txt", results=None, bench_params=None):
    """
    Write a human-readable benchmark summary to *filename*.

    Parameters
    ----------
    filename : str
        Output file path (default: ``benchmark_summary.txt`` in cwd).
    results : dict, optional
        Output of :func:`run_benchmarks`; defaults to the accumulated
        profile data.
    bench_params : dict, optional
        Benchmark parameters to include (seed, n_grid, etc.).
    """
    if results is None:
        results = get_profile_data()

    lines = []
    lines.append("=" * 72)
    lines.append("  NINTERP BENCHMARK SUMMARY")
    lines.append("=" * 72)
    lines.append("")

    lines.append(f"Date/Time:       {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append("")

    # ── Timing ──
    if _wall_time is not None:
        lines.append("--- Timing ---")
        lines.append(f"  {'total':12s}  {_wall_time:.3f} s")
        lines.append("")

    # ── Benchmark params ──
    if bench_params:
        lines.append("--- Benchmark Parameters ---")
        for k, v in bench_params.items():
            lines.append(f"  {k:16s}  {v}")
        lines.append("")

    # ── Hardware ──
    lines.append("--- Hardware ---")
    lines.append(f"  CPU:           {_cpu_info()}")
    lines.append(f"  Cores (os):    {os.cpu_count()}")
    lines.append(f"  RAM:           {_mem_info()}")
    lines.append(f"  Platform:      {platform.platform()}")
    lines.append("")

    # ── Software versions ──
    lines.append("--- Software ---")
    lines.append(f"  Python:        {sys.version.split()[0]}")
    lines.append(f"  NumPy:         {np.__version__}")
    lines.append(f"  Numba:         {numba.__version__}")
    lines.append("")

    # ── Per-case breakdown ──
    if results:
        lines.append("--- Cases ---")
        lines.append(f"  {'Case':<12s} {'Time (s)':>10s}  {'Calls':>8s}  {'Avg (us)':>10s}")
        lines.append(f"  {'-'*12} {'-'*10}  {'-'*8}  {'-'*10}")
        for label, vals in results.items():
            avg_us = vals["total"] / vals["calls"] * 1e6 if vals["calls"] else 0.0
            lines.append(
                f"  {label:<12s} {vals['total']:>10.3f}  {vals['calls']:>8d}  {avg_us:>10.3f}"
            )
        lines.append("")

    lines.append("=" * 72)

    text = "\n".join(lines) + "\n"

    with open(filename, "w", encoding="utf-8") as f:
        f.write(text)

    print(text)

    return filename


def main():
    params = {"seed": RANDOM_SEED, "n_grid": 100, "n_points": 1_000}
    results = run_benchmarks(**params)
    write_summary(results=results, bench_params=params)


if __name__ == "__main__":
    main()
