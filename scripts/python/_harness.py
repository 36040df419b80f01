"""Shared benchmark harness for Python workloads.

Usage in each workload script:
    from _harness import bench_main
    def run(n, seed, out=sys.stdout):
        ...
        return result
    if __name__ == "__main__":
        bench_main(run)

The script is invoked as:
    python3 <script>.py [N]

N defaults to 1. The seed is fixed so every run of a given N walks the
same key order; the workload prints its own report lines.
"""

import sys
import time

SEED = 42


class Lcg:
    """Seeded linear congruential generator shared by the workloads."""

    MODULUS = 2147483648

    def __init__(self, seed):
        self.x = seed % 1000000 + 1

    def next(self):
        self.x = (self.x * 1103515245 + 12345) % self.MODULUS
        return self.x


class Stopwatch:
    """Monotonic stopwatch; elapsed time accumulates until reset()."""

    def __init__(self):
        self._elapsed_ns = 0
        self._started_ns = None

    def start(self):
        if self._started_ns is None:
            self._started_ns = time.perf_counter_ns()

    def stop(self):
        if self._started_ns is not None:
            self._elapsed_ns += time.perf_counter_ns() - self._started_ns
            self._started_ns = None

    def reset(self):
        self._elapsed_ns = 0
        self._started_ns = None

    @property
    def running(self):
        return self._started_ns is not None

    @property
    def elapsed_ns(self):
        if self._started_ns is None:
            return self._elapsed_ns
        return self._elapsed_ns + time.perf_counter_ns() - self._started_ns

    @property
    def elapsed_ms(self):
        # whole milliseconds, truncated
        return self.elapsed_ns // 1_000_000


def parse_n(argv=None, default=1):
    if argv is None:
        argv = sys.argv
    if len(argv) < 2:
        return default
    n = int(argv[1])
    if n < 0:
        raise ValueError(f"N must be non-negative, got {n}")
    return n


def bench_main(workload_fn, argv=None):
    n = parse_n(argv)
    workload_fn(n, SEED)
    return 0
