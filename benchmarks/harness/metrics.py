import os
import time
from contextlib import contextmanager

import psutil

_PROC = psutil.Process(os.getpid())


def rss_mb() -> float:
    return _PROC.memory_info().rss / 1024**2


@contextmanager
def measure(ops: int | None = None):
    """
    Context manager yielding a dict filled on exit with:
      - wall_time_s
      - rss_delta_mb (resident memory growth across the block)
      - us_per_op (only when ``ops`` is given; microseconds per operation)
    """
    rss0 = rss_mb()
    t0 = time.perf_counter()
    result = {}
    try:
        yield result
    finally:
        elapsed = time.perf_counter() - t0
        result.update(wall_time_s=elapsed, rss_delta_mb=rss_mb() - rss0)
        if ops:
            result["us_per_op"] = elapsed * 1e6 / ops
