import importlib
import json
import platform
from pathlib import Path

import numpy as np
import scipy

from .scales import SCALES

BENCH_ROOT = Path(__file__).resolve().parents[1]
SUITES = ("core", "io")


def discover_benchmarks(only=None):
    benches = []
    for pkg in SUITES:
        for py in sorted((BENCH_ROOT / pkg).glob("*.py")):
            if py.name.startswith("_"):
                continue
            modname = f"benchmarks.{pkg}.{py.stem}"
            if only and only not in modname:
                continue
            benches.append(modname)
    return benches


def run(scale_name="small", only=None):
    scale = SCALES[scale_name]
    results = {
        "scale": scale_name,
        "env": {
            "python": platform.python_version(),
            "numpy": np.__version__,
            "scipy": scipy.__version__,
        },
        "benchmarks": {},
    }

    for modname in discover_benchmarks(only):
        mod = importlib.import_module(modname)
        if not hasattr(mod, "run"):
            continue
        try:
            results["benchmarks"][modname] = mod.run(scale)
        except (MemoryError, ModuleNotFoundError) as e:
            # a scale that does not fit, or a missing optional dependency
            results["benchmarks"][modname] = {"error": str(e), "skipped": True}
    return results


if __name__ == "__main__":
    import argparse

    p = argparse.ArgumentParser()
    p.add_argument("--scale", default="small", choices=SCALES.keys())
    p.add_argument("--only", default=None, help="run benchmarks whose module name contains this")
    p.add_argument("--out", default="benchmark_results.json")
    args = p.parse_args()

    res = run(args.scale, args.only)
    Path(args.out).write_text(json.dumps(res, indent=2))
    print(f"Wrote {args.out}")
