import json
from pathlib import Path


def _fmt(v):
    if isinstance(v, dict):
        parts = [f"{v['wall_time_s']:.4f}s"]
        if "us_per_op" in v:
            parts.append(f"{v['us_per_op']:.1f}us/op")
        parts.append(f"{v['rss_delta_mb']:+.1f}MB")
        return ", ".join(parts)
    return str(v)


def render(json_path: str):
    data = json.loads(Path(json_path).read_text())
    print(f"# swgraphs benchmark ({data['scale']})\n")

    for name, res in data["benchmarks"].items():
        print(f"## {name}")
        if "skipped" in res:
            print(f"- SKIPPED: {res['error']}\n")
            continue
        for k, v in res.items():
            print(f"- {k}: {_fmt(v)}")
        print()


if __name__ == "__main__":
    import sys

    render(sys.argv[1] if len(sys.argv) > 1 else "benchmark_results.json")
