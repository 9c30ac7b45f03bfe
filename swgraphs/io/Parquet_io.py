from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import polars as pl

from .dataframe_io import to_dataframe
from ._utils import _graph_class


def to_parquet(graph, path):
    """Write a GraphDir: ``edges.parquet`` + ``manifest.json`` (directedness, n, dtypes)."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)

    to_dataframe(graph).write_parquet(path / "edges.parquet", compression="zstd")

    # manifest.json (tiny)
    manifest = {
        "format_version": 1,
        "directed": graph.is_directed(),
        "n": graph.nv(),
        "counts": {"V": graph.nv(), "E": graph.ne()},
        "weight_dtype": np.dtype(graph.weighttype).name,
        "index_dtype": np.dtype(graph.eltype).name,
        "provenance": {"package": "swgraphs"},
    }
    (path / "manifest.json").write_text(json.dumps(manifest, indent=2))


def from_parquet(path):
    """Read a GraphDir written by ``to_parquet`` (lossless)."""
    path = Path(path)
    manifest = json.loads((path / "manifest.json").read_text())
    E = pl.read_parquet(path / "edges.parquet")
    cls = _graph_class(bool(manifest["directed"]))
    dtype = np.dtype(manifest.get("weight_dtype", "float64"))
    g = cls.from_edges(
        E["source"].to_numpy(),
        E["target"].to_numpy(),
        E["weight"].to_numpy(),
        n=int(manifest["n"]),
        combine="last",
        dtype=dtype,
        index_dtype=np.dtype(manifest.get("index_dtype", "int64")),
    )
    expected = manifest.get("counts", {}).get("E")
    if expected is not None and g.ne() != expected:
        raise ValueError(f"edge count mismatch: manifest says {expected}, read {g.ne()}")
    return g
