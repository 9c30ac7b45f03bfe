from __future__ import annotations

from typing import Any

import narwhals as nw
import numpy as np
import polars as pl
from narwhals.typing import IntoDataFrame

from ._utils import _edge_arrays, _graph_class


def to_dataframe(graph) -> pl.DataFrame:
    """Export edges as a Polars DataFrame with columns ``source, target, weight``.

    Rows follow edge iteration order. Undirected edges appear once with
    ``source <= target``. Vertex count and directedness are not part of the
    frame; use ``to_edge_records`` or pass them back to ``from_dataframe``.
    """
    src, dst, w = _edge_arrays(graph)
    return pl.DataFrame({"source": src, "target": dst, "weight": w})


def to_edge_records(graph) -> dict[str, Any]:
    """Everything needed to rebuild ``graph`` exactly.

    Returns
    ---
    dict
        ``{"directed": bool, "n": int, "weight_dtype": str, "edges": [(src, dst, weight), ...]}``

    """
    src, dst, w = _edge_arrays(graph)
    return {
        "directed": graph.is_directed(),
        "n": graph.nv(),
        "weight_dtype": np.dtype(graph.weighttype).name,
        "edges": list(zip(src.tolist(), dst.tolist(), w.tolist())),
    }


def from_edge_records(records: dict[str, Any], *, history: bool = True):
    """Inverse of ``to_edge_records``."""
    for key in ("directed", "n", "edges"):
        if key not in records:
            raise ValueError(f"edge records missing {key!r}")
    cls = _graph_class(bool(records["directed"]))
    dtype = np.dtype(records.get("weight_dtype", "float64"))
    edges = records["edges"]
    if not edges:
        return cls(int(records["n"]), dtype=dtype, history=history)
    src, dst, w = zip(*edges)
    return cls.from_edges(
        np.asarray(src, dtype=np.int64),
        np.asarray(dst, dtype=np.int64),
        np.asarray(w, dtype=dtype),
        n=int(records["n"]),
        combine="last",
        dtype=dtype,
        history=history,
    )


def from_dataframe(
    df: IntoDataFrame,
    *,
    n: int | None = None,
    directed: bool = True,
    source: str = "source",
    target: str = "target",
    weight: str | None = "weight",
    combine="sum",
    dtype=np.float64,
):
    """Import a graph from any DataFrame (Pandas, Polars, PyArrow, etc.).

    Args:
        df: edge table with 1-based ``source``/``target`` columns
        n: number of vertices (defaults to the largest id)
        directed: build a ``WeightedDiGraph`` (True) or ``WeightedGraph`` (False)
        source, target, weight: column names; a missing weight column means weight 1
        combine: merge rule for repeated edges
        dtype: weight dtype

    Returns:
        WeightedDiGraph or WeightedGraph

    """
    edges_nw = nw.from_native(df, eager_only=True)
    missing = [c for c in (source, target) if c not in edges_nw.columns]
    if missing:
        raise ValueError(f"edges DataFrame must have columns {missing}")
    src = edges_nw.get_column(source).to_numpy()
    dst = edges_nw.get_column(target).to_numpy()
    if weight is not None and weight in edges_nw.columns:
        w = edges_nw.get_column(weight).to_numpy()
    else:
        w = np.ones(len(src), dtype=dtype)
    cls = _graph_class(directed)
    return cls.from_edges(src, dst, w, n=n, combine=combine, dtype=dtype)
