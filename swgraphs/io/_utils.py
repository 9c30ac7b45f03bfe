import numpy as np


def _graph_class(directed: bool):
    from ..core.graph import WeightedDiGraph, WeightedGraph

    return WeightedDiGraph if directed else WeightedGraph


def _edge_arrays(graph):
    """``(source, target, weight)`` numpy arrays in edge iteration order.

    Directed: one row per stored entry. Undirected: entries with row <= col,
    i.e. each edge once with ``source <= target``.
    """
    mat = graph.matrix
    rows = mat.indices
    cols = mat._column_of_positions()
    data = mat.data
    if graph.is_directed():
        return cols + 1, rows + 1, data.copy()
    keep = rows <= cols
    return rows[keep] + 1, cols[keep] + 1, data[keep]


def _dtype_name(dtype) -> str:
    return np.dtype(dtype).name


def _parse_weight(token: str, dtype):
    if np.issubdtype(dtype, np.integer):
        return int(token)
    if np.issubdtype(dtype, np.bool_):
        return token.strip().lower() in ("1", "true")
    return float(token)
