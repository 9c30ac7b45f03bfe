from __future__ import annotations

try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install swgraphs[networkx]"
    ) from e

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ..core.graph import AbstractWeightedGraph

from ..io._utils import _edge_arrays, _graph_class


def to_nx(graph: AbstractWeightedGraph, *, weight: str = "weight"):
    """Export to ``networkx.DiGraph`` / ``networkx.Graph``.

    Nodes are the vertex ids ``1..N``; each edge carries its weight under the
    ``weight`` attribute. Self-loops are kept.
    """
    G = nx.DiGraph() if graph.is_directed() else nx.Graph()
    G.add_nodes_from(graph.vertices())
    src, dst, w = _edge_arrays(graph)
    G.add_weighted_edges_from(zip(src.tolist(), dst.tolist(), w.tolist()), weight=weight)
    return G


def from_nx(
    G,
    *,
    weight: str = "weight",
    default: float = 1.0,
    combine="sum",
    dtype=np.float64,
    return_mapping: bool = False,
):
    """Import a networkx graph.

    Nodes are numbered ``1..N`` in ``G.nodes`` order. Parallel edges of a
    multigraph are merged with ``combine``; edges whose weight is zero are not
    stored.

    Returns
    ---
    WeightedGraph | WeightedDiGraph
        Or ``(graph, node_to_vertex)`` if ``return_mapping`` is True.

    """
    node_to_vertex = {node: i for i, node in enumerate(G.nodes, start=1)}
    src, dst, w = [], [], []
    for u, v, data in G.edges(data=True):
        src.append(node_to_vertex[u])
        dst.append(node_to_vertex[v])
        w.append(data.get(weight, default))
    cls = _graph_class(G.is_directed())
    g = cls.from_edges(
        np.asarray(src, dtype=np.int64),
        np.asarray(dst, dtype=np.int64),
        np.asarray(w, dtype=dtype),
        n=len(node_to_vertex),
        combine=combine,
        dtype=dtype,
    )
    if return_mapping:
        return g, node_to_vertex
    return g
