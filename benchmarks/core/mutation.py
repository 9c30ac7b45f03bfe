import random

import numpy as np

from benchmarks.harness.metrics import measure
from swgraphs.core.graph import WeightedDiGraph, WeightedGraph


def _base_edges(scale, rng):
    src = rng.integers(1, scale.vertices + 1, size=scale.edges)
    dst = rng.integers(1, scale.vertices + 1, size=scale.edges)
    w = rng.random(scale.edges) + 0.5
    return src, dst, w


def run(scale):
    rng = np.random.default_rng(42)
    random.seed(42)
    src, dst, w = _base_edges(scale, rng)

    with measure() as m_build_directed:
        D = WeightedDiGraph.from_edges(src, dst, w, n=scale.vertices, history=False)

    with measure() as m_build_undirected:
        U = WeightedGraph.from_edges(src, dst, w, n=scale.vertices, history=False)

    pairs = [
        (random.randint(1, scale.vertices), random.randint(1, scale.vertices))  # nosec B311
        for _ in range(scale.mutations)
    ]

    # in-place weight updates: O(log k) each
    existing = list(D.edges())[: scale.mutations]
    with measure(len(existing)) as m_update:
        for e in existing:
            D.add_edge(e.src, e.dst, e.weight + 1.0)

    # inserts into the first column shift every later entry in place: O(nnz) each
    with measure(len(pairs)) as m_insert_front:
        for _, v in pairs:
            D.add_edge(1, v, 2.0)

    # inserts into the last column shift only that column's entries: O(k) each
    with measure(len(pairs)) as m_insert_back:
        for _, v in pairs:
            D.add_edge(scale.vertices, v, 2.0)

    with measure(len(pairs)) as m_remove:
        for u, v in pairs:
            D.remove_edge(u, v)

    with measure(len(pairs)) as m_undirected_insert:
        for u, v in pairs:
            U.add_edge(u, v, 3.0)

    return {
        "build_directed": m_build_directed,
        "build_undirected": m_build_undirected,
        "update_existing": m_update,
        "insert_first_column": m_insert_front,
        "insert_last_column": m_insert_back,
        "remove": m_remove,
        "undirected_insert": m_undirected_insert,
        "nnz": int(D.matrix.nnz),
    }
