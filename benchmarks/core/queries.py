import numpy as np

from benchmarks.harness.metrics import measure
from swgraphs.core.graph import WeightedDiGraph


def run(scale):
    rng = np.random.default_rng(7)
    src = rng.integers(1, scale.vertices + 1, size=scale.edges)
    dst = rng.integers(1, scale.vertices + 1, size=scale.edges)
    G = WeightedDiGraph.from_edges(src, dst, n=scale.vertices, history=False)
    sample = rng.integers(1, scale.vertices + 1, size=min(200, scale.vertices)).tolist()

    with measure(len(sample)) as m_out:
        for v in sample:
            G.out_neighbors(v)

    with measure(len(sample)) as m_in:
        for v in sample:
            G.in_neighbors(v)

    k = min(1000, scale.edges)
    with measure(k) as m_weight:
        for u, v in zip(src[:k].tolist(), dst[:k].tolist()):
            G.get_weight(u, v)

    with measure() as m_edges:
        n = sum(1 for _ in G.edges())

    with measure() as m_laplacian:
        G.laplacian_matrix()

    return {
        "out_neighbors": m_out,
        "in_neighbors": m_in,
        "get_weight": m_weight,
        "iterate_edges": m_edges,
        "laplacian": m_laplacian,
        "edges_iterated": n,
    }
