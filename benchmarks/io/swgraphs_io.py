import tempfile

import numpy as np

from benchmarks.harness.metrics import measure
from swgraphs.core.graph import WeightedGraph
from swgraphs.io.Parquet_io import from_parquet, to_parquet
from swgraphs.io.swg_io import load_swg, save_swg


def run(scale):
    rng = np.random.default_rng(13)
    src = np.arange(scale.edges) % scale.vertices + 1
    dst = (np.arange(scale.edges) * 13) % scale.vertices + 1
    G = WeightedGraph.from_edges(src, dst, rng.random(scale.edges) + 0.1, history=False)

    with tempfile.TemporaryDirectory() as tmp:
        with measure() as m_write_swg:
            save_swg(G, f"{tmp}/graph.swg")

        with measure() as m_read_swg:
            _ = load_swg(f"{tmp}/graph.swg")

        with measure() as m_write_parquet:
            to_parquet(G, f"{tmp}/graph_dir")

        with measure() as m_read_parquet:
            _ = from_parquet(f"{tmp}/graph_dir")

    return {
        "write_swg": m_write_swg,
        "read_swg": m_read_swg,
        "write_parquet": m_write_parquet,
        "read_parquet": m_read_parquet,
    }
