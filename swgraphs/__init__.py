# swgraphs/__init__.py
"""swgraphs: weighted graphs on a column-compressed sparse weight matrix."""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    # namespaces
    "adapters": "swgraphs.adapters",
    "io": "swgraphs.io",
    "core": "swgraphs.core",
    "algorithms": "swgraphs.algorithms",
    # adapter modules (direct convenience)
    "networkx": "swgraphs.adapters.networkx_adapter",
    # io modules
    "swgio": "swgraphs.io.swg_io",
    "jsonio": "swgraphs.io.json_io",
    "dataframe": "swgraphs.io.dataframe_io",
    "parquet": "swgraphs.io.Parquet_io",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "WeightedGraph": ("swgraphs.core.graph", "WeightedGraph"),
    "WeightedDiGraph": ("swgraphs.core.graph", "WeightedDiGraph"),
    "WGraph": ("swgraphs.core.graph", "WGraph"),
    "WDiGraph": ("swgraphs.core.graph", "WDiGraph"),
    "AbstractWeightedGraph": ("swgraphs.core.graph", "AbstractWeightedGraph"),
    "WeightedEdge": ("swgraphs.core._Edge", "WeightedEdge"),
    "GraphDiff": ("swgraphs.core._History", "GraphDiff"),
    "WeightMatrix": ("swgraphs.core._WeightMatrix", "WeightMatrix"),
    "EdgeType": ("swgraphs.core._helpers", "EdgeType"),
    "VertexIndexError": ("swgraphs.core._helpers", "VertexIndexError"),
    "ConstructionError": ("swgraphs.core._helpers", "ConstructionError"),
    "locate": ("swgraphs.core._Locator", "locate"),
    "symmetrize": ("swgraphs.core._Conversion", "symmetrize"),
    "to_directed": ("swgraphs.core._Conversion", "to_directed"),
    "to_undirected": ("swgraphs.core._Conversion", "to_undirected"),
    # SWG text format
    "save_swg": ("swgraphs.io.swg_io", "save_swg"),
    "load_swg": ("swgraphs.io.swg_io", "load_swg"),
    "load_swg_all": ("swgraphs.io.swg_io", "load_swg_all"),
    # Stdlib JSON I/O
    "to_json": ("swgraphs.io.json_io", "to_json"),
    "from_json": ("swgraphs.io.json_io", "from_json"),
    # DataFrames / Parquet
    "to_dataframe": ("swgraphs.io.dataframe_io", "to_dataframe"),
    "from_dataframe": ("swgraphs.io.dataframe_io", "from_dataframe"),
    "to_edge_records": ("swgraphs.io.dataframe_io", "to_edge_records"),
    "from_edge_records": ("swgraphs.io.dataframe_io", "from_edge_records"),
    "to_parquet": ("swgraphs.io.Parquet_io", "to_parquet"),
    "from_parquet": ("swgraphs.io.Parquet_io", "from_parquet"),
    # NetworkX adapter (optional dependency)
    "to_nx": ("swgraphs.adapters.networkx_adapter", "to_nx"),
    "from_nx": ("swgraphs.adapters.networkx_adapter", "from_nx"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("swgraphs")
except PackageNotFoundError:
    __version__ = "0.0.0"
