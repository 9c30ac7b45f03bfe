"""swgraphs.io: consolidated I/O API with lazy symbol loading."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_lazy_symbols: dict[str, tuple[str, str]] = {
    # SWG text format
    "save_swg": ("swgraphs.io.swg_io", "save_swg"),
    "load_swg": ("swgraphs.io.swg_io", "load_swg"),
    "load_swg_all": ("swgraphs.io.swg_io", "load_swg_all"),
    # JSON
    "to_json": ("swgraphs.io.json_io", "to_json"),
    "from_json": ("swgraphs.io.json_io", "from_json"),
    # DataFrame / edge records
    "to_dataframe": ("swgraphs.io.dataframe_io", "to_dataframe"),
    "from_dataframe": ("swgraphs.io.dataframe_io", "from_dataframe"),
    "to_edge_records": ("swgraphs.io.dataframe_io", "to_edge_records"),
    "from_edge_records": ("swgraphs.io.dataframe_io", "from_edge_records"),
    # Parquet
    "to_parquet": ("swgraphs.io.Parquet_io", "to_parquet"),
    "from_parquet": ("swgraphs.io.Parquet_io", "from_parquet"),
}

__all__ = sorted(_lazy_symbols)


def __getattr__(name: str) -> Any:
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))
