"""SWG: plain-text weighted graph format.

A file holds one or more graphs. Each graph is a header line

    nv,ne,d|u,name,index_dtype,weight_dtype,simpleweightedgraph

followed by exactly ``ne`` edge lines ``src,dst,weight``. Lines starting with
``#`` and blank lines are ignored anywhere. Undirected graphs list each
edge once (``src <= dst``). Floats are written with ``repr`` so they read back
bit-for-bit.

Public entry points:
- save_swg(graph | {name: graph}, path, name="graph") -> int
- load_swg(path, name=None) -> graph
- load_swg_all(path) -> dict[str, graph]
"""

from __future__ import annotations

from pathlib import Path

import numpy as np

from ._utils import _dtype_name, _edge_arrays, _graph_class, _parse_weight

GRAPH_TYPE = "simpleweightedgraph"
_DIR_FLAGS = {"d": True, "u": False}


def _format_weight(w) -> str:
    if isinstance(w, np.generic):
        w = w.item()
    return repr(w)


def _write_graph(f, graph, name: str):
    if not name or name != name.strip() or name.startswith("#") or any(c in name for c in ",\r\n"):
        raise ValueError(
            f"invalid graph name {name!r}: must be non-empty, without commas, line breaks, "
            "surrounding whitespace or a leading #"
        )
    flag = "d" if graph.is_directed() else "u"
    src, dst, w = _edge_arrays(graph)
    f.write(
        f"{graph.nv()},{len(src)},{flag},{name},{_dtype_name(graph.eltype)},"
        f"{_dtype_name(graph.weighttype)},{GRAPH_TYPE}\n"
    )
    for s, d, x in zip(src.tolist(), dst.tolist(), w.tolist()):
        f.write(f"{s},{d},{_format_weight(x)}\n")


def save_swg(graph, path, *, name: str = "graph") -> int:
    """Write one graph, or a ``{name: graph}`` mapping, to ``path``.

    Returns
    ---
    int
        Number of graphs written.

    """
    graphs = graph if isinstance(graph, dict) else {name: graph}
    with open(Path(path), "w", encoding="utf-8") as f:
        for gname, g in graphs.items():
            _write_graph(f, g, str(gname))
    return len(graphs)


def _split(line: str) -> list[str]:
    return [t.strip() for t in line.split(",")]


def _read_graphs(lines):
    it = iter(enumerate(lines, start=1))
    for lineno, raw in it:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        toks = _split(line)
        if len(toks) != 7:
            raise ValueError(f"line {lineno}: malformed SWG header {line!r}")
        nv_s, ne_s, flag, gname, index_dtype, weight_dtype, gtype = toks
        if gtype != GRAPH_TYPE:
            raise ValueError(f"line {lineno}: unsupported graph type {gtype!r}")
        if flag not in _DIR_FLAGS:
            raise ValueError(f"line {lineno}: directedness must be 'd' or 'u', got {flag!r}")
        nv, ne = int(nv_s), int(ne_s)
        index_dtype = np.dtype(index_dtype)
        weight_dtype = np.dtype(weight_dtype)

        src, dst, w = [], [], []
        while len(src) < ne:
            try:
                lineno, raw = next(it)
            except StopIteration:
                raise ValueError(
                    f"graph {gname!r}: expected {ne} edges, file ended after {len(src)}"
                ) from None
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            toks = _split(line)
            if len(toks) != 3:
                raise ValueError(f"line {lineno}: malformed edge line {line!r}")
            src.append(int(toks[0]))
            dst.append(int(toks[1]))
            w.append(_parse_weight(toks[2], weight_dtype))

        cls = _graph_class(_DIR_FLAGS[flag])
        g = cls.from_edges(
            np.asarray(src, dtype=np.int64),
            np.asarray(dst, dtype=np.int64),
            np.asarray(w, dtype=weight_dtype),
            n=nv,
            combine="last",
            dtype=weight_dtype,
            index_dtype=index_dtype,
        )
        if g.ne() != ne:
            raise ValueError(f"graph {gname!r}: header declares {ne} edges, read {g.ne()}")
        yield gname, g


def load_swg_all(path) -> dict:
    """Read every graph in ``path`` as ``{name: graph}`` (file order)."""
    with open(Path(path), encoding="utf-8") as f:
        return dict(_read_graphs(f))


def load_swg(path, name: str | None = None):
    """Read the graph called ``name`` from ``path`` (the first one if ``name`` is None)."""
    with open(Path(path), encoding="utf-8") as f:
        for gname, g in _read_graphs(f):
            if name is None or gname == name:
                return g
    if name is None:
        raise ValueError(f"no graph found in {path}")
    raise KeyError(f"graph {name!r} not found in {path}")
