from __future__ import annotations

import json
from pathlib import Path

from .dataframe_io import from_edge_records, to_edge_records

FORMAT = "swgraphs-edges"


def to_json(graph, path, *, indent: int | None = None):
    """Write ``{"format", "directed", "n", "weight_dtype", "edges": [[s, d, w], ...]}``.

    Python's ``json`` writes floats with ``repr``, so weights round-trip exactly.
    """
    doc = {"format": FORMAT, **to_edge_records(graph)}
    with open(Path(path), "w", encoding="utf-8") as f:
        json.dump(doc, f, indent=indent)


def from_json(path):
    """Read a graph written by ``to_json``."""
    with open(Path(path), encoding="utf-8") as f:
        doc = json.load(f)
    if doc.get("format") != FORMAT:
        raise ValueError(f"not a {FORMAT} document: format={doc.get('format')!r}")
    doc["edges"] = [(int(s), int(d), w) for s, d, w in doc["edges"]]
    return from_edge_records(doc)
