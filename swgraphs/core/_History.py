import inspect
import json
import time
from datetime import UTC, datetime
from functools import wraps

import numpy as np
import polars as pl


class GraphDiff:
    """Edge-level difference between two snapshots of the same graph.

    Attributes
    --
    vertices_added : int
        Vertices appended between the snapshots (vertices are never removed).
    edges_added : set[tuple[int, int]]
        ``(src, dst)`` pairs stored in b but not in a.
    edges_removed : set[tuple[int, int]]
        Pairs stored in a but not in b.
    reweighted : dict[tuple[int, int], tuple]
        Pairs stored in both with a different weight: ``{pair: (w_a, w_b)}``.

    """

    def __init__(self, snapshot_a, snapshot_b):
        self.snapshot_a = snapshot_a
        self.snapshot_b = snapshot_b
        wa, wb = snapshot_a["weights"], snapshot_b["weights"]
        self.vertices_added = snapshot_b["nv"] - snapshot_a["nv"]
        self.edges_added = wb.keys() - wa.keys()
        self.edges_removed = wa.keys() - wb.keys()
        self.reweighted = {
            pair: (wa[pair], wb[pair]) for pair in wa.keys() & wb.keys() if wa[pair] != wb[pair]
        }

    def summary(self):
        return "\n".join(
            [
                f"Diff: {self.snapshot_a['label']} -> {self.snapshot_b['label']}",
                f"Vertices: {self.vertices_added:+d}",
                f"Edges: {len(self.edges_added)} added, {len(self.edges_removed)} removed, "
                f"{len(self.reweighted)} reweighted",
            ]
        )

    def is_empty(self):
        return not (
            self.vertices_added or self.edges_added or self.edges_removed or self.reweighted
        )

    def __repr__(self):
        return self.summary()

    def to_dict(self):
        return {
            "snapshot_a": self.snapshot_a["label"],
            "snapshot_b": self.snapshot_b["label"],
            "vertices_added": self.vertices_added,
            "edges_added": sorted(self.edges_added),
            "edges_removed": sorted(self.edges_removed),
            "reweighted": [[s, d, a, b] for (s, d), (a, b) in sorted(self.reweighted.items())],
        }


class History:
    """Append-only log of graph mutations.

    Each mutator named in ``_HISTORY_OPS`` is wrapped per instance at
    construction. A call appends one event after it returns; a call that
    raises is not logged. Events are plain dicts::

        {"version", "ts_utc", "mono_ns", "op", <call arguments>, "result", "nv", "ne"}

    where ``nv``/``ne`` are the vertex and edge counts after the call.
    """

    _HISTORY_OPS = ("add_edge", "remove_edge", "add_vertex", "add_vertices")

    def _init_history(self, enabled: bool = True):
        self._history_enabled = bool(enabled)
        self._history = []
        self._version = 0
        self._history_clock0 = time.perf_counter_ns()
        self._snapshots = {}
        for name in self._HISTORY_OPS:
            fn = getattr(self, name, None)
            if fn is not None and getattr(fn, "__wrapped__", None) is None:
                setattr(self, name, self._logged(name, fn))

    @staticmethod
    def _utcnow_iso() -> str:
        return datetime.now(UTC).isoformat(timespec="microseconds").replace("+00:00", "Z")

    @classmethod
    def _jsonify(cls, x):
        if x is None or isinstance(x, (bool, int, float, str)):
            return x
        if isinstance(x, np.generic):
            return x.item()
        if isinstance(x, (list, tuple)):
            # edges arrive as WeightedEdge or plain tuples
            return [cls._jsonify(v) for v in x]
        if isinstance(x, dict):
            return {str(k): cls._jsonify(v) for k, v in x.items()}
        return f"<<{type(x).__name__}>>"

    def _log_event(self, op: str, **fields):
        if not self._history_enabled:
            return
        self._version += 1
        evt = {
            "version": self._version,
            "ts_utc": self._utcnow_iso(),
            "mono_ns": time.perf_counter_ns() - self._history_clock0,
            "op": op,
        }
        evt.update((k, self._jsonify(v)) for k, v in fields.items())
        self._history.append(evt)

    def _logged(self, op, fn):
        sig = inspect.signature(fn)

        @wraps(fn)
        def wrapper(*args, **kwargs):
            result = fn(*args, **kwargs)
            if self._history_enabled:
                bound = sig.bind(*args, **kwargs)
                bound.apply_defaults()
                self._log_event(
                    op, **bound.arguments, result=result, nv=self.nv(), ne=self.ne()
                )
            return result

        return wrapper

    def history(self, as_df: bool = False):
        """Return the mutation history.

        Parameters
        --
        as_df : bool, default False
            If True, return a Polars DataFrame; otherwise a list of event dicts.

        Notes
        -
        In the DataFrame, list-valued arguments (an edge passed as a tuple)
        are stored as JSON text so every column has one type.

        """
        if as_df:
            return self._history_frame()
        return list(self._history)

    def _history_frame(self) -> pl.DataFrame:
        rows = [
            {k: (json.dumps(v) if isinstance(v, (list, dict)) else v) for k, v in evt.items()}
            for evt in self._history
        ]
        return pl.DataFrame(rows, strict=False, infer_schema_length=None)

    def export_history(self, path) -> int:
        """Write the history to ``path``; returns the number of events written.

        The extension picks the format: ``.parquet``, ``.csv``, ``.ndjson`` /
        ``.jsonl`` or ``.json``. Any other extension gets ``.parquet`` appended.
        Nothing is written when the history is empty.
        """
        if not self._history:
            return 0
        path = str(path)
        df = self._history_frame()
        ext = path.lower().rsplit(".", 1)[-1] if "." in path else ""
        if ext in ("ndjson", "jsonl"):
            df.write_ndjson(path)
        elif ext == "json":
            df.write_json(path)
        elif ext == "csv":
            df.write_csv(path)
        else:
            if ext != "parquet":
                path += ".parquet"
            df.write_parquet(path)
        return df.height

    def enable_history(self, flag: bool = True):
        self._history_enabled = bool(flag)

    def clear_history(self):
        """Drop logged events. Versions keep counting and snapshots are kept."""
        self._history.clear()

    def mark(self, label: str):
        """Append a manual ``op='mark'`` event."""
        self._log_event("mark", label=label)

    # Snapshots

    def snapshot(self, label: str | None = None):
        """Record the current edge set under ``label`` and return the snapshot.

        Snapshots copy every ``(src, dst) -> weight`` pair, so each costs O(ne).
        """
        if label is None:
            label = f"v{self._version}"
        snap = {
            "label": label,
            "version": self._version,
            "ts_utc": self._utcnow_iso(),
            "nv": self.nv(),
            "weights": {(e.src, e.dst): e.weight for e in self._iter_edges()},
        }
        self._snapshots[label] = snap
        return snap

    def list_snapshots(self):
        return [
            {"label": s["label"], "version": s["version"], "nv": s["nv"], "ne": len(s["weights"])}
            for s in self._snapshots.values()
        ]

    def diff(self, a, b=None) -> GraphDiff:
        """Difference from snapshot ``a`` to snapshot ``b`` (the current state if None)."""
        snap_a = self._resolve_snapshot(a)
        snap_b = self.snapshot("__current__") if b is None else self._resolve_snapshot(b)
        if b is None:
            del self._snapshots["__current__"]
        return GraphDiff(snap_a, snap_b)

    def _resolve_snapshot(self, ref):
        if isinstance(ref, dict):
            return ref
        if ref not in self._snapshots:
            raise KeyError(f"snapshot {ref!r} not found")
        return self._snapshots[ref]
