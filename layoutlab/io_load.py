from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
from pandas.errors import ParserError

from .preprocess import coerce_edge_table, coerce_vertex_table
from .state_models import Graph, build_graph


def load_table(path: Path) -> pd.DataFrame:
    """Load a CSV/Excel file into a DataFrame."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in (".xlsx", ".xls"):
        df = pd.read_excel(path)
    else:
        try:
            df = pd.read_csv(path, sep=None, engine="python", encoding_errors="replace")
        except (UnicodeDecodeError, ParserError):
            df = pd.read_csv(path, sep=None, engine="python", encoding="cp1251")

    df.columns = [str(c).strip() for c in df.columns]
    return df


def load_graph_json(path: Path) -> Graph:
    """
    {"nodes": [{"id", "x", "y"}, ...], "edges": [{"source", "target"}, ...]}
    Тот же формат, что пишет export_layout_json.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict) or "nodes" not in data:
        raise ValueError(f"{path}: expected an object with 'nodes' and 'edges'")

    df_nodes = pd.DataFrame(data.get("nodes") or [], columns=["id", "x", "y"])
    df_edges = pd.DataFrame(data.get("edges") or [], columns=["source", "target"])
    return build_graph(
        vertices=coerce_vertex_table(df_nodes),
        edges=coerce_edge_table(df_edges),
    )


def load_graph_tables(
    nodes_path: Path,
    edges_path: Path | None = None,
    *,
    id_col: str = "id",
    x_col: str = "x",
    y_col: str = "y",
    src_col: str = "source",
    dst_col: str = "target",
) -> Graph:
    vertices = coerce_vertex_table(load_table(nodes_path), id_col, x_col, y_col)
    edges = coerce_edge_table(load_table(edges_path), src_col, dst_col) if edges_path else []
    return build_graph(vertices=vertices, edges=edges)


def load_graph(path: Path, edges_path: Path | None = None, **columns) -> Graph:
    """Dispatch on suffix: .json -> load_graph_json, anything else -> tables."""
    path = Path(path)
    if path.suffix.lower() == ".json":
        return load_graph_json(path)
    return load_graph_tables(path, edges_path, **columns)
