from __future__ import annotations

from typing import List, Sequence

import pandas as pd

from .state_models import Edge, Vertex


def _to_float(s: pd.Series) -> pd.Series:
    if pd.api.types.is_numeric_dtype(s):
        return pd.to_numeric(s, errors="coerce")
    return pd.to_numeric(s.astype(str).str.replace(",", ".", regex=False), errors="coerce")


def _id_str(v) -> str:
    # pandas widens int ids to float when the column has a null: 1.0 -> "1"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v).strip()


def coerce_vertex_table(
    df_nodes: pd.DataFrame,
    id_col: str = "id",
    x_col: str = "x",
    y_col: str = "y",
) -> List[Vertex]:
    """
    Таблица вершин -> список Vertex в порядке строк.
    Строки без id/x/y или с нечисловыми координатами выбрасываются.
    """
    missing = [c for c in (id_col, x_col, y_col) if c not in df_nodes.columns]
    if missing:
        raise ValueError(f"Нет обязательных колонок: {missing}")

    df = df_nodes[[id_col, x_col, y_col]].copy()
    df[x_col] = _to_float(df[x_col])
    df[y_col] = _to_float(df[y_col])
    df = df.dropna(subset=[id_col, x_col, y_col])

    if df.empty:
        raise ValueError("После очистки таблица вершин пустая (проверь id/x/y).")

    return [
        Vertex(id=_id_str(r[0]), x=float(r[1]), y=float(r[2]))
        for r in df.itertuples(index=False, name=None)
    ]


def coerce_edge_table(
    df_edges: pd.DataFrame,
    src_col: str = "source",
    dst_col: str = "target",
) -> List[Edge]:
    if src_col not in df_edges.columns or dst_col not in df_edges.columns:
        raise ValueError(f"Нет обязательных колонок: {[src_col, dst_col]}")

    df = df_edges[[src_col, dst_col]].dropna()
    return [
        Edge(source=_id_str(s), target=_id_str(t))
        for s, t in df.itertuples(index=False, name=None)
    ]


def find_dangling_edges(vertices: Sequence[Vertex], edges: Sequence[Edge]) -> List[Edge]:
    """Edges with at least one endpoint missing from vertices."""
    ids = {v.id for v in vertices}
    return [e for e in edges if e.source not in ids or e.target not in ids]
