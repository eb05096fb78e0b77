import networkx as nx

from .preprocess import find_dangling_edges
from .state_models import Graph, build_graph

"""
Graph <-> networkx
+ сводка по графу для CLI (висячие рёбра тут же)
"""


def to_networkx(graph: Graph) -> nx.Graph:
    G = nx.Graph()
    for v in graph.vertices:
        G.add_node(v.id, x=float(v.x), y=float(v.y))
    ids = set(G.nodes)
    for e in graph.edges:
        if e.source in ids and e.target in ids:
            G.add_edge(e.source, e.target)
    return G


def from_networkx(G: nx.Graph, pos: dict | None = None) -> Graph:
    """Build a Graph from networkx; positions from pos or node attrs x/y (default 0.5)."""
    vertices = []
    for n, d in G.nodes(data=True):
        if pos is not None and n in pos:
            x, y = pos[n][0], pos[n][1]
        else:
            x, y = d.get("x", 0.5), d.get("y", 0.5)
        vertices.append((str(n), float(x), float(y)))
    edges = [(str(u), str(v)) for u, v in G.edges()]
    return build_graph(vertices=vertices, edges=edges)


def graph_summary(graph: Graph) -> str:
    G = to_networkx(graph)
    N = G.number_of_nodes()
    E = G.number_of_edges()
    C = nx.number_connected_components(G) if N > 0 else 0
    dens = nx.density(G) if N > 1 else 0.0
    return (
        f"N={N}\n"
        f"E={E}\n"
        f"Components={C}\n"
        f"Density={dens:.6g}\n"
        f"Selfloops={nx.number_of_selfloops(G)}\n"
        f"Dangling={len(find_dangling_edges(graph.vertices, graph.edges))}\n"
    )
