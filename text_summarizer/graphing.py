from __future__ import annotations
from itertools import combinations
from typing import List, Optional
import networkx as nx
from .datatypes import Document, Graph, Edge

def build_graph(doc: Document, simM: List[List[float]], threshold: float = 0.1) -> Graph:
    """Sentences as nodes, one undirected edge per pair with similarity >= threshold."""
    edges = [
        Edge(i=i, j=j, weight=simM[i][j])
        for i, j in combinations(range(len(doc.sentences)), 2)
        if simM[i][j] >= threshold
    ]
    return Graph(nodes=doc.sentences, edges=edges)

def graph_density(graph: Graph) -> float:
    n = len(graph.nodes)
    max_possible_edges = n * (n - 1) // 2
    return len(graph.edges) / max_possible_edges if max_possible_edges > 0 else 0.0

def to_networkx(graph: Graph, scores: Optional[List[float]] = None) -> nx.Graph:
    # node attributes: label S1.., text preview, centrality score when given
    G = nx.Graph()
    for s in graph.nodes:
        preview = s.text[:30] + "..." if len(s.text) > 30 else s.text
        G.add_node(s.idx, label=f"S{s.idx+1}", preview=preview,
                   score=scores[s.idx] if scores is not None else 0.0)
    for e in graph.edges:
        G.add_edge(e.i, e.j, weight=e.weight)
    return G
