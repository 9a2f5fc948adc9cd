from __future__ import annotations
from typing import List
import networkx as nx
from .datatypes import Document, Graph, Edge, SimilarityMatrix

def build_graph(doc: Document, simM: SimilarityMatrix) -> Graph:
    # thresholding already happened in build_similarity; keep non-zero cells
    nodes = doc.sentences
    edges: List[Edge] = []
    n = len(nodes)
    for i in range(n):
        for j in range(i+1, n):
            w = simM[i][j]
            if w > 0.0:
                edges.append(Edge(i=i, j=j, weight=w))
    return Graph(nodes=nodes, edges=edges)

def out_weights(simM: SimilarityMatrix) -> List[float]:
    # per row, not assumed equal to the column sums
    return [sum(w for w in row if w > 0.0) for row in simM]

def to_networkx(graph: Graph) -> nx.Graph:
    G = nx.Graph()
    for s in graph.nodes:
        G.add_node(s.idx, text=s.text)
    for e in graph.edges:
        G.add_edge(e.i, e.j, weight=e.weight)
    return G
