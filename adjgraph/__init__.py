"""Adjacency list graphs with weighted, directed and undirected edges."""

from adjgraph.graph import (
    AdjacencyList,
    Edge,
    EdgeType,
    Graph,
    GraphError,
    UnknownVertexError,
    Vertex,
)

__all__ = [
    "AdjacencyList",
    "Edge",
    "EdgeType",
    "Graph",
    "GraphError",
    "UnknownVertexError",
    "Vertex",
]
