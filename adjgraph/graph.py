"""Generic graph structure backed by adjacency lists."""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Generic, List, Optional, TextIO, TypeVar


T = TypeVar("T")


class GraphError(Exception):
    """Base class for graph errors."""


class UnknownVertexError(GraphError):

    """Raised by strict graphs when given a vertex they do not track."""

    def __init__(self, vertex: Vertex):
        super().__init__(f"unknown vertex: {vertex}")
        self.vertex = vertex


class EdgeType(Enum):
    DIRECTED = "directed"
    UNDIRECTED = "undirected"


@dataclass(frozen=True)
class Vertex(Generic[T]):

    """A vertex in a graph.

    Vertices are identified by their index alone: two vertices with the same
    index are equal regardless of their data.
    """

    index: int
    data: T = field(compare=False)

    def __str__(self) -> str:
        return f"{self.index}: {self.data}"


@dataclass(frozen=True)
class Edge(Generic[T]):

    """A directed edge. A weight of None means the edge is unweighted."""

    source: Vertex[T]
    destination: Vertex[T]
    weight: Optional[float] = None


class Graph(ABC, Generic[T]):

    """Abstract graph.

    Subclasses provide storage by implementing the abstract methods. Undirected
    edges and dispatch by EdgeType are implemented here purely in terms of
    add_directed_edge.
    """

    @abstractmethod
    def create_vertex(self, data: T) -> Vertex[T]:
        """Create a new vertex holding data."""

    @abstractmethod
    def add_directed_edge(
        self, source: Vertex[T], destination: Vertex[T], weight: Optional[float] = None
    ):
        """Add an edge from source to destination."""

    @abstractmethod
    def edges(self, source: Vertex[T]) -> List[Edge[T]]:
        """Return the outgoing edges of source in insertion order."""

    @abstractmethod
    def weight(self, source: Vertex[T], destination: Vertex[T]) -> Optional[float]:
        """Return the weight of the first edge from source to destination."""

    def add_undirected_edge(
        self, source: Vertex[T], destination: Vertex[T], weight: Optional[float] = None
    ):
        """Add a pair of directed edges between source and destination."""
        self.add_directed_edge(source, destination, weight)
        self.add_directed_edge(destination, source, weight)

    def add(
        self,
        kind: EdgeType,
        source: Vertex[T],
        destination: Vertex[T],
        weight: Optional[float] = None,
    ):
        if kind is EdgeType.DIRECTED:
            self.add_directed_edge(source, destination, weight)
        elif kind is EdgeType.UNDIRECTED:
            self.add_undirected_edge(source, destination, weight)
        else:
            raise ValueError(f"invalid edge type: {kind!r}")


class AdjacencyList(Graph[T]):

    """A graph where each vertex stores the list of its outgoing edges.

    A vertex is tracked only if this graph created it. A vertex from another
    graph with the same index is not tracked, unless it also holds equal data.

    By default, referring to an untracked vertex is permitted: adding an edge
    to or from it does nothing, and querying it behaves as if it had no edges.
    If strict is true, these raise UnknownVertexError instead.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self.adjacencies: Dict[Vertex[T], List[Edge[T]]] = {}
        self.order: List[Vertex[T]] = []

    def __repr__(self):
        return f"AdjacencyList(N={len(self.adjacencies)})"

    def __str__(self):
        return "".join(self._lines())

    def __len__(self) -> int:
        return len(self.adjacencies)

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, Vertex) and self._tracks(vertex)

    @property
    def vertices(self) -> List[Vertex[T]]:
        return list(self.order)

    def dump(self, out: TextIO = sys.stdout):
        """Dump a textual representation of this graph to out."""
        for line in self._lines():
            out.write(line)

    def _lines(self):
        for vertex, edges in self.adjacencies.items():
            destinations = ", ".join(str(edge.destination) for edge in edges)
            yield f"{vertex} ---> [{destinations}]\n"

    def _tracks(self, vertex: Vertex[T]) -> bool:
        if not 0 <= vertex.index < len(self.order):
            return False
        stored = self.order[vertex.index]
        return stored is vertex or stored.data == vertex.data

    def _check(self, vertex: Vertex[T]) -> bool:
        if self._tracks(vertex):
            return True
        if self.strict:
            raise UnknownVertexError(vertex)
        return False

    def create_vertex(self, data: T) -> Vertex[T]:
        vertex = Vertex(len(self.order), data)
        self.adjacencies[vertex] = []
        self.order.append(vertex)
        logging.debug("created vertex %s", vertex)
        return vertex

    def add_directed_edge(
        self, source: Vertex[T], destination: Vertex[T], weight: Optional[float] = None
    ):
        if not (self._check(destination) and self._check(source)):
            logging.debug("ignoring edge %s -> %s", source, destination)
            return
        self.adjacencies[source].append(Edge(source, destination, weight))

    def edges(self, source: Vertex[T]) -> List[Edge[T]]:
        if not self._check(source):
            return []
        return list(self.adjacencies[source])

    def weight(self, source: Vertex[T], destination: Vertex[T]) -> Optional[float]:
        if not self._check(destination):
            return None
        for edge in self.edges(source):
            if edge.destination == destination:
                return edge.weight
        return None
