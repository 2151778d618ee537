"""Generic directed graph structure."""

from __future__ import annotations

from copy import copy
from typing import (
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterator,
    List,
    Optional,
    TextIO,
    Tuple,
    TypeVar,
)


class Unit:

    """Type of the empty payload.

    There is only one instance, UNIT. It is used instead of None so that None
    can mean "absent" in lookups.
    """

    _instance: Optional[Unit] = None

    def __new__(cls) -> Unit:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "()"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> Unit:
        return self

    def __deepcopy__(self, memo) -> Unit:
        return self


UNIT = Unit()

VId = TypeVar("VId", bound=Hashable)
E = TypeVar("E")
V = TypeVar("V", bound=Hashable)
R = TypeVar("R")


class Graph(Generic[VId, E, V]):

    """A directed graph stored as adjacency lists.

    Vertices are identified by ids of type VId and carry a payload of type V.
    Edges carry a payload of type E. Both payloads default to UNIT.

    Edges are kept per source in insertion order. Parallel edges and self-loops
    are allowed, and edges may point at (or come from) ids that were never
    pushed as vertices.
    """

    def __init__(self):
        self.vertices: Dict[VId, V] = {}
        self.adjacency: Dict[VId, List[Tuple[VId, E]]] = {}

    def __repr__(self) -> str:
        return f"Graph(V={len(self.vertices)}, E={self.edge_count()})"

    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, vid: object) -> bool:
        return vid in self.vertices

    def dump(self, out: Optional[TextIO] = None):
        """Dump a textual representation of this graph to out (default stdout)."""
        vids = list(self.vertices)
        vids.extend(vid for vid in self.adjacency if vid not in self.vertices)
        for vid in vids:
            payload = ""
            if vid in self.vertices and self.vertices[vid] is not UNIT:
                payload = f" = {self.vertices[vid]!r}"
            print(f"{vid!r}{payload}", file=out)
            for dst, edge in self.adjacency.get(vid, ()):
                print(f"    -> {dst!r}: {edge!r}", file=out)

    def vertex_count(self) -> int:
        return len(self.vertices)

    def edge_count(self) -> int:
        """Return the number of directed edges, counting parallel edges."""
        return sum(len(edges) for edges in self.adjacency.values())

    def push_vertex(self, vid: VId, vertex: V):
        """Insert a vertex, replacing the payload if vid already exists."""
        self.vertices[vid] = vertex

    def push_vid(self, vid: VId):
        """Insert a vertex with the empty payload."""
        self.vertices[vid] = UNIT  # type: ignore

    def push_edge(self, src: VId, dst: VId, edge: E = UNIT):  # type: ignore
        """Append an edge from src to dst.

        Neither endpoint has to exist as a vertex. Edges are never deduplicated.
        """
        self.adjacency.setdefault(src, []).append((dst, edge))

    def push_undirected_edge(self, src: VId, dst: VId, edge: E = UNIT):  # type: ignore
        """Push an edge in both directions.

        The reverse edge gets a copy of the payload. For a self-loop this adds
        two entries to the same list.
        """
        self.push_edge(src, dst, edge)
        self.push_edge(dst, src, copy(edge))

    def get_vertex(self, vid: VId) -> Optional[V]:
        """Return the vertex payload, or None if vid is not a vertex."""
        return self.vertices.get(vid)

    def get_edge(self, src: VId, dst: VId) -> Optional[E]:
        """Return the payload of the first edge from src to dst.

        Edges are scanned in insertion order, so only the earliest of several
        parallel edges is found. Returns None if there is no such edge.
        """
        for to, edge in self.adjacency.get(src, ()):
            if to == dst:
                return edge
        return None

    def incident_edges(self, vid: VId) -> Optional[Tuple[Tuple[VId, E], ...]]:
        """Return the outgoing edges of vid in insertion order.

        Returns None (not an empty tuple) if no edge was ever pushed from vid.
        """
        edges = self.adjacency.get(vid)
        if edges is None:
            return None
        return tuple(edges)

    def map_adjacent(self, vid: VId, f: Callable[[Tuple[VId, E]], R]) -> List[R]:
        """Apply f to each outgoing (dst, edge) pair of vid.

        Returns an empty list if vid has no outgoing edges.
        """
        return [f(pair) for pair in self.adjacency.get(vid, ())]

    def iter_vertices(self) -> Iterator[Tuple[VId, V]]:
        """Iterate over (vid, payload) pairs."""
        yield from self.vertices.items()

    def iter_edges(self) -> Iterator[Tuple[VId, Tuple[Tuple[VId, E], ...]]]:
        """Iterate over each source vid with its outgoing edges."""
        for src, edges in self.adjacency.items():
            yield src, tuple(edges)

    def iter_complete_edges(self) -> Iterator[Tuple[VId, VId, E]]:
        """Iterate over all edges as (src, dst, edge) triples."""
        for src, edges in self.iter_edges():
            for dst, edge in edges:
                yield src, dst, edge
