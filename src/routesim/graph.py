from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Set, Tuple

import networkx as nx

from .config import INFINITY
from .errors import VertexNotFoundError


class Adjacency(NamedTuple):
    vertex: "Vertex"
    weight: float


@dataclass(eq=False)
class Vertex:
    name: str
    adj: List[Adjacency] = field(default_factory=list)
    # scratch fields, rewritten by every ospf() run
    dist: float = INFINITY
    prev: Optional["Vertex"] = None

    def reset(self):
        self.dist = INFINITY
        self.prev = None

    def __repr__(self):
        return f"Vertex({self.name!r}, out={len(self.adj)}, dist={self.dist})"


class Graph:
    """
    Weighted graph whose vertices and edges can be marked up or down.

    - Vertices are created lazily the first time a name is mentioned.
    - Every adjacency entry is a directed edge; an undirected edge is two
      independent entries that are toggled and deleted separately.
    - State is kept in two down sets keyed by name; anything not in a down
      set is up.
    """

    def __init__(self):
        self._vertices: Dict[str, Vertex] = {}
        self._edges_down: Set[Tuple[str, str]] = set()
        self._vertices_down: Set[str] = set()

    # ------------------------------------------------------------------ #
    # Registry
    # ------------------------------------------------------------------ #
    def get_or_create(self, name: str) -> Vertex:
        v = self._vertices.get(name)
        if v is None:
            v = Vertex(name)
            self._vertices[name] = v
            self._vertices_down.discard(name)
        return v

    def has_vertex(self, name: str) -> bool:
        return name in self._vertices

    def vertex(self, name: str) -> Vertex:
        try:
            return self._vertices[name]
        except KeyError:
            raise VertexNotFoundError(f"Vertex {name!r} not found", name) from None

    def vertices(self) -> List[Vertex]:
        return list(self._vertices.values())

    def names(self) -> List[str]:
        """All vertex names in ascending order."""
        return sorted(self._vertices)

    def __contains__(self, name):
        return name in self._vertices

    def __len__(self):
        return len(self._vertices)

    # ------------------------------------------------------------------ #
    # State tables
    # ------------------------------------------------------------------ #
    # toggles create the vertices they name, like any other reference
    def edge_up(self, src: str, dst: str):
        self.get_or_create(src)
        self.get_or_create(dst)
        self._edges_down.discard((src, dst))

    def edge_down(self, src: str, dst: str):
        self.get_or_create(src)
        self.get_or_create(dst)
        self._edges_down.add((src, dst))

    def vertex_up(self, name: str):
        self.get_or_create(name)
        self._vertices_down.discard(name)

    def vertex_down(self, name: str):
        self.get_or_create(name)
        self._vertices_down.add(name)

    def is_edge_down(self, src: str, dst: str) -> bool:
        return (src, dst) in self._edges_down

    def is_vertex_down(self, name: str) -> bool:
        return name in self._vertices_down

    # ------------------------------------------------------------------ #
    # Edges
    # ------------------------------------------------------------------ #
    def add_undirected_edge(self, u: str, v: str, weight: float):
        a = self.get_or_create(u)
        b = self.get_or_create(v)
        a.adj.append(Adjacency(b, float(weight)))
        self.edge_up(u, v)
        b.adj.append(Adjacency(a, float(weight)))
        self.edge_up(v, u)

    def add_edge(self, tail: str, head: str, weight: float):
        a = self.get_or_create(tail)
        b = self.get_or_create(head)
        self.edge_up(tail, head)
        a.adj.append(Adjacency(b, float(weight)))

    def delete_edge(self, u: str, v: str) -> bool:
        """
        Remove the first u->v adjacency entry. The reverse direction of an
        undirected edge is left alone.

        Callers check that both names exist first; lookups here create
        missing vertices.
        """
        a = self.get_or_create(u)
        b = self.get_or_create(v)
        for i, entry in enumerate(a.adj):
            if entry.vertex is b:
                del a.adj[i]
                return True
        return False

    def edges(self):
        """Yield (source, dest, weight) for every adjacency entry."""
        for v in self._vertices.values():
            for entry in v.adj:
                yield v.name, entry.vertex.name, entry.weight

    # ------------------------------------------------------------------ #
    # Queries (thin wrappers, the engines take the graph explicitly)
    # ------------------------------------------------------------------ #
    def clear_all(self):
        for v in self._vertices.values():
            v.reset()

    def ospf(self, start: str, out=None) -> bool:
        from .pathfinding.dijkstra import ospf  # local import avoids cycles
        return ospf(self, start, out=out)

    def reachability(self) -> Dict[str, List[str]]:
        from .pathfinding.reachability import reachability
        return reachability(self)

    # ------------------------------------------------------------------ #
    # networkx export
    # ------------------------------------------------------------------ #
    def to_networkx(self, up_only: bool = False) -> nx.MultiDiGraph:
        """
        Build a MultiDiGraph copy of the topology.

        Nodes and edges carry a `down` attribute. With up_only=True, down
        vertices and down edges are left out, which gives the subgraph the
        engines traverse.
        """
        G = nx.MultiDiGraph()
        for name in self.names():
            down = self.is_vertex_down(name)
            if up_only and down:
                continue
            G.add_node(name, down=down)

        for u, v, w in self.edges():
            down = self.is_edge_down(u, v)
            if up_only and (down or u not in G or v not in G):
                continue
            G.add_edge(u, v, weight=w, down=down)
        return G
