"""
routesim
========

Weighted network whose links and routers can be failed and restored, with
OSPF-style shortest paths and reachability over the part that is still up.

Public API:

- Graph              : vertex registry, up/down state and adjacency lists.
- ospf / shortest_path
- reachability / reachable_from
- print_graph / print_path / print_reachable : the text reports.
- build_network      : load a Graph from a seed file.
"""

from .errors import GraphError, VertexNotFoundError
from .graph import Adjacency, Graph, Vertex
from .network_builder import build_network, load_edges
from .pathfinding import ospf, reachability, reachable_from, shortest_path
from .report import print_graph, print_path, print_reachable

__version__ = "0.1.0"

__all__ = [
    "Adjacency",
    "Graph",
    "Vertex",
    "GraphError",
    "VertexNotFoundError",
    "build_network",
    "load_edges",
    "ospf",
    "shortest_path",
    "reachability",
    "reachable_from",
    "print_graph",
    "print_path",
    "print_reachable",
    "__version__",
]
