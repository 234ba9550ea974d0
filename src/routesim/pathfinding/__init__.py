from .dijkstra import ospf, shortest_path
from .reachability import reachability, reachable_from

__all__ = [
    "ospf",
    "shortest_path",
    "reachability",
    "reachable_from",
]
