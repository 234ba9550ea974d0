"""
Text reports for the graph: the listing printed by `print`, the route printed
by `path` and the table printed by `reachable`.

Each report has a format_* function returning the lines and a print_* function
writing them to a stream (stdout by default).
"""

import math
import sys

from .config import DOWN_SUFFIX
from .errors import VertexNotFoundError


def truncate_distance(dist):
    # two decimals, truncated rather than rounded
    scaled = dist * 100
    if math.isinf(scaled) or math.isnan(scaled):
        return dist
    return int(scaled) / 100.0


def _emit(lines, out):
    out = out if out is not None else sys.stdout
    for line in lines:
        print(line, file=out)


def format_graph(graph):
    lines = []
    for name in graph.names():
        v = graph.vertex(name)
        lines.append(name + (DOWN_SUFFIX if graph.is_vertex_down(name) else ""))

        # sorted() is stable, duplicate neighbors keep insertion order
        for entry in sorted(v.adj, key=lambda e: e.vertex.name):
            line = f"\t{entry.vertex.name} {entry.weight}"
            if graph.is_edge_down(name, entry.vertex.name):
                line += DOWN_SUFFIX
            lines.append(line)
    return lines


def print_graph(graph, out=None):
    _emit(format_graph(graph), out)


def path_names(vertex):
    """Follow prev links back to the source; returns source-to-vertex order."""
    names = []
    while vertex is not None:
        names.append(vertex.name)
        vertex = vertex.prev
    names.reverse()
    return names


def format_path(graph, dest_name):
    """Route line for dest_name, valid after ospf() has run."""
    if not graph.has_vertex(dest_name):
        raise VertexNotFoundError("Destination vertex not found", dest_name)

    dest = graph.vertex(dest_name)
    if math.isinf(dest.dist):
        return f"{dest_name} is unreachable"
    return " ".join(path_names(dest)) + f" {truncate_distance(dest.dist)}"


def print_path(graph, dest_name, out=None):
    _emit([format_path(graph, dest_name)], out)


def format_reachable(graph, table):
    """
    Lines for a reachability table as returned by reachability().
    Down sources are left out entirely, header included.
    """
    lines = []
    for name in sorted(table):
        if graph.is_vertex_down(name):
            continue
        lines.append(name)
        for dest in sorted(set(table[name])):
            lines.append(f"\t{dest}")
    return lines


def print_reachable(graph, out=None):
    from .pathfinding.reachability import reachability

    _emit(format_reachable(graph, reachability(graph)), out)
