import heapq
import io
import itertools
import math
import sys
from logging import getLogger

from ..errors import VertexNotFoundError
from ..report import path_names

logger = getLogger(__name__)

START_DOWN_MESSAGE = "Starting location is down"


def ospf(graph, start_name, out=None):
    """
    Single-source shortest paths over the up part of the graph.

    Results are left in each vertex's dist / prev fields. Returns False
    (after printing a notice) when the start vertex is down, in which case
    every vertex stays at the infinite distance.
    """
    graph.clear_all()

    if graph.is_vertex_down(start_name):
        print(START_DOWN_MESSAGE, file=out if out is not None else sys.stdout)
        return False

    if not graph.has_vertex(start_name):
        raise VertexNotFoundError("Start vertex not found", start_name)

    start = graph.vertex(start_name)
    start.dist = 0.0

    # (distance, insertion sequence, name): equal distances pop in insertion order
    counter = itertools.count()
    pq = [(0.0, next(counter), start_name)]
    done = set()

    while pq:
        _, _, name = heapq.heappop(pq)

        # skip outdated elements
        if name in done:
            continue
        done.add(name)
        v = graph.vertex(name)

        for neighbor, weight in v.adj:
            if graph.is_vertex_down(neighbor.name) or graph.is_edge_down(name, neighbor.name):
                continue

            new_dist = v.dist + weight
            if new_dist < neighbor.dist:  # dv > du + w
                neighbor.dist = new_dist
                neighbor.prev = v
                heapq.heappush(pq, (new_dist, next(counter), neighbor.name))

    logger.debug("ospf from %s settled %d of %d vertices", start_name, len(done), len(graph))
    return True


def shortest_path(graph, src, dst):
    """
    Run ospf() from src and return (path, cost) for dst.

    path is the list of names from src to dst; an unreachable dst (or a down
    src) gives ([], inf).
    """
    if not graph.has_vertex(dst):
        raise VertexNotFoundError("Destination vertex not found", dst)

    if not ospf(graph, src, out=io.StringIO()):
        return [], graph.vertex(dst).dist

    target = graph.vertex(dst)
    if math.isinf(target.dist):
        return [], target.dist
    return path_names(target), target.dist
