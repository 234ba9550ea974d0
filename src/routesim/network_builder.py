import sys
from logging import getLogger

from .graph import Graph

logger = getLogger(__name__)


def parse_edge_line(line):
    """
    Split a seed line into (source, dest, weight).
    Returns None when the line does not have exactly three tokens or the
    weight is not a number.
    """
    tokens = line.split()
    if len(tokens) != 3:
        return None
    source, dest, weight = tokens
    try:
        return source, dest, float(weight)
    except ValueError:
        return None


def load_edges(graph, lines, err=None):
    """
    Add one undirected edge per well-formed line to graph.
    Ill-formatted lines are reported on err (stderr by default) and skipped.
    Returns the number of edges added.
    """
    err = err if err is not None else sys.stderr
    added = 0
    for line in lines:
        line = line.rstrip("\r\n")
        edge = parse_edge_line(line)
        if edge is None:
            print(f"Skipping ill-formatted line {line}", file=err)
            logger.warning("Skipping ill-formatted line %s", line)
            continue
        graph.add_undirected_edge(*edge)
        added += 1
    return added


def build_network(path, err=None):
    """
    Create a Graph from a seed file.

    An unreadable file is reported on err and gives an empty graph, so the
    simulator can still start.
    """
    err = err if err is not None else sys.stderr
    graph = Graph()
    try:
        with open(path, "r") as f:
            added = load_edges(graph, f, err=err)
    except OSError as e:
        print(e, file=err)
        logger.warning("Could not read seed file %s", path)
        return graph

    logger.info("Loaded %d edges, %d vertices from %s", added, len(graph), path)
    return graph
