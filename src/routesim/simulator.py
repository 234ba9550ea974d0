"""
Interactive failure simulator.

Reads a seed file of weighted links, then processes one command per line
from stdin:

    path <src> <dst>        shortest route over the up part of the network
    print                   list vertices and their edges
    reachable               list what every up vertex can reach
    edgedown <a> <b>        mark the a->b edge down
    edgeup <a> <b>          mark the a->b edge up
    vertexdown <a>          mark vertex a down
    vertexup <a>            mark vertex a up
    addedge <a> <b> <w>     add a directed a->b edge with weight w
    deleteedge <a> <b>      remove the a->b edge (b->a stays)
    draw [file]             save a picture of the topology
    quit
"""

import argparse
import logging
import sys
from logging import getLogger

from . import config
from .errors import GraphError, VertexNotFoundError
from .network_builder import build_network
from .report import print_graph, print_path, print_reachable

logger = getLogger(__name__)

USAGE = {
    "path": "path <source> <dest>",
    "edgedown": "edgedown <source> <dest>",
    "edgeup": "edgeup <source> <dest>",
    "vertexdown": "vertexdown <vertex>",
    "vertexup": "vertexup <vertex>",
    "addedge": "addedge <source> <dest> <weight>",
    "deleteedge": "deleteedge <source> <dest>",
    "draw": "draw [file]",
}

EDGE_MISSING = ("One or more of the vertices requested do not exist yet and thus their "
                "edge cannot be {}")
VERTEX_MISSING = "The vertex requested does not exist yet and thus cannot be labeled as {}"


def _path(graph, args, out):
    src, dst = args
    try:
        graph.ospf(src, out=out)
        print_path(graph, dst, out=out)
    except VertexNotFoundError:
        print("One of the vertices given is invalid", file=out)


def _edge_state(up):
    def handler(graph, args, out):
        src, dst = args
        if not graph.has_vertex(src) or not graph.has_vertex(dst):
            print(EDGE_MISSING.format("listed as Up" if up else "listed as Down"), file=out)
            return
        if up:
            graph.edge_up(src, dst)
        else:
            graph.edge_down(src, dst)
    return handler


def _vertex_state(up):
    def handler(graph, args, out):
        (name,) = args
        if not graph.has_vertex(name):
            print(VERTEX_MISSING.format("Up" if up else "down"), file=out)
            return
        if up:
            graph.vertex_up(name)
        else:
            graph.vertex_down(name)
    return handler


def _addedge(graph, args, out):
    src, dst, weight = args
    try:
        weight = float(weight)
    except ValueError:
        print(f"Invalid weight {weight}", file=out)
        return
    graph.add_edge(src, dst, weight)


def _deleteedge(graph, args, out):
    src, dst = args
    if not graph.has_vertex(src) or not graph.has_vertex(dst):
        print(EDGE_MISSING.format("deleted"), file=out)
        return
    if not graph.delete_edge(src, dst):
        print(f"There is no {src} -> {dst} edge to delete", file=out)


def _draw(graph, args, out):
    # matplotlib is only needed here
    from .visualize_network import draw_graph

    output_link = args[0] if args else config.DEFAULT_PLOT_PATH
    try:
        draw_graph(graph, output_link=output_link, out=out)
    except OSError as e:
        print(f"Could not save {output_link}: {e}", file=out)


# command -> (handler, allowed argument counts)
COMMANDS = {
    "path": (_path, (2,)),
    "print": (lambda graph, args, out: print_graph(graph, out=out), (0,)),
    "reachable": (lambda graph, args, out: print_reachable(graph, out=out), (0,)),
    "edgedown": (_edge_state(up=False), (2,)),
    "edgeup": (_edge_state(up=True), (2,)),
    "vertexdown": (_vertex_state(up=False), (1,)),
    "vertexup": (_vertex_state(up=True), (1,)),
    "addedge": (_addedge, (3,)),
    "deleteedge": (_deleteedge, (2,)),
    "draw": (_draw, (0, 1)),
}


def process_request(line, graph, out=None):
    """
    Run one command line against graph.
    Returns False when the session should end (quit), True otherwise.
    """
    out = out if out is not None else sys.stdout
    tokens = line.split()
    if not tokens:
        return True

    command, args = tokens[0], tokens[1:]
    if command == "quit":
        return False

    if command not in COMMANDS:
        print(f"Unrecognized command: {command}", file=out)
        return True

    handler, arity = COMMANDS[command]
    if len(args) not in arity:
        print(f"Usage: {USAGE.get(command, command)}", file=out)
        return True

    logger.debug("Running %s %s", command, args)
    try:
        handler(graph, args, out)
    except GraphError as e:
        print(e, file=out)
    return True


def run(graph, lines, out=None):
    """Process command lines until quit or end of input."""
    for line in lines:
        if not process_request(line, graph, out=out):
            break


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="routesim",
        description="Simulate link and router failures on a weighted network.",
    )
    parser.add_argument("seed_file", help="file of 'source dest weight' lines")
    parser.add_argument(
        "--log-level",
        default=config.DEFAULT_LOG_LEVEL,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
    )
    return parser.parse_args(argv)


def main(argv=None, stdin=None, out=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)

    out = out if out is not None else sys.stdout
    graph = build_network(args.seed_file)
    print("File read...", file=out)
    print(f"{len(graph)} vertices", file=out)

    run(graph, stdin if stdin is not None else sys.stdin, out=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
