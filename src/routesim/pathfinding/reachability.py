from collections import deque


def reachable_from(graph, source_name):
    """
    Breadth-first sweep from source_name through up vertices and up edges.

    Returns the destinations in the order they were discovered; a neighbor
    reached over several edges may appear more than once. The source itself
    is marked visited first and so is never recorded. A down source gives an
    empty list.
    """
    visited = set()
    destinations = []
    queue = deque([graph.vertex(source_name)])

    while queue:
        current = queue.popleft()
        if current.name in visited or graph.is_vertex_down(current.name):
            continue
        visited.add(current.name)

        for neighbor, _ in current.adj:
            if neighbor.name in visited or graph.is_vertex_down(neighbor.name):
                continue
            # edge identity is the (source, dest) name pair
            if graph.is_edge_down(current.name, neighbor.name):
                continue
            queue.append(neighbor)
            destinations.append(neighbor.name)

    return destinations


def reachability(graph):
    """Map every vertex name, in ascending order, to its reachable_from() list."""
    return {name: reachable_from(graph, name) for name in graph.names()}
