import os
import sys

import matplotlib.pyplot as plt
import networkx as nx
from matplotlib.patches import Patch

from .config import DEFAULT_PLOT_PATH, STATE_COLORS


def drawing_graph(graph):
    """
    Collapse the topology into a DiGraph for drawing: one arrow per ordered
    pair, labelled with the weight of its first adjacency entry. An arrow is
    down when its edge identity or either endpoint is down.
    """
    multi = graph.to_networkx()
    G = nx.DiGraph()
    G.add_nodes_from(multi.nodes(data=True))
    for u, v, d in multi.edges(data=True):
        if G.has_edge(u, v):
            continue
        down = d["down"] or multi.nodes[u]["down"] or multi.nodes[v]["down"]
        G.add_edge(u, v, weight=d["weight"], down=down)
    return G


def draw_graph(graph, path=None, output_link=DEFAULT_PLOT_PATH, layout="spring", out=None):
    G = drawing_graph(graph)

    if layout == "kamada":
        pos = nx.kamada_kawai_layout(G, weight=None)
    elif layout == "shell":
        pos = nx.shell_layout(G)
    else:
        pos = nx.spring_layout(G, seed=42, k=2.0, weight=None)

    plt.figure(figsize=(10, 8))

    node_colors = [
        STATE_COLORS['down'] if G.nodes[n]['down'] else STATE_COLORS['up']
        for n in G.nodes()
    ]
    nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=500)
    nx.draw_networkx_labels(G, pos, font_size=9)

    up_edges = [(u, v) for u, v, d in G.edges(data=True) if not d['down']]
    down_edges = [(u, v) for u, v, d in G.edges(data=True) if d['down']]
    nx.draw_networkx_edges(G, pos, edgelist=up_edges, arrows=True, arrowstyle='->',
                           width=1.0, arrowsize=12, connectionstyle='arc3,rad=0.1')
    nx.draw_networkx_edges(G, pos, edgelist=down_edges, arrows=True, arrowstyle='->',
                           width=1.0, arrowsize=12, style='dashed',
                           edge_color=STATE_COLORS['down'], connectionstyle='arc3,rad=0.1')
    edge_labels = nx.get_edge_attributes(G, 'weight')
    nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=8)

    # highlighted route
    if path and len(path) > 1:
        path_edges = [edge for edge in zip(path, path[1:]) if G.has_edge(*edge)]
        nx.draw_networkx_edges(
            G, pos, edgelist=path_edges,
            width=3.0, edge_color=STATE_COLORS['path'],
            arrows=True, arrowstyle='->', arrowsize=16,
            connectionstyle='arc3,rad=0.1'
        )

    legend_elements = [
        Patch(facecolor=color, label=state.capitalize())
        for state, color in STATE_COLORS.items()
    ]
    plt.legend(handles=legend_elements, loc='upper left', frameon=True)

    plt.title("Network topology", fontsize=12)
    plt.tight_layout()
    try:
        directory = os.path.dirname(output_link)
        if directory:
            os.makedirs(directory, exist_ok=True)
        plt.savefig(output_link)
    finally:
        plt.close()
    print(f"Saved {output_link}", file=out if out is not None else sys.stdout)
    return output_link
