"""
Cross-check Prim's result against NetworkX and draw it
Can also be run on a graph_metadata.json file
"""

import argparse
import sys

import matplotlib.pyplot as plt
import networkx as nx

from mst_verifier import verify_mst
from mtx_loader import load_graph
from prim_mst import build_mst

TOLERANCE = 1e-6


def networkx_mst_weight(graph):
    """Weight of the NetworkX MST over the component containing vertex 0"""
    if graph.vertices == 0:
        return 0.0

    G = graph.to_networkx()
    component = G.subgraph(nx.node_connected_component(G, 0))
    mst = nx.minimum_spanning_tree(component, weight="weight")
    return sum(data["weight"] for _, _, data in mst.edges(data=True))


def compare_with_networkx(graph, result):
    """Compare an MSTResult with the NetworkX MST weight"""
    nx_weight = networkx_mst_weight(graph)
    return {
        "mst_weight": result.total_cost,
        "networkx_weight": nx_weight,
        "difference": abs(result.total_cost - nx_weight),
        "matches": abs(result.total_cost - nx_weight) <= TOLERANCE,
    }


def visualize(graph, result, save_path="prim_mst.png"):
    """Draw the input graph and its MST side by side"""
    G = graph.to_networkx()
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))

    pos = nx.spring_layout(G, seed=42)

    ax1.set_title("Original Graph", fontsize=14, fontweight="bold")
    nx.draw(
        G,
        pos,
        ax=ax1,
        with_labels=True,
        node_color="lightblue",
        node_size=700,
        font_size=12,
        font_weight="bold",
    )
    edge_labels = {
        (u, v): f"{w:.1f}" for u, v, w in G.edges(data="weight")
    }
    nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax1)

    ax2.set_title("MST (Prim)", fontsize=14, fontweight="bold")
    mst_graph = nx.Graph()
    mst_graph.add_nodes_from(G.nodes())
    for u, v, w in result.edges:
        mst_graph.add_edge(u, v, weight=w)

    nx.draw(
        mst_graph,
        pos,
        ax=ax2,
        with_labels=True,
        node_color="lightgreen",
        node_size=700,
        font_size=12,
        font_weight="bold",
        edge_color="red",
        width=3,
    )
    if result.edges:
        edge_labels = {
            (u, v): f"{w:.1f}" for u, v, w in mst_graph.edges(data="weight")
        }
        nx.draw_networkx_edge_labels(mst_graph, pos, edge_labels, ax=ax2)

    plt.tight_layout()
    try:
        plt.savefig(save_path, dpi=150, bbox_inches="tight")
    finally:
        plt.close(fig)

    return mst_graph


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Compare Prim's MST with the NetworkX MST"
    )
    parser.add_argument(
        "graph_file",
        nargs="?",
        default="graph_data/graph_metadata.json",
        help="Graph metadata JSON or Matrix Market file",
    )
    parser.add_argument(
        "--seed", type=int, default=42, help="Seed for synthetic costs (default: 42)"
    )
    args = parser.parse_args(argv)

    try:
        graph = load_graph(args.graph_file, seed=args.seed)
    except (OSError, ValueError) as e:
        print(f"Error reading {args.graph_file}: {e}")
        return 1

    result = build_mst(graph)
    comparison = compare_with_networkx(graph, result)

    print("Prim MST edges:")
    for u, v, w in sorted(result.edges):
        print(f"  ({u},{v}): {w}")
    print(f"\nPrim total weight: {comparison['mst_weight']}")
    print(f"NetworkX total weight: {comparison['networkx_weight']}")
    print(f"Number of edges: {len(result.edges)}")

    G = graph.to_networkx()
    print(f"\nOriginal graph connected: {graph.vertices > 0 and nx.is_connected(G)}")
    print(f"MST valid spanning tree: {verify_mst(result.edges, graph.vertices).valid}")
    print(f"Status: {'✓ CORRECT' if comparison['matches'] else '✗ INCORRECT'}")

    return 0 if comparison["matches"] else 2


if __name__ == "__main__":
    sys.exit(main())
