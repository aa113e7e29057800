"""
Create test graph files for the Prim MST runner
Writes the same random graph as Matrix Market and as JSON metadata
"""

import argparse
import os
import random
import sys

import matplotlib
import matplotlib.pyplot as plt
import networkx as nx

from grid_graph import Graph
from mtx_loader import save_metadata, write_mtx


def create_random_graph(num_nodes=6, edge_probability=0.5, seed=42):
    """Create a random connected graph with integer weights 1..10"""
    rng = random.Random(seed)

    # Generate random graph using Erdos-Renyi model
    G = nx.erdos_renyi_graph(num_nodes, edge_probability, seed=seed)

    # Ensure the graph is connected
    attempts = 0
    while num_nodes > 0 and not nx.is_connected(G) and attempts < 100:
        G = nx.erdos_renyi_graph(
            num_nodes, edge_probability, seed=rng.randint(0, 10000)
        )
        attempts += 1

    if num_nodes > 0 and not nx.is_connected(G):
        # Force connectivity by chaining the components
        components = [min(c) for c in nx.connected_components(G)]
        for u, v in zip(components, components[1:]):
            G.add_edge(u, v)

    graph = Graph(num_nodes)
    for u, v in sorted(G.edges()):
        graph.add_edge(u, v, rng.randint(1, 10))

    return graph


def create_graph_files(graph, output_dir="graph_data", plot=True):
    """Write graph.mtx, graph_metadata.json and optionally input_graph.png"""
    os.makedirs(output_dir, exist_ok=True)

    mtx_file = os.path.join(output_dir, "graph.mtx")
    write_mtx(graph, mtx_file)
    print(f"  Created {mtx_file}")

    metadata_file = os.path.join(output_dir, "graph_metadata.json")
    save_metadata(graph, metadata_file)
    print(f"  Created {metadata_file}")

    if plot:
        visualize_graph(graph, output_dir)

    return output_dir


def visualize_graph(graph, output_dir):
    """Visualize the graph and save to file"""
    G = graph.to_networkx()
    plt.figure(figsize=(10, 8))
    pos = nx.spring_layout(G, seed=42)

    nx.draw(
        G,
        pos,
        with_labels=True,
        node_color="lightblue",
        node_size=700,
        font_size=12,
        font_weight="bold",
        edge_color="gray",
        width=2,
    )

    edge_labels = {(u, v): f"{w:g}" for u, v, w in G.edges(data="weight")}
    nx.draw_networkx_edge_labels(G, pos, edge_labels, font_size=10)

    plt.title("Input Graph for Prim's MST", fontsize=14, fontweight="bold")

    output_file = os.path.join(output_dir, "input_graph.png")
    plt.savefig(output_file, dpi=150, bbox_inches="tight")
    print(f"  Visualization saved to {output_file}")
    plt.close()


def print_graph_summary(graph):
    """Print summary of the graph"""
    G = graph.to_networkx()
    print("\n" + "=" * 70)
    print("Graph Summary")
    print("=" * 70)
    print(f"Number of nodes: {graph.vertices}")
    print(f"Number of edges: {graph.edge_count}")
    print(f"Is connected: {graph.vertices > 0 and nx.is_connected(G)}")

    print("\nEdge list (with weights):")
    for u, v, w in sorted(graph.edges):
        print(f"  ({u}, {v}): weight = {w:g}")
    print("=" * 70)


def main(argv=None):
    """Main function to create graph files"""
    parser = argparse.ArgumentParser(
        description="Generate random graph files for the Prim MST runner"
    )
    parser.add_argument(
        "--nodes", type=int, default=6, help="Number of nodes (default: 6)"
    )
    parser.add_argument(
        "--edge-prob", type=float, default=0.5, help="Edge probability (default: 0.5)"
    )
    parser.add_argument(
        "--seed", type=int, default=42, help="Random seed (default: 42)"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="graph_data",
        help="Output directory (default: graph_data)",
    )
    parser.add_argument(
        "--no-plot", action="store_true", help="Skip the input graph picture"
    )
    args = parser.parse_args(argv)

    if args.nodes < 0:
        parser.error("--nodes must be non-negative")

    print("=" * 70)
    print("Graph File Generator")
    print("=" * 70)
    print(f"\nGenerating random graph...")
    print(f"  Nodes: {args.nodes}")
    print(f"  Edge probability: {args.edge_prob}")
    print(f"  Random seed: {args.seed}")

    graph = create_random_graph(args.nodes, args.edge_prob, args.seed)
    print_graph_summary(graph)

    if not args.no_plot:
        matplotlib.use("Agg")

    print()
    try:
        create_graph_files(graph, args.output_dir, plot=not args.no_plot)
    except OSError as e:
        print(f"Error writing graph files: {e}")
        return 1

    print(f"\nTo compute the MST:")
    print(f"  python run_prim.py {os.path.join(args.output_dir, 'graph.mtx')} --use-weights")
    return 0


if __name__ == "__main__":
    sys.exit(main())
