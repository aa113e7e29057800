"""
Graph ingestion: Matrix Market coordinate files and JSON metadata files

The Matrix Market reader gives every edge a synthetic installation cost,
since the power grid files only record which sites are connected.
"""

import json
import logging
import os
import random

from grid_graph import Graph

logger = logging.getLogger(__name__)

DEFAULT_MIN_COST = 1.0
DEFAULT_MAX_COST = 100.0


def read_mtx(
    path,
    seed=None,
    min_cost=DEFAULT_MIN_COST,
    max_cost=DEFAULT_MAX_COST,
    use_weights=False,
):
    """
    Read a Matrix Market coordinate file into a Graph.

    Lines starting with '%' are comments. The first line with at least three
    fields is the header 'rows cols entries'; rows is the vertex count. Every
    later line with at least two fields is an edge with 1-based endpoints.
    Costs are drawn uniformly from [min_cost, max_cost) unless use_weights is
    set and the line carries a third value.
    """
    if min_cost > max_cost:
        raise ValueError(f"min_cost {min_cost} is greater than max_cost {max_cost}")

    rng = random.Random(seed)
    graph = None
    declared_entries = 0

    with open(path, "r") as f:
        for line_number, line in enumerate(f, 1):
            if line.startswith("%"):
                continue
            parts = line.split()

            if graph is None:
                if len(parts) < 3:
                    continue
                try:
                    vertices = int(parts[0])
                    declared_entries = int(parts[2])
                except ValueError:
                    raise ValueError(
                        f"{path}:{line_number}: malformed header {line.strip()!r}"
                    ) from None
                graph = Graph(vertices)
                continue

            if len(parts) < 2:
                continue
            try:
                source = int(parts[0]) - 1
                target = int(parts[1]) - 1
                if use_weights and len(parts) >= 3:
                    cost = float(parts[2])
                else:
                    cost = rng.random() * (max_cost - min_cost) + min_cost
                graph.add_edge(source, target, cost)
            except (ValueError, IndexError) as e:
                raise ValueError(f"{path}:{line_number}: {e}") from None

    if graph is None:
        raise ValueError(f"{path}: no Matrix Market header found")

    if graph.edge_count != declared_entries:
        logger.warning(
            "%s declares %d entries but %d edges were read",
            path,
            declared_entries,
            graph.edge_count,
        )
    logger.info(
        "Graph loaded: %d nodes, %d edges", graph.vertices, graph.edge_count
    )
    return graph


def write_mtx(graph, path):
    """Write graph as a Matrix Market coordinate file with its costs"""
    with open(path, "w") as f:
        f.write("%%MatrixMarket matrix coordinate real symmetric\n")
        f.write(f"{graph.vertices} {graph.vertices} {graph.edge_count}\n")
        for u, v, w in graph.edges:
            f.write(f"{u + 1} {v + 1} {w}\n")


def save_metadata(graph, path):
    """Save graph in the graph_metadata.json layout"""
    metadata = {
        "num_nodes": graph.vertices,
        "num_edges": graph.edge_count,
        "edges": [[u, v, w] for u, v, w in graph.edges],
    }
    with open(path, "w") as f:
        json.dump(metadata, f, indent=2)


def load_metadata(path):
    """Load a graph saved by save_metadata"""
    with open(path, "r") as f:
        metadata = json.load(f)

    try:
        num_nodes = metadata["num_nodes"]
        edges = metadata["edges"]
    except (KeyError, TypeError):
        raise ValueError(f"{path}: missing 'num_nodes' or 'edges'") from None

    try:
        return Graph.from_edges(num_nodes, edges)
    except (IndexError, TypeError) as e:
        raise ValueError(f"{path}: {e}") from None


def load_graph(path, **kwargs):
    """Load a graph from a .json metadata file or a Matrix Market file"""
    if os.path.splitext(path)[1].lower() == ".json":
        return load_metadata(path)
    return read_mtx(path, **kwargs)
