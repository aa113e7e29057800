"""
Prim's algorithm for the Minimum Spanning Tree
Grows a single tree from vertex 0 using a min-heap of frontier edges
"""

import logging
from typing import NamedTuple

from min_heap import MinHeap

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 500


class MSTResult(NamedTuple):
    edges: list
    total_cost: float

    def is_spanning(self, vertices):
        """True when the tree reaches every one of the given vertices"""
        return len(self.edges) == max(vertices - 1, 0)


def build_mst(graph):
    """
    Build the MST of the component containing vertex 0.

    Vertices that cannot be reached from vertex 0 are left out without
    complaint; a caller detects that case by len(edges) < vertices - 1.
    """
    if graph.vertices == 0:
        return MSTResult([], 0.0)

    mst_edges = []
    total_cost = 0.0
    visited = [False] * graph.vertices
    target_size = graph.vertices - 1

    visited[0] = True
    heap = MinHeap()
    for edge in graph.neighbors(0):
        heap.push(edge)

    discarded = 0
    while heap and len(mst_edges) < target_size:
        edge = heap.pop()

        # Stale entry: the far end joined the tree after this edge was pushed
        if visited[edge.target]:
            discarded += 1
            continue

        mst_edges.append(edge)
        total_cost += edge.cost
        visited[edge.target] = True

        if len(mst_edges) % PROGRESS_INTERVAL == 0:
            logger.debug(
                "Prim: %d edges accepted, %d entries in heap",
                len(mst_edges),
                len(heap),
            )

        for next_edge in graph.neighbors(edge.target):
            if not visited[next_edge.target]:
                heap.push(next_edge)

    logger.debug(
        "Prim finished: %d edges, cost %.4f, %d stale heap entries discarded",
        len(mst_edges),
        total_cost,
        discarded,
    )
    if len(mst_edges) < target_size:
        logger.debug(
            "Only %d of %d vertices reachable from vertex 0",
            len(mst_edges) + 1,
            graph.vertices,
        )

    return MSTResult(mst_edges, total_cost)
