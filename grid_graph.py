"""
Undirected weighted graph over the vertex range 0..vertices-1
Each edge is kept once in insertion order and twice in the adjacency lists
"""

import math
from typing import NamedTuple

import networkx as nx


class WeightedEdge(NamedTuple):
    source: int
    target: int
    cost: float

    def reversed(self):
        return WeightedEdge(self.target, self.source, self.cost)


class Graph:
    def __init__(self, vertices):
        if vertices < 0:
            raise ValueError(f"Vertex count must be non-negative, got {vertices}")
        self.vertices = vertices
        self.edges = []
        # Dense ids, so a list of lists indexed by vertex
        self.adjacency = [[] for _ in range(vertices)]

    @classmethod
    def from_edges(cls, vertices, edges):
        """Build a graph from (source, target, cost) triples"""
        graph = cls(vertices)
        for source, target, cost in edges:
            graph.add_edge(source, target, cost)
        return graph

    def __repr__(self):
        return f"Graph(vertices={self.vertices}, edges={len(self.edges)})"

    @property
    def edge_count(self):
        return len(self.edges)

    def add_edge(self, source, target, cost):
        """Add the undirected edge source-target with the given cost"""
        for vertex in (source, target):
            if not 0 <= vertex < self.vertices:
                raise IndexError(
                    f"Vertex {vertex} out of range [0, {self.vertices})"
                )
        cost = float(cost)
        if not math.isfinite(cost):
            raise ValueError(f"Edge {source}-{target} has non-finite cost {cost}")

        edge = WeightedEdge(source, target, cost)
        self.edges.append(edge)
        self.adjacency[source].append(edge)
        self.adjacency[target].append(edge.reversed())
        return edge

    def neighbors(self, vertex):
        """Edges leaving vertex, each oriented vertex -> neighbor"""
        return self.adjacency[vertex]

    def total_cost(self):
        """Cost of installing every edge in the graph"""
        total = 0.0
        for edge in self.edges:
            total += edge.cost
        return total

    def to_networkx(self):
        """Convert to a networkx Graph, keeping the cheapest of parallel edges"""
        G = nx.Graph()
        G.add_nodes_from(range(self.vertices))
        for u, v, w in self.edges:
            if G.has_edge(u, v) and G[u][v]["weight"] <= w:
                continue
            G.add_edge(u, v, weight=w)
        return G
