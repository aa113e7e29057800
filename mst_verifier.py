"""
Independent check that an edge list is a spanning tree
Works on any candidate edge list, not only on Prim's output
"""

import logging
from enum import Enum
from typing import NamedTuple, Optional

from disjoint_set import DisjointSet

logger = logging.getLogger(__name__)


class DiagnosisKind(Enum):
    CYCLE = "CYCLE"
    DISCONNECTED = "DISCONNECTED"


class Diagnosis(NamedTuple):
    kind: DiagnosisKind
    # The offending edge for CYCLE, the first unreached vertex for DISCONNECTED
    detail: object
    index: Optional[int] = None

    def describe(self):
        if self.kind is DiagnosisKind.CYCLE:
            u, v = self.detail[0], self.detail[1]
            return f"cycle detected at edge {u}-{v} (position {self.index})"
        return f"graph not connected, vertex {self.detail} is isolated"


class Verdict(NamedTuple):
    valid: bool
    diagnosis: Optional[Diagnosis] = None

    def __bool__(self):
        return self.valid


def verify_mst(edges, vertices):
    """
    Certify that edges form a spanning tree of vertices 0..vertices-1.

    Every edge must merge two different components (no cycle) and afterwards
    every vertex must share vertex 0's component. Together these also force
    exactly vertices - 1 edges.
    """
    sets = DisjointSet(vertices)

    for index, edge in enumerate(edges):
        source, target = edge[0], edge[1]
        if not sets.union(source, target):
            diagnosis = Diagnosis(DiagnosisKind.CYCLE, edge, index)
            logger.info("Verification failed: %s", diagnosis.describe())
            return Verdict(False, diagnosis)

    if vertices > 0:
        root = sets.find(0)
        for vertex in range(1, vertices):
            if sets.find(vertex) != root:
                diagnosis = Diagnosis(DiagnosisKind.DISCONNECTED, vertex)
                logger.info("Verification failed: %s", diagnosis.describe())
                return Verdict(False, diagnosis)

    return Verdict(True)
