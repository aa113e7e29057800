"""
Disjoint-Set (Union-Find) over the vertex range 0..n-1
Path compression in find, union by rank in union
"""


class DisjointSet:
    def __init__(self, n):
        """Create n singleton sets"""
        if n < 0:
            raise IndexError(f"Set size must be non-negative, got {n}")
        self.parent = list(range(n))
        self.rank = [0] * n
        self.components = n

    def __len__(self):
        return len(self.parent)

    def _check(self, x):
        # Negative indexes would silently wrap around on a list
        if not 0 <= x < len(self.parent):
            raise IndexError(f"Element {x} out of range [0, {len(self.parent)})")

    def find(self, x):
        """Return the representative of x's set, flattening the path to it"""
        self._check(x)

        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        # Second pass: point every node on the path straight at the root
        while self.parent[x] != root:
            next_node = self.parent[x]
            self.parent[x] = root
            x = next_node

        return root

    def union(self, x, y):
        """
        Merge the sets containing x and y.
        Returns False if they were already in the same set (the edge x-y
        would close a cycle).
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        self.components -= 1
        return True

    def connected(self, x, y):
        return self.find(x) == self.find(y)
