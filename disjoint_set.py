#!/usr/bin/env python3
# disjoint_set.py - Union-find over integer ids

class DisjointSet:
    """Partition of the ids 0..n-1, with path compression and union by rank"""

    def __init__(self, size):
        self.parent = list(range(size))
        self.rank = [0] * size
        self.sets = size

    def find(self, item):
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        # compress
        while self.parent[item] != root:
            next_item = self.parent[item]
            self.parent[item] = root
            item = next_item
        return root

    def union(self, a, b):
        """Merge the sets holding a and b. Returns False if already joined."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1

        self.sets -= 1
        return True

    def connected(self, a, b):
        return self.find(a) == self.find(b)
