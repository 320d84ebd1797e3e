"""Union-Find data structure used to merge lines into groups."""

from __future__ import annotations


class UnionFind:
    """Union-Find (disjoint set) over ``[0, n)``.

    ``find`` is iterative with full path compression so deep chains never
    hit the recursion limit; ``union`` attaches by rank.
    """

    __slots__ = ("_parent", "_rank")

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must be >= 0, got {n}")
        self._parent = list(range(n))
        self._rank = [0] * n

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """Find root with full path compression."""
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge sets containing a and b.

        Returns:
            True if two distinct sets were merged, False if already joined.
        """
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False

        rank = self._rank
        if rank[ra] < rank[rb]:
            self._parent[ra] = rb
        elif rank[ra] > rank[rb]:
            self._parent[rb] = ra
        else:
            self._parent[rb] = ra
            rank[ra] += 1
        return True

    def groups(self) -> dict[int, list[int]]:
        """Return all groups as root -> member indices."""
        result: dict[int, list[int]] = {}
        for i in range(len(self._parent)):
            root = self.find(i)
            result.setdefault(root, []).append(i)
        return result
