import numpy as np

DEFAULT_CAPACITY = 100


class DisjointSet:
    """
    Union-find over the integers 0..n-1.

    Each slot of `items` holds either the negative size of its group (a root)
    or the index of its parent (a child). Unions link the smaller group under
    the larger one and every find compresses the walked path onto the root,
    so m operations on n elements cost O(m log n) in the worst case.
    """

    __slots__ = ['items', 'groups']

    def __init__(self, n: int = DEFAULT_CAPACITY):
        if n <= 0:
            n = DEFAULT_CAPACITY
        self.items = np.full(n, -1, dtype=int)
        self.groups = n

    def __len__(self) -> int:
        return self.items.shape[0]

    def _valid(self, i: int) -> bool:
        return 0 <= i < self.items.shape[0]

    def count_groups(self) -> int:
        return self.groups

    def find(self, i: int) -> int:
        """Root index of the group holding `i`, or -1 if `i` is out of range."""
        if not self._valid(i):
            return -1

        root = i
        while self.items[root] >= 0:
            root = int(self.items[root])

        curr = i
        while self.items[curr] >= 0:
            nxt = int(self.items[curr])
            self.items[curr] = root
            curr = nxt
        return root

    def union(self, i: int, j: int) -> bool:
        root_i = self.find(i)
        root_j = self.find(j)

        if root_i == -1 or root_j == -1 or root_i == root_j:
            return False

        # sizes are stored negated, so the smaller slot is the larger group
        if self.items[root_j] < self.items[root_i]:
            self.items[root_j] += self.items[root_i]
            self.items[root_i] = root_j
        else:
            self.items[root_i] += self.items[root_j]
            self.items[root_j] = root_i

        self.groups -= 1
        return True

    def connected(self, i: int, j: int) -> bool:
        root = self.find(i)
        return root != -1 and root == self.find(j)

    def size_of(self, i: int) -> int:
        root = self.find(i)
        if root == -1:
            return 0
        return int(-self.items[root])

    def __str__(self) -> str:
        slots = " ".join(f"({i} : {int(v)})" for i, v in enumerate(self.items))
        return f"groups: {self.groups}\n[{slots}]"
