import numpy as np

from algorithms.errors import InvalidVertex


class DisjointSet:
    __slots__ = ['parent', 'size', 'num_groups']

    def __init__(self, n: int):
        self.parent = np.arange(n, dtype=np.int64)
        self.size = np.ones(n, dtype=np.int64)
        self.num_groups = n

    def __len__(self) -> int:
        return self.parent.shape[0]

    @property
    def group_count(self) -> int:
        return self.num_groups

    def _check(self, v) -> int:
        # numpy would silently wrap negative indices
        v = int(v)
        if not 0 <= v < self.parent.shape[0]:
            raise InvalidVertex(v, self.parent.shape[0])
        return v

    def find(self, v: int) -> int:
        root = self._check(v)
        while root != self.parent[root]:
            root = int(self.parent[root])

        curr = int(v)
        while curr != root:
            nxt = int(self.parent[curr])
            self.parent[curr] = root
            curr = nxt
        return root

    def union(self, a: int, b: int) -> bool:
        root_a = self.find(a)
        root_b = self.find(b)

        if root_a == root_b:
            return False

        if self.size[root_a] < self.size[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        self.size[root_a] += self.size[root_b]

        self.num_groups -= 1
        return True

    def roots(self) -> np.ndarray:
        """
        Root of every element, as an array indexed by element id.
        Compresses every path along the way.
        """
        return np.fromiter((self.find(i) for i in range(len(self))),
                           dtype=np.int64, count=len(self))


def make(n: int) -> DisjointSet:
    if n < 0:
        raise ValueError("n must be >= 0")
    return DisjointSet(n)
