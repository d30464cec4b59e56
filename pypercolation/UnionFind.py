import operator
import numpy as np
from pypercolation.exceptions import InvalidSizeError, OutOfRangeError


class WeightedUnionFind:
    """
    A fixed-size Union-Find (Disjoint Set) data structure using union by size
    and path compression.

    Useful for answering dynamic connectivity queries while elements are merged
    one pair at a time. Sets are never split.
    """

    def __init__(self, num_nodes: int):
        """
        Initialize the structure with every node in its own set.

        Parameters
        ----------
        num_nodes : int
            The number of nodes. Must be strictly positive.

        Raises
        ------
        InvalidSizeError
            If ``num_nodes`` is not positive.
        """

        num_nodes = operator.index(num_nodes)
        if num_nodes <= 0:
            raise InvalidSizeError(f"num_nodes must be > 0, got {num_nodes}")

        self.parent = np.arange(num_nodes, dtype=np.int64)
        self.size = np.ones(num_nodes, dtype=np.int64)  # only meaningful at roots
        self.num_nodes = num_nodes
        self._count = num_nodes

    def _validate(self, node: int) -> int:
        """
        Check that ``node`` is an integer index in ``[0, num_nodes)``.

        Parameters
        ----------
        node : int
            The node index to check.

        Returns
        -------
        int
            The index as a plain Python integer.
        """

        node = operator.index(node)
        if node < 0 or node >= self.num_nodes:
            raise OutOfRangeError(
                f"node {node} is not between 0 and {self.num_nodes - 1}"
            )
        return node

    def find(self, node: int) -> int:
        """
        Find the root representative of the set containing the node.

        Every node visited on the way up is re-attached directly to the root.

        Parameters
        ----------
        node : int
            The node whose set root is to be found.

        Returns
        -------
        int
            The root node of the set.
        """

        node = self._validate(node)
        return self._find(node)

    def _find(self, node: int) -> int:
        parent = self.parent
        root = node
        while parent[root] != root:
            root = int(parent[root])

        while node != root:
            next_node = int(parent[node])
            parent[node] = root
            node = next_node
        return root

    def union(self, node1: int, node2: int) -> bool:
        """
        Merge the sets containing node1 and node2.

        The root of the smaller set is attached under the root of the larger
        one. On a tie the root of ``node2`` goes under the root of ``node1``.

        Parameters
        ----------
        node1 : int
            First node.
        node2 : int
            Second node.

        Returns
        -------
        bool
            True if two distinct sets were merged, False if the nodes were
            already connected.
        """

        node1 = self._validate(node1)
        node2 = self._validate(node2)
        root1 = self._find(node1)
        root2 = self._find(node2)
        if root1 == root2:
            return False

        if self.size[root1] < self.size[root2]:
            self.parent[root1] = root2
            self.size[root2] += self.size[root1]
        else:
            self.parent[root2] = root1
            self.size[root1] += self.size[root2]
        self._count -= 1
        return True

    def is_connected(self, node1: int, node2: int) -> bool:
        """
        Check whether two nodes are in the same set.

        Parameters
        ----------
        node1 : int
            First node.
        node2 : int
            Second node.

        Returns
        -------
        bool
            True if node1 and node2 are connected, False otherwise.
        """

        node1 = self._validate(node1)
        node2 = self._validate(node2)
        root1 = self._find(node1)
        root2 = self._find(node2)
        return root1 == root2

    def size_of(self, node: int) -> int:
        """Return the number of nodes in the set containing ``node``."""

        return int(self.size[self.find(node)])

    @property
    def count(self) -> int:
        """Number of disjoint sets currently tracked."""

        return self._count

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"WeightedUnionFind(num_nodes={self.num_nodes}, count={self._count})"
