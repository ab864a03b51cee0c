from typing import TypeVar, Generic, List, Optional

from tree_node import TreeNode

T = TypeVar('T')


class BinarySearchTree(Generic[T]):
    def __init__(self) -> None:
        self._root: Optional[TreeNode[T]] = None

    @property
    def root(self) -> Optional[TreeNode[T]]:
        return self._root

    def insert(self, value: T) -> bool:
        if self._root is None:
            self._root = TreeNode(value)
            return True
        return self._root.insert(value)

    def remove(self, value: T) -> bool:
        """Remove value if present. Returns False when it was absent.

        Looks the value up before removing it, so a successful removal walks
        the search path twice. Comparing size() before and after would walk
        the whole tree instead.
        """
        if self._root is None or not self._root.contains(value):
            return False
        self._root = self._root.remove(value)
        return True

    def contains(self, value: T) -> bool:
        if self._root is None:
            return False
        return self._root.contains(value)

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        return self._root.min()

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        return self._root.max()

    def size(self) -> int:
        if self._root is None:
            return 0
        return self._root.size()

    def depth(self) -> int:
        """Height of the tree in edges; -1 for an empty tree."""
        if self._root is None:
            return -1
        return self._root.depth()

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None

    def in_order(self) -> List[T]:
        if self._root is None:
            return []
        return self._root.in_order()

    def render(self) -> str:
        if self._root is None:
            return ""
        return self._root.render()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return self.render()
