from typing import TypeVar, Generic, List, Optional

T = TypeVar('T')


class TreeNode(Generic[T]):
    """A node of an unbalanced binary search tree without duplicates.

    Each node owns the subtree rooted at it. Every operation recurses into
    the children; there are no parent references, so remove hands back the
    subtree that should take this node's place.
    """

    def __init__(self, value: T) -> None:
        if value is None:
            raise TypeError("tree values cannot be None")
        self.value: T = value
        self.left: Optional['TreeNode[T]'] = None
        self.right: Optional['TreeNode[T]'] = None

    def insert(self, value: T) -> bool:
        """Add value to the subtree. Returns False if it was already present."""
        if value == self.value:
            return False
        if value < self.value:
            if self.left is None:
                self.left = TreeNode(value)
                return True
            return self.left.insert(value)
        if value > self.value:
            if self.right is None:
                self.right = TreeNode(value)
                return True
            return self.right.insert(value)
        return False

    def contains(self, value: T) -> bool:
        if value == self.value:
            return True
        if value < self.value:
            return self.left is not None and self.left.contains(value)
        if value > self.value:
            return self.right is not None and self.right.contains(value)
        return False

    def remove(self, value: T) -> Optional['TreeNode[T]']:
        """Remove value from the subtree and return the new subtree root.

        The caller must store the result in place of this node. A missing
        value leaves the subtree untouched and returns self.
        """
        if value == self.value:
            if self.left is None:
                return self.right
            if self.right is None:
                return self.left
            # the right subtree's minimum has no left child, so this
            # second removal always hits the zero/one child case
            self.value = self.right.min()
            self.right = self.right.remove(self.value)
        elif value < self.value:
            if self.left is not None:
                self.left = self.left.remove(value)
        elif value > self.value:
            if self.right is not None:
                self.right = self.right.remove(value)
        return self

    def min(self) -> T:
        if self.left is None:
            return self.value
        return self.left.min()

    def max(self) -> T:
        if self.right is None:
            return self.value
        return self.right.max()

    def size(self) -> int:
        total = 1
        if self.left is not None:
            total += self.left.size()
        if self.right is not None:
            total += self.right.size()
        return total

    def depth(self) -> int:
        """Height of the subtree in edges; a leaf has depth 0."""
        if self.is_leaf():
            return 0
        left_depth = self.left.depth() if self.left is not None else 0
        right_depth = self.right.depth() if self.right is not None else 0
        return 1 + max(left_depth, right_depth)

    def in_order(self) -> List[T]:
        result: List[T] = []
        if self.left is not None:
            result.extend(self.left.in_order())
        result.append(self.value)
        if self.right is not None:
            result.extend(self.right.in_order())
        return result

    def render(self) -> str:
        """Values of the subtree in sorted order, separated by ", "."""
        parts: List[str] = []
        if self.left is not None:
            parts.append(self.left.render())
        parts.append(str(self.value))
        if self.right is not None:
            parts.append(self.right.render())
        return ", ".join(parts)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r})"
