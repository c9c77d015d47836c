"""
Clue Set - Ordered, duplicate-free storage for collected clues.

Clues are kept in a binary search tree keyed by the clue text, so listing
them in alphabetical order is a plain in-order walk. The tree is never
rebalanced: its shape depends on the order clues were found, which is fine
for the handful of rooms in the mansion.
"""

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class ClueNode:
    """A single node of the clue tree."""
    clue: str
    left: Optional["ClueNode"] = None
    right: Optional["ClueNode"] = None


class ClueSet:
    """
    Binary search tree of clue texts.

    Invariants:
    - Everything in a node's left subtree sorts before the node's clue,
      everything in its right subtree sorts after it
    - No clue is stored twice
    - The set only grows; there is no removal
    """

    def __init__(self):
        self.root: Optional[ClueNode] = None
        self._size = 0

    def insert(self, clue: Optional[str]) -> bool:
        """
        Add a clue to the set.

        Empty or missing clues are ignored. Inserting a clue that is
        already present leaves the tree untouched.

        Args:
            clue: The clue text

        Returns:
            True if a new node was created, False otherwise
        """
        if not clue:
            return False

        if self.root is None:
            self.root = ClueNode(clue)
            self._size += 1
            return True

        node = self.root
        while True:
            if clue == node.clue:
                return False
            if clue < node.clue:
                if node.left is None:
                    node.left = ClueNode(clue)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = ClueNode(clue)
                    break
                node = node.right

        self._size += 1
        return True

    def contains(self, clue: Optional[str]) -> bool:
        """Check whether a clue has been collected."""
        if not clue:
            return False
        node = self.root
        while node is not None:
            if clue == node.clue:
                return True
            node = node.left if clue < node.clue else node.right
        return False

    def in_order(self) -> Iterator[str]:
        """
        Yield every clue in ascending order.

        Each call starts a fresh walk, so the result can be iterated
        as many times as needed. Uses an explicit stack instead of
        recursion.
        """
        stack: list[ClueNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.clue
            node = node.right

    def height(self) -> int:
        """Number of levels in the tree (0 when empty)."""
        if self.root is None:
            return 0
        deepest = 0
        stack = [(self.root, 1)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return deepest

    def __contains__(self, clue) -> bool:
        return isinstance(clue, str) and self.contains(clue)

    def __iter__(self) -> Iterator[str]:
        return self.in_order()

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"ClueSet({list(self.in_order())!r})"
