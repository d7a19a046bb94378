"""Unbalanced binary search tree with traversal and comparison helpers.

``OrderedTree`` stores distinct, totally ordered values.  The shape of the tree
is a direct function of insertion order: nothing is ever rotated or rebalanced,
so sorted input degenerates into a chain.

The public API covers the following capabilities:

* ``insert``/``bulk_insert`` – attach values as new leaves, ignoring duplicates.
* ``search``/``is_empty``/``height`` – read-only queries.
* ``pre_order``/``in_order``/``post_order``/``level_order`` – traversals
  returning fresh lists of values.
* ``level_lines``/``print_level_by_level`` – breadth-first listing grouped by
  depth.
* ``trees_equal`` – structural and value equality between two trees.

Every walk uses an explicit stack or queue, so the depth of a skewed tree is
bounded by memory rather than by the interpreter's recursion limit.
"""

from __future__ import annotations

from collections import deque
import logging
from typing import Callable, Deque, Generic, Iterable, Iterator, List, Optional, Tuple

from .node import T, TreeNode

__all__ = [
    "EMPTY_TREE_LINE",
    "OrderedTree",
    "trees_equal",
]

logger = logging.getLogger(__name__)

EMPTY_TREE_LINE = "Tree is empty"


class OrderedTree(Generic[T]):
    """Binary search tree over values supporting ``<`` and ``>``."""

    __slots__ = ("_root", "_size")

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[TreeNode[T]] = None
        self._size = 0
        if values is not None:
            self.bulk_insert(values)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def insert(self, value: T) -> None:
        """Insert *value* as a new leaf.

        Duplicates are dropped silently; the tree is left untouched.
        """

        if self._root is None:
            self._root = TreeNode(value)
            self._size = 1
            return

        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = TreeNode(value)
                    self._size += 1
                    return
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = TreeNode(value)
                    self._size += 1
                    return
                current = current.right
            else:
                logger.debug("Ignoring duplicate value %r", value)
                return

    def bulk_insert(self, values: Iterable[T]) -> None:
        """Insert every item of *values* in iteration order."""

        before = self._size
        for value in values:
            self.insert(value)
        logger.debug(
            "Bulk insert added %d node(s); tree now holds %d",
            self._size - before,
            self._size,
        )

    def clear(self) -> None:
        """Release every node at once, leaving an empty tree."""

        logger.debug("Clearing tree with %d node(s)", self._size)
        self._root = None
        self._size = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def root(self) -> Optional[TreeNode[T]]:
        """Root node, or ``None`` for an empty tree.  Treat as read-only."""

        return self._root

    def search(self, value: T) -> bool:
        """Return ``True`` if a value equal to *value* is stored."""

        current = self._root
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return True
        return False

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """Return the number of edges on the longest root-to-leaf path.

        An empty tree has height ``-1`` and a lone root has height ``0``.
        """

        height = -1
        for _ in self._iter_levels():
            height += 1
        return height

    def __contains__(self, value: object) -> bool:
        return value is not None and self.search(value)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedTree):
            return NotImplemented
        return trees_equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.pre_order()!r})"

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------
    def pre_order(self) -> List[T]:
        """Return values visiting node, then left subtree, then right subtree."""

        result: List[T] = []
        stack: List[TreeNode[T]] = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def in_order(self) -> List[T]:
        """Return values in ascending order (left, node, right)."""

        result: List[T] = []
        stack: List[TreeNode[T]] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            result.append(node.value)
            current = node.right
        return result

    def post_order(self) -> List[T]:
        """Return values visiting left subtree, right subtree, then node."""

        # Node-right-left order reversed is left-right-node.
        result: List[T] = []
        stack: List[TreeNode[T]] = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def level_order(self) -> List[T]:
        """Return values breadth first, left to right within each depth."""

        if self._root is None:
            return []
        result: List[T] = []
        queue: Deque[TreeNode[T]] = deque([self._root])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def level_lines(self) -> List[str]:
        """Return one ``depth N: ...`` line per level.

        An empty tree yields the single line ``"Tree is empty"``.
        """

        if self._root is None:
            return [EMPTY_TREE_LINE]
        return [
            f"depth {depth}: " + " ".join(str(node.value) for node in level)
            for depth, level in enumerate(self._iter_levels())
        ]

    def print_level_by_level(
        self, sink: Optional[Callable[[str], None]] = print
    ) -> List[str]:
        """Emit :meth:`level_lines` to *sink* one line at a time.

        The lines are returned as well so callers can pass ``sink=None`` and
        format them elsewhere.
        """

        lines = self.level_lines()
        if sink is not None:
            for line in lines:
                sink(line)
        return lines

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _iter_levels(self) -> Iterator[List[TreeNode[T]]]:
        if self._root is None:
            return
        queue: Deque[TreeNode[T]] = deque([self._root])
        while queue:
            # Snapshot before any child of this level is enqueued.
            level_size = len(queue)
            level: List[TreeNode[T]] = []
            for _ in range(level_size):
                node = queue.popleft()
                level.append(node)
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)
            yield level


def trees_equal(first: OrderedTree[T], second: OrderedTree[T]) -> bool:
    """Return ``True`` when both trees have the same shape and values.

    Two trees holding the same values are still unequal if a different
    insertion order gave them a different shape.
    """

    pending: List[Tuple[Optional[TreeNode[T]], Optional[TreeNode[T]]]] = [
        (first.root, second.root)
    ]
    while pending:
        left, right = pending.pop()
        if left is None and right is None:
            continue
        if left is None or right is None:
            return False
        if left.value != right.value:
            return False
        pending.append((left.right, right.right))
        pending.append((left.left, right.left))
    return True
