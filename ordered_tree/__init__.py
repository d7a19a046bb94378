"""Ordered binary search tree."""

from .node import Comparable, TreeNode
from .tree import EMPTY_TREE_LINE, OrderedTree, trees_equal

__all__ = [
    "Comparable",
    "EMPTY_TREE_LINE",
    "OrderedTree",
    "TreeNode",
    "trees_equal",
]
