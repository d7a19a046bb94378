"""Node type shared by the ordered tree algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, Protocol, TypeVar

__all__ = ["Comparable", "T", "TreeNode"]


class Comparable(Protocol):
    """Values that support the strict ordering comparisons used by the tree."""

    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=Comparable)


@dataclass(slots=True, eq=False)
class TreeNode(Generic[T]):
    """A single tree vertex owning up to two children."""

    value: T
    left: Optional["TreeNode[T]"] = None
    right: Optional["TreeNode[T]"] = None

    def __post_init__(self) -> None:
        if self.value is None:
            raise TypeError("TreeNode value must not be None")
