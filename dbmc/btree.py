"""An in-memory B-tree of ordered keys."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort_right
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

DEFAULT_MIN_DEGREE = 2


@dataclass
class BTreeNode:
    """A node holding sorted keys and, unless it is a leaf, one more child than keys."""

    is_leaf: bool
    keys: list = field(default_factory=list)
    children: list["BTreeNode"] = field(default_factory=list)

    def search(self, key: Any) -> Optional["BTreeNode"]:
        """Return the node in this subtree that holds ``key``, or None."""
        node = self
        while True:
            i = bisect_left(node.keys, key)
            if i < len(node.keys) and node.keys[i] == key:
                return node
            if node.is_leaf:
                return None
            node = node.children[i]

    def keys_in_order(self) -> Iterator[Any]:
        """Yield the keys of this subtree in ascending order."""
        if self.is_leaf:
            yield from self.keys
            return
        for child, key in zip(self.children, self.keys):
            yield from child.keys_in_order()
            yield key
        yield from self.children[len(self.keys)].keys_in_order()


class BTree:
    """A B-tree whose nodes hold between ``t - 1`` and ``2t - 1`` keys."""

    def __init__(self, min_degree: int = DEFAULT_MIN_DEGREE) -> None:
        if min_degree < 2:
            raise ValueError(f"minimum degree must be at least 2, got {min_degree}")
        self.min_degree = min_degree
        self.root: Optional[BTreeNode] = None
        self._size = 0

    @property
    def max_keys(self) -> int:
        return 2 * self.min_degree - 1

    def insert(self, key: Any) -> None:
        """Insert ``key``; equal keys are kept alongside each other."""
        if self.root is None:
            self.root = BTreeNode(is_leaf=True, keys=[key])
        elif len(self.root.keys) == self.max_keys:
            new_root = BTreeNode(is_leaf=False, children=[self.root])
            self._split_child(new_root, 0)
            i = 1 if new_root.keys[0] < key else 0
            self._insert_nonfull(new_root.children[i], key)
            self.root = new_root
        else:
            self._insert_nonfull(self.root, key)
        self._size += 1

    def _insert_nonfull(self, node: BTreeNode, key: Any) -> None:
        while not node.is_leaf:
            i = bisect_right(node.keys, key)
            if len(node.children[i].keys) == self.max_keys:
                self._split_child(node, i)
                if node.keys[i] < key:
                    i += 1
            node = node.children[i]
        insort_right(node.keys, key)

    def _split_child(self, parent: BTreeNode, index: int) -> None:
        t = self.min_degree
        child = parent.children[index]
        median = child.keys[t - 1]
        sibling = BTreeNode(
            is_leaf=child.is_leaf,
            keys=child.keys[t:],
            children=[] if child.is_leaf else child.children[t:],
        )
        child.keys = child.keys[: t - 1]
        if not child.is_leaf:
            child.children = child.children[:t]
        parent.children.insert(index + 1, sibling)
        parent.keys.insert(index, median)

    def search(self, key: Any) -> Optional[BTreeNode]:
        """Return the node holding ``key``, or None if it is absent."""
        if self.root is None:
            return None
        return self.root.search(key)

    def traverse(self) -> list:
        """Return every key in ascending order."""
        return list(self)

    def is_empty(self) -> bool:
        return self.root is None or not self.root.keys

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def __iter__(self) -> Iterator[Any]:
        if self.root is not None:
            yield from self.root.keys_in_order()

    def __len__(self) -> int:
        return self._size