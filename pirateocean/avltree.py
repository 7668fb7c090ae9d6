"""A self-balancing binary search tree keyed by any ordered type."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class _Node(Generic[K, V]):
    __slots__ = ("key", "value", "left", "right", "height")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value
        self.left: _Node[K, V] | None = None
        self.right: _Node[K, V] | None = None
        self.height = 0


def _height(node: _Node[Any, Any] | None) -> int:
    return node.height if node is not None else -1


def _update(node: _Node[Any, Any]) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance_factor(node: _Node[Any, Any]) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(node: _Node[K, V]) -> _Node[K, V]:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: _Node[K, V]) -> _Node[K, V]:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: _Node[K, V]) -> _Node[K, V]:
    _update(node)
    balance = _balance_factor(node)
    if balance > 1:
        assert node.left is not None
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree(Generic[K, V]):
    """An ordered mapping backed by an AVL tree.

    Inserting a key that is already present leaves the tree unchanged, and
    removing an absent key is a no-op.
    """

    def __init__(self) -> None:
        self._root: _Node[K, V] | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self._find_node(key) is not None

    def __iter__(self) -> Iterator[K]:
        for key, _ in self.items():
            yield key

    def insert(self, key: K, value: V) -> bool:
        """Add ``key`` with ``value``; return False if the key already exists."""
        self._root, added = self._insert(self._root, key, value)
        if added:
            self._size += 1
        return added

    def _insert(
        self, node: _Node[K, V] | None, key: K, value: V
    ) -> tuple[_Node[K, V], bool]:
        if node is None:
            return _Node(key, value), True
        if key < node.key:  # type: ignore[operator]
            node.left, added = self._insert(node.left, key, value)
        elif node.key < key:  # type: ignore[operator]
            node.right, added = self._insert(node.right, key, value)
        else:
            return node, False
        return (_rebalance(node) if added else node), added

    def remove(self, key: K) -> bool:
        """Delete ``key``; return False if it was not present."""
        self._root, removed = self._remove(self._root, key)
        if removed:
            self._size -= 1
        return removed

    def _remove(
        self, node: _Node[K, V] | None, key: K
    ) -> tuple[_Node[K, V] | None, bool]:
        if node is None:
            return None, False
        if key < node.key:  # type: ignore[operator]
            node.left, removed = self._remove(node.left, key)
        elif node.key < key:  # type: ignore[operator]
            node.right, removed = self._remove(node.right, key)
        else:
            if node.left is None:
                return node.right, True
            if node.right is None:
                return node.left, True
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key, node.value = successor.key, successor.value
            node.right, removed = self._remove(node.right, successor.key)
        return (_rebalance(node) if removed else node), removed

    def _find_node(self, key: object) -> _Node[K, V] | None:
        node = self._root
        while node is not None:
            if key < node.key:  # type: ignore[operator]
                node = node.left
            elif node.key < key:  # type: ignore[operator]
                node = node.right
            else:
                return node
        return None

    def find(self, key: K) -> V | None:
        """Return the value stored under ``key``, or None if it is absent."""
        node = self._find_node(key)
        return node.value if node is not None else None

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield ``(key, value)`` pairs in ascending key order."""
        stack: list[_Node[K, V]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def values(self) -> Iterator[V]:
        """Yield the values in ascending key order."""
        for _, value in self.items():
            yield value

    def first(self) -> tuple[K, V] | None:
        """Return the pair with the smallest key, or None if the tree is empty."""
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.key, node.value

    def height(self) -> int:
        """Return the tree's height: 0 for a single node, -1 when empty."""
        return _height(self._root)