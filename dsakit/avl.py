"""A self-balancing AVL binary search tree of distinct keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional


class _Node:
    __slots__ = ("key", "left", "right", "height")

    def __init__(self, key: int) -> None:
        self.key = key
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.height = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: Optional[_Node], key: int) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node
    _update(node)
    balance = _balance(node)
    if balance > 1 and node.left is not None:
        if key > node.left.key:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and node.right is not None:
        if key < node.right.key:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete(node: Optional[_Node], key: int) -> Optional[_Node]:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        return node.left if node.left is not None else node.right
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key = successor.key
        node.right = _delete(node.right, successor.key)
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
        return _rotate_left(node)
    return node


class AVLTree:
    """Binary search tree kept height-balanced after every change."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> bool:
        """Add ``key``; return False if it was already present."""
        if key in self:
            return False
        self._root = _insert(self._root, key)
        self._size += 1
        return True

    def delete(self, key: int) -> bool:
        """Remove ``key``; return False if it was not present."""
        if key not in self:
            return False
        self._root = _delete(self._root, key)
        self._size -= 1
        return True

    def preorder(self) -> list[int]:
        """Keys in root, left, right order."""
        result: list[int] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def inorder(self) -> list[int]:
        """Keys in ascending order."""
        return list(self._walk_inorder())

    def _walk_inorder(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return _height(self._root)

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return False

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"AVLTree({self.inorder()!r})"