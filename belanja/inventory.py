"""Item records and the AVL tree that keeps them ordered by id."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class Item:
    """A product in stock."""

    id: int
    name: str
    stock: int
    price: float


@dataclass
class _Node:
    item: Item
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node else 0


def _balance(node: Optional[_Node]) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


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


def _rebalance(node: _Node) -> _Node:
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


def _insert(node: Optional[_Node], item: Item) -> tuple[_Node, bool]:
    if node is None:
        return _Node(item), True
    if item.id < node.item.id:
        node.left, added = _insert(node.left, item)
    elif item.id > node.item.id:
        node.right, added = _insert(node.right, item)
    else:
        return node, False
    return _rebalance(node), added


def _min_node(node: _Node) -> _Node:
    while node.left:
        node = node.left
    return node


def _remove(node: Optional[_Node], item_id: int) -> tuple[Optional[_Node], bool]:
    if node is None:
        return None, False
    if item_id < node.item.id:
        node.left, removed = _remove(node.left, item_id)
    elif item_id > node.item.id:
        node.right, removed = _remove(node.right, item_id)
    else:
        if node.left is None or node.right is None:
            return node.left or node.right, True
        successor = _min_node(node.right)
        node.item = successor.item
        node.right, _ = _remove(node.right, successor.item.id)
        removed = True
    return _rebalance(node), removed


class Inventory:
    """Items kept in a self-balancing search tree keyed by item id."""

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.insert(item)

    def insert(self, item: Item) -> bool:
        """Add an item; return False and keep the tree unchanged if its id exists."""
        self._root, added = _insert(self._root, item)
        if added:
            self._size += 1
        return added

    def remove(self, item_id: int) -> bool:
        """Remove the item with this id; return whether one was removed."""
        self._root, removed = _remove(self._root, item_id)
        if removed:
            self._size -= 1
        return removed

    def find(self, item_id: int) -> Optional[Item]:
        """Return the stored item with this id, or None."""
        node = self._root
        while node is not None:
            if item_id == node.item.id:
                return node.item
            node = node.left if item_id < node.item.id else node.right
        return None

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self._root)

    def __iter__(self) -> Iterator[Item]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.item
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __contains__(self, item_id: object) -> bool:
        return isinstance(item_id, int) and self.find(item_id) is not None