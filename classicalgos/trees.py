"""Binary trees: rebuilding from traversals and mirror comparison."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """A binary tree node."""

    data: Any
    left: Node | None = None
    right: Node | None = None


def build_tree(inorder: Sequence[Any], preorder: Sequence[Any]) -> Node | None:
    """Rebuild a binary tree from its inorder and preorder traversals."""
    if len(inorder) != len(preorder):
        raise ValueError("inorder and preorder traversals differ in length")
    roots: Iterator[Any] = iter(preorder)

    def build(start: int, end: int) -> Node | None:
        if start > end:
            return None
        node = Node(next(roots))
        if start == end:
            return node
        try:
            split = list(inorder).index(node.data, start, end + 1)
        except ValueError:
            raise ValueError(
                f"{node.data!r} from the preorder traversal is missing "
                "from its place in the inorder traversal"
            ) from None
        node.left = build(start, split - 1)
        node.right = build(split + 1, end)
        return node

    return build(0, len(inorder) - 1)


def postorder(root: Node | None) -> list[Any]:
    """Return the node values in postorder: left, right, then the node."""
    if root is None:
        return []
    return postorder(root.left) + postorder(root.right) + [root.data]


def are_mirror(a: Node | None, b: Node | None) -> bool:
    """True when ``b`` is the mirror image of ``a``."""
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return (
        a.data == b.data
        and are_mirror(a.left, b.right)
        and are_mirror(a.right, b.left)
    )