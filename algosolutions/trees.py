"""Binary tree type with construction, recovery and search helpers."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional

_TRAVERSAL_PATTERN = re.compile(r"(?:-*[0-9]+)+")
_NODE_PATTERN = re.compile(r"(-*)([0-9]+)")


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    def _walk(self, order: str) -> Iterator[int]:
        if order == "pre":
            yield self.val
        if self.left is not None:
            yield from self.left._walk(order)
        if order == "in":
            yield self.val
        if self.right is not None:
            yield from self.right._walk(order)
        if order == "post":
            yield self.val

    def inorder(self) -> list[int]:
        """Values in left, node, right order."""
        return list(self._walk("in"))

    def preorder(self) -> list[int]:
        """Values in node, left, right order."""
        return list(self._walk("pre"))

    def postorder(self) -> list[int]:
        """Values in left, right, node order."""
        return list(self._walk("post"))


def find_target(root: Optional[TreeNode], k: int) -> bool:
    """Tell whether two distinct nodes of a search tree sum to ``k``."""
    values = root.inorder() if root is not None else []
    left, right = 0, len(values) - 1
    while left < right:
        total = values[left] + values[right]
        if total > k:
            right -= 1
        elif total < k:
            left += 1
        else:
            return True
    return False


def construct_from_pre_post(
    preorder: Sequence[int], postorder: Sequence[int]
) -> Optional[TreeNode]:
    """Build a tree from its preorder and postorder traversals."""
    post_index = {value: i for i, value in enumerate(postorder)}
    pre_index = 0

    def build(left: int, right: int) -> Optional[TreeNode]:
        nonlocal pre_index
        if left > right or pre_index >= len(preorder):
            return None
        root = TreeNode(preorder[pre_index])
        pre_index += 1
        if left == right:
            return root
        try:
            boundary = post_index[preorder[pre_index]]
        except (KeyError, IndexError):
            raise ValueError("traversals do not describe the same tree") from None
        root.left = build(left, boundary)
        root.right = build(boundary + 1, right - 1)
        return root

    return build(0, len(preorder) - 1)


def recover_from_preorder(traversal: str) -> TreeNode:
    """Rebuild a tree from a dash-depth preorder string such as ``1-2--3``."""
    if not _TRAVERSAL_PATTERN.fullmatch(traversal):
        raise ValueError(f"malformed traversal: {traversal!r}")
    stack: list[TreeNode] = []
    for match in _NODE_PATTERN.finditer(traversal):
        depth = len(match.group(1))
        node = TreeNode(int(match.group(2)))
        del stack[depth:]
        if stack:
            parent = stack[-1]
            if parent.left is None:
                parent.left = node
            else:
                parent.right = node
        stack.append(node)
    return stack[0]


class FindElements:
    """Recovers a contaminated tree and answers membership queries.

    The root holds 0; a node holding ``x`` has children ``2x + 1`` and ``2x + 2``.
    """

    def __init__(self, root: Optional[TreeNode]) -> None:
        if root is None:
            raise ValueError("a root node is required")
        self._values: set[int] = set()
        pending: list[tuple[Optional[TreeNode], int]] = [(root, 0)]
        while pending:
            node, value = pending.pop()
            if node is None:
                continue
            self._values.add(value)
            pending.append((node.left, 2 * value + 1))
            pending.append((node.right, 2 * value + 2))

    def find(self, target: int) -> bool:
        """Tell whether ``target`` is a value of the recovered tree."""
        return target in self._values

    def __contains__(self, target: object) -> bool:
        return target in self._values