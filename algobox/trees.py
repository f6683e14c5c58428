"""Binary trees, singly linked lists and edge-cut scoring on undirected trees."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


@dataclass
class ListNode:
    """A singly linked list node."""

    val: int = 0
    next: ListNode | None = None


def flatten(root: TreeNode | None) -> None:
    """Rewire the tree in place into a right-leaning chain in preorder."""
    node = root
    while node is not None:
        if node.left is not None:
            rightmost = node.left
            while rightmost.right is not None:
                rightmost = rightmost.right
            rightmost.right = node.right
            node.right = node.left
            node.left = None
        node = node.right


def decimal_value(head: ListNode | None) -> int:
    """The integer whose binary digits, most significant first, are the list values."""
    result = 0
    node = head
    while node is not None:
        result = (result << 1) | node.val
        node = node.next
    return result


def _component_xors(
    graph: list[list[int]], values: Sequence[int], root: int, blocked: int
) -> dict[int, int]:
    """Subtree XORs of the component holding ``root`` once the edge to ``blocked`` is cut."""
    parent = {root: -1}
    order = [root]
    stack = [root]
    while stack:
        node = stack.pop()
        for nxt in graph[node]:
            if nxt != parent[node] and nxt != blocked:
                parent[nxt] = node
                order.append(nxt)
                stack.append(nxt)
    xors = {node: values[node] for node in order}
    for node in reversed(order):
        up = parent[node]
        if up != -1:
            xors[up] ^= xors[node]
    return xors


def minimum_score(nums: Sequence[int], edges: Sequence[Sequence[int]]) -> int:
    """Smallest spread of component XORs after removing two edges of the tree."""
    graph: list[list[int]] = [[] for _ in nums]
    for a, b in edges:
        graph[a].append(b)
        graph[b].append(a)

    total = 0
    for value in nums:
        total ^= value

    best: int | None = None
    for root, neighbours in enumerate(graph):
        for blocked in neighbours:
            xors = _component_xors(graph, nums, root, blocked)
            part = xors[root]
            rest = total ^ part
            for node, a in xors.items():
                if node == root:
                    continue
                parts = (a, part ^ a, rest)
                spread = max(parts) - min(parts)
                if best is None or spread < best:
                    best = spread
    if best is None:
        raise ValueError("the tree needs at least three nodes to remove two edges")
    return best