"""Binary tree node type and classic binary tree algorithms."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, _MISSING)
        if left is _MISSING:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, _MISSING)
        if right is _MISSING:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def tree_to_list(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Serialise a tree to level-order values with trailing Nones removed."""
    result: list[Optional[int]] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True if both trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return p.val == q.val and is_same_tree(p.right, q.right) and is_same_tree(p.left, q.left)


def _is_mirror(left: Optional[TreeNode], right: Optional[TreeNode]) -> bool:
    if left is None and right is None:
        return True
    if left is None or right is None:
        return False
    return (
        left.val == right.val
        and _is_mirror(left.left, right.right)
        and _is_mirror(left.right, right.left)
    )


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return True if the tree is a mirror image of itself."""
    if root is None:
        return True
    return _is_mirror(root.left, root.right)


def min_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the shortest root-to-leaf path."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    if root.left is None:
        return 1 + min_depth(root.right)
    if root.right is None:
        return 1 + min_depth(root.left)
    return 1 + min(min_depth(root.right), min_depth(root.left))


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Return True if some root-to-leaf path sums to target_sum."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return target_sum == root.val
    remaining = target_sum - root.val
    return has_path_sum(root.right, remaining) or has_path_sum(root.left, remaining)


def count_nodes(root: Optional[TreeNode]) -> int:
    """Return the number of nodes in the tree."""
    if root is None:
        return 0
    return count_nodes(root.left) + count_nodes(root.right) + 1


def check_tree(root: TreeNode) -> bool:
    """Return True if the root's value equals the sum of its two children."""
    if root.left is None or root.right is None:
        raise ValueError("root must have both a left and a right child")
    return root.left.val + root.right.val == root.val


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Swap every node's children in place and return the root."""
    if root is None:
        return None
    root.left, root.right = root.right, root.left
    invert_tree(root.left)
    invert_tree(root.right)
    return root


def evaluate_tree(root: Optional[TreeNode]) -> bool:
    """Evaluate a boolean tree: leaves 0/1, inner nodes 2 (OR) or 3 (AND)."""
    if root is None:
        raise ValueError("operator node is missing an operand")
    if root.val <= 1:
        return bool(root.val)
    if root.val == 2:
        return evaluate_tree(root.left) or evaluate_tree(root.right)
    return evaluate_tree(root.left) and evaluate_tree(root.right)


def find_tilt(root: Optional[TreeNode]) -> int:
    """Return the sum over all nodes of |left subtree sum - right subtree sum|."""
    tilt = 0

    def explore(node: Optional[TreeNode]) -> int:
        nonlocal tilt
        if node is None:
            return 0
        left = explore(node.left)
        right = explore(node.right)
        tilt += abs(left - right)
        return left + right + node.val

    explore(root)
    return tilt


def merge_trees(t1: Optional[TreeNode], t2: Optional[TreeNode]) -> Optional[TreeNode]:
    """Overlay t2 onto t1, summing overlapping values; t1 is modified in place."""
    if t2 is None:
        return t1
    if t1 is None:
        return t2
    t1.val += t2.val
    t1.left = merge_trees(t1.left, t2.left)
    t1.right = merge_trees(t1.right, t2.right)
    return t1


def _second_min_candidates(node: Optional[TreeNode]) -> Iterator[int]:
    if node is None:
        return
    if node.left is not None and node.right is not None:
        yield min(node.left.val, node.right.val)
    else:
        yield node.val
    yield from _second_min_candidates(node.left)
    yield from _second_min_candidates(node.right)


def find_second_minimum_value(root: Optional[TreeNode]) -> int:
    """Return the second smallest distinct value in the tree, or -1 if none."""
    candidates = list(_second_min_candidates(root))
    if not candidates:
        return -1
    smallest = min(candidates)
    larger = [value for value in candidates if value > smallest]
    return min(larger) if larger else -1


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the subtree of a binary search tree rooted at val, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.right if node.val < val else node.left
    return node


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the node values in in-order sequence."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def is_unival_tree(root: Optional[TreeNode]) -> bool:
    """Return True if every node in the tree has the same value."""
    if root is None or (root.left is None and root.right is None):
        return True
    if root.right is not None and root.right.val != root.val:
        return False
    if root.left is not None and root.left.val != root.val:
        return False
    return is_unival_tree(root.left) and is_unival_tree(root.right)