"""Flat-tree index arithmetic.

Nodes of an infinite complete binary tree are laid out in a flat array:
leaves (depth 0) at even indices, a node at depth ``d`` with offset ``o`` at
``(2^d - 1) + o * 2^(d+1)``. Every function here is pure and works on plain
integers. Functions that need a node's depth accept an optional ``d`` so
callers that already know it can skip the depth search.

Negative arguments are a caller error and are only checked by ``assert``.
"""
from __future__ import annotations

from typing import List, Optional, Tuple


class InvalidArgumentError(ValueError):
    """Raised when an index violates a documented precondition."""
    pass


def index(depth: int, offset: int) -> int:
    assert depth >= 0 and offset >= 0
    return ((1 << depth) - 1) + offset * (1 << (depth + 1))


def is_depth_n(index: int, depth: int) -> bool:
    """True when ``index`` lies on the row ``depth`` levels above the leaves."""
    return (index - ((1 << depth) - 1)) % (1 << (depth + 1)) == 0


def depth(index: int) -> int:
    """
    Depth of a node, 0 for leaves.

    Searches upward from the leaf row; the loop never runs past the bit length
    of ``index``.
    """
    assert index >= 0
    d = 0
    while not is_depth_n(index, d):
        d += 1
    return d


def step_size(depth: int) -> int:
    # Distance between two neighbours on the same row
    return 1 << (depth + 1)


def offset(index: int, d: Optional[int] = None) -> int:
    if d is None:
        d = depth(index)
    return (index - ((1 << d) - 1)) // step_size(d)


def sibling(index: int, d: Optional[int] = None) -> int:
    if d is None:
        d = depth(index)
    if offset(index, d) & 0x01 == 0:
        return index + step_size(d)
    return index - step_size(d)


def parent(index: int, d: Optional[int] = None) -> int:
    # A node and its sibling are always equidistant from their parent
    return (index + sibling(index, d)) // 2


def children(index: int, d: Optional[int] = None) -> Optional[Tuple[int, int]]:
    """Left and right child of ``index``, or None for a leaf."""
    if d is None:
        d = depth(index)
    if d == 0:
        return None
    half = step_size(d - 1) // 2
    return index - half, index + half


def left_child(index: int, d: Optional[int] = None) -> Optional[int]:
    c = children(index, d)
    return None if c is None else c[0]


def right_child(index: int, d: Optional[int] = None) -> Optional[int]:
    c = children(index, d)
    return None if c is None else c[1]


def left_span(index: int, d: Optional[int] = None) -> int:
    """Leftmost leaf covered by the subtree rooted at ``index``."""
    if d is None:
        d = depth(index)
    return index - ((1 << d) - 1)


def right_span(index: int, d: Optional[int] = None) -> int:
    """Rightmost leaf covered by the subtree rooted at ``index``."""
    if d is None:
        d = depth(index)
    return index + ((1 << d) - 1)


def spans(index: int, d: Optional[int] = None) -> Tuple[int, int]:
    if d is None:
        d = depth(index)
    return left_span(index, d), right_span(index, d)


def counts(index: int, d: Optional[int] = None) -> int:
    """Number of nodes, internal ones included, in the subtree at ``index``."""
    if d is None:
        d = depth(index)
    return (1 << (d + 1)) - 1


def count_leaves(index: int, d: Optional[int] = None) -> int:
    if d is None:
        d = depth(index)
    return 1 << d


def full_roots(index: int) -> List[int]:
    """
    Roots of the full subtrees that together cover the first ``index // 2``
    leaves, left to right.

    Each root corresponds to one set bit of the leaf count, largest first.
    ``index`` must be a leaf boundary (even), e.g. ``full_roots(10) == [3, 8]``.
    """
    if index & 0x01:
        raise InvalidArgumentError(
            f"full_roots({index}): only leaf-level boundaries (even indices) "
            "have a full-root decomposition"
        )

    result: List[int] = []
    remaining = index >> 1
    # Flat index of the first leaf not yet covered
    start = 0
    while remaining > 0:
        factor = 1
        while factor * 2 <= remaining:
            factor *= 2
        result.append(start + factor - 1)
        start += 2 * factor
        remaining -= factor
    return result
