"""Stateful cursor over flat-tree coordinates.

The cursor caches index, step size, offset and depth together so relative
moves are O(1). Only ``seek`` searches for a depth. A cursor is a plain
mutable value with no locking; each traversal should own its own instance
(``copy()`` gives an independent one).
"""
from __future__ import annotations

from dataclasses import dataclass, replace

from . import tree_math


@dataclass
class Cursor:
    """
    Position in the flat tree.

    All four fields are updated together by every move and always satisfy
    ``index == tree_math.index(depth, offset)`` and
    ``step_size == tree_math.step_size(depth)``. Moves return the new index.
    """

    index: int = 0
    step_size: int = 2
    offset: int = 0
    depth: int = 0

    @classmethod
    def at(cls, index: int) -> "Cursor":
        c = cls()
        c.seek(index)
        return c

    def copy(self) -> "Cursor":
        return replace(self)

    def seek(self, index: int) -> None:
        assert index >= 0
        d = tree_math.depth(index)
        self.index = index
        self.step_size = tree_math.step_size(d)
        self.offset = tree_math.offset(index, d)
        self.depth = d

    def is_left(self) -> bool:
        return self.offset & 0x01 == 0

    def is_right(self) -> bool:
        return self.offset & 0x01 == 1

    def next(self) -> int:
        self.index += self.step_size
        self.offset += 1
        return self.index

    def prev(self) -> int:
        # Already leftmost on this row
        if self.offset == 0:
            return self.index
        self.index -= self.step_size
        self.offset -= 1
        return self.index

    def sibling(self) -> int:
        return self.next() if self.is_left() else self.prev()

    def parent(self) -> int:
        if self.is_left():
            self.index += self.step_size // 2
        else:
            self.index -= self.step_size // 2
        self.offset //= 2
        self.depth += 1
        self.step_size *= 2
        return self.index

    def left_child(self) -> int:
        if self.depth == 0:
            return self.index
        self.depth -= 1
        self.step_size //= 2
        self.index -= self.step_size // 2
        self.offset *= 2
        return self.index

    def right_child(self) -> int:
        if self.depth == 0:
            return self.index
        self.depth -= 1
        self.step_size //= 2
        self.index += self.step_size // 2
        self.offset = 2 * self.offset + 1
        return self.index

    def left_span(self) -> int:
        """Drop to the leftmost leaf of the current subtree in one jump."""
        edge = (1 << self.depth) - 1
        self.offset <<= self.depth
        self.index -= edge
        self.depth = 0
        self.step_size = 2
        return self.index

    def right_span(self) -> int:
        """Drop to the rightmost leaf of the current subtree in one jump."""
        edge = (1 << self.depth) - 1
        self.offset = ((self.offset + 1) << self.depth) - 1
        self.index += edge
        self.depth = 0
        self.step_size = 2
        return self.index

    def next_tree(self) -> int:
        """Move to the first leaf after the current subtree."""
        self.index += (self.step_size // 2) + 1
        self.offset = self.index // 2
        self.depth = 0
        self.step_size = 2
        return self.index

    def prev_tree(self) -> int:
        """Move to the last leaf before the current subtree, or leaf 0."""
        if self.offset == 0:
            self.index = 0
        else:
            self.index -= (self.step_size // 2) + 1
        self.offset = self.index // 2
        self.depth = 0
        self.step_size = 2
        return self.index

    def full_root(self, index: int) -> bool:
        """
        Climb from a leaf to the largest full root whose leaves all lie
        before the leaf boundary ``index``.

        Returns False, leaving the cursor untouched, when the cursor is not on
        a leaf or ``index`` is not past it.
        """
        if index <= self.index or self.depth != 0:
            return False
        # The parent's right span is index + 3 * step_size // 2 - 1
        while self.is_left() and index > self.index + self.step_size + self.step_size // 2:
            self.parent()
        return True

    def contains(self, index: int) -> bool:
        """True when ``index`` is a node of the subtree rooted at the cursor."""
        half = self.step_size // 2
        if index > self.index:
            return index < self.index + half
        if index < self.index:
            return index > self.index - half
        return True

    def count_nodes(self) -> int:
        return self.step_size - 1

    def count_leaves(self) -> int:
        return self.step_size // 2
