"""flattree: flat-tree addressing for append-only Merkle-style trees."""
from .cursor import Cursor
from .tree_math import (
    InvalidArgumentError,
    children,
    count_leaves,
    counts,
    depth,
    full_roots,
    index,
    is_depth_n,
    left_child,
    left_span,
    offset,
    parent,
    right_child,
    right_span,
    sibling,
    spans,
    step_size,
)

__version__: str = "0.1.0"

__all__ = [
    "Cursor",
    "InvalidArgumentError",
    "children",
    "count_leaves",
    "counts",
    "depth",
    "full_roots",
    "index",
    "is_depth_n",
    "left_child",
    "left_span",
    "offset",
    "parent",
    "right_child",
    "right_span",
    "sibling",
    "spans",
    "step_size",
]
