from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict

from . import tree_math
from .cursor import Cursor


_MOVES = {
    "next": Cursor.next,
    "prev": Cursor.prev,
    "parent": Cursor.parent,
    "left-child": Cursor.left_child,
    "right-child": Cursor.right_child,
    "left-span": Cursor.left_span,
    "right-span": Cursor.right_span,
    "sibling": Cursor.sibling,
    "next-tree": Cursor.next_tree,
    "prev-tree": Cursor.prev_tree,
}


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {text}")
    return value


def describe(i: int) -> Dict[str, Any]:
    """Everything the index arithmetic knows about a single node."""
    d = tree_math.depth(i)
    c = tree_math.children(i, d)
    return {
        "index": i,
        "depth": d,
        "offset": tree_math.offset(i, d),
        "step_size": tree_math.step_size(d),
        "sibling": tree_math.sibling(i, d),
        "parent": tree_math.parent(i, d),
        "children": list(c) if c is not None else None,
        "spans": list(tree_math.spans(i, d)),
        "counts": tree_math.counts(i, d),
        "count_leaves": tree_math.count_leaves(i, d),
    }


def _cursor_state(move: str, c: Cursor) -> Dict[str, Any]:
    return {
        "move": move,
        "index": c.index,
        "depth": c.depth,
        "offset": c.offset,
        "step_size": c.step_size,
    }


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="flattree")
    sub = p.add_subparsers(dest="cmd", required=True)
    ins = sub.add_parser("inspect")
    ins.add_argument("index", type=_non_negative)
    idx = sub.add_parser("index")
    idx.add_argument("depth", type=_non_negative)
    idx.add_argument("offset", type=_non_negative)
    fr = sub.add_parser("full-roots")
    fr.add_argument("index", type=_non_negative)
    walk = sub.add_parser("walk")
    walk.add_argument("start", type=_non_negative)
    walk.add_argument("moves", nargs="+", choices=sorted(_MOVES))
    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    if args.cmd == "inspect":
        print(json.dumps(describe(args.index)))
        return 0
    if args.cmd == "index":
        print(json.dumps({"index": tree_math.index(args.depth, args.offset)}))
        return 0
    if args.cmd == "full-roots":
        try:
            roots = tree_math.full_roots(args.index)
        except tree_math.InvalidArgumentError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        print(json.dumps({"index": args.index, "full_roots": roots}))
        return 0
    if args.cmd == "walk":
        c = Cursor.at(args.start)
        steps = [_cursor_state("seek", c)]
        for move in args.moves:
            _MOVES[move](c)
            steps.append(_cursor_state(move, c))
        print(json.dumps(steps))
        return 0
    return 2


if __name__ == "__main__":
    sys.exit(main())
