"""Command-line entry point running one task on an input file."""

from __future__ import annotations

import sys
from typing import List, Optional

from satlink.satellite import format_levels, tokenize
from satlink.tree import build_tree, common_parent, decode, encode

_USAGE = "usage: satlink -cN INPUT OUTPUT"


def run_task(task: str, text: str) -> str:
    """Build the tree from the text and run task 1 to 4; other tasks print nothing."""
    tokens = tokenize(text)
    root = build_tree(tokens)
    if task == "1":
        return format_levels(root)
    if task == "2":
        return decode(root, tokens)
    if task == "3":
        return encode(root, tokens)
    if task == "4":
        return common_parent(root, tokens)
    return ""


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 3:
        print(_USAGE, file=sys.stderr)
        return 1
    flag = args[0]
    task = flag[2] if len(flag) > 2 else ""
    in_path, out_path = args[-2], args[-1]

    try:
        with open(in_path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("ERROR OPEN FILE")
        return 1

    try:
        result = run_task(task, text)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        with open(out_path, "w", encoding="utf-8") as handle:
            handle.write(result)
    except OSError:
        print("ERROR OPEN FILE")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())