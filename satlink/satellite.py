"""Satellite nodes, input parsing and level-order printing."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from satlink.heap import MinHeap


@dataclass(eq=False)
class Satellite:
    """A satellite (or a link joining two) with its frequency and name."""

    data: int
    name: str
    left: Optional["Satellite"] = field(default=None, repr=False)
    right: Optional["Satellite"] = field(default=None, repr=False)
    parent: Optional["Satellite"] = field(default=None, repr=False)

    def __lt__(self, other: "Satellite") -> bool:
        return (self.data, self.name) < (other.data, other.name)

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None


def tokenize(text: str) -> Iterator[str]:
    """Split input text into whitespace-separated tokens."""
    return iter(text.split())


def _next_token(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"unexpected end of input while reading {what}") from None


def read_satellites(tokens: Iterable[str]) -> MinHeap[Satellite]:
    """Read a count followed by that many ``frequency name`` pairs into a min-heap."""
    stream = iter(tokens)
    count = int(_next_token(stream, "satellite count"))
    if count < 0:
        raise ValueError("satellite count must not be negative")
    heap: MinHeap[Satellite] = MinHeap()
    for _ in range(count):
        data = int(_next_token(stream, "satellite frequency"))
        name = _next_token(stream, "satellite name")
        heap.push(Satellite(data, name))
    return heap


def level_order(root: Optional[Satellite]) -> Iterator[List[Satellite]]:
    """Yield the nodes of the tree one level at a time, left to right."""
    if root is None:
        return
    queue = deque([root])
    while queue:
        level = list(queue)
        queue.clear()
        for node in level:
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        yield level


def format_levels(root: Optional[Satellite]) -> str:
    """Render the tree level by level as ``data-name`` entries."""
    if root is None:
        return ""
    lines = [
        "".join(f"{node.data}-{node.name} " for node in level) + "\n"
        for level in level_order(root)
    ]
    return "".join(lines) + "\n"