"""Building the satellite link tree and answering queries on it."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from satlink.satellite import Satellite, read_satellites

_DIGITS = "0123456789"


def _next_token(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"unexpected end of input while reading {what}") from None


def _read_count(tokens: Iterator[str], what: str) -> int:
    text = _next_token(tokens, what)
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"invalid {what}: {text!r}") from None


def _link_parents(root: Satellite) -> None:
    root.parent = None
    stack = [root]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                child.parent = node
                stack.append(child)


def build_tree(tokens: Iterable[str]) -> Satellite:
    """Read the satellites and join the two weakest repeatedly into one tree.

    Returns the root of the tree, with parent links filled in.
    """
    heap = read_satellites(iter(tokens))
    if not heap:
        raise ValueError("at least one satellite is required")
    while len(heap) > 1:
        left = heap.pop()
        right = heap.pop()
        heap.push(
            Satellite(
                left.data + right.data,
                left.name + right.name,
                left=left,
                right=right,
            )
        )
    root = heap.pop()
    _link_parents(root)
    return root


def decode(root: Satellite, tokens: Iterable[str]) -> str:
    """Decode a count of bit strings into the names of the satellites reached."""
    stream = iter(tokens)
    count = _read_count(stream, "message count")
    out: List[str] = []
    for _ in range(count):
        line = _next_token(stream, "encoded message")
        if line and root.is_leaf():
            raise ValueError("cannot decode a message with a single satellite")
        node = root
        pos = 0
        while pos < len(line):
            child = node.left if line[pos] == "0" else node.right
            if child is None:
                out.append(f"{node.name} ")
                node = root
            else:
                node = child
                pos += 1
        if node.is_leaf():
            out.append(node.name)
        out.append("\n")
    return "".join(out)


def _contains_name(haystack: str, name: str) -> bool:
    pos = haystack.find(name)
    if pos == -1:
        return False
    # A two-character name such as K1 must not match inside K11.
    if len(name) == 2:
        while pos + 2 < len(haystack) and haystack[pos + 2] in _DIGITS:
            pos = haystack.find(name, pos + 1)
            if pos == -1:
                return False
    return True


def _path_to(root: Satellite, name: str) -> str:
    bits: List[str] = []
    node: Optional[Satellite] = root
    while node is not None and not node.is_leaf():
        if node.left is not None and _contains_name(node.left.name, name):
            bits.append("0")
            node = node.left
        elif node.right is not None and _contains_name(node.right.name, name):
            bits.append("1")
            node = node.right
        else:
            break
    return "".join(bits)


def encode(root: Satellite, tokens: Iterable[str]) -> str:
    """Encode a count of satellite names as one line of bits."""
    stream = iter(tokens)
    count = _read_count(stream, "name count")
    codes = [_path_to(root, _next_token(stream, "satellite name")) for _ in range(count)]
    return "".join(codes) + "\n"


def common_parent(root: Satellite, tokens: Iterable[str]) -> str:
    """Find the nearest node whose name covers every satellite named."""
    stream = iter(tokens)
    count = _read_count(stream, "name count")
    name = _next_token(stream, "satellite name")

    node = root
    while node.name != name:
        start = node
        if node.left is not None and name in node.left.name:
            node = node.left
        if node.right is not None and name in node.right.name:
            node = node.right
        if node is start:
            raise ValueError(f"unknown satellite: {name!r}")

    for _ in range(1, count):
        name = _next_token(stream, "satellite name")
        while node.parent is not None and name not in node.name:
            node = node.parent

    return f"{node.name}\n"