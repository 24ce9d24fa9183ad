"""A binary search tree of satellites ordered by frequency then name."""

from __future__ import annotations

from typing import Optional

from satlink.satellite import Satellite, format_levels


def _compare(a: Satellite, b: Satellite) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


class SatelliteBST:
    """Binary search tree holding copies of the satellites inserted into it."""

    def __init__(self) -> None:
        self.root: Optional[Satellite] = None

    def insert(self, satellite: Satellite) -> None:
        """Insert a copy of the satellite; an equal one already present is kept."""
        node = Satellite(satellite.data, satellite.name)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            rc = _compare(current, node)
            if rc < 0:
                if current.right is None:
                    current.right = node
                    return
                current = current.right
            elif rc > 0:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                return

    def remove(self, satellite: Satellite) -> bool:
        """Remove the node equal to the satellite; return whether one was found."""
        self.root, removed = self._remove(self.root, satellite)
        return removed

    def _remove(
        self, node: Optional[Satellite], key: Satellite
    ) -> tuple[Optional[Satellite], bool]:
        if node is None:
            return None, False
        rc = _compare(key, node)
        if rc < 0:
            node.left, removed = self._remove(node.left, key)
            return node, removed
        if rc > 0:
            node.right, removed = self._remove(node.right, key)
            return node, removed

        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True

        # Replace with the smallest node of the right subtree.
        successor_parent = None
        successor = node.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        if successor_parent is not None:
            successor_parent.left = successor.right
        successor.left = node.left
        if node.right is not successor:
            successor.right = node.right
        return successor, True

    def format_levels(self) -> str:
        """Render the tree level by level as ``data-name`` entries."""
        return format_levels(self.root)