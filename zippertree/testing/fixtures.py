"""Test fixtures for ZipperTree consumers.

These fixtures provide controlled access to tree shape for testing purposes
without exposing implementation details as part of the public API.
"""

from typing import Any, Dict, List

from ..core.cursor import Cursor
from ..core.node import Node


class TreeTestHelper:
    """Public test fixture for verifying the shape of a cursor's tree.

    This class provides a stable testing interface for checking what a
    sequence of cursor operations built, without walking nodes by hand.
    None of its methods move the cursor.

    Example:
        cursor = Cursor(-1)
        cursor.create_branch(0)
        helper = TreeTestHelper(cursor)

        assert helper.values_at_depth(1) == [0]
        assert helper.cursor_path_values() == [-1, 0]
    """

    def __init__(self, cursor: Cursor):
        """Initialize with the cursor under test.

        Args:
            cursor: Cursor whose tree is inspected
        """
        self._cursor = cursor

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - total_nodes: Number of nodes including the root
            - max_depth: Depth of the deepest node
            - root_children: Values of the root's children
            - cursor_value: Value under the cursor
            - cursor_depth: Depth of the cursor
        """
        total = 0
        max_depth = 0
        for _, depth in self._cursor.root.walk():
            total += 1
            max_depth = max(max_depth, depth)

        return {
            'total_nodes': total,
            'max_depth': max_depth,
            'root_children': self._cursor.root.map_children(lambda v: v),
            'cursor_value': self._cursor.value,
            'cursor_depth': self._cursor.depth,
        }

    def values_at_depth(self, depth: int) -> List[Any]:
        """Values of all nodes at ``depth``, in pre-order."""
        return [node.value for node, d in self._cursor.root.walk() if d == depth]

    def cursor_path_values(self) -> List[Any]:
        """Values from the root down to the cursor position."""
        values = []
        node = self._cursor.current
        while node is not None:
            values.append(node.value)
            node = node.parent
        values.reverse()
        return values

    def as_nested(self, node: Node = None) -> Any:
        """Tree as nested ``(value, [children...])`` tuples.

        Args:
            node: Subtree root (default the tree's root)
        """
        node = node if node is not None else self._cursor.root
        return (node.value, [self.as_nested(child) for child in node.children])

    def contains_node(self, node: Node) -> bool:
        """Check if ``node`` (by identity) is part of this tree."""
        return any(candidate is node for candidate, _ in self._cursor.root.walk())
