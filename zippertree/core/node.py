"""Node abstraction for ZipperTree.

A Node owns one value and an insertion-ordered list of child nodes. It is
an internal building block: callers reach nodes through a Cursor, which owns
the root and with it the whole tree.

Ownership runs strictly downward. ``children`` holds the child objects;
the parent link is a weak reference so a child never keeps its parent
alive. Children are stored as references in a list, so appending a sibling
never moves an existing node: a node reference stays valid for the lifetime
of the tree.
"""

import sys
import weakref
from typing import (
    Any,
    Callable,
    Generic,
    Iterator,
    List,
    Optional,
    TextIO,
    Tuple,
    TypeVar,
)

from ..config import PrintConfig

T = TypeVar("T")
R = TypeVar("R")
Acc = TypeVar("Acc")

# Returned by find_child_index when no child matches
NOT_FOUND = -1


class Node(Generic[T]):
    """A single element of the tree, owning a value and its children.

    Attributes:
        value: The payload, opaque to the tree
        children: Child nodes in insertion order
    """

    def __init__(self, parent: Optional['Node[T]'], value: T):
        """Build a node.

        Args:
            parent: Parent node, or None for the root
            value: Payload stored in this node
        """
        self.value = value
        self.children: List['Node[T]'] = []
        self._parent = weakref.ref(parent) if parent is not None else None

    @property
    def parent(self) -> Optional['Node[T]']:
        """The parent node, or None for the root."""
        if self._parent is None:
            return None
        return self._parent()

    def is_root(self) -> bool:
        """Returns True if this node has no parent."""
        return self.parent is None

    def is_leaf(self) -> bool:
        """Returns True if this node has no children."""
        return not self.children

    def depth(self) -> int:
        """Number of edges between this node and the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def add_child(self, value: T) -> None:
        """Append a new child holding ``value``.

        Args:
            value: Payload for the new child
        """
        self.children.append(Node(self, value))

    def find_child_index(self, predicate: Callable[[T], bool]) -> int:
        """Find the first child whose value satisfies ``predicate``.

        Children are scanned in insertion order and scanning stops at the
        first match.

        Args:
            predicate: Called with each child's value

        Returns:
            Index of the first matching child, or NOT_FOUND (-1)
        """
        for index, child in enumerate(self.children):
            if predicate(child.value):
                return index
        return NOT_FOUND

    def for_each_child(self, visitor: Callable[[T], Any]) -> None:
        """Call ``visitor`` on every child value, discarding the results."""
        for child in self.children:
            visitor(child.value)

    def map_children(self, transform: Callable[[T], R]) -> List[R]:
        """Apply ``transform`` to every child value.

        Returns:
            Results in the same order as ``children``
        """
        return [transform(child.value) for child in self.children]

    def fold_children(self, combiner: Callable[[T, Acc], Acc], initial: Acc) -> Acc:
        """Left-fold the child values into a single result.

        The combiner is called as ``combiner(value, acc)``: value first,
        accumulator second. For children [c1, c2, c3] the result is
        ``combiner(c3, combiner(c2, combiner(c1, initial)))``.

        Args:
            combiner: Function of (child value, accumulator)
            initial: Starting accumulator

        Returns:
            The final accumulator
        """
        acc = initial
        for child in self.children:
            acc = combiner(child.value, acc)
        return acc

    def walk(self,
             depth: int = 0,
             max_depth: Optional[int] = None) -> Iterator[Tuple['Node[T]', int]]:
        """Traverse this subtree depth-first, pre-order.

        Uses an explicit stack so long chains don't hit the recursion limit.

        Args:
            depth: Depth reported for this node
            max_depth: Don't descend below this depth (None = unlimited)

        Yields:
            Tuples of (node, depth), parents before children
        """
        stack = [(self, depth)]
        while stack:
            node, node_depth = stack.pop()
            yield node, node_depth
            if max_depth is not None and node_depth >= max_depth:
                continue
            # Reversed so the first child is popped first
            for child in reversed(node.children):
                stack.append((child, node_depth + 1))

    def print_tree(self,
                   output: Optional[TextIO] = None,
                   depth: int = 0,
                   config: Optional[PrintConfig] = None) -> None:
        """Print this subtree, one node per line, parents before children.

        Args:
            output: Stream to write to (default sys.stdout)
            depth: Depth of this node in the printout
            config: Line layout (default PrintConfig())
        """
        output = output if output is not None else sys.stdout
        config = config or PrintConfig()
        for node, node_depth in self.walk(depth):
            output.write(config.format_line(node.value, node_depth) + "\n")

    def __iter__(self) -> Iterator['Node[T]']:
        return iter(self.children)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r}, {len(self.children)} children)"
