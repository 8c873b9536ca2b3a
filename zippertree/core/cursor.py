"""Cursor (zipper) over a ZipperTree.

The Cursor is the only component external callers touch. It owns the root
node, and through it the whole tree, and keeps a position (``current``)
that every navigating or mutating call updates. The position is always a
node reachable from the root; it is never None.
"""

import logging
import sys
from dataclasses import replace
from typing import (
    Any,
    Callable,
    Generic,
    List,
    Optional,
    TextIO,
    Tuple,
    TypeVar,
)

from ..config import CursorConfig
from ..errors import AtRootError, BranchOutOfRangeError, NegativeBranchError
from .node import Node

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")
Acc = TypeVar("Acc")


class Cursor(Generic[T]):
    """Navigable position over an owned, append-only N-ary tree.

    New nodes only enter the tree through ``create_branch``, which appends a
    child to the current node and moves onto it. ``step_back`` retreats
    toward the root and ``step_forward`` descends into an existing branch.

    Example:
        >>> cursor = Cursor(-1)
        >>> cursor.create_branch(0)
        >>> cursor.step_back()
        >>> cursor.create_branch(1)
        >>> cursor.step_back()
        >>> cursor.map_branches(lambda v: v * 10)
        [0, 10]
    """

    def __init__(self,
                 *args: Any,
                 config: Optional[CursorConfig] = None,
                 factory: Optional[Callable[..., T]] = None,
                 **kwargs: Any):
        """Create a tree holding only a root, with the cursor on it.

        Args:
            *args: Root value, or the arguments passed to the factory
            config: Cursor configuration (default CursorConfig())
            factory: Builds node values from arguments. Overrides
                ``config.factory`` when given.
            **kwargs: Keyword arguments passed to the factory

        Raises:
            ValueError: If the configuration is invalid
            TypeError: If the arguments don't describe a single value
        """
        config = config or CursorConfig()
        if factory is not None:
            config = replace(config, factory=factory)

        config_errors = config.validate()
        if config_errors:
            raise ValueError(f"Invalid configuration: {'; '.join(config_errors)}")

        self.config = config
        if not args and not kwargs and config.factory is None:
            root_value = None
        else:
            root_value = self._make_value(args, kwargs)

        self._root: Node[T] = Node(None, root_value)
        self._current: Node[T] = self._root

    def _make_value(self, args: Tuple[Any, ...], kwargs: dict) -> T:
        """Build a node value from call arguments."""
        if self.config.factory is not None:
            return self.config.factory(*args, **kwargs)
        if len(args) != 1 or kwargs:
            raise TypeError(
                "Without a factory exactly one positional value is expected, "
                f"got {len(args)} positional and {len(kwargs)} keyword argument(s)"
            )
        return args[0]

    @property
    def root(self) -> Node[T]:
        """The root node of the tree."""
        return self._root

    @property
    def current(self) -> Node[T]:
        """The node under the cursor."""
        return self._current

    @property
    def value(self) -> T:
        """Value held by the node under the cursor."""
        return self._current.value

    @property
    def depth(self) -> int:
        """Distance from the root to the cursor position."""
        return self._current.depth()

    def path(self) -> List[int]:
        """Branch indices leading from the root to the cursor position.

        Replaying them with ``step_forward`` from the root reaches the
        current node again.
        """
        indices = []
        node = self._current
        parent = node.parent
        while parent is not None:
            indices.append(next(i for i, child in enumerate(parent.children) if child is node))
            node = parent
            parent = node.parent
        indices.reverse()
        return indices

    # Backward navigation

    def can_step_back(self) -> bool:
        """Returns True unless the cursor is on the root."""
        return self._current.parent is not None

    def step_back(self, n: int = 1) -> None:
        """Move the cursor ``n`` steps toward the root.

        Steps are taken one at a time. If one fails, the error propagates
        immediately and the steps already taken are kept: the cursor stays
        on the ancestor it had reached.

        Args:
            n: Number of steps (zero or negative is a no-op)

        Raises:
            AtRootError: If the root is reached before ``n`` steps are taken
        """
        for _ in range(n):
            self._step_back_once()

    def _step_back_once(self) -> None:
        parent = self._current.parent
        if parent is None:
            logger.debug("step_back refused at root")
            raise AtRootError()
        self._current = parent

    def go_to_root(self) -> None:
        """Move the cursor to the root. Never raises."""
        self._current = self._root

    # Forward navigation

    def can_step_forward(self) -> bool:
        """Returns True if the current node has at least one branch."""
        return not self._current.is_leaf()

    def find_branch(self, predicate: Callable[[T], bool]) -> int:
        """Index of the first branch whose value satisfies ``predicate``.

        Returns:
            Branch index, or NOT_FOUND (-1)
        """
        return self._current.find_child_index(predicate)

    def step_forward(self, branch: int) -> None:
        """Move the cursor onto the child at index ``branch``.

        On failure the cursor does not move.

        Raises:
            NegativeBranchError: If branch is negative
            BranchOutOfRangeError: If branch >= number of branches
        """
        available = len(self._current.children)
        if branch < 0:
            logger.debug("step_forward refused negative branch %d", branch)
            raise NegativeBranchError(branch, available)
        if branch >= available:
            logger.debug("step_forward refused branch %d of %d", branch, available)
            raise BranchOutOfRangeError(branch, available)
        self._current = self._current.children[branch]

    def create_branch(self, *args: Any, **kwargs: Any) -> None:
        """Append a new branch to the current node and move onto it.

        Args:
            *args: The new value, or arguments for the configured factory
            **kwargs: Keyword arguments for the configured factory
        """
        value = self._make_value(args, kwargs)
        self._current.add_child(value)
        self._current = self._current.children[-1]

    def available_branches(self) -> Tuple[Node[T], ...]:
        """Read-only snapshot of the current node's branches."""
        return tuple(self._current.children)

    # Bulk operations over the current node's branches

    def map_branches(self, transform: Callable[[T], R]) -> List[R]:
        """Apply ``transform`` to each branch value, in order."""
        return self._current.map_children(transform)

    def for_each_branch(self, visitor: Callable[[T], Any]) -> None:
        """Call ``visitor`` on each branch value, discarding results."""
        self._current.for_each_child(visitor)

    def fold_children(self, combiner: Callable[[T, Acc], Acc], initial: Acc) -> Acc:
        """Left-fold the branch values as ``combiner(value, acc)``."""
        return self._current.fold_children(combiner, initial)

    def print_tree(self, output: Optional[TextIO] = None) -> None:
        """Print the whole tree from the root, wherever the cursor is.

        Args:
            output: Stream to write to (default sys.stdout)
        """
        output = output if output is not None else sys.stdout
        self._root.print_tree(output, 0, self.config.print_config)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(current={self._current.value!r}, depth={self.depth})"


# The cursor is a zipper over the tree
Zipper = Cursor
