"""High-level API for ZipperTree.

This module provides simple, functional interfaces for common tasks: building
a tree from a script of cursor steps, and querying or rendering a finished
tree. These functions wrap the Cursor for ease of use in simple cases; they
never move the cursor unless their name says so.
"""

import io
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .config import CursorConfig, PrintConfig
from .core.cursor import Cursor
from .core.node import Node
from .error_policies import ErrorPolicy, FailFastPolicy
from .errors import InvalidStepError, ZipperError

# A step is ("branch", value), ("back", n), ("forward", index)
# or the compact string forms "+value", "<n", ">index".
Step = Union[Tuple[str, Any], str]

_STEP_ALIASES = {
    "branch": "branch",
    "create": "branch",
    "+": "branch",
    "back": "back",
    "<": "back",
    "forward": "forward",
    ">": "forward",
}


def parse_step(step: Step) -> Tuple[str, Any]:
    """Normalize a step instruction to ``(kind, argument)``.

    String steps carry an integer argument: ``"+5"`` creates a branch with
    value 5, ``"<3"`` steps back three times, ``">0"`` steps into branch 0.

    Args:
        step: Step instruction

    Returns:
        Tuple of (kind, argument) with kind one of branch/back/forward

    Raises:
        InvalidStepError: If the step can't be understood

    Example:
        >>> parse_step("<5")
        ('back', 5)
        >>> parse_step(("branch", "x"))
        ('branch', 'x')
    """
    if isinstance(step, str):
        if len(step) < 2 or step[0] not in "+<>":
            raise InvalidStepError(step, "expected +N, <N or >N")
        try:
            argument = int(step[1:])
        except ValueError:
            raise InvalidStepError(step, "argument is not an integer") from None
        if step[0] == "<" and argument < 0:
            raise InvalidStepError(step, "step count cannot be negative")
        return _STEP_ALIASES[step[0]], argument

    if isinstance(step, tuple) and len(step) == 2:
        if not isinstance(step[0], str):
            raise InvalidStepError(step, "step kind must be a string")
        kind = _STEP_ALIASES.get(step[0])
        if kind is None:
            raise InvalidStepError(step, f"unknown step kind {step[0]!r}")
        if kind in ("back", "forward") and not isinstance(step[1], int):
            raise InvalidStepError(step, f"{kind} takes an integer")
        if kind == "back" and step[1] < 0:
            raise InvalidStepError(step, "step count cannot be negative")
        return kind, step[1]

    raise InvalidStepError(step)


def run_steps(
    cursor: Cursor,
    steps: Iterable[Step],
    policy: Optional[ErrorPolicy] = None,
) -> int:
    """Apply a script of steps to a cursor.

    Each failing step is handed to ``policy``. The default FailFastPolicy
    re-raises, leaving the cursor where the failing step left it (a
    multi-step back keeps the steps it managed to take).

    Args:
        cursor: Cursor to drive
        steps: Step instructions, see ``parse_step``
        policy: Error policy (default FailFastPolicy)

    Returns:
        Number of steps that completed successfully

    Raises:
        InvalidStepError: If a step can't be parsed (never passed to the policy)
        ZipperError: Whatever the policy re-raises

    Example:
        >>> cursor = Cursor(-1)
        >>> run_steps(cursor, ["+0", "+1", "<2", "+2"])
        4
        >>> cursor.root.map_children(lambda v: v)
        [0, 2]
    """
    policy = policy or FailFastPolicy()
    completed = 0

    for index, step in enumerate(steps):
        kind, argument = parse_step(step)
        try:
            if kind == "branch":
                cursor.create_branch(argument)
            elif kind == "back":
                cursor.step_back(argument)
            else:
                cursor.step_forward(argument)
        except ZipperError as e:
            if not policy.handle(e, step, index):
                break
            continue
        completed += 1

    return completed


def build_tree(
    root_value: Any,
    steps: Iterable[Step] = (),
    policy: Optional[ErrorPolicy] = None,
    config: Optional[CursorConfig] = None,
) -> Cursor:
    """Create a cursor seeded with ``root_value`` and run ``steps`` on it.

    Args:
        root_value: Value of the root node
        steps: Step instructions, see ``parse_step``
        policy: Error policy (default FailFastPolicy)
        config: Cursor configuration

    Returns:
        The cursor, positioned wherever the script left it
    """
    cursor = Cursor(root_value, config=config)
    run_steps(cursor, steps, policy)
    return cursor


def render_tree(cursor: Cursor, config: Optional[PrintConfig] = None) -> str:
    """Return the whole-tree printout as a string.

    Args:
        cursor: Cursor whose tree to render
        config: Line layout (default the cursor's own print config)
    """
    buffer = io.StringIO()
    cursor.root.print_tree(buffer, 0, config or cursor.config.print_config)
    return buffer.getvalue()


def iter_nodes(cursor: Cursor, max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:
    """Walk the whole tree pre-order.

    Args:
        cursor: Cursor whose tree to walk
        max_depth: Don't descend below this depth (None = unlimited)

    Yields:
        Tuples of (node, depth)
    """
    yield from cursor.root.walk(max_depth=max_depth)


def count_nodes(cursor: Cursor, **kwargs) -> int:
    """Count nodes in the tree, root included.

    Args:
        cursor: Cursor whose tree to count
        **kwargs: Options passed to ``iter_nodes``
    """
    count = 0
    for _ in iter_nodes(cursor, **kwargs):
        count += 1
    return count


def find_nodes(cursor: Cursor, predicate: Callable[[Any], bool], **kwargs) -> Iterator[Node]:
    """Find nodes anywhere in the tree whose value satisfies ``predicate``.

    Yields:
        Matching nodes in pre-order
    """
    for node, _ in iter_nodes(cursor, **kwargs):
        if predicate(node.value):
            yield node


def get_tree_paths(cursor: Cursor) -> Iterator[List[Any]]:
    """Get the value path from the root to each leaf.

    Yields:
        Lists of values, root first
    """
    path: List[Any] = []
    for node, depth in cursor.root.walk():
        del path[depth:]
        path.append(node.value)
        if node.is_leaf():
            yield list(path)


def get_leaf_values(cursor: Cursor) -> List[Any]:
    """Values of all leaves, in pre-order."""
    return [node.value for node, _ in cursor.root.walk() if node.is_leaf()]


def get_tree_stats(cursor: Cursor) -> Dict[str, Any]:
    """Get statistics about the tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, max_depth, max_branching,
        nodes_by_depth and cursor_depth
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'max_branching': 0,
        'nodes_by_depth': {},
        'cursor_depth': cursor.depth,
    }

    for node, depth in cursor.root.walk():
        stats['total_nodes'] += 1
        if node.is_leaf():
            stats['leaf_nodes'] += 1
        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['max_branching'] = max(stats['max_branching'], len(node.children))
        stats['nodes_by_depth'][depth] = stats['nodes_by_depth'].get(depth, 0) + 1

    return stats
