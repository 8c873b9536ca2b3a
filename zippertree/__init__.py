"""ZipperTree - Mutable N-ary Tree with a Zipper Cursor.

ZipperTree provides a generic, in-memory, append-only tree whose every
mutation and navigation goes through a single Cursor:

    from zippertree import Cursor

    cursor = Cursor(-1)           # root holds -1, cursor on root
    cursor.create_branch(0)       # append child 0 and move onto it
    cursor.step_back()            # back to the root
    cursor.print_tree()

Nodes are never deleted and never move once created, so a node reference
stays valid for as long as the cursor that owns the tree.
"""

__version__ = "0.1.0"

from .core import Node, NOT_FOUND, Cursor, Zipper
from .errors import (
    ZipperError,
    AtRootError,
    InvalidBranchError,
    NegativeBranchError,
    BranchOutOfRangeError,
    InvalidStepError,
)
from .config import PrintConfig, PrintStyle, CursorConfig
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    StopOnErrorPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
)
from .api import (
    parse_step,
    run_steps,
    build_tree,
    render_tree,
    iter_nodes,
    count_nodes,
    find_nodes,
    get_tree_paths,
    get_leaf_values,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'Node',
    'NOT_FOUND',
    'Cursor',
    'Zipper',
    # Errors
    'ZipperError',
    'AtRootError',
    'InvalidBranchError',
    'NegativeBranchError',
    'BranchOutOfRangeError',
    'InvalidStepError',
    # Config
    'PrintConfig',
    'PrintStyle',
    'CursorConfig',
    # Error policies
    'ErrorPolicy',
    'FailFastPolicy',
    'StopOnErrorPolicy',
    'ContinueOnErrorsPolicy',
    'CollectErrorsPolicy',
    # API
    'parse_step',
    'run_steps',
    'build_tree',
    'render_tree',
    'iter_nodes',
    'count_nodes',
    'find_nodes',
    'get_tree_paths',
    'get_leaf_values',
    'get_tree_stats',
]
