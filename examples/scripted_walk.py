#!/usr/bin/env python3
"""Build trees from step scripts and compare error policies.

The same script, which backs past the root halfway through, is run under
each policy to show where the cursor ends up and what the tree looks like.
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from zippertree import (
    Cursor,
    PrintConfig,
    CursorConfig,
    StopOnErrorPolicy,
    ContinueOnErrorsPolicy,
    run_steps,
    render_tree,
    get_tree_stats,
)

SCRIPT = ["+1", "+2", "<1", "+3", "<4", "+4", ">0"]


def demo_policy(name, policy):
    print(f"\n=== {name} ===")
    cursor = Cursor("root", config=CursorConfig(print_config=PrintConfig.guides()))
    completed = run_steps(cursor, SCRIPT, policy)

    print(f"Completed {completed}/{len(SCRIPT)} steps, cursor at {cursor.value!r}")
    print(render_tree(cursor), end="")

    stats = get_tree_stats(cursor)
    print(f"Nodes: {stats['total_nodes']}, leaves: {stats['leaf_nodes']}, "
          f"max depth: {stats['max_depth']}")


def main():
    demo_policy("Stop on first error", StopOnErrorPolicy())
    demo_policy("Continue on errors", ContinueOnErrorsPolicy())


if __name__ == "__main__":
    main()
