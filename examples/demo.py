#!/usr/bin/env python3
"""Demo driver for ZipperTree.

Seeds a tree with -1, then for i in 0..25 either steps back five levels
(when i % 6 == 5) or creates a branch holding i. A navigation error stops
the loop and is reported on stderr; the tree built so far is printed either
way and the script always exits 0.
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from zippertree import Cursor, ZipperError


def main() -> int:
    cursor = Cursor(-1)

    try:
        for i in range(26):
            if i % 6 == 5:
                cursor.step_back(5)
            else:
                cursor.create_branch(i)
    except ZipperError as e:
        print(f"Exception: {e}", file=sys.stderr)

    cursor.print_tree(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
