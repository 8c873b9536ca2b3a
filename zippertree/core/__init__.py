"""Core data structures for ZipperTree.

This module contains the tree node and the cursor that owns and navigates it.
"""

from .node import Node, NOT_FOUND
from .cursor import Cursor, Zipper

__all__ = [
    "Node",
    "NOT_FOUND",
    "Cursor",
    "Zipper",
]
