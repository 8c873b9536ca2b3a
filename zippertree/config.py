"""Configuration system for ZipperTree.

This module defines how users control the diagnostic tree printout and how
a cursor builds node values from the arguments given to ``create_branch``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional


class PrintStyle(Enum):
    """How each line of a tree printout is laid out.

    FIELD reproduces an iostream ``setw``: the value is right-aligned in a
    field of ``depth * indent_width`` characters, so a value wider than the
    field is printed unpadded.
    """
    FIELD = "field"        # Right-aligned in a depth-sized field
    INDENT = "indent"      # Left padding of depth * indent_width spaces
    GUIDES = "guides"      # "|   " guide per level


@dataclass
class PrintConfig:
    """Configuration for ``print_tree``."""

    indent_width: int = 4
    style: PrintStyle = PrintStyle.FIELD
    formatter: Callable[[Any], str] = str  # Turns a node value into text

    def format_line(self, value: Any, depth: int) -> str:
        """Format one node as a single line (without the newline).

        Args:
            value: Node payload
            depth: Depth of the node, root is 0

        Returns:
            The formatted line
        """
        text = self.formatter(value)
        width = depth * self.indent_width

        if self.style == PrintStyle.FIELD:
            return text.rjust(width)
        if self.style == PrintStyle.INDENT:
            return " " * width + text
        # GUIDES
        guide = "|" + " " * max(self.indent_width - 1, 0)
        return guide * depth + text

    @classmethod
    def indented(cls, indent_width: int = 2) -> 'PrintConfig':
        """Create config for a plain left-indented printout.

        Args:
            indent_width: Spaces per level

        Returns:
            PrintConfig using PrintStyle.INDENT
        """
        return cls(indent_width=indent_width, style=PrintStyle.INDENT)

    @classmethod
    def guides(cls, indent_width: int = 4) -> 'PrintConfig':
        """Create config that draws a guide bar for every level."""
        return cls(indent_width=indent_width, style=PrintStyle.GUIDES)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.indent_width < 0:
            errors.append("indent_width cannot be negative")

        if not isinstance(self.style, PrintStyle):
            errors.append(f"style must be a PrintStyle, got {self.style!r}")

        if not callable(self.formatter):
            errors.append("formatter must be callable")

        return errors


@dataclass
class CursorConfig:
    """Complete configuration for a Cursor.

    Attributes:
        print_config: Layout used by ``Cursor.print_tree``
        factory: Builds node values from ``create_branch`` arguments.
            When None, ``create_branch`` takes the value itself.
    """

    print_config: PrintConfig = field(default_factory=PrintConfig)
    factory: Optional[Callable[..., Any]] = None

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = list(self.print_config.validate())

        if self.factory is not None and not callable(self.factory):
            errors.append("factory must be callable")

        return errors
