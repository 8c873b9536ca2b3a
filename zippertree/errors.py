"""Error taxonomy for ZipperTree.

Every navigation failure is an ordinary, recoverable condition raised
synchronously at the offending call. The cursor never retries or recovers;
callers either catch these or pre-validate with ``can_step_back()`` and
``find_branch()``.
"""

from typing import Optional


class ZipperError(Exception):
    """Base class for all cursor navigation errors."""
    pass


class AtRootError(ZipperError):
    """Raised when stepping back from the root node."""

    def __init__(self, message: str = "Cursor.step_back: cannot step back from the root."):
        super().__init__(message)


class InvalidBranchError(ZipperError, IndexError):
    """Raised when stepping forward into a branch that does not exist.

    Attributes:
        branch: The branch index that was requested
        available: Number of branches at the cursor when the call was made
    """

    def __init__(self, message: str, branch: int, available: int):
        super().__init__(message)
        self.branch = branch
        self.available = available


class NegativeBranchError(InvalidBranchError):
    """Raised for a negative branch index.

    Usually means the caller passed the result of ``find_branch()`` without
    checking it against ``NOT_FOUND``.
    """

    def __init__(self, branch: int, available: int):
        super().__init__(
            f"Cursor.step_forward: invalid branch id {branch}\n"
            "\tpossibly did not check the result of Cursor.find_branch.",
            branch,
            available,
        )


class BranchOutOfRangeError(InvalidBranchError):
    """Raised for a branch index at or past the number of children."""

    def __init__(self, branch: int, available: int):
        super().__init__(
            f"Cursor.step_forward: invalid branch id {branch} "
            f"({available} branch(es) available)\n"
            "\tuse only the result of Cursor.find_branch.",
            branch,
            available,
        )


class InvalidStepError(ZipperError, ValueError):
    """Raised when a step instruction passed to ``run_steps`` can't be parsed."""

    def __init__(self, step: object, reason: Optional[str] = None):
        message = f"Invalid step instruction: {step!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.step = step
