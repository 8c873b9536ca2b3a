"""
Error handling policies for ZipperTree.

This module provides a flexible error handling system through the Policy pattern,
allowing users to decide what happens when a step in a scripted walk fails
(see ``zippertree.api.run_steps``). The cursor itself never consults a policy:
it always raises.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import sys

from .errors import ZipperError


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors
    raised by cursor operations.
    """

    @abstractmethod
    def handle(self, error: ZipperError, step: Any, index: int) -> bool:
        """
        Handle an error raised while running a step.

        Args:
            error: The exception that was raised
            step: The step instruction that failed
            index: Position of the step in the script

        Returns:
            True to continue with the next step, False to stop the script.
            May re-raise the error instead.
        """
        pass


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping the script.

    This is the default behavior. The cursor is left wherever the failing
    step put it.
    """

    def handle(self, error: ZipperError, step: Any, index: int) -> bool:
        """Re-raise the error immediately."""
        raise error


class StopOnErrorPolicy(ErrorPolicy):
    """
    Policy that stops the script at the first error without raising.

    The error is kept on ``error`` and, when verbose, reported on stderr as
    ``Exception: <message>``.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print the error to stderr
        """
        self.error: Optional[ZipperError] = None
        self.failed_index: Optional[int] = None
        self.verbose = verbose

    def handle(self, error: ZipperError, step: Any, index: int) -> bool:
        self.error = error
        self.failed_index = index
        if self.verbose:
            print(f"Exception: {error}", file=sys.stderr)
        return False


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that logs errors and continues with the next step.

    Errors are collected for later inspection. This is useful when you want
    to apply as much of a script as possible despite some failures.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        self.errors: List[Dict[str, Any]] = []
        self.verbose = verbose

    def handle(self, error: ZipperError, step: Any, index: int) -> bool:
        """Record the error and keep going."""
        self.errors.append({
            'index': index,
            'step': step,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error),
        })

        if self.verbose:
            print(f"\nWARNING: Step {index} {step!r} failed: {error}", file=sys.stderr)

        return True

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts per error type
        """
        by_type: Dict[str, int] = {}
        for record in self.errors:
            by_type[record['error_type']] = by_type.get(record['error_type'], 0) + 1
        return {
            'total_errors': len(self.errors),
            'by_type': by_type,
            'failed_steps': [record['index'] for record in self.errors],
        }


class CollectErrorsPolicy(ErrorPolicy):
    """
    Policy that collects all errors without logging, for batch processing.

    Call ``raise_if_errors`` after the script to surface the first failure.
    """

    def __init__(self):
        self.errors: List[ZipperError] = []

    def handle(self, error: ZipperError, step: Any, index: int) -> bool:
        self.errors.append(error)
        return True

    def has_errors(self) -> bool:
        return bool(self.errors)

    def raise_if_errors(self) -> None:
        """Re-raise the first collected error, if any."""
        if self.errors:
            raise self.errors[0]
