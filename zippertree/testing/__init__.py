"""Testing utilities for ZipperTree consumers."""

from .fixtures import TreeTestHelper

__all__ = ['TreeTestHelper']
