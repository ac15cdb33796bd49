"""Test helpers and utilities.

This module provides shared utilities for testing:
- assertions: Custom assertions for dispatcher responses and previews
"""

from tests.helpers.assertions import (
    assert_error_response,
    assert_success_response,
    numbered_lines,
)

__all__ = [
    "assert_success_response",
    "assert_error_response",
    "numbered_lines",
]
