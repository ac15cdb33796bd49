"""Shared response helper functions for the dispatcher.

This module provides the standardized response format returned at the
dispatcher boundary. Engine operations return plain strings or raise
``EditorError``; the dispatcher wraps both outcomes with these helpers so the
transport can handle results uniformly.
"""

from typing import Any


def create_success_response(result: Any, message: str = "") -> dict:
    """Create standardized success response.

    Args:
        result: Operation result (the engine's output text)
        message: Optional success message for logging/display

    Returns:
        Structured response dict with success=True

    Example:
        >>> response = create_success_response(
        ...     result="File created successfully at: /tmp/a.txt",
        ...     message="create completed"
        ... )
        >>> response["success"]
        True
    """
    return {
        "success": True,
        "result": result,
        "message": message,
    }


def create_error_response(error: str, message: str) -> dict:
    """Create standardized error response.

    Args:
        error: Machine-readable error code (e.g., "no_match")
        message: Human-friendly error message

    Returns:
        Structured response dict with success=False

    Example:
        >>> response = create_error_response(
        ...     error="not_found",
        ...     message="The path /tmp/missing.txt does not exist. Please provide a valid path."
        ... )
        >>> response
        {'success': False, 'error': 'not_found', 'message': '...'}
    """
    return {
        "success": False,
        "error": error,
        "message": message,
    }
