"""Base class for editor toolsets.

This module provides the abstract base class for creating toolsets. Toolsets
encapsulate related tools with shared dependencies, avoiding global state and
enabling dependency injection for testing.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from mcp_editor.config.schema import EditorSettings


class EditorToolset(ABC):
    """Base class for editor toolsets.

    Each toolset receives an EditorSettings instance with all necessary
    configuration, making it easy to substitute in tests.

    Example:
        >>> class MyTools(EditorToolset):
        ...     def get_tools(self):
        ...         return [self.my_tool]
        ...
        ...     async def my_tool(self, path: str) -> str:
        ...         return f"Processed: {path}"
    """

    def __init__(self, config: EditorSettings | None = None):
        """Initialize toolset with configuration.

        Args:
            config: Editor settings. Defaults to built-in settings when omitted.
        """
        self.config = config or EditorSettings()

    @abstractmethod
    def get_tools(self) -> list[Callable]:
        """Get list of tool functions.

        Subclasses must implement this method to return their tool functions.
        Tools are async callables that return a human-readable string and
        raise ``EditorError`` on failure.

        Returns:
            List of callable tool functions
        """
        pass
