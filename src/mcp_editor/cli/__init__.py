"""Command line interface for MCP Editor."""

from mcp_editor.cli.app import app

__all__ = ["app"]
