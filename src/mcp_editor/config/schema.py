"""Pydantic models for editor configuration schema."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from mcp_editor.config.constants import (
    DEFAULT_DATA_DIR,
    DEFAULT_LISTING_DEPTH,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SERVER_NAME,
    DEFAULT_SERVER_VERSION,
    DEFAULT_SNIPPET_LINES,
    DEFAULT_TAB_SIZE,
)

# Module-level constants for validation
VALID_LOG_LEVELS = {"debug", "info", "warning", "error", "critical"}


class EditorConfig(BaseModel):
    """Editing engine configuration."""

    snippet_lines: int = Field(
        default=DEFAULT_SNIPPET_LINES,
        ge=0,
        description="Lines of context shown above and below an edit in previews",
    )
    tab_size: int = Field(
        default=DEFAULT_TAB_SIZE,
        ge=1,
        description="Spaces substituted for each tab character",
    )
    listing_depth: int = Field(
        default=DEFAULT_LISTING_DEPTH,
        ge=1,
        description="Deepest directory level shown when viewing a directory",
    )


class ServerConfig(BaseModel):
    """MCP server identity advertised to clients."""

    name: str = DEFAULT_SERVER_NAME
    version: str = DEFAULT_SERVER_VERSION


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = DEFAULT_LOG_LEVEL
    data_dir: str = str(DEFAULT_DATA_DIR)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        level = v.lower()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Valid levels: {sorted(VALID_LOG_LEVELS)}")
        return level

    @field_validator("data_dir")
    @classmethod
    def expand_data_dir(cls, v: str) -> str:
        """Expand user home directory in data_dir."""
        return str(Path(v).expanduser())

    @property
    def log_dir(self) -> Path:
        """Directory holding session log files."""
        return Path(self.data_dir) / "logs"


class EditorSettings(BaseModel):
    """Root configuration model for editor settings."""

    version: str = "1.0"
    editor: EditorConfig = Field(default_factory=EditorConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def model_dump_json_minimal(self) -> str:
        """Dump model to JSON, leaving out sections that only hold defaults.

        Returns:
            JSON string with the version and every customized section
        """
        defaults = EditorSettings().model_dump()
        data = self.model_dump(exclude_none=True)

        minimal: dict[str, Any] = {"version": data["version"]}
        for section in ("editor", "server", "logging"):
            if data[section] != defaults[section]:
                minimal[section] = data[section]

        return json.dumps(minimal, indent=2)
