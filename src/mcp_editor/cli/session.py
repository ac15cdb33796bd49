"""Session logging for the CLI."""

import logging
import os
from datetime import datetime
from pathlib import Path

from mcp_editor.config.schema import EditorSettings

logger = logging.getLogger(__name__)


def resolve_log_level(config: EditorSettings | None = None) -> str:
    """Resolve the log level name.

    Priority: MCP_EDITOR_LOG_LEVEL, LOG_LEVEL, settings, then INFO.
    """
    log_level = os.getenv("MCP_EDITOR_LOG_LEVEL") or os.getenv("LOG_LEVEL")
    if not log_level and config is not None:
        log_level = config.logging.level
    return (log_level or "INFO").upper()


def setup_session_logging(
    session_name: str | None = None, config: EditorSettings | None = None
) -> str:
    """Setup session-specific logging to file (not console).

    Log files live at <data_dir>/logs/session-{name}.log. Nothing is logged
    to stdout, which carries the MCP protocol when serving on stdio.

    Args:
        session_name: Session identifier (timestamp when omitted)
        config: Editor settings (defaults used when omitted)

    Returns:
        Path to log file as string

    Example:
        >>> setup_session_logging("2026-10-19-13-16-20")
        '/Users/user/.mcp-editor/logs/session-2026-10-19-13-16-20.log'
    """
    config = config or EditorSettings()

    log_dir = Path(config.logging.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    if session_name is None:
        session_name = datetime.now().strftime("%Y-%m-%d-%H-%M-%S")

    log_file = log_dir / f"session-{session_name}.log"

    log_level = resolve_log_level(config)
    numeric_level = getattr(logging, log_level, logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=str(log_file),
        filemode="a",  # Append mode
        force=True,  # Reconfigure if already configured
    )

    logger.debug(f"Session logging to {log_file} at {log_level}")
    return str(log_file)
