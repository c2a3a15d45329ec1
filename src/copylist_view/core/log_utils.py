"""
Logging setup for copylist-view applications.

Library modules only create module-level loggers; handlers are attached
here by the hosting application.
"""

import logging
import time
from pathlib import Path
from typing import Optional, Union

from copylist_view.protocols import get_view_config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_PREFIX = "copylist_view_"

# Path of the file handler attached by setup_logging()
_configured_log_path: Optional[str] = None


def get_log_dir() -> Path:
    """Return configured log directory or default."""
    config = get_view_config()
    if config.log_dir:
        return Path(config.log_dir)
    return Path.home() / ".local" / "share" / "copylist_view" / "logs"


def default_log_file_path() -> Path:
    """Timestamped log file path inside the log directory."""
    return get_log_dir() / f"{LOG_PREFIX}{int(time.time())}.log"


def get_current_log_file_path() -> Optional[str]:
    """Return the file attached by setup_logging(), else the root logger's first FileHandler."""
    if _configured_log_path is not None:
        return _configured_log_path
    for handler in logging.getLogger().handlers:
        if isinstance(handler, logging.FileHandler):
            return handler.baseFilename
    return None


def setup_logging(
    level: Union[int, str, None] = None,
    log_file: Union[str, Path, bool, None] = None,
) -> logging.Logger:
    """
    Attach stream (and optionally file) handlers to the root logger.

    Args:
        level: Level number or name; defaults to the configured log_level
        log_file: Path of the log file, True for default_log_file_path(),
            or None/False for console only

    Returns:
        The configured root logger
    """
    global _configured_log_path
    if level is None:
        level = get_view_config().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    if log_file:
        path = default_log_file_path() if log_file is True else Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        _configured_log_path = file_handler.baseFilename
        logger.info(f"Logging to {path}")

    return root
