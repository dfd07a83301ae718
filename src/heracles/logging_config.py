"""
Logging setup for applications embedding the Hydra client.

The library only creates module loggers. ``setup_logging`` wires the root
logger from the ``logging`` section of the client configuration;
``HydraClient`` calls it when that section is present.

Usage:
    from heracles.logging_config import setup_logging

    setup_logging(config={"level": "DEBUG", "format": "json", "file": "logs/heracles.log"})
"""

import json
import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, List, Literal, Optional

from .constants import LoggingConfig

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Attributes every LogRecord carries; anything else came in through ``extra``.
_STANDARD_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, including fields passed via ``extra``."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: Dict[str, Any] = {
            "timestamp": created.strftime(LoggingConfig.JSON_DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        extras = {
            key: value for key, value in vars(record).items()
            if key not in _STANDARD_RECORD_ATTRIBUTES and not key.startswith("_")
        }
        for key, value in extras.items():
            entry.setdefault(key, value)

        return json.dumps(entry, ensure_ascii=False, default=str)


@dataclass(frozen=True)
class LoggingSettings:
    """Normalized view of a ``logging`` configuration section."""

    level: int
    file: Optional[str]
    style: str
    pattern: str
    date_format: str
    rotate: bool
    max_bytes: int
    backup_count: int
    include_console: bool

    @classmethod
    def from_config(
        cls,
        config: Dict[str, Any],
        level: str,
        log_file: Optional[str],
        include_console: bool,
    ) -> 'LoggingSettings':
        level_name = str(config.get('level', level or LoggingConfig.DEFAULT_LOG_LEVEL)).upper()
        style = str(config.get('format', LoggingConfig.DEFAULT_FORMAT_STYLE)).lower()
        if style not in LoggingConfig.SUPPORTED_FORMATS:
            style = LoggingConfig.DEFAULT_FORMAT_STYLE

        rotation = config.get('rotation')
        rotation = rotation if isinstance(rotation, dict) else {}
        return cls(
            level=getattr(logging, level_name, logging.INFO),
            file=log_file if log_file is not None else config.get('file'),
            style=style,
            pattern=config.get('pattern') or LoggingConfig.LOG_FORMAT,
            date_format=config.get('date_format', LoggingConfig.DATE_FORMAT),
            rotate=bool(rotation.get('enabled', LoggingConfig.ROTATION_ENABLED)),
            max_bytes=_positive(rotation.get('max_mb'), LoggingConfig.MAX_LOG_FILE_MB) * 1024 * 1024,
            backup_count=_positive(rotation.get('backup_count'), LoggingConfig.LOG_BACKUP_COUNT),
            include_console=include_console,
        )

    def formatter(self) -> logging.Formatter:
        if self.style == 'json':
            return JSONFormatter()
        return logging.Formatter(fmt=self.pattern, datefmt=self.date_format)

    def handlers(self) -> List[logging.Handler]:
        handlers: List[logging.Handler] = []
        if self.include_console or not self.file:
            handlers.append(logging.StreamHandler(sys.stdout))
        if self.file:
            directory = os.path.dirname(self.file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            if self.rotate:
                handlers.append(RotatingFileHandler(
                    self.file, maxBytes=self.max_bytes, backupCount=self.backup_count, encoding='utf-8'
                ))
            else:
                handlers.append(logging.FileHandler(self.file, encoding='utf-8'))
        return handlers


def _positive(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


_installed_handlers: List[logging.Handler] = []
_installed_settings: Optional[LoggingSettings] = None


def reset_logging() -> None:
    """Detach and close the handlers installed by ``setup_logging``."""
    global _installed_settings
    root_logger = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()
    _installed_settings = None


def setup_logging(
    level: LogLevel = LoggingConfig.DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    *,
    config: Optional[Dict[str, Any]] = None,
    include_console: bool = True,
) -> Optional[str]:
    """
    Configure the root logger.

    Args:
        level: Log level, overridden by ``config["level"]``.
        log_file: Log file path, overrides ``config["file"]``.
        config: The ``logging`` section of the client configuration.
        include_console: Also log to stdout. Console output is kept when no
            file is configured.

    Returns:
        The log file path used, or None if logging to console only.

    Calling again with equivalent settings leaves the installed handlers in
    place.
    """
    global _installed_settings

    settings = LoggingSettings.from_config(dict(config or {}), level, log_file, include_console)
    if settings == _installed_settings and _installed_handlers:
        return settings.file

    reset_logging()
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.level)
    formatter = settings.formatter()
    for handler in settings.handlers():
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _installed_handlers.append(handler)
    _installed_settings = settings

    if settings.file:
        logging.getLogger(__name__).info(f"Logging to: {settings.file}")
    return settings.file
