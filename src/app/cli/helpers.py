"""
CLI helper utilities.

Shared by every command:
- Configuration file loading
- Logging setup (console on stderr, optional rotating log file)
- Console banners for summaries
"""

import json
import logging
import os
import sys
import tempfile
from dataclasses import dataclass
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Iterator, List, Literal, Optional, Tuple

from constants import LoggingConfig

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Attributes every LogRecord carries; anything else was passed via ``extra``.
_STANDARD_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, extras included."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "timestamp": created.strftime(LoggingConfig.JSON_DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        extras = {
            key: value for key, value in vars(record).items()
            if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_") and key not in payload
        }
        for key, value in extras.items():
            try:
                json.dumps(value)
            except TypeError:
                value = str(value)
            payload[key] = value

        return json.dumps(payload, ensure_ascii=False)


@dataclass(frozen=True)
class LoggingSettings:
    """Resolved logging configuration; equal settings mean nothing to redo."""
    level: int
    log_file: Optional[str]
    structured: bool
    pattern: str
    date_format: str
    include_console: bool
    rotate: bool
    max_bytes: int
    backup_count: int

    @classmethod
    def resolve(
        cls,
        config: Dict[str, Any],
        level: Optional[str],
        log_file: Optional[str],
        include_console: bool,
    ) -> 'LoggingSettings':
        level_name = str(config.get('level') or level or LoggingConfig.DEFAULT_LOG_LEVEL)
        path = log_file if log_file is not None else (config.get('file') or config.get('log_file'))

        style = str(config.get('format', LoggingConfig.DEFAULT_FORMAT_STYLE)).lower()
        if style not in LoggingConfig.SUPPORTED_FORMATS:
            style = LoggingConfig.DEFAULT_FORMAT_STYLE

        rotation = config.get('rotation')
        rotation = rotation if isinstance(rotation, dict) else {}
        rotate = rotation.get('enabled')
        if rotate is None:
            rotate = LoggingConfig.ROTATION_ENABLED

        return cls(
            level=getattr(logging, level_name.upper(), logging.INFO),
            log_file=path or None,
            structured=bool(config.get('structured')) or style == 'json',
            pattern=config.get('pattern') or LoggingConfig.LOG_FORMAT,
            date_format=config.get('date_format', LoggingConfig.DATE_FORMAT),
            include_console=include_console,
            rotate=bool(rotate),
            max_bytes=_positive_int(rotation.get('max_mb'), LoggingConfig.MAX_LOG_FILE_MB) * 1024 * 1024,
            backup_count=_positive_int(rotation.get('backup_count'), LoggingConfig.LOG_BACKUP_COUNT),
        )

    def formatter(self) -> logging.Formatter:
        if self.structured:
            return JSONFormatter()
        return logging.Formatter(fmt=self.pattern, datefmt=self.date_format)


_MANAGED_HANDLERS: List[logging.Handler] = []
_LOGGING_SIGNATURE: Optional[LoggingSettings] = None
_LAST_LOG_FILE: Optional[str] = None


def _positive_int(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def get_default_config_path() -> str:
    """Return the path of config.json in the project root."""
    # src/app/cli/helpers.py -> project root
    return str(Path(__file__).resolve().parents[3] / "config.json")


def _clear_managed_handlers() -> None:
    """Detach and close the handlers installed by setup_logging()."""
    root_logger = logging.getLogger()
    while _MANAGED_HANDLERS:
        handler = _MANAGED_HANDLERS.pop()
        root_logger.removeHandler(handler)
        handler.close()


def _log_file_candidates(requested: str) -> Iterator[str]:
    """The requested path, then the same file name in temp and home."""
    name = os.path.basename(requested) or "tsv_graph.log"
    yield requested
    yield os.path.join(tempfile.gettempdir(), name)
    yield os.path.join(str(Path.home()), name)


def _open_log_file(settings: LoggingSettings) -> Tuple[Optional[logging.Handler], Optional[str]]:
    for candidate in _log_file_candidates(settings.log_file):
        try:
            directory = os.path.dirname(candidate)
            if directory:
                os.makedirs(directory, exist_ok=True)
            if settings.rotate:
                handler: logging.Handler = RotatingFileHandler(
                    candidate,
                    maxBytes=settings.max_bytes,
                    backupCount=settings.backup_count,
                    encoding='utf-8',
                )
            else:
                handler = logging.FileHandler(candidate, encoding='utf-8')
        except OSError as exc:
            print(f"  Could not create log at {candidate}: {exc}", file=sys.stderr)
            continue
        if candidate != settings.log_file:
            print(f"Note: Using fallback log file: {candidate}", file=sys.stderr)
        return handler, candidate

    print(f"Warning: Could not write log file {settings.log_file} to any location; "
          f"logging to console only", file=sys.stderr)
    return None, None


def setup_logging(
    level: LogLevel = LoggingConfig.DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    *,
    config: Optional[Dict[str, Any]] = None,
    include_console: bool = True,
) -> Optional[str]:
    """
    Configure the root logger.

    Console output goes to stderr so converted data written to stdout
    stays clean. A log file that cannot be created is retried in the
    temp directory and the home directory before giving up on file
    logging. Calling again with identical settings is a no-op.

    Args:
        level: Level used when the config does not set one.
        log_file: Log file path, overriding the config's ``file``.
        config: The ``logging`` section of the configuration.
        include_console: If False, skip the console handler.

    Returns:
        The log file actually used, or None for console-only logging.
    """
    global _LOGGING_SIGNATURE, _LAST_LOG_FILE

    settings = LoggingSettings.resolve(dict(config or {}), level, log_file, include_console)
    if settings == _LOGGING_SIGNATURE and _MANAGED_HANDLERS:
        return _LAST_LOG_FILE

    formatter = settings.formatter()
    handlers: List[logging.Handler] = []
    used_file = None

    if settings.log_file:
        file_handler, used_file = _open_log_file(settings)
        if file_handler is not None:
            handlers.append(file_handler)

    if settings.include_console or not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    _clear_managed_handlers()
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.level)
    logging.captureWarnings(True)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _MANAGED_HANDLERS.append(handler)

    _LOGGING_SIGNATURE = settings
    _LAST_LOG_FILE = used_file

    if used_file:
        logging.getLogger(__name__).info(f"Logging to: {used_file}")
    return used_file


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load a JSON configuration file.

    Raises:
        ValueError: If the path is empty, or the file is not a JSON object.
        FileNotFoundError: If the file does not exist.
        PermissionError: If the file cannot be read.
    """
    if not config_path:
        raise ValueError("config_path cannot be empty")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Copy config.sample.json to config.json or pass one with --config"
        )
    except PermissionError:
        raise PermissionError(f"Permission denied reading {config_path}")
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in configuration file {config_path} at line {e.lineno}, column {e.colno}: {e.msg}"
        )
    except UnicodeDecodeError as e:
        raise ValueError(f"File encoding error in {config_path}: {e}")

    if not isinstance(config, dict):
        raise ValueError(f"Configuration file must contain a JSON object, got {type(config).__name__}")
    return config


def print_header(title: str, width: int = 60) -> None:
    """Print a banner with ``title`` to stderr."""
    rule = "=" * width
    print(f"\n{rule}\n{title}\n{rule}", file=sys.stderr)


def print_footer(width: int = 60) -> None:
    print("=" * width + "\n", file=sys.stderr)
