"""Unified logging configuration for pathmorph entrypoints.

Library modules never configure logging; they call
``logging.getLogger(__name__)`` and emit DEBUG records. Entrypoints
(``scripts/morph.py``, notebooks, host applications) call setup_logging once.

Provides:
    - Console handler (stderr) with optional ANSI level colors
    - Optional file handler, plain or rotating (size or time based)
    - JSON-lines output mode for log shippers
    - Contextual fields (job, frame, ...) carried by contextvars
    - Python warnings routed into logging
    - Uncaught exception logging

Public API:
    setup_logging(log_level="INFO", log_file=None, json=False, context={"app": "morph"})
    get_logger(name)
    push_context(job="wave.yaml")
    pop_context(keys=["job"])
    install_excepthook()
    shutdown()

Format examples:
    Human: 2025-10-28T13:45:12.345Z | INFO     | app=morph job=wave.yaml | Wrote 30 frames
    JSON:  {"t": "2025-10-28T13:45:12.345000+00:00", "lvl": "INFO", "name": "...", "pid": 4242, "msg": "...", "app": "morph"}

Idempotent: repeated setup_logging() calls replace handlers instead of
stacking them.
"""

import contextvars
import json as jsonlib
import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

_context_var: contextvars.ContextVar = contextvars.ContextVar("pathmorph_log_context")

_configured = False
_installed_handlers: List[logging.Handler] = []

_LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"


def _current_context() -> Dict[str, Any]:
    return dict(_context_var.get({}))


class ContextFormatter(logging.Formatter):
    """Formatter that appends contextual fields to every record.

    Parameters
    ----------
    fmt_mode : str
        "human" (pipe-separated line) or "json" (one JSON object per line)
    use_color : bool
        Colorize the level name; ignored unless stderr is a TTY
    tz : str
        "UTC" (default) or "local"
    """

    def __init__(self, fmt_mode: str = "human", use_color: bool = True, tz: str = "UTC"):
        super().__init__()
        if fmt_mode not in ("human", "json"):
            raise ValueError(f"Unknown log format '{fmt_mode}'. Use 'human' or 'json'.")
        self.fmt_mode = fmt_mode
        self.use_color = use_color and sys.stderr.isatty()
        self.tz = tz

    def _timestamp(self, record: logging.LogRecord) -> datetime:
        if self.tz == "UTC":
            return datetime.fromtimestamp(record.created, tz=timezone.utc)
        return datetime.fromtimestamp(record.created)

    def format(self, record: logging.LogRecord) -> str:
        ts = self._timestamp(record)
        context = _current_context()
        if self.fmt_mode == "json":
            return self._format_json(record, ts, context)
        return self._format_human(record, ts, context)

    def _format_json(self, record: logging.LogRecord, ts: datetime, context: dict) -> str:
        payload = {
            "t": ts.isoformat(),
            "lvl": record.levelname,
            "name": record.name,
            "pid": os.getpid(),
            "msg": record.getMessage(),
        }
        payload.update(context)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return jsonlib.dumps(payload, default=str)

    def _format_human(self, record: logging.LogRecord, ts: datetime, context: dict) -> str:
        ts_str = ts.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + ("Z" if self.tz == "UTC" else "")

        level = f"{record.levelname:8s}"
        if self.use_color:
            level = f"{_LEVEL_COLORS.get(record.levelname, '')}{level}{_RESET}"

        parts = [ts_str, "|", level, "|"]
        if context:
            parts.append(" ".join(f"{k}={v}" for k, v in context.items()))
            parts.append("|")
        parts.append(record.getMessage())

        line = " ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def _create_file_handler(
    log_file: str,
    rotate: Optional[Dict[str, Any]],
    json_format: bool,
    tz: str
) -> logging.Handler:
    """File handler, rotating when ``rotate`` is given."""
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    if rotate:
        mode = rotate.get("mode", "size")
        if mode == "size":
            handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=rotate.get("max_bytes", 10_000_000),
                backupCount=rotate.get("backup_count", 5),
            )
        elif mode == "time":
            handler = logging.handlers.TimedRotatingFileHandler(
                log_file,
                when=rotate.get("when", "D"),
                interval=rotate.get("interval", 1),
                backupCount=rotate.get("backup_count", 7),
            )
        else:
            raise ValueError(f"Unknown rotation mode: {mode}. Use 'size' or 'time'.")
    else:
        handler = logging.FileHandler(log_file)

    handler.setFormatter(ContextFormatter("json" if json_format else "human", use_color=False, tz=tz))
    return handler


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    *,
    json: bool = False,
    color: bool = True,
    to_stderr: bool = True,
    rotate: Optional[Dict[str, Any]] = None,
    tz: str = "UTC",
    capture_warnings: bool = True,
    quiet_libs: Optional[List[str]] = None,
    context: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Configure the root logger (idempotent).

    Parameters
    ----------
    log_level : str
        "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL"
    log_file : str, optional
        Also log to this file; None for console only
    json : bool
        JSON-lines format for the file handler and console, default False
    color : bool
        ANSI colors on the console, default True
    to_stderr : bool
        Attach a console handler, default True
    rotate : dict, optional
        {"mode": "size", "max_bytes": ..., "backup_count": ...} or
        {"mode": "time", "when": "D", "interval": 1, "backup_count": ...}
    tz : str
        "UTC" or "local" timestamps
    capture_warnings : bool
        Route ``warnings.warn`` into logging, default True
    quiet_libs : list[str], optional
        Loggers forced to WARNING (e.g. ["matplotlib"])
    context : dict, optional
        Initial contextual fields, e.g. {"app": "morph"}

    Returns
    -------
    dict
        {"handlers": [logging.Handler, ...]}

    Raises
    ------
    ValueError
        If ``log_level`` or the rotation mode is unknown
    """
    global _configured, _installed_handlers

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    root = logging.getLogger()
    if _configured:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)

    handlers: List[logging.Handler] = []
    fmt_mode = "json" if json else "human"

    if to_stderr:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(ContextFormatter(fmt_mode, use_color=color, tz=tz))
        handlers.append(console)

    if log_file:
        handlers.append(_create_file_handler(log_file, rotate, json, tz))

    for handler in handlers:
        root.addHandler(handler)
    _installed_handlers = list(handlers)

    if context:
        push_context(**context)

    for lib in quiet_libs or []:
        logging.getLogger(lib).setLevel(logging.WARNING)

    if capture_warnings:
        route_warnings()

    _configured = True
    return {"handlers": handlers}


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def set_level(level: str) -> None:
    """Change the root level at runtime."""
    logging.getLogger().setLevel(getattr(logging, level.upper()))


def push_context(**kwargs: Any) -> None:
    """Add fields shown on every subsequent record in this context.

    Examples
    --------
    >>> push_context(app="morph")
    >>> push_context(job="wave.yaml")
    >>> logger.info("Loaded")  # → "... | app=morph job=wave.yaml | Loaded"
    """
    _context_var.set({**_current_context(), **kwargs})


def pop_context(keys: Optional[List[str]] = None) -> None:
    """Remove the given fields, or all of them when ``keys`` is None."""
    if keys is None:
        _context_var.set({})
        return
    current = _current_context()
    for key in keys:
        current.pop(key, None)
    _context_var.set(current)


def install_excepthook() -> None:
    """Log uncaught exceptions (except Ctrl+C) before the interpreter exits."""
    def log_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logging.getLogger(__name__).critical(
            "Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback)
        )

    sys.excepthook = log_exception


def route_warnings() -> None:
    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(logging.WARNING)


def shutdown() -> None:
    """Flush, detach and close the handlers installed by setup_logging().

    Call at the end of main() so every record reaches its file. Handlers
    attached by anything else (host application, pytest) are left alone.
    """
    global _configured, _installed_handlers

    root = logging.getLogger()
    for handler in _installed_handlers:
        handler.flush()
        root.removeHandler(handler)
        handler.close()
    _installed_handlers = []
    _configured = False
