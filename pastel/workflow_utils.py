"""
Workflow utilities: logging setup, structured logging, graceful shutdown.
"""
import json
import logging
import signal
from typing import Any

logger = logging.getLogger(__name__)

_shutdown_requested = False


def request_shutdown() -> bool:
    """Check if shutdown was requested (e.g. SIGTERM)."""
    return _shutdown_requested


def _set_shutdown_requested(*_args: Any) -> None:
    global _shutdown_requested
    _shutdown_requested = True


def _interrupt(*_args: Any) -> None:
    # readline() is retried after a flag-only handler (PEP 475)
    _set_shutdown_requested()
    raise KeyboardInterrupt


def reset_shutdown() -> None:
    """Clear the shutdown flag (new session in the same process)."""
    global _shutdown_requested
    _shutdown_requested = False


def setup_graceful_shutdown(interrupt: bool = False) -> None:
    """
    Register SIGTERM/SIGINT handlers that set the shutdown flag.
    With interrupt=True they also raise KeyboardInterrupt, for loops blocked on input.
    """
    handler = _interrupt if interrupt else _set_shutdown_requested
    for sig in (signal.SIGTERM, signal.SIGINT):
        try:
            signal.signal(sig, handler)
        except (AttributeError, ValueError):
            pass  # Windows or not in main thread


def configure_logging(level: str | int = "INFO") -> None:
    """Root logging for scripts. Level may be a name ("DEBUG") or a logging constant."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def log_structured(level: str, **kwargs: Any) -> None:
    """Emit structured (JSON) log line."""
    record = {"level": level, **kwargs}
    line = json.dumps(record)
    if level == "error":
        logger.error("%s", line)
    elif level == "warning":
        logger.warning("%s", line)
    else:
        logger.info("%s", line)
