"""
Session logging for sectiongen.

Every CLI run opens one log file under the configured log directory
(``SectiongenConfig.resolved_log_dir``, ``~/.sectiongen/logs`` by default)::

    sectiongen_YYYYMMDD_HHMMSS_<session_id>.log   one per run
    sectiongen.log                                 symlink to the latest run

What goes where:

- DEBUG: request URLs, payload bodies (truncated), individual file writes
- INFO: generation start and completion summaries
- WARNING: more than one failed component write
- ERROR: retrieval, payload and filesystem failures

Usage::

    from sectiongen.utils.logging import get_logger, setup_logging

    setup_logging(cfg.resolved_log_dir, level=cfg.log_level)
    logger = get_logger(__name__)

Library use never creates log files on its own: until ``setup_logging`` is
called, records propagate to whatever handlers the host application set up.
"""

from __future__ import annotations

import logging
import sys
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

# ============================================================================
# Constants
# ============================================================================

ROOT_LOGGER_NAME = "sectiongen"
SYMLINK_NAME = "sectiongen.log"

CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(session_id)s | %(name)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(session_id)s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_log_file_path: Optional[Path] = None
_session_id: Optional[str] = None


# ============================================================================
# Session setup
# ============================================================================

class SessionFormatter(logging.Formatter):
    """Stamps every record with the session it was written in."""

    def __init__(self, fmt: str, session_id: str):
        super().__init__(fmt, DATE_FORMAT)
        self.session_id = session_id

    def format(self, record: logging.LogRecord) -> str:
        record.session_id = self.session_id  # type: ignore[attr-defined]
        return super().format(record)


def session_log_path(log_dir: Path, session_id: str) -> Path:
    """``<log_dir>/sectiongen_YYYYMMDD_HHMMSS_<session_id>.log``"""
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return log_dir / f"sectiongen_{stamp}_{session_id}.log"


def _link_latest(log_file: Path) -> None:
    link = log_file.parent / SYMLINK_NAME
    try:
        if link.is_symlink() or link.exists():
            link.unlink()
        link.symlink_to(log_file.name)
    except OSError:
        # Windows without developer mode cannot create symlinks
        pass


def setup_logging(log_dir: Path, level: str = "INFO", console_output: bool = False) -> Path:
    """
    Start a logging session for one CLI run.

    The CLI passes ``log_dir`` and ``level`` from :class:`SectiongenConfig`.
    Handlers left by an earlier session are closed and replaced.

    Parameters
    ----------
    log_dir : Path
        Directory receiving the session file; created when missing.
    level : str
        DEBUG, INFO, WARNING or ERROR.  Unknown names fall back to INFO.
    console_output : bool
        Also write records to stderr.

    Returns
    -------
    Path
        The session log file.
    """
    global _log_file_path, _session_id

    session_id = uuid.uuid4().hex[:6]
    log_level = getattr(logging, level.upper(), logging.INFO)

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = session_log_path(log_dir, session_id)

    handlers: list[logging.Handler] = [logging.FileHandler(log_file, encoding="utf-8")]
    handlers[0].setFormatter(SessionFormatter(FILE_FORMAT, session_id))
    if console_output:
        stderr = logging.StreamHandler(sys.stderr)
        stderr.setFormatter(SessionFormatter(CONSOLE_FORMAT, session_id))
        handlers.append(stderr)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for old in root.handlers[:]:
        root.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setLevel(log_level)
        root.addHandler(handler)
    root.setLevel(log_level)
    root.propagate = False

    _link_latest(log_file)
    _log_file_path, _session_id = log_file, session_id

    root.info(f"Session {session_id} started at level {logging.getLevelName(log_level)}: {log_file}")
    return log_file


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance under the sectiongen namespace.

    Parameters
    ----------
    name : str
        Module name (typically __name__)

    Returns
    -------
    logging.Logger
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def get_current_log_file() -> Optional[Path]:
    """Return the path to the current log file, if logging is initialised."""
    return _log_file_path


def get_session_id() -> Optional[str]:
    """Return the current session ID, if logging is initialised."""
    return _session_id


# ============================================================================
# Logging Helper Functions - Structured Logging
# ============================================================================

def log_generation_start(
    logger: logging.Logger,
    kind: str,
    name: str,
    directory: Path,
) -> None:
    """Log the start of a generation run."""
    logger.info("-" * 60)
    logger.info(f"GENERATE {kind.upper()} START")
    logger.info(f"  Name: {name}")
    logger.info(f"  Directory: {directory}")
    logger.info("-" * 60)


def log_generation_complete(
    logger: logging.Logger,
    kind: str,
    name: str,
    written: Sequence[Path],
    duration_seconds: Optional[float] = None,
) -> None:
    """Log a generation summary with every written path."""
    logger.info("-" * 60)
    logger.info(f"GENERATE {kind.upper()} SUCCEEDED: {name}")
    for path in written:
        logger.info(f"  Wrote: {path}")
    if duration_seconds is not None:
        logger.info(f"  Duration: {duration_seconds:.2f}s")
    logger.info("-" * 60)


def log_payload(
    logger: logging.Logger,
    label: str,
    content: str,
    truncate_at: int = 1000,
) -> None:
    """Log a registry payload or file body at DEBUG level, truncated."""
    if len(content) > truncate_at:
        display = content[:truncate_at] + f"... [TRUNCATED, {len(content)} chars total]"
    else:
        display = content
    logger.debug(f"{label} ({len(content)} chars):\n{display}")
