"""
sectiongen Utilities Package - Cross-Cutting Helpers

================================================================================
sectiongen: fetch registry sections and write them into a project tree
================================================================================

Overview:
---------
Helpers reused by the CLI and the generation pipeline without importing
heavier dependencies at package load time.  Currently this is the session
logging setup and the structured log helpers built on top of it.
"""

from .logging import (
    setup_logging,
    get_logger,
    get_current_log_file,
    get_session_id,
    log_generation_start,
    log_generation_complete,
    log_payload,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "get_current_log_file",
    "get_session_id",
    "log_generation_start",
    "log_generation_complete",
    "log_payload",
]
