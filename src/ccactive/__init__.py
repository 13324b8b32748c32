"""Detect directories with an active Claude Code session."""

from ccactive.detection.detector import detect_active_sessions
from ccactive.types import ActiveSessionsResult

__all__ = [
    "ActiveSessionsResult",
    "detect_active_sessions",
]
