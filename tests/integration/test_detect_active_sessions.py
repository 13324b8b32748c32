"""Integration test for detect_active_sessions on the running platform."""

import sys

from ccactive import detect_active_sessions
from ccactive.detection.detector import PLATFORM_STRATEGY


def test_detect_active_sessions_reports_platform_support() -> None:
    result = detect_active_sessions()

    if sys.platform in ("darwin", "linux"):
        assert result.supported is True
        assert PLATFORM_STRATEGY is not None
    else:
        assert result.supported is False
        assert result.active_paths == frozenset()
