"""Active Claude Code session detection.

Selects a platform strategy once at import time and combines the process
lister with the matching working-directory resolver:

- macOS (darwin): ps + batched lsof
- Linux: ps + /proc/<pid>/cwd
- Windows and everything else: unsupported (supported=False)
"""

import logging
import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Literal

from ccactive.constants import TARGET_PROCESS_NAME
from ccactive.detection.cwd_resolver import (
    LsofWorkingDirectoryResolver,
    ProcfsWorkingDirectoryResolver,
    WorkingDirectoryResolver,
)
from ccactive.detection.process_lister import list_target_pids
from ccactive.gateway.command_runner.abc import CommandRunner
from ccactive.gateway.command_runner.real import RealCommandRunner
from ccactive.gateway.proc_fs.abc import ProcFs
from ccactive.gateway.proc_fs.real import RealProcFs
from ccactive.types import ActiveSessionsResult

logger = logging.getLogger(__name__)

ResolverStrategy = Literal["lsof", "procfs"]

# None marks platforms that are known but deliberately unimplemented.
_PLATFORM_STRATEGIES: dict[str, ResolverStrategy | None] = {
    "darwin": "lsof",
    "linux": "procfs",
    "win32": None,
}


def strategy_for_platform(platform: str) -> ResolverStrategy | None:
    """Map a sys.platform value to its resolver strategy, None if unsupported."""
    return _PLATFORM_STRATEGIES.get(platform)


PLATFORM_STRATEGY: ResolverStrategy | None = strategy_for_platform(sys.platform)


class SessionDetector(ABC):
    """Capability interface for finding directories with live Claude sessions."""

    @property
    @abstractmethod
    def supported(self) -> bool: ...

    @abstractmethod
    def list_target_pids(self) -> list[int]: ...

    @abstractmethod
    def resolve_working_directories(self, pids: Sequence[int]) -> set[str]: ...

    def detect(self) -> ActiveSessionsResult:
        if not self.supported:
            return ActiveSessionsResult.unsupported()

        pids = self.list_target_pids()
        if not pids:
            return ActiveSessionsResult(supported=True, active_paths=frozenset())

        paths = self.resolve_working_directories(pids)
        logger.debug(
            "Found %d %s process(es) in %d directories", len(pids), TARGET_PROCESS_NAME, len(paths)
        )
        return ActiveSessionsResult(supported=True, active_paths=frozenset(paths))


class ProcessTableSessionDetector(SessionDetector):
    """Detector backed by the ps process table and a working-directory resolver."""

    def __init__(self, runner: CommandRunner, resolver: WorkingDirectoryResolver) -> None:
        self._runner = runner
        self._resolver = resolver

    @property
    def supported(self) -> bool:
        return True

    def list_target_pids(self) -> list[int]:
        return list_target_pids(self._runner, target_name=TARGET_PROCESS_NAME)

    def resolve_working_directories(self, pids: Sequence[int]) -> set[str]:
        return self._resolver.resolve(pids)


class UnsupportedSessionDetector(SessionDetector):
    """Detector for platforms without a strategy. Never touches the OS."""

    @property
    def supported(self) -> bool:
        return False

    def list_target_pids(self) -> list[int]:
        return []

    def resolve_working_directories(self, pids: Sequence[int]) -> set[str]:
        return set()


def create_session_detector(
    *,
    strategy: ResolverStrategy | None,
    runner: CommandRunner,
    proc_fs: ProcFs,
) -> SessionDetector:
    """Build the detector for a resolver strategy.

    Args:
        strategy: Resolver to use, or None for an unsupported platform
        runner: Runs ps (and lsof for the batched strategy)
        proc_fs: Reads /proc/<pid>/cwd for the procfs strategy

    Returns:
        A SessionDetector; UnsupportedSessionDetector when strategy is None
    """
    if strategy is None:
        return UnsupportedSessionDetector()

    resolver: WorkingDirectoryResolver
    if strategy == "lsof":
        resolver = LsofWorkingDirectoryResolver(runner)
    else:
        resolver = ProcfsWorkingDirectoryResolver(proc_fs)
    return ProcessTableSessionDetector(runner, resolver)


def detect_active_sessions() -> ActiveSessionsResult:
    """Detect directories with an active Claude Code session on this machine.

    Best effort: never raises for missing tools, vanished processes or
    unreadable output. Those simply contribute no paths.
    """
    detector = create_session_detector(
        strategy=PLATFORM_STRATEGY,
        runner=RealCommandRunner(),
        proc_fs=RealProcFs(),
    )
    return detector.detect()
