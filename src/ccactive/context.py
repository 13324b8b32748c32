"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from ccactive.detection.detector import (
    PLATFORM_STRATEGY,
    ResolverStrategy,
    SessionDetector,
    create_session_detector,
)
from ccactive.gateway.command_runner.abc import CommandRunner
from ccactive.gateway.command_runner.fake import FakeCommandRunner
from ccactive.gateway.command_runner.real import RealCommandRunner
from ccactive.gateway.proc_fs.abc import ProcFs
from ccactive.gateway.proc_fs.fake import FakeProcFs
from ccactive.gateway.proc_fs.real import RealProcFs


@dataclass(frozen=True)
class CcactiveContext:
    """Immutable context holding all dependencies for ccactive commands.

    Created at CLI entry point and threaded through the commands.
    """

    runner: CommandRunner
    proc_fs: ProcFs
    strategy: ResolverStrategy | None
    cwd: Path  # Current working directory at CLI invocation

    def session_detector(self) -> SessionDetector:
        return create_session_detector(
            strategy=self.strategy,
            runner=self.runner,
            proc_fs=self.proc_fs,
        )

    @staticmethod
    def for_test(
        *,
        runner: CommandRunner | None = None,
        proc_fs: ProcFs | None = None,
        strategy: ResolverStrategy | None = "procfs",
        cwd: Path | None = None,
    ) -> "CcactiveContext":
        """Create a context with fake gateways.

        Args:
            runner: Command runner; defaults to an empty FakeCommandRunner
                (no programs available).
            proc_fs: Procfs gateway; defaults to an empty FakeProcFs.
            strategy: Resolver strategy; pass None to simulate an
                unsupported platform.
            cwd: Invocation directory; defaults to Path("/test/default/cwd")
                to prevent accidental use of the real Path.cwd() in tests.
        """
        return CcactiveContext(
            runner=runner if runner is not None else FakeCommandRunner(),
            proc_fs=proc_fs if proc_fs is not None else FakeProcFs(),
            strategy=strategy,
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
        )


def create_context() -> CcactiveContext:
    """Create production context with real implementations for this platform."""
    return CcactiveContext(
        runner=RealCommandRunner(),
        proc_fs=RealProcFs(),
        strategy=PLATFORM_STRATEGY,
        cwd=Path.cwd(),
    )
