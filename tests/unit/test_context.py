"""Tests for CcactiveContext wiring."""

from pathlib import Path

from ccactive.context import CcactiveContext, create_context
from ccactive.detection.detector import (
    PLATFORM_STRATEGY,
    ProcessTableSessionDetector,
    UnsupportedSessionDetector,
)
from ccactive.gateway.command_runner.fake import FakeCommandRunner
from ccactive.gateway.command_runner.real import RealCommandRunner
from ccactive.gateway.proc_fs.fake import FakeProcFs
from ccactive.gateway.proc_fs.real import RealProcFs


def test_for_test_defaults_to_empty_fakes() -> None:
    ctx = CcactiveContext.for_test()

    assert isinstance(ctx.runner, FakeCommandRunner)
    assert isinstance(ctx.proc_fs, FakeProcFs)
    assert ctx.strategy == "procfs"
    assert ctx.cwd == Path("/test/default/cwd")


def test_for_test_session_detector_finds_nothing() -> None:
    result = CcactiveContext.for_test().session_detector().detect()

    assert result.supported is True
    assert result.active_paths == frozenset()


def test_for_test_unsupported_strategy() -> None:
    ctx = CcactiveContext.for_test(strategy=None)

    assert isinstance(ctx.session_detector(), UnsupportedSessionDetector)


def test_for_test_lsof_strategy() -> None:
    runner = FakeCommandRunner.with_stdout(ps="7 claude\n", lsof="p7\nfcwd\nn/srv/app\n")
    ctx = CcactiveContext.for_test(runner=runner, strategy="lsof")

    detector = ctx.session_detector()

    assert isinstance(detector, ProcessTableSessionDetector)
    assert detector.detect().active_paths == frozenset({"/srv/app"})


def test_create_context_uses_real_gateways() -> None:
    ctx = create_context()

    assert isinstance(ctx.runner, RealCommandRunner)
    assert isinstance(ctx.proc_fs, RealProcFs)
    assert ctx.strategy == PLATFORM_STRATEGY
    assert ctx.cwd == Path.cwd()
