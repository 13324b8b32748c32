"""Integration tests for RealProcFs against the running system."""

import os
import sys
from pathlib import Path

import pytest

from ccactive.gateway.proc_fs.real import RealProcFs


@pytest.mark.skipif(not Path("/proc/self/cwd").exists(), reason="procfs not available")
def test_read_cwd_of_current_process() -> None:
    assert RealProcFs().read_cwd(os.getpid()) == os.getcwd()


def test_read_cwd_returns_none_for_missing_pid(tmp_path: Path) -> None:
    assert RealProcFs(proc_root=tmp_path).read_cwd(12345) is None


@pytest.mark.skipif(sys.platform == "win32", reason="requires symlinks")
def test_read_cwd_follows_link_under_custom_root(tmp_path: Path) -> None:
    project = tmp_path / "project"
    project.mkdir()
    proc_root = tmp_path / "proc"
    (proc_root / "42").mkdir(parents=True)
    (proc_root / "42" / "cwd").symlink_to(project)

    assert RealProcFs(proc_root=proc_root).read_cwd(42) == str(project)


@pytest.mark.skipif(sys.platform != "linux", reason="non-UTF-8 file names need a bytes filesystem")
def test_read_cwd_skips_non_utf8_target(tmp_path: Path) -> None:
    proc_root = tmp_path / "proc"
    (proc_root / "42").mkdir(parents=True)
    os.symlink(b"/tmp/\xff\xfe", os.fsencode(proc_root / "42" / "cwd"))

    assert RealProcFs(proc_root=proc_root).read_cwd(42) is None
