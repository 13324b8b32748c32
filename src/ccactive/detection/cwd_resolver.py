"""Resolve process IDs to their current working directories.

Two interchangeable strategies:

- LsofWorkingDirectoryResolver asks lsof for every PID in a single call,
  used where no procfs exists (macOS).
- ProcfsWorkingDirectoryResolver reads /proc/<pid>/cwd one PID at a time
  (Linux).

Both omit PIDs whose directory cannot be determined.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from ccactive.gateway.command_runner.abc import CommandRunner
from ccactive.gateway.proc_fs.abc import ProcFs

logger = logging.getLogger(__name__)

# Field tag lsof uses for the file name in -F output
_LSOF_NAME_FIELD = "n"


class WorkingDirectoryResolver(ABC):
    @abstractmethod
    def resolve(self, pids: Sequence[int]) -> set[str]:
        """Return the working directories of the given processes.

        An empty input returns an empty set without touching the OS.
        """
        ...


def build_lsof_command(pids: Sequence[int]) -> list[str]:
    pid_list = ",".join(str(pid) for pid in pids)
    return ["lsof", "-a", "-d", "cwd", "-Fn", "-p", pid_list]


def parse_lsof_cwd_output(stdout: str) -> set[str]:
    """Extract paths from `lsof -Fn` output.

    -F output is one field per line, tagged by its first character:
    p<pid>, f<fd>, n<name>. Only name lines carry a path.
    """
    paths: set[str] = set()
    for line in stdout.splitlines():
        if not line.startswith(_LSOF_NAME_FIELD):
            continue
        path = line[len(_LSOF_NAME_FIELD) :]
        if not path:
            logger.debug("Skipping empty lsof name field")
            continue
        paths.add(path)
    return paths


class LsofWorkingDirectoryResolver(WorkingDirectoryResolver):
    """Batched resolution: one lsof invocation for all PIDs."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def resolve(self, pids: Sequence[int]) -> set[str]:
        if not pids:
            return set()

        # lsof exits 1 when any requested PID is gone but still reports the
        # rest, so stdout is parsed regardless of the exit status.
        output = self._runner.run(build_lsof_command(pids))
        if output is None:
            return set()
        return parse_lsof_cwd_output(output.stdout)


class ProcfsWorkingDirectoryResolver(WorkingDirectoryResolver):
    """Per-PID resolution through /proc/<pid>/cwd."""

    def __init__(self, proc_fs: ProcFs) -> None:
        self._proc_fs = proc_fs

    def resolve(self, pids: Sequence[int]) -> set[str]:
        paths: set[str] = set()
        for pid in pids:
            cwd = self._proc_fs.read_cwd(pid)
            if cwd is not None:
                paths.add(cwd)
        return paths
