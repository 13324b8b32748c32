"""Per-process working directory lookup abstraction.

Linux exposes each process's current working directory as the symlink
/proc/<pid>/cwd. This ABC hides that filesystem access so resolvers can be
tested without real processes.
"""

from abc import ABC, abstractmethod


class ProcFs(ABC):
    """Abstract access to the per-process cwd entry for dependency injection."""

    @abstractmethod
    def read_cwd(self, pid: int) -> str | None:
        """Read the current working directory of a process.

        Args:
            pid: Process identifier to look up

        Returns:
            The working directory path, or None if it cannot be determined
            (process exited, permission denied, path not valid UTF-8)
        """
        ...
