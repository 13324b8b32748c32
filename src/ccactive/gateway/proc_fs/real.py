"""Real per-process cwd lookup through procfs."""

import logging
import os
from pathlib import Path

from ccactive.gateway.proc_fs.abc import ProcFs

logger = logging.getLogger(__name__)


class RealProcFs(ProcFs):
    """Production implementation reading the <proc_root>/<pid>/cwd symlink."""

    def __init__(self, proc_root: Path = Path("/proc")) -> None:
        self._proc_root = proc_root

    def read_cwd(self, pid: int) -> str | None:
        link = self._proc_root / str(pid) / "cwd"

        # Error boundary: the process may exit or deny access at any moment,
        # so there is nothing meaningful to check beforehand.
        try:
            raw = os.readlink(os.fsencode(link))
        except OSError as e:
            logger.debug("Cannot read cwd of pid %d: %s", pid, e)
            return None

        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("cwd of pid %d is not valid UTF-8, skipping", pid)
            return None
