"""List PIDs of running processes with an exact command name."""

import logging

from ccactive.constants import PS_LIST_COMMAND
from ccactive.gateway.command_runner.abc import CommandRunner

logger = logging.getLogger(__name__)

# PIDs are unsigned 32-bit values on every supported platform
_MAX_PID = 2**32 - 1


def parse_process_listing(stdout: str, *, target_name: str) -> list[int]:
    """Extract PIDs whose command name equals target_name from `ps -eo pid,comm` output.

    Lines that are not of the form "<pid> <comm> ..." with an unsigned
    integer pid (including the header line) are skipped.

    Args:
        stdout: Raw ps output
        target_name: Command name to match exactly (no substring or case folding)

    Returns:
        Matching PIDs in output order, without duplicates
    """
    pids: list[int] = []
    for line in stdout.splitlines():
        parts = line.split()
        if len(parts) < 2 or parts[1] != target_name:
            continue
        # ASCII digits only; isdigit() alone also accepts superscripts and
        # non-Latin numerals
        if not (parts[0].isascii() and parts[0].isdigit()):
            logger.debug("Skipping ps line with non-numeric pid: %r", line)
            continue
        pid = int(parts[0])
        if pid > _MAX_PID:
            logger.debug("Skipping ps line with out-of-range pid: %r", line)
            continue
        if pid not in pids:
            pids.append(pid)
    return pids


def list_target_pids(runner: CommandRunner, *, target_name: str) -> list[int]:
    """Run ps and return PIDs of processes named target_name.

    Returns an empty list if ps is unavailable.
    """
    output = runner.run(PS_LIST_COMMAND)
    if output is None:
        return []
    return parse_process_listing(output.stdout, target_name=target_name)
