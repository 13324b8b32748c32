import logging
import shutil
import subprocess

from ccactive.gateway.command_runner.abc import CommandOutput, CommandRunner

logger = logging.getLogger(__name__)


class RealCommandRunner(CommandRunner):
    def run(self, cmd: list[str]) -> CommandOutput | None:
        # LBYL: Check if command exists first
        if shutil.which(cmd[0]) is None:
            logger.debug("Command not found: %s", cmd[0])
            return None

        # Error boundary: the binary can still vanish or be unexecutable
        # between the which() check and the spawn.
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("Failed to run %s: %s", cmd[0], e)
            return None

        if result.returncode != 0:
            logger.debug("%s exited with status %d", cmd[0], result.returncode)
        return CommandOutput(stdout=result.stdout, returncode=result.returncode)
