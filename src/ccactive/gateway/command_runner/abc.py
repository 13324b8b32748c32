from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CommandOutput:
    stdout: str
    returncode: int


class CommandRunner(ABC):
    @abstractmethod
    def run(self, cmd: list[str]) -> CommandOutput | None:
        """Run an external command and capture its output.

        Returns None when the command could not be started at all
        (binary missing, spawn failure). A command that started and exited
        non-zero still produces a CommandOutput.
        """
        ...
