"""Fake command runner for testing.

FakeCommandRunner is an in-memory implementation that returns canned output
per program name, enabling deterministic tests without ps, lsof or real
Claude processes.
"""

from ccactive.gateway.command_runner.abc import CommandOutput, CommandRunner


class FakeCommandRunner(CommandRunner):
    """In-memory fake implementation for testing.

    This class has NO public setup methods. All state is provided via constructor.
    Programs without a configured output behave as if they were not installed.
    """

    def __init__(self, outputs: dict[str, CommandOutput] | None = None) -> None:
        """Create FakeCommandRunner with canned outputs.

        Args:
            outputs: Mapping from program name (first element of the command)
                to the output it produces. Defaults to no programs available.
        """
        self._outputs: dict[str, CommandOutput] = outputs if outputs is not None else {}
        self._run_calls: list[list[str]] = []

    @classmethod
    def with_stdout(cls, **stdout_by_program: str) -> "FakeCommandRunner":
        """Create a FakeCommandRunner whose programs all exit 0 with the given stdout."""
        return cls(
            outputs={
                program: CommandOutput(stdout=stdout, returncode=0)
                for program, stdout in stdout_by_program.items()
            }
        )

    def run(self, cmd: list[str]) -> CommandOutput | None:
        self._run_calls.append(list(cmd))
        return self._outputs.get(cmd[0])

    @property
    def run_calls(self) -> list[list[str]]:
        """Commands passed to run(), in call order.

        This property is for test assertions only.
        """
        return list(self._run_calls)

    @property
    def programs_run(self) -> list[str]:
        """Program names passed to run(), in call order.

        This property is for test assertions only.
        """
        return [cmd[0] for cmd in self._run_calls]
