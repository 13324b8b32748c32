"""Fake per-process cwd lookup for testing."""

from ccactive.gateway.proc_fs.abc import ProcFs


class FakeProcFs(ProcFs):
    """In-memory fake implementation for testing.

    This class has NO public setup methods. All state is provided via constructor.
    PIDs missing from the mapping behave like processes that have exited.
    """

    def __init__(self, cwds: dict[int, str] | None = None) -> None:
        self._cwds: dict[int, str] = cwds if cwds is not None else {}
        self._read_calls: list[int] = []

    @property
    def read_calls(self) -> list[int]:
        """PIDs passed to read_cwd(), in call order.

        This property is for test assertions only.
        """
        return list(self._read_calls)

    def read_cwd(self, pid: int) -> str | None:
        self._read_calls.append(pid)
        return self._cwds.get(pid)
