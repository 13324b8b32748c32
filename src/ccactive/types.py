"""Result type returned by session detection."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ActiveSessionsResult:
    """Directories with a live Claude Code process, as seen by one detection call.

    Attributes:
        supported: Whether session detection is implemented on this platform.
        active_paths: Working directories of running Claude processes.
            Always empty when supported is False.
    """

    supported: bool
    active_paths: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.supported and self.active_paths:
            raise ValueError("Unsupported platform result cannot carry active paths")

    @classmethod
    def unsupported(cls) -> "ActiveSessionsResult":
        return cls(supported=False, active_paths=frozenset())

    def is_active(self, path: str) -> bool:
        """Check whether a directory has a live session.

        Uses exact string comparison; callers should pass paths in the same
        form the OS reports them (absolute, symlinks resolved).
        """
        return path in self.active_paths

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize for the host application boundary (camelCase keys)."""
        return {
            "supported": self.supported,
            "activePaths": sorted(self.active_paths),
        }

    @classmethod
    def from_json_dict(cls, data: dict[str, Any]) -> "ActiveSessionsResult":
        supported = data.get("supported")
        if not isinstance(supported, bool):
            raise ValueError(f"'supported' must be a bool, got {supported!r}")

        paths = data.get("activePaths", [])
        if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
            raise ValueError(f"'activePaths' must be a list of strings, got {paths!r}")

        return cls(supported=supported, active_paths=frozenset(paths))
