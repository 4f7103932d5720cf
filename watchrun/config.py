from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from .errors import ConfigError


POLL_INTERVAL = 1.0

# "path": per-path comparison, stop the walk at the first newer file
# "max": newest mtime across the whole tree against a high-water mark
POLICIES = ("path", "max")
DEFAULT_POLICY = "path"


@dataclass(frozen=True)
class WatchConfig:
    """Everything the poll loop needs, captured once at startup."""

    command: Tuple[str, ...]
    recursive: bool = False
    root: Path = Path(".")
    interval: float = POLL_INTERVAL
    policy: str = DEFAULT_POLICY

    def __post_init__(self) -> None:
        object.__setattr__(self, "command", tuple(self.command))
        object.__setattr__(self, "root", Path(self.root))
        if not self.command:
            raise ConfigError("no command given")
        if self.policy not in POLICIES:
            raise ConfigError(
                f"unknown policy {self.policy!r}, expected one of {', '.join(POLICIES)}"
            )
