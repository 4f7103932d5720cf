"""watchrun: re-run a command whenever files in a directory change.

Exports:
- app, main: Typer CLI entrypoints (from watchrun.cli)
- Watcher: the poll-detect-execute loop (from watchrun.poller)
- WatchConfig: immutable run configuration (from watchrun.config)
- PathDetector, HighWaterMarkDetector, make_detector: change policies (from watchrun.detectors)
- run_command: command executor (from watchrun.runner)
- iter_entries, snapshot_entries: directory walkers (from watchrun.walker)
"""

from .cli import app, main  # noqa: F401
from .config import WatchConfig  # noqa: F401
from .detectors import (  # noqa: F401
    Change,
    HighWaterMarkDetector,
    PathDetector,
    make_detector,
)
from .errors import ConfigError, WalkError, WatchError  # noqa: F401
from .poller import Watcher  # noqa: F401
from .runner import run_command  # noqa: F401
from .walker import Entry, iter_entries, snapshot_entries  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "app",
    "main",
    "WatchConfig",
    "Change",
    "HighWaterMarkDetector",
    "PathDetector",
    "make_detector",
    "ConfigError",
    "WalkError",
    "WatchError",
    "Watcher",
    "run_command",
    "Entry",
    "iter_entries",
    "snapshot_entries",
]
