from pathlib import Path
from typing import Union


class WatchError(Exception):
    """Base class for errors raised by watchrun."""


class ConfigError(WatchError):
    pass


class WalkError(WatchError):
    """A directory entry could not be listed or stat'ed during a walk.

    Always fatal to the watcher: no kind of filesystem error is retried or
    skipped.
    """

    def __init__(self, path: Union[str, Path], cause: OSError) -> None:
        self.path = str(path)
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"{self.path}: {reason}")
