"""Change detection policies.

A detector owns all of the state remembered between polling cycles. The
watcher asks it to check the tree once per cycle and, after running the
command for a reported change, tells it to reset.
"""

from contextlib import closing
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Type

from .config import DEFAULT_POLICY, WatchConfig
from .walker import Entry, iter_entries, snapshot_entries


@dataclass(frozen=True)
class Change:
    path: str
    mtime_ns: int


class ChangeDetector:
    def walk(self, config: WatchConfig) -> Iterator[Entry]:
        raise NotImplementedError

    def observe(self, entries: Iterable[Entry]) -> Optional[Change]:
        raise NotImplementedError

    def reset(self) -> None:
        raise NotImplementedError

    def check(self, config: WatchConfig) -> Optional[Change]:
        # Closing the walk releases a generator abandoned on early exit
        with closing(self.walk(config)) as entries:
            return self.observe(entries)


class PathDetector(ChangeDetector):
    """Compare each file against the mtime recorded when it was first seen.

    The first file found strictly newer than its record is reported at once
    and the rest of the walk is skipped. A file without a record is only
    recorded: creating a file never triggers, a later write to it does.
    Directories are walked through but not compared, since their mtime moves
    whenever a child is created or removed. Records for files a complete walk
    no longer finds are dropped, so a deleted file that reappears is a new
    baseline.
    """

    def __init__(self) -> None:
        self.state: Dict[str, int] = {}

    def walk(self, config: WatchConfig) -> Iterator[Entry]:
        return iter_entries(config.root, config.recursive)

    def observe(self, entries: Iterable[Entry]) -> Optional[Change]:
        seen = set()
        for entry in entries:
            if entry.is_dir:
                continue
            seen.add(entry.path)
            recorded = self.state.get(entry.path)
            if recorded is None:
                self.state[entry.path] = entry.mtime_ns
            elif entry.mtime_ns > recorded:
                self.state[entry.path] = entry.mtime_ns
                return Change(entry.path, entry.mtime_ns)
        # Only a complete walk proves a path is gone
        for path in self.state.keys() - seen:
            del self.state[path]
        return None

    def reset(self) -> None:
        self.state.clear()


class HighWaterMarkDetector(ChangeDetector):
    """Trigger whenever the newest mtime anywhere in the tree passes the mark.

    Every entry counts, the root and subdirectories included, so adding or
    removing a file also triggers. The mark only moves forward: it is raised
    on reset() to the value that triggered and never lowered, even when the
    newest file is deleted.
    """

    def __init__(self) -> None:
        self.mark: Optional[int] = None
        self._pending: Optional[int] = None

    def walk(self, config: WatchConfig) -> Iterator[Entry]:
        return snapshot_entries(config.root, config.recursive)

    def observe(self, entries: Iterable[Entry]) -> Optional[Change]:
        newest = max(entries, key=lambda entry: entry.mtime_ns, default=None)
        if newest is None:
            return None
        if self.mark is None:
            self.mark = newest.mtime_ns
            return None
        if newest.mtime_ns > self.mark:
            self._pending = newest.mtime_ns
            return Change(newest.path, newest.mtime_ns)
        return None

    def reset(self) -> None:
        if self._pending is not None and (self.mark is None or self._pending > self.mark):
            self.mark = self._pending
        self._pending = None


DETECTORS: Dict[str, Type[ChangeDetector]] = {
    "path": PathDetector,
    "max": HighWaterMarkDetector,
}


def make_detector(policy: str = DEFAULT_POLICY) -> ChangeDetector:
    return DETECTORS[policy]()
