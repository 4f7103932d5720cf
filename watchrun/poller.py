import logging
import shlex
import time
from typing import Callable, Optional, Sequence

from .config import WatchConfig
from .detectors import Change, ChangeDetector, make_detector
from .runner import run_command


class Watcher:
    """The poll-detect-execute loop.

    Walks, optionally runs the command, then sleeps, strictly in sequence on
    the calling thread. A WalkError raised by the detector is not handled
    here and ends the loop.
    """

    def __init__(
        self,
        config: WatchConfig,
        detector: Optional[ChangeDetector] = None,
        runner: Callable[[Sequence[str]], Optional[int]] = run_command,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config
        self.detector = detector if detector is not None else make_detector(config.policy)
        self.runner = runner
        self.sleep = sleep

    def poll_once(self) -> Optional[Change]:
        change = self.detector.check(self.config)
        if change is None:
            return None
        logging.info(f"{change.path} changed, running: {shlex.join(self.config.command)}")
        self.runner(self.config.command)
        self.detector.reset()
        return change

    def run(self, max_cycles: Optional[int] = None) -> None:
        cycles = 0
        while max_cycles is None or cycles < max_cycles:
            self.poll_once()
            self.sleep(self.config.interval)
            cycles += 1
