import logging
import subprocess
from typing import Optional, Sequence


def run_command(argv: Sequence[str]) -> Optional[int]:
    """Run argv to completion with the watcher's own stdout and stderr.

    Returns the exit status, or None if the program could not be started.
    A failing command is never an error for the watcher: nothing is raised
    and nothing above DEBUG is logged.
    """
    try:
        completed = subprocess.run(list(argv))
    except OSError as e:
        logging.debug(f"Could not start {argv[0]}: {e}")
        return None
    logging.debug(f"{argv[0]} exited with status {completed.returncode}")
    return completed.returncode
