import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer

from .config import DEFAULT_POLICY, POLICIES, WatchConfig
from .errors import WalkError
from .poller import Watcher


USAGE = "usage: watch [-r] cmd [args...]"

app = typer.Typer(add_completion=False)


@app.command(
    # Everything from the first positional on belongs to the command, flags too
    context_settings={"allow_interspersed_args": False, "ignore_unknown_options": True}
)
def main(
    command: Optional[List[str]] = typer.Argument(
        None, metavar="cmd [args...]", help="Command to run each time a file changes"
    ),
    recursive: bool = typer.Option(
        False, "-r", "--recursive", help="Watch all subdirectories recursively"
    ),
    policy: str = typer.Option(
        DEFAULT_POLICY,
        "--policy",
        help="Change detection: 'path' compares each file with its last seen mtime, "
        "'max' compares the newest mtime in the tree",
    ),
    loglevel: str = typer.Option(
        "WARNING", "--loglevel", help="Logging level: DEBUG, INFO, WARNING, ERROR"
    ),
):
    """Run a command each time any file in the current directory is written.

    The directory is polled once a second. With -r, all subdirectories are
    polled as well. The command's output goes straight to the terminal and its
    exit status is ignored.
    """
    logging.basicConfig(
        level=getattr(logging, loglevel.upper(), logging.WARNING),
        format="watch: %(message)s",
        stream=sys.stderr,
    )

    # ignore_unknown_options leaves a mistyped flag at the head of the command
    if not command or (command[0].startswith("-") and command[0] != "-"):
        typer.echo(USAGE, err=True)
        raise typer.Exit(code=2)

    policy = (policy or DEFAULT_POLICY).strip().lower()
    if policy not in POLICIES:
        logging.warning(f"Unknown --policy '{policy}', defaulting to '{DEFAULT_POLICY}'")
        policy = DEFAULT_POLICY

    config = WatchConfig(command=tuple(command), recursive=recursive, policy=policy)
    logging.info(
        f"Watching {Path.cwd()} (recursive: {config.recursive}, policy: {config.policy})"
    )

    try:
        Watcher(config).run()
    except WalkError as e:
        logging.critical(str(e))
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        raise typer.Exit(code=130)


if __name__ == "__main__":
    app()
