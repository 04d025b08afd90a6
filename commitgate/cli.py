#!/usr/bin/env python3
import re
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from .commit_message import CommitMessageValidator
from .observers import ConsoleLogObserver, FileLogObserver, notify

err_console = Console(stderr=True)

# A byte-order mark counts as surrounding whitespace
SURROUNDING_WHITESPACE_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def read_commit_message(message_file: Path) -> str:
    """Read the message file written by git and trim surrounding whitespace."""
    return SURROUNDING_WHITESPACE_RE.sub("", message_file.read_text(encoding="utf-8"))


@click.command()
@click.argument(
    "message_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path),
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to append validation results to",
)
@click.option(
    "-v", "--verbose", is_flag=True, help="Report accepted messages as well"
)
@click.option("--version", is_flag=True, help="Display version information and exit")
def main(
    message_file: Optional[Path],
    log_file: Optional[Path],
    verbose: bool,
    version: bool,
):
    """
    Validate the commit message stored in MESSAGE_FILE.

    Intended to run from a git commit-msg hook, which passes the path of the
    message file as its first argument. A message is accepted when it is a
    release message (v followed by a digit) or a conventional commit such as
    "feat(scope): subject". Rejected messages exit with status 1.
    """
    if version:
        from .version import display_version_info

        display_version_info()
        return

    if message_file is None:
        raise click.UsageError("Missing argument 'MESSAGE_FILE'.")

    message = read_commit_message(message_file)
    result = CommitMessageValidator().validate(message)

    observers = [ConsoleLogObserver(err_console, verbose=verbose)]
    if log_file:
        observers.append(FileLogObserver(str(log_file)))

    notify(observers, result)

    if not result.accepted:
        sys.exit(1)


if __name__ == "__main__":
    main()
