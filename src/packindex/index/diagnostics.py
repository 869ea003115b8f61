import logging
import os
from typing import Optional

import click

from packindex.index.errors import IndexLoadError
from packindex.index.loader import load_index
from packindex.index.validator import validate_index

logger = logging.getLogger(__name__)

FAILED_LINE = "Index validation failed."
PASSED_LINE = "Index validation passed."


class Diagnostics:
    """Collects violation messages of one run and decides its exit status."""

    def __init__(self):
        self.messages = []
        self.failed = False

    def report(self, message):
        click.echo(str(message), err=True)
        self.messages.append(str(message))
        self.failed = True

    def finish(self) -> int:
        if self.failed:
            click.echo(FAILED_LINE, err=True)
            return 1
        click.echo(PASSED_LINE)
        return 0


def run(path: str, label: Optional[str] = None) -> int:
    """
    Validate the index file at path, printing every violation to stderr.

    Returns the process exit status: 0 when the index is valid, 1 when it
    could not be loaded or has at least one violation.
    """
    diagnostics = Diagnostics()
    try:
        entries = load_index(path)
    except IndexLoadError as e:
        click.echo(e.message, err=True)
        return 1

    if not entries:
        logger.info(f"{path} contains no entries")

    label = label or os.path.basename(path) or path
    for violation in validate_index(entries, label):
        diagnostics.report(violation)

    status = diagnostics.finish()
    logger.debug(f"Validation of {path} finished with status {status}")
    return status
