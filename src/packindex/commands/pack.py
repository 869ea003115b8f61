import logging
import shlex
import subprocess

import click

from packindex.helper.utils import configure_logging, get_config

logger = logging.getLogger(__name__)

COMMAND_NOT_EXECUTABLE = 126
COMMAND_NOT_FOUND = 127
SIGNAL_BASE = 128


def exit_status(returncode: int) -> int:
    # killed by signal N: report 128+N like a shell
    if returncode < 0:
        return SIGNAL_BASE - returncode
    return returncode


def pack_validator_args(pack_path: str) -> list[str]:
    return shlex.split(get_config()["pack_validator"]) + ["--file", pack_path]


@click.command("validate-pack")
@click.argument("pack_path", metavar="PACK", type=click.Path())
@click.pass_context
def validate_pack(ctx, pack_path):
    """Run the pack content validator on a single pack manifest PACK."""
    configure_logging()
    args = pack_validator_args(pack_path)
    logger.debug(f"Running {shlex.join(args)}")
    try:
        result = subprocess.run(args, check=False)
    except FileNotFoundError:
        click.echo(f"{args[0]}: command not found", err=True)
        ctx.exit(COMMAND_NOT_FOUND)
    except PermissionError:
        click.echo(f"{args[0]}: permission denied", err=True)
        ctx.exit(COMMAND_NOT_EXECUTABLE)
    ctx.exit(exit_status(result.returncode))
