import click

from packindex.helper.utils import configure_logging, default_index_path
from packindex.index.diagnostics import run


@click.command("validate-index")
@click.argument("index_path", required=False, type=click.Path())
@click.pass_context
def validate_index(ctx, index_path):
    """Validate the pack registry index at INDEX_PATH (default: ./index.json)."""
    configure_logging()
    if index_path is None:
        index_path = default_index_path()
    ctx.exit(run(index_path))
