#!/bin/env python3

import click

from packindex.commands import index, pack


@click.group()
def cli():
    """Pack registry index tooling"""
    pass


cli.add_command(index.validate_index)
cli.add_command(pack.validate_pack)


if __name__ == "__main__":
    cli()
