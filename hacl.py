#!/usr/bin/env python3
"""hacl - Simple Home Assistant CLI to control lights."""

import click

from commands.lights import areas_command, toggle_command
from commands.setup import ColouredGroup, config_command, setup_command


@click.group(cls=ColouredGroup, invoke_without_command=True,
             context_settings={'help_option_names': ['-h', '--help']})
@click.version_option(package_name='hacl')
@click.pass_context
def cli(ctx):
    """Simple Home Assistant CLI to control lights.

    Run without a command to pick an area and toggle its lights.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(toggle_command)


cli.add_command(toggle_command)
cli.add_command(areas_command)
cli.add_command(config_command)
cli.add_command(setup_command)


if __name__ == '__main__':
    cli()
