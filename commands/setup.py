"""
Setup and help commands for the hacl CLI.

Contains custom Click group class for coloured help output and typo suggestions.
"""

import click

from commands.errors import report_errors
from models.utils import similarity_score


class ColouredGroup(click.Group):
    """Custom Group class that adds colour to help output and suggests similar commands."""

    def resolve_command(self, ctx, args):
        """Resolve command with suggestions for typos."""
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if 'No such command' in str(e):
                cmd_name = args[0] if args else ''
                suggestions = self._get_suggestions(ctx, cmd_name)

                if suggestions:
                    error_msg = f"No such command '{cmd_name}'.\n\n"
                    error_msg += click.style("Did you mean one of these?\n", fg='yellow')
                    for suggestion in suggestions:
                        error_msg += click.style(f"  • {suggestion}\n", fg='green')
                    raise click.UsageError(error_msg, ctx) from e
            raise

    def _get_suggestions(self, ctx, cmd_name, max_suggestions=3):
        """Get command suggestions based on similarity."""
        if not cmd_name:
            return []

        cmd_lower = cmd_name.lower()
        suggestions = []
        for command in self.list_commands(ctx):
            cmd_obj = self.get_command(ctx, command)
            if cmd_obj and not cmd_obj.hidden:
                score = similarity_score(cmd_lower, command.lower())
                if score > 0.5:
                    suggestions.append((score, command))

        suggestions.sort(reverse=True, key=lambda x: x[0])
        return [cmd for score, cmd in suggestions[:max_suggestions]]

    def format_usage(self, ctx, formatter):
        """Format the usage line with colour."""
        formatter.write_paragraph()
        formatter.write_text(
            click.style('Usage: ', fg='cyan', bold=True) +
            click.style(f'{ctx.command_path} [OPTIONS] COMMAND [ARGS]...', fg='white')
        )

    def format_commands(self, ctx, formatter):
        """Format commands with colour."""
        commands = []
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands.append((subcommand, cmd.get_short_help_str(limit=200)))

        if commands:
            formatter.write_paragraph()
            formatter.write_text(click.style('Commands:', fg='yellow', bold=True))

            max_len = max(max(len(cmd[0]) for cmd in commands), 10)
            with formatter.indentation():
                for subcommand, help_text in commands:
                    formatter.write_text(
                        click.style(subcommand.ljust(max_len), fg='green') + '  ' +
                        click.style(help_text, fg='white', dim=True)
                    )


@click.command(name='config')
@click.option('--url', '-u', 'base_url', help='Base Home Assistant url')
@click.option('--token', '-t', help='Home Assistant API token')
@click.pass_context
@report_errors
def config_command(ctx, base_url, token):
    """Store the Home Assistant url and API token.

    Options that are not given keep their stored value.

    \b
    Examples:
      hacl config --url http://homeassistant.local:8123
      hacl config --token <long-lived access token>
    """
    from core.config import get_config_file, update_config

    if base_url is None and token is None:
        click.echo(ctx.get_help())
        return

    if base_url:
        from core.client import validate_base_url
        validate_base_url(base_url)

    update_config(base_url=base_url, token=token)
    click.secho("✓ Configuration has been stored", fg='green')
    click.echo(f"  Path: {get_config_file()}")


@click.command(name='setup')
@report_errors
def setup_command():
    """Show current configuration and test the connection.

    Configuration sources (priority order):
    1. Environment variables (HACL_BASE_URL, HACL_TOKEN)
    2. Config file (written by 'hacl config')
    """
    from core.client import HubClient
    from core.config import get_config_file, load_auth_from_environment, load_config
    from core.errors import ConfigurationError

    click.echo()
    click.secho("=== Home Assistant Configuration ===", fg='cyan', bold=True)
    click.echo()

    click.echo(click.style("1. Environment Variables", fg='cyan', bold=True))
    env_creds = load_auth_from_environment()
    if env_creds:
        click.echo(f"   Status:      {click.style('✓ Configured', fg='green')}")
        click.echo(f"   Base url:    {env_creds['base_url']}")
    else:
        click.echo(f"   Status:      {click.style('✗ Not configured', fg='yellow')}")
    click.echo()

    click.echo(click.style("2. Config File", fg='cyan', bold=True))
    click.echo(f"   Path:        {get_config_file()}")
    try:
        file_creds = load_config()
    except ConfigurationError as e:
        if not env_creds:
            raise
        # Environment variables take priority, so an unreadable file is only reported
        file_creds = None
        click.echo(f"   Status:      {click.style('✗ Unreadable', fg='red')}")
        click.echo(f"   Error:       {e}")
    else:
        if file_creds['base_url'] and file_creds['token']:
            click.echo(f"   Status:      {click.style('✓ Configured', fg='green')}")
            click.echo(f"   Base url:    {file_creds['base_url']}")
        else:
            click.echo(f"   Status:      {click.style('✗ Not configured', fg='yellow')}")
    click.echo()

    credentials = env_creds or file_creds
    click.echo(click.style("Connection Test", fg='cyan', bold=True))
    click.echo("Testing connection to Home Assistant...")
    with HubClient(credentials) as client:
        message = client.check_connection()
    click.secho(f"✓ Connected to {credentials['base_url']}: {message}", fg='green', bold=True)
    click.echo()
