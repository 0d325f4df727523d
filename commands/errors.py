"""Presentation of hacl errors on the command line."""

import functools

import click

from core.errors import ConfigurationError, HaclError, SelectionCancelled

EXIT_FAILURE = 1
EXIT_CONFIG = 2
# EX_SOFTWARE from sysexits.h
EXIT_INTERNAL = 70


def exit_code_for(error: HaclError) -> int:
    if isinstance(error, SelectionCancelled):
        return 0
    if error.internal:
        return EXIT_INTERNAL
    if isinstance(error, ConfigurationError):
        return EXIT_CONFIG
    return EXIT_FAILURE


def echo_error(error: HaclError):
    """Print an error and its suggestion to stderr."""
    if isinstance(error, SelectionCancelled):
        click.secho(str(error), fg='yellow', err=True)
    elif error.internal:
        click.secho(f"✗ Internal error: {error}", fg='red', bold=True, err=True)
        click.echo("This is a bug in hacl, please report it.", err=True)
    else:
        click.secho(f"✗ {error}", fg='red', err=True)

    if error.hint:
        click.secho(f"Suggestion: {error.hint}", fg='green', bold=True, err=True)


def report_errors(func):
    """Turn HaclError raised by a command into coloured output and an exit code.

    A cancelled selection ends the command normally.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except HaclError as e:
            echo_error(e)
            code = exit_code_for(e)
            if code:
                click.get_current_context().exit(code)
    return wrapper
