"""Light commands - discover areas and toggle their lights."""

import click

from core.client import DEFAULT_TIMEOUT, HubClient
from core.config import load_credentials, require_credentials
from core.discovery import discover_areas
from core.errors import AreaNotFound
from core.selection import default_chooser, select_area
from core.toggle import toggle_lights
from commands.errors import report_errors
from models.area_utils import find_area_by_id, find_similar_area_ids, get_area_lights
from models.types import Area, AreaCatalog


def connect(timeout: float | None, verbose: bool) -> HubClient:
    """Create a hub client from the stored configuration."""
    credentials = require_credentials(load_credentials())
    if timeout:
        return HubClient(credentials, timeout=(DEFAULT_TIMEOUT[0], timeout), verbose=verbose)
    return HubClient(credentials, verbose=verbose)


def resolve_area(catalog: AreaCatalog, area_id: str) -> Area:
    """Find an area named on the command line.

    Raises:
        AreaNotFound: If no area has that id (with suggestions as hint)
    """
    area = find_area_by_id(catalog, area_id)
    if area is not None:
        return area

    suggestions = find_similar_area_ids(catalog, area_id)
    hint = None
    if suggestions:
        hint = "Did you mean " + ", ".join(f"'{s}'" for s in suggestions) + "?"
    raise AreaNotFound(f"Area '{area_id}' not found", hint=hint)


@click.command(name='toggle')
@click.argument('area', required=False)
@click.option('--workers', '-w', type=click.IntRange(min=1), default=1, show_default=True,
              help='Concurrent requests while discovering areas')
@click.option('--timeout', type=click.FloatRange(min=0, min_open=True), help='Read timeout in seconds')
@click.option('--verbose', '-v', is_flag=True, help='Show requests sent to Home Assistant')
@report_errors
def toggle_command(area, workers, timeout, verbose):
    """Toggle all lights in an area.

    Fetches the areas from Home Assistant and lets you pick one with a fuzzy
    finder (fzf when installed, otherwise a numbered menu).

    \b
    Examples:
      hacl toggle
      hacl toggle kitchen
    """
    with connect(timeout, verbose) as client:
        catalog = discover_areas(client, max_workers=workers)
        if area:
            selected = resolve_area(catalog, area)
        else:
            selected = select_area(catalog, default_chooser())

        if not get_area_lights(selected):
            click.secho(f"No lights in area '{selected.id}'", fg='yellow')
            return

        toggled = toggle_lights(
            client, selected,
            on_toggled=lambda entity_id: click.echo(f"  {click.style('✓', fg='green')} {entity_id}")
        )
        click.secho(f"Toggled {len(toggled)} light{'s' if len(toggled) != 1 else ''} in '{selected.id}'",
                    fg='green', bold=True)


@click.command(name='areas')
@click.option('--workers', '-w', type=click.IntRange(min=1), default=1, show_default=True,
              help='Concurrent requests while discovering areas')
@click.option('--timeout', type=click.FloatRange(min=0, min_open=True), help='Read timeout in seconds')
@click.option('--verbose', '-v', is_flag=True, help='Show requests sent to Home Assistant')
@report_errors
def areas_command(workers, timeout, verbose):
    """List areas and the number of lights in each."""
    with connect(timeout, verbose) as client:
        catalog = discover_areas(client, max_workers=workers)

    if not catalog:
        click.echo("No areas found.")
        return

    click.secho("\n=== Areas ===\n", fg='cyan', bold=True)
    max_len = max(len(a.id) for a in catalog)
    for a in catalog:
        lights = len(get_area_lights(a))
        click.echo(f"  {a.id:<{max_len}} : {lights} light{'s' if lights != 1 else ''}")
    click.echo()
