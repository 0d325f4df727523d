"""
Interactive area selection.

The chooser is a small interface, ``choose(text, preview) -> line or None``,
so the area lookup can be exercised without a terminal. ``FzfChooser`` runs
the external fzf binary; ``PromptChooser`` is a numbered click menu used when
fzf is not installed.
"""

import shutil
import subprocess
from typing import Protocol

import click

from core.errors import (
    ChooserError,
    InternalConsistencyError,
    SelectionAborted,
    SelectionEmpty,
)
from models.area_utils import find_area_by_id, format_area_list
from models.types import Area, AreaCatalog
from models.utils import find_similar_strings

# fzf exit codes
FZF_NO_MATCH = 1
FZF_INTERRUPTED = 130


class Chooser(Protocol):
    def choose(self, text: str, preview: str | None = None) -> str | None:
        """Pick one line of text.

        Returns:
            The selected line, or None if nothing was selected

        Raises:
            SelectionAborted: If the user aborted
        """
        ...


class FzfChooser:
    """Fuzzy selection through the fzf binary."""

    def __init__(self, executable: str = 'fzf', height: str = '50%'):
        self.executable = executable
        self.height = height

    @staticmethod
    def available(executable: str = 'fzf') -> bool:
        return shutil.which(executable) is not None

    def command(self, preview: str | None = None) -> list[str]:
        args = [self.executable, '--height', self.height, '--no-multi', '--color', 'dark']
        if preview:
            args += ['--preview', preview]
        return args

    def choose(self, text: str, preview: str | None = None) -> str | None:
        try:
            result = subprocess.run(
                self.command(preview),
                input=text,
                stdout=subprocess.PIPE,
                text=True,
            )
        except OSError as e:
            raise ChooserError(f"Fuzzy finder failed to start: {e}",
                               hint="Install fzf or make sure it is on PATH") from e

        if result.returncode == FZF_INTERRUPTED:
            raise SelectionAborted("No selection made")
        if result.returncode == FZF_NO_MATCH:
            return None
        if result.returncode != 0:
            raise ChooserError(f"Fuzzy finder exited with status {result.returncode}")

        selected = result.stdout.rstrip('\n')
        return selected or None


class PromptChooser:
    """Numbered menu selection with click prompts.

    Accepts either a number from the menu or a typed name, which is matched
    exactly first and then fuzzily.
    """

    def choose(self, text: str, preview: str | None = None) -> str | None:
        lines = [line for line in text.splitlines() if line]
        if not lines:
            return None

        click.echo()
        for i, line in enumerate(lines, 1):
            click.echo(f"  {click.style(str(i), fg='green', bold=True)}. {line}")
        click.echo()

        try:
            choice = click.prompt(
                f"Select area [1-{len(lines)}], type a name, or 'q' to cancel",
                type=str,
                default='',
                show_default=False,
            ).strip()
        except (click.Abort, KeyboardInterrupt) as e:
            raise SelectionAborted("No selection made") from e

        if choice.lower() == 'q':
            raise SelectionAborted("No selection made")
        if not choice:
            return None

        if choice.isdigit():
            index = int(choice) - 1
            if 0 <= index < len(lines):
                return lines[index]
            click.echo(f"Invalid selection: {choice}", err=True)
            return None

        if choice in lines:
            return choice

        matches = find_similar_strings(choice, lines, threshold=0.6, limit=1)
        if matches:
            return matches[0]

        click.echo(f"No area matches: {choice}", err=True)
        return None


def default_chooser() -> Chooser:
    """Use fzf when it is installed, otherwise the numbered menu."""
    if FzfChooser.available():
        return FzfChooser()
    return PromptChooser()


def select_area(catalog: AreaCatalog, chooser: Chooser) -> Area:
    """Let the user pick one area from the catalog.

    Raises:
        SelectionAborted: The user cancelled the chooser
        SelectionEmpty: Nothing was chosen (or there was nothing to choose)
        InternalConsistencyError: The chooser returned a line not in the catalog
    """
    if not catalog:
        raise SelectionEmpty("No areas found in Home Assistant",
                             hint="Create areas and assign lights to them in Home Assistant")

    selected_id = chooser.choose(format_area_list(catalog), preview=None)
    if not selected_id:
        raise SelectionEmpty("No selection made")

    area = find_area_by_id(catalog, selected_id)
    if area is None:
        raise InternalConsistencyError(f"Unexpected area id: {selected_id!r}")
    return area
