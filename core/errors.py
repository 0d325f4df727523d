"""Error types raised by hacl.

Every error may carry a ``hint``: a short remediation suggestion shown to the
user after the error message.
"""

CONFIG_HINT = ("You must configure the Home Assistant url and API token with the "
               "config subcommand. E.g. `hacl config --url http://homeassistant.local:8123 --token <token>`")


class HaclError(Exception):
    """Base class for all hacl errors."""

    # Internal errors are programming defects, not user-facing conditions
    internal = False

    def __init__(self, message: str, hint: str | None = None):
        super().__init__(message)
        self.hint = hint


class ConfigurationError(HaclError):
    """Missing or invalid base URL/token, or an unusable config file."""

    def __init__(self, message: str, hint: str | None = CONFIG_HINT):
        super().__init__(message, hint)


class TransportError(HaclError):
    """Connection failure, timeout or non-2xx reply from the hub."""


class HubProtocolError(HaclError):
    """Hub reply could not be read as the expected list of strings."""

    def __init__(self, message: str, raw: str, hint: str | None = None):
        super().__init__(message, hint)
        self.raw = raw

    def __str__(self):
        return f"{self.args[0]} (hub replied: {self.raw!r})"


class DecodeError(HubProtocolError):
    """Template output is not a list of strings."""


class SelectionCancelled(HaclError):
    """User declined to choose an area. Not a failure."""


class SelectionAborted(SelectionCancelled):
    """User aborted the chooser."""


class SelectionEmpty(SelectionCancelled):
    """Chooser returned no item."""


class InternalConsistencyError(HaclError):
    """An invariant of hacl itself was violated."""

    internal = True


class ChooserError(HaclError):
    """The interactive chooser failed to run."""


class AreaNotFound(HaclError):
    """An area named on the command line does not exist."""
