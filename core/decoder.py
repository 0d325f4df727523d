"""Decoding of Home Assistant template responses.

The hub renders lists with Python literal syntax, e.g. ``['kitchen', 'office']``.
We swap every single quote for a double quote and read the result as JSON.
No escaping is supported: an area or entity name containing an apostrophe
produces invalid JSON and fails with DecodeError.
"""

import json

from core.errors import DecodeError


def decode_string_list(raw: str) -> list[str]:
    """Decode a rendered template list into a list of strings.

    Args:
        raw: Response body from the template endpoint

    Returns:
        Strings in the order the hub rendered them

    Raises:
        DecodeError: If the body is not a list of strings after quote swapping
    """
    normalised = raw.replace("'", '"')
    try:
        value = json.loads(normalised)
    except ValueError as e:
        raise DecodeError(f"Unable to decode Home Assistant response as a list: {e}", raw) from e

    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise DecodeError("Home Assistant response is not a list of strings", raw)

    return value
