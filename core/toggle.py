"""Light toggle dispatch."""

from typing import Callable

from core.client import HubClient
from models.area_utils import get_area_lights
from models.types import Area, EntityId

LIGHT_DOMAIN = 'light'
TOGGLE_ACTION = 'toggle'


def toggle_lights(client: HubClient, area: Area,
                  on_toggled: Callable[[EntityId], None] | None = None) -> list[EntityId]:
    """Toggle every light in an area, one request per light.

    Stops at the first failed toggle and raises it. Lights toggled before the
    failure stay toggled.

    Args:
        client: Connected hub client
        area: Area whose lights should be toggled
        on_toggled: Optional callback run after each successful toggle

    Returns:
        Entity ids that were toggled, in area order
    """
    toggled = []
    for entity_id in get_area_lights(area):
        client.invoke_action(LIGHT_DOMAIN, TOGGLE_ACTION, entity_id)
        toggled.append(entity_id)
        if on_toggled:
            on_toggled(entity_id)
    return toggled
