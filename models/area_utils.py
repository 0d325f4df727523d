"""Area utilities for light toggling.

This module contains helper functions for working with the area catalog:
picking out the lights of an area and looking areas up by id.
"""

from models.types import Area, AreaCatalog, EntityId
from models.utils import find_similar_strings

# Entities toggled by hacl must carry this prefix
LIGHT_PREFIX = 'light.'


def get_area_lights(area: Area) -> list[EntityId]:
    """Get light entity ids in an area.

    Args:
        area: Area from the catalog

    Returns:
        List of entity ids starting with 'light.', in area order
    """
    return [entity for entity in area.entities if entity.startswith(LIGHT_PREFIX)]


def find_area_by_id(catalog: AreaCatalog, area_id: str) -> Area | None:
    """Find the area whose id matches exactly, or None."""
    for area in catalog:
        if area.id == area_id:
            return area
    return None


def find_similar_area_ids(catalog: AreaCatalog, text: str) -> list[str]:
    """Suggest area ids that look like the given text.

    Args:
        catalog: Discovered areas
        text: Area name typed by the user

    Returns:
        Up to three similar area ids, best match first
    """
    return find_similar_strings(text, [area.id for area in catalog], threshold=0.5)


def format_area_list(catalog: AreaCatalog) -> str:
    """Render the catalog as one area id per line, in catalog order."""
    return ''.join(f"{area.id}\n" for area in catalog)
