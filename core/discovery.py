"""Area discovery.

The template API evaluates one expression per request, so the catalog is
built in two stages: one request listing the area ids, then one request per
area for its entities.
"""

from concurrent.futures import ThreadPoolExecutor

from core.client import HubClient
from core.decoder import decode_string_list
from core.errors import DecodeError, HubProtocolError
from models.types import Area, AreaCatalog

AREAS_TEMPLATE = 'areas()'
AREA_ENTITIES_TEMPLATE = "area_entities('{area_id}')"


def _evaluate_list(client: HubClient, expression: str) -> list[str]:
    raw = client.evaluate_template(expression)
    try:
        return decode_string_list(raw)
    except DecodeError as e:
        raise HubProtocolError(f"Unexpected reply to template {expression!r}", e.raw) from e


def list_area_ids(client: HubClient) -> list[str]:
    """Return the hub's area ids in the order the hub lists them."""
    return _evaluate_list(client, AREAS_TEMPLATE)


def fetch_area_entities(client: HubClient, area_id: str) -> Area:
    """Fetch the entity ids assigned to one area."""
    entities = _evaluate_list(client, AREA_ENTITIES_TEMPLATE.format(area_id=area_id))
    return Area(id=area_id, entities=tuple(entities))


def discover_areas(client: HubClient, max_workers: int = 1) -> AreaCatalog:
    """Build the area catalog.

    Args:
        client: Connected hub client
        max_workers: Number of concurrent per-area requests (1 = sequential)

    Returns:
        Tuple of Area in the order the hub listed the area ids

    Raises:
        TransportError, HubProtocolError: The first failure in area order.
            No partial catalog is returned.
    """
    area_ids = list_area_ids(client)

    if max_workers <= 1 or len(area_ids) <= 1:
        return tuple(fetch_area_entities(client, area_id) for area_id in area_ids)

    # Leaving the with block waits for every in-flight request, even when a
    # result below raises
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(fetch_area_entities, client, area_id) for area_id in area_ids]
        return tuple(future.result() for future in futures)
