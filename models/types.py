"""Type definitions for the hacl CLI.

This module provides the structured data types shared by the hub client,
area discovery and the toggle commands.
"""

from dataclasses import dataclass, field
from typing import TypedDict

# Entity ids are plain strings of the form "<domain>.<object_id>"
EntityId = str


class Credentials(TypedDict):
    """Connection settings for the Home Assistant hub."""
    base_url: str
    token: str


@dataclass(frozen=True)
class Area:
    """A hub area and the entity ids assigned to it."""
    id: str
    entities: tuple[EntityId, ...] = field(default_factory=tuple)


# Built once per run, in the order the hub listed the areas
AreaCatalog = tuple[Area, ...]
