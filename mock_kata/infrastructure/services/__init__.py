"""Service adapters.

In-memory implementations of the ports the thing cache depends on.
"""

from .catalog import CatalogEntry, ThingCatalog, load_thing_catalog
from .in_memory_thing_service import InMemoryThingService

__all__ = [
    "CatalogEntry",
    "InMemoryThingService",
    "ThingCatalog",
    "load_thing_catalog",
]
