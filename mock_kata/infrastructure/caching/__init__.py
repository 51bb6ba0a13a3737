"""Caching infrastructure.

This module provides the thing cache and its in-memory entry table.
"""

from .entry_table import EntryTable
from .thing_cache import ThingCache

__all__ = [
    "EntryTable",
    "ThingCache",
]
