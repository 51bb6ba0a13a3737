"""Presenters that render command results with rich."""

from .lookup_table import LookupTablePresenter

__all__ = ["LookupTablePresenter"]
