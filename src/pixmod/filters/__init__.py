"""Filter catalog and built-in filters."""

from pixmod.filters.builtin import BUILTIN_FILTERS
from pixmod.filters.catalog import FilterCatalog, FilterDefinition

__all__ = ["FilterCatalog", "FilterDefinition", "BUILTIN_FILTERS"]
