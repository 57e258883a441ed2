"""Named filter registry.

Example:
    >>> catalog = FilterCatalog()
    >>> catalog.names()[:3]
    ['none', 'grayscale', 'black_white']
    >>> out = catalog.apply("sepia", buffer)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from pixmod.buffer import PixelBuffer
from pixmod.exceptions import UnknownFilterError
from pixmod.filters.builtin import BUILTIN_FILTERS
from pixmod.protocols import BufferTransform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterDefinition:
    """A registered filter.

    Attributes:
        name: Lookup key (lower case)
        transform: ``PixelBuffer -> PixelBuffer`` callable
        display_name: Human-readable label
        description: One-line summary
    """

    name: str
    transform: BufferTransform
    display_name: str
    description: str = ""

    def __call__(self, buffer: PixelBuffer) -> PixelBuffer:
        return self.transform(buffer)


class FilterCatalog:
    """Registry mapping filter names to transforms.

    Names are case-insensitive. Registering an existing name replaces it;
    there is no removal.

    :param include_builtins: Pre-register the built-in filters
    """

    def __init__(self, include_builtins: bool = True):
        self._filters: dict[str, FilterDefinition] = {}
        if include_builtins:
            for name, (transform, display_name, description) in BUILTIN_FILTERS.items():
                self.register(name, transform, display_name, description)

    @staticmethod
    def _key(name: str) -> str:
        if not isinstance(name, str):
            raise TypeError(f"Filter name must be a string, got {type(name).__name__}")
        return name.strip().lower()

    def register(
        self,
        name: str,
        transform: BufferTransform,
        display_name: str | None = None,
        description: str = "",
    ) -> FilterDefinition:
        """Add or replace a filter.

        :param name: Lookup name
        :param transform: Callable returning a new buffer
        :param display_name: Label; defaults to ``name``
        :param description: One-line summary
        :returns: The stored definition
        :raises TypeError: If ``name`` is not a string or ``transform`` is not callable
        :raises ValueError: If ``name`` is empty
        """
        if not isinstance(transform, BufferTransform):
            raise TypeError(f"Filter transform must be callable, got {type(transform).__name__}")
        key = self._key(name)
        if not key:
            raise ValueError("Filter name must not be empty")

        if key in self._filters:
            logger.debug("[Filters] Replacing filter %r", key)
        definition = FilterDefinition(key, transform, display_name or name, description)
        self._filters[key] = definition
        return definition

    def get(self, name: str) -> FilterDefinition:
        """
        :raises UnknownFilterError: If no filter is registered under ``name``
        """
        if not isinstance(name, str):
            raise UnknownFilterError(name, list(self._filters))
        try:
            return self._filters[self._key(name)]
        except KeyError:
            raise UnknownFilterError(name, list(self._filters)) from None

    def apply(self, name: str, buffer: PixelBuffer) -> PixelBuffer:
        """Run the named filter on ``buffer``.

        :returns: New buffer; ``buffer`` is not modified
        :raises UnknownFilterError: If no filter is registered under ``name``
        """
        definition = self.get(name)
        logger.debug("[Filters] Applying %r to %r", definition.name, buffer)
        return definition(buffer)

    def info(self, name: str) -> dict[str, str]:
        """Name, display name and description of a filter."""
        definition = self.get(name)
        return {
            "name": definition.name,
            "display_name": definition.display_name,
            "description": definition.description,
        }

    def names(self) -> list[str]:
        """Registered names in registration order."""
        return list(self._filters)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._filters

    def __iter__(self) -> Iterator[FilterDefinition]:
        return iter(self._filters.values())

    def __len__(self) -> int:
        return len(self._filters)

    def __repr__(self) -> str:
        return f"FilterCatalog({len(self)} filters)"
