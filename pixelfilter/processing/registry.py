"""Named registry of configured filter instances.

A registry maps a human-readable name (e.g. "More Red") to one fully
configured filter. Registries are plain objects: construct one, seed it,
and pass it to whoever needs lookups.

Example
-------
>>> registry = build_default_registry()
>>> registry.register("Very Red", EnhancedRedFilter(shift=60))
>>> registry.lookup("BW").apply(Pixel(128, 64, 32))
Pixel(red=75, green=75, blue=75, alpha=255)
"""

import logging
from typing import Dict, Iterator, List, Mapping, Optional

from ..core import FilterNotFoundError
from .filters import (
    PixelFilter,
    BalanceFilter,
    BlackAndWhiteFilter,
    EnhancedRedFilter,
    HalfBrighterFilter,
    HalfBrightnessFilter,
)


logger = logging.getLogger(__name__)


class FilterRegistry:
    """Mapping from filter name to a configured filter instance."""

    def __init__(self, filters: Optional[Mapping[str, PixelFilter]] = None):
        self._filters: Dict[str, PixelFilter] = {}
        for name, filter in (filters or {}).items():
            self.register(name, filter)

    def register(self, name: str, filter: PixelFilter) -> None:
        """Register a filter under ``name``, replacing any previous entry.

        Parameters
        ----------
        name : str
            Lookup key, matched exactly
        filter : PixelFilter
            Configured filter (or anything with ``matches``/``apply``)
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Filter name must be a non-empty string")
        if not (callable(getattr(filter, "matches", None)) and callable(getattr(filter, "apply", None))):
            raise TypeError(
                f"Filter '{name}' must implement matches() and apply(), got {type(filter).__name__}"
            )

        previous = self._filters.get(name)
        self._filters[name] = filter

        if previous is not None:
            logger.debug("Replaced filter %r: %r -> %r", name, previous, filter)
        else:
            logger.info("Registered filter: %s (%s)", name, type(filter).__name__)

    def unregister(self, name: str) -> None:
        """Remove a registered filter."""
        if name not in self._filters:
            raise FilterNotFoundError(name, self._filters.keys())
        del self._filters[name]

    def lookup(self, name: str) -> PixelFilter:
        """Return the filter registered under exactly ``name``.

        Raises
        ------
        FilterNotFoundError
            If nothing is registered under ``name``
        """
        try:
            return self._filters[name]
        except KeyError:
            raise FilterNotFoundError(name, self._filters.keys()) from None

    def names(self) -> List[str]:
        """Registered names in registration order."""
        return list(self._filters)

    def __contains__(self, name: object) -> bool:
        return name in self._filters

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._filters))


def default_filters() -> Dict[str, PixelFilter]:
    """The stock named configurations."""
    return {
        "BW": BlackAndWhiteFilter(),
        "More Red": EnhancedRedFilter(shift=10),
        "50% Brightness": HalfBrightnessFilter(),
        "50% Brighter": HalfBrighterFilter(),
        "Balance": BalanceFilter(),
    }


def build_default_registry() -> FilterRegistry:
    """Create a registry seeded with the stock configurations."""
    return FilterRegistry(default_filters())
