"""
Processing pipeline management.

Manages a chain of filters that are applied sequentially to each pixel.
The output of one filter is the input of the next.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ..core import Pixel, SerializationError
from .filters import FILTER_TYPES, PixelFilter, create_filter


@dataclass
class FilterPipeline:
    """Container for an ordered sequence of filters."""

    filters: List[PixelFilter] = field(default_factory=list)

    def __post_init__(self):
        # Own the list so callers can keep editing theirs
        self.filters = list(self.filters)

    @classmethod
    def from_names(cls, registry, names: Iterable[str]) -> "FilterPipeline":
        """Build a pipeline from registry names, in order."""
        return cls([registry.lookup(name) for name in names])

    def matches(self, pixel: Pixel) -> bool:
        """A pipeline considers every pixel; each step gates itself."""
        return True

    def apply(self, pixel: Pixel) -> Pixel:
        """Thread a pixel through every filter in order."""
        for f in self.filters:
            if f.matches(pixel):
                pixel = f.apply(pixel)
        return pixel

    def add_filter(self, filter: PixelFilter) -> None:
        """Add a filter to the end of the pipeline."""
        self.filters.append(filter)

    def remove_filter(self, index: int) -> bool:
        """Remove a filter by index. Returns success."""
        if 0 <= index < len(self.filters):
            del self.filters[index]
            return True
        return False

    def move_filter(self, from_index: int, to_index: int) -> bool:
        """Move a filter from one position to another. Returns success."""
        if not (0 <= from_index < len(self.filters) and 0 <= to_index < len(self.filters)):
            return False

        filter = self.filters.pop(from_index)
        self.filters.insert(to_index, filter)
        return True

    def get_filter(self, index: int) -> Optional[PixelFilter]:
        """Get a filter by index."""
        if 0 <= index < len(self.filters):
            return self.filters[index]
        return None

    def clear(self) -> None:
        """Remove all filters from pipeline."""
        self.filters.clear()

    def is_empty(self) -> bool:
        """Check if pipeline has any filters."""
        return len(self.filters) == 0

    def __len__(self) -> int:
        """Return number of filters in pipeline."""
        return len(self.filters)

    def __iter__(self):
        """Iterate over filters in pipeline."""
        return iter(self.filters)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pipeline to dictionary."""
        return {
            "filters": [self.serialize_filter(f) for f in self.filters],
        }

    @staticmethod
    def serialize_filter(filter: PixelFilter) -> Dict[str, Any]:
        """Serialize a single filter."""
        filter_id = getattr(filter, "filter_id", None)
        if FILTER_TYPES.get(filter_id) is not type(filter):
            raise SerializationError(
                f"Cannot serialize {type(filter).__name__}: not a catalogued filter"
            )
        return {
            "filter_id": filter_id,
            "parameters": filter.get_parameters(),
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "FilterPipeline":
        """Deserialize pipeline from dictionary."""
        steps = data.get("filters", [])
        if not isinstance(steps, list):
            raise SerializationError("'filters' must be a list")

        pipeline = FilterPipeline()
        for step in steps:
            pipeline.add_filter(FilterPipeline.deserialize_filter(step))
        return pipeline

    @staticmethod
    def deserialize_filter(data: Dict[str, Any]) -> PixelFilter:
        """Deserialize a single filter from data."""
        if not isinstance(data, dict):
            raise SerializationError(f"Filter entry must be an object, got {type(data).__name__}")

        filter_id = data.get("filter_id")
        if not filter_id:
            raise SerializationError("Filter entry has no 'filter_id'")
        if not isinstance(filter_id, str):
            raise SerializationError(f"'filter_id' must be a string, got {type(filter_id).__name__}")

        parameters = data.get("parameters", {})
        if not isinstance(parameters, dict):
            raise SerializationError(f"Parameters of '{filter_id}' must be an object")

        return create_filter(filter_id, **parameters)
