"""
Pipeline and preset serialization.

Handles saving and loading of filter pipelines and named filter presets
to/from JSON format.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from ..core import SerializationError
from ..processing import FilterPipeline, FilterRegistry, PixelFilter


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class PipelineSerializer:
    """
    Serializes and deserializes pipelines and presets to/from JSON.

    Format is versioned so future fields do not break old files.
    """

    # Format version for future compatibility
    FORMAT_VERSION = "1.0"

    @staticmethod
    def serialize(pipeline: FilterPipeline) -> Dict[str, Any]:
        """Convert a pipeline to a serializable dictionary."""
        return {
            "format_version": PipelineSerializer.FORMAT_VERSION,
            "pipeline": pipeline.to_dict(),
        }

    @staticmethod
    def deserialize(data: Dict[str, Any]) -> FilterPipeline:
        """Convert a dictionary back to a pipeline."""
        PipelineSerializer._check_version(data)

        pipeline_data = data.get("pipeline", {})
        if not isinstance(pipeline_data, dict):
            raise SerializationError("'pipeline' must be an object")
        return FilterPipeline.from_dict(pipeline_data)

    @staticmethod
    def save_to_file(pipeline: FilterPipeline, file_path: PathLike) -> None:
        """Save pipeline to JSON file."""
        PipelineSerializer._write_json(PipelineSerializer.serialize(pipeline), Path(file_path))

    @staticmethod
    def load_from_file(file_path: PathLike) -> FilterPipeline:
        """Load pipeline from JSON file."""
        return PipelineSerializer.deserialize(PipelineSerializer._read_json(Path(file_path)))

    # ========== Presets ==========

    @staticmethod
    def save_presets(presets: Mapping[str, PixelFilter], file_path: PathLike) -> None:
        """Save named filter configurations to a JSON file."""
        data = {
            "format_version": PipelineSerializer.FORMAT_VERSION,
            "presets": {
                name: FilterPipeline.serialize_filter(f) for name, f in presets.items()
            },
        }
        PipelineSerializer._write_json(data, Path(file_path))

    @staticmethod
    def load_presets(file_path: PathLike, registry: FilterRegistry) -> List[str]:
        """
        Register every preset of a JSON file, replacing same-named entries.

        Returns the registered names in file order. Nothing is registered if
        any preset is invalid.
        """
        path = Path(file_path)
        data = PipelineSerializer._read_json(path)
        PipelineSerializer._check_version(data)

        presets_data = data.get("presets", {})
        if not isinstance(presets_data, dict):
            raise SerializationError("'presets' must be an object")

        for name in presets_data:
            if not name:
                raise SerializationError("Preset names must be non-empty")

        # Build everything first so a bad entry leaves the registry untouched
        presets = {
            name: FilterPipeline.deserialize_filter(entry)
            for name, entry in presets_data.items()
        }
        for name, f in presets.items():
            registry.register(name, f)

        logger.info("Loaded %d preset(s) from %s", len(presets), path)
        return list(presets)

    # ========== Helpers ==========

    @staticmethod
    def _check_version(data: Any) -> None:
        if not isinstance(data, dict):
            raise SerializationError(f"Expected a JSON object, got {type(data).__name__}")

        version = data.get("format_version", PipelineSerializer.FORMAT_VERSION)
        if version != PipelineSerializer.FORMAT_VERSION:
            raise SerializationError(
                f"Unsupported format version: {version}. "
                f"Expected {PipelineSerializer.FORMAT_VERSION}"
            )

    @staticmethod
    def _write_json(data: Dict[str, Any], file_path: Path) -> None:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w") as f:
            json.dump(data, f, indent=2)

    @staticmethod
    def _read_json(file_path: Path) -> Any:
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, "r") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise SerializationError(f"Invalid JSON in {file_path}: {e}") from e
