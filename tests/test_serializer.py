"""Tests for PipelineSerializer."""

import json

import pytest

from pixelfilter.core import FilterNotFoundError, InvalidParameterError, Pixel, SerializationError
from pixelfilter.processing import (
    BalanceFilter,
    EnhancedRedFilter,
    FilterPipeline,
    HalfBrightnessFilter,
)
from pixelfilter.services import PipelineSerializer


class TestPipelineFiles:
    """Test saving and loading pipelines."""

    def test_save_and_load(self, temp_dir, sample_pixels):
        pipeline = FilterPipeline([
            EnhancedRedFilter(shift=-40),
            HalfBrightnessFilter(divisor=3),
            BalanceFilter(blend=1.25),
        ])
        path = temp_dir / "nested" / "pipeline.json"

        PipelineSerializer.save_to_file(pipeline, path)
        loaded = PipelineSerializer.load_from_file(path)

        assert list(loaded) == list(pipeline)
        for p in sample_pixels:
            assert loaded.apply(p) == pipeline.apply(p)

    def test_file_format(self, temp_dir):
        path = temp_dir / "pipeline.json"
        PipelineSerializer.save_to_file(FilterPipeline([EnhancedRedFilter(shift=3)]), path)

        data = json.loads(path.read_text())
        assert data == {
            "format_version": "1.0",
            "pipeline": {"filters": [{"filter_id": "enhanced_red", "parameters": {"shift": 3}}]},
        }

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            PipelineSerializer.load_from_file(temp_dir / "nope.json")

    def test_invalid_json(self, temp_dir):
        path = temp_dir / "broken.json"
        path.write_text("{not json")
        with pytest.raises(SerializationError):
            PipelineSerializer.load_from_file(path)

    def test_unsupported_version(self):
        with pytest.raises(SerializationError, match="Unsupported format version"):
            PipelineSerializer.deserialize({"format_version": "9.9", "pipeline": {"filters": []}})

    def test_not_an_object(self):
        with pytest.raises(SerializationError):
            PipelineSerializer.deserialize(["BW"])

    @pytest.mark.parametrize("filter_id", [["x"], {"id": "balance"}, 7])
    def test_non_string_filter_id(self, filter_id):
        with pytest.raises(SerializationError):
            PipelineSerializer.deserialize({"pipeline": {"filters": [{"filter_id": filter_id}]}})

    def test_unknown_filter_in_file(self):
        with pytest.raises(FilterNotFoundError):
            PipelineSerializer.deserialize({"pipeline": {"filters": [{"filter_id": "sepia"}]}})


class TestPresets:
    """Test named preset files."""

    def test_save_and_load_presets(self, temp_dir, registry):
        path = temp_dir / "presets.json"
        PipelineSerializer.save_presets(
            {"Very Red": EnhancedRedFilter(shift=80), "Quarter": HalfBrightnessFilter(divisor=4)},
            path,
        )

        names = PipelineSerializer.load_presets(path, registry)

        assert names == ["Very Red", "Quarter"]
        assert registry.lookup("Very Red").apply(Pixel(100, 0, 0)).red == 180
        assert registry.lookup("Quarter") == HalfBrightnessFilter(divisor=4)
        assert "BW" in registry

    def test_presets_replace_defaults(self, temp_dir, registry):
        path = temp_dir / "presets.json"
        PipelineSerializer.save_presets({"More Red": EnhancedRedFilter(shift=50)}, path)

        PipelineSerializer.load_presets(path, registry)

        assert registry.lookup("More Red") == EnhancedRedFilter(shift=50)

    def test_bad_preset_registers_nothing(self, temp_dir, registry):
        path = temp_dir / "presets.json"
        path.write_text(json.dumps({
            "format_version": "1.0",
            "presets": {
                "Good": {"filter_id": "balance"},
                "Bad": {"filter_id": "half_brightness", "parameters": {"divisor": 0}},
            },
        }))

        with pytest.raises(InvalidParameterError):
            PipelineSerializer.load_presets(path, registry)
        assert "Good" not in registry

    def test_empty_preset_name_registers_nothing(self, temp_dir, registry):
        path = temp_dir / "presets.json"
        path.write_text(json.dumps({
            "presets": {
                "Good": {"filter_id": "balance"},
                "": {"filter_id": "balance"},
            },
        }))

        with pytest.raises(SerializationError):
            PipelineSerializer.load_presets(path, registry)
        assert "Good" not in registry

    def test_non_finite_parameter_in_file(self, temp_dir, registry):
        path = temp_dir / "presets.json"
        path.write_text(
            '{"presets": {"Broken": {"filter_id": "half_brighter", "parameters": {"factor": NaN}}}}'
        )

        with pytest.raises(InvalidParameterError):
            PipelineSerializer.load_presets(path, registry)
        assert "Broken" not in registry

    def test_presets_must_be_object(self, temp_dir, registry):
        path = temp_dir / "presets.json"
        path.write_text(json.dumps({"presets": ["BW"]}))
        with pytest.raises(SerializationError):
            PipelineSerializer.load_presets(path, registry)
