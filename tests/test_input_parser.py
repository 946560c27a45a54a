"""YAML input parsing and validation."""
import pytest
import yaml

from conftest import make_inputs
from rcbeam.config import DesignSettings
from rcbeam.input_parser import (
    InputError, build_design_inputs, generate_template, parse_config, parse_input,
)
from rcbeam.models.inputs import DisabledSlab, OneWaySlab, TwoWaySlab, slab_side_from_flags


def beam_mapping(**overrides):
    data = {
        "slab": {
            "thickness": 125, "live_load": 3.0, "floor_finish": 1.0,
            "left": {"type": "two_way", "lx": 3.0, "ly": 4.5, "support_edge": "short"},
        },
        "beam": {"width": 230, "depth": 450, "span": 3.0, "effective_cover": 25},
        "wall": {"height": 3.0, "thickness": 230, "density": 20},
        "materials": {"concrete_grade": "M20", "steel_grade": "Fe500"},
    }
    data.update(overrides)
    return data


class TestTemplate:

    def test_template_parses_to_reference_beam(self):
        parsed = parse_config(yaml.safe_load(generate_template()))
        assert parsed.settings == DesignSettings()
        assert len(parsed.beams) == 1
        name, inputs = parsed.beams[0]
        assert name == "B1"
        assert inputs == make_inputs()


class TestSlabSides:

    def test_flag_form_matches_variant_form(self):
        flags = beam_mapping()
        flags["slab"]["left"] = {
            "enabled": True, "span_type": "TwoWay", "lx": 3.0, "ly": 4.5, "support_edge": "Short",
        }
        assert build_design_inputs(flags) == build_design_inputs(beam_mapping())

    def test_disabled_flag(self):
        data = beam_mapping()
        data["slab"]["left"] = {"enabled": False, "lx": 3.0}
        assert build_design_inputs(data).slab.left == DisabledSlab()

    def test_null_side_is_disabled(self):
        data = beam_mapping()
        data["slab"]["right"] = None
        assert isinstance(build_design_inputs(data).slab.right, DisabledSlab)

    def test_one_way_flag(self):
        assert slab_side_from_flags(True, "OneWay", lx=2.5) == OneWaySlab(lx=2.5)

    def test_two_way_flag_long_edge(self):
        side = slab_side_from_flags(True, "TwoWay", lx=3.0, ly=6.0, support_edge="Long")
        assert isinstance(side, TwoWaySlab)
        assert side.aspect_ratio == 2.0

    def test_ly_shorter_than_lx_rejected(self):
        data = beam_mapping()
        data["slab"]["left"] = {"type": "two_way", "lx": 4.0, "ly": 3.0}
        with pytest.raises(InputError, match="ly"):
            parse_config(data)


class TestValidation:

    def test_errors_are_collected(self):
        data = beam_mapping(
            beam={"width": -230, "depth": 450, "span": 0, "effective_cover": 25},
            colour="red",
        )
        with pytest.raises(InputError) as exc_info:
            parse_config(data)
        message = str(exc_info.value)
        assert "3 error(s)" in message
        assert "beam.colour: unknown section" in message
        assert "beam.beam.width" in message
        assert "beam.beam.span" in message

    def test_point_load_beyond_span(self):
        data = beam_mapping(point_loads=[{"value": 10, "distance": 4.0}])
        with pytest.raises(InputError, match="beyond the span"):
            parse_config(data)

    def test_cover_must_be_less_than_depth(self):
        data = beam_mapping(beam={"width": 230, "depth": 40, "span": 3.0, "effective_cover": 40})
        with pytest.raises(InputError, match="effective cover"):
            parse_config(data)

    def test_unknown_grade(self):
        data = beam_mapping(materials={"concrete_grade": "M15"})
        with pytest.raises(InputError, match="concrete_grade"):
            parse_config(data)

    def test_non_standard_bar(self):
        data = beam_mapping(materials={"main_bar_dia": 18})
        with pytest.raises(InputError, match="main_bar_dia"):
            parse_config(data)

    def test_root_must_be_mapping(self):
        with pytest.raises(InputError, match="mapping"):
            parse_config([1, 2, 3])

    def test_bad_settings(self):
        with pytest.raises(InputError, match="settings.diagram_segments"):
            parse_config({"settings": {"diagram_segments": 5}, **beam_mapping()})


class TestMultipleBeams:

    def test_names_and_order(self):
        raw = {"beams": [dict(beam_mapping(), name="B7"), beam_mapping()]}
        parsed = parse_config(raw)
        assert [name for name, _ in parsed.beams] == ["B7", "B2"]

    def test_duplicate_names(self):
        raw = {"beams": [dict(beam_mapping(), name="B1"), dict(beam_mapping(), name="B1")]}
        with pytest.raises(InputError, match="duplicate"):
            parse_config(raw)

    def test_empty_list(self):
        with pytest.raises(InputError, match="non-empty"):
            parse_config({"beams": []})

    def test_settings_applied(self):
        raw = {"settings": {"load_factor": 1.2}, "beams": [beam_mapping()]}
        assert parse_config(raw).settings.load_factor == 1.2


class TestFiles:

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_input(tmp_path / "nope.yaml")

    def test_yaml_syntax_error(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("beam: [unclosed\n", encoding="utf-8")
        with pytest.raises(InputError, match="YAML syntax error"):
            parse_input(path)

    def test_round_trip_from_disk(self, tmp_path):
        path = tmp_path / "input.yaml"
        path.write_text(generate_template(), encoding="utf-8")
        assert parse_input(path).beams[0][1] == make_inputs()
