"""
Tests for serialization of AJF forms.

These tests pin the AJF dict layout and check that JSON/YAML output
loads back into the same form.
"""

import json

import yaml

from xls2ajf.converter import convert_xlsform
from xls2ajf.examples import build_example_household_form
from xls2ajf.serialization import (
    form_from_dict,
    form_from_json,
    form_from_yaml,
    form_to_dict,
    form_to_json,
    form_to_yaml,
    node_to_dict,
)


def build_sample_form():
    return convert_xlsform(build_example_household_form(member_count=3))


def test_top_level_layout():
    d = form_to_dict(build_sample_form())

    assert list(d) == ["choicesOrigins", "slides"]
    assert d["choicesOrigins"][0] == {
        "type": "fixed",
        "name": "dwelling_type",
        "choicesType": "string",
        "choices": [
            {"value": "house", "label": "House"},
            {"value": "flat", "label": "Flat"},
        ],
    }


def test_node_layout():
    form = build_sample_form()

    head = node_to_dict(form.find_node("head_name"))
    assert head == {
        "id": 1002,
        "previous": 1001,
        "name": "head_name",
        "label": "Name of the household head",
        "nodeType": "field",
        "nodes": [],
        "fieldType": "string",
        "validation": {"notEmpty": True},
    }

    assert node_to_dict(form.find_node("intro"))["HTML"] == "Welcome to the <b>household</b> survey"
    assert node_to_dict(form.find_node("fuels"))["choicesOriginRef"] == "fuels"
    assert node_to_dict(form.find_node("fuels"))["relevant"] == "${has_water} = 'yes'"

    members = node_to_dict(form.find_node("members"))
    assert members["nodeType"] == "repeatingSlide"
    assert members["maxReps"] == 3
    assert "fieldType" not in members
    assert [n["id"] for n in members["nodes"]] == [2001, 2002, 2003]


def test_json_roundtrip():
    form = build_sample_form()
    before = form_to_dict(form)
    json_str = form_to_json(form)
    assert json.loads(json_str) == before
    after = form_to_dict(form_from_json(json_str))
    assert before == after


def test_yaml_roundtrip():
    form = build_sample_form()
    before = form_to_dict(form)
    yaml_str = form_to_yaml(form)
    assert yaml.safe_load(yaml_str) == before
    after = form_to_dict(form_from_yaml(yaml_str))
    assert before == after


def test_from_dict_restores_tree():
    form = build_sample_form()
    restored = form_from_dict(form_to_dict(form))
    assert restored.find_node("dwelling_type").choices_origin_ref == "dwelling_type"
    assert restored.find_node("members").max_reps == 3
    assert [o.name for o in restored.choices_origins] == ["dwelling_type", "yes_no", "fuels"]


def test_compact_json():
    assert "\n" not in form_to_json(build_sample_form(), indent=None)
