"""
Test the example household form end to end.

Validates that converting the built-in example produces the expected
slides, nesting, navigation ids and choice lists.
"""

from xls2ajf.converter import convert_xlsform
from xls2ajf.examples import build_example_household_form
from xls2ajf.model import FieldType, NodeType


def test_example_household_form_structure():
    form = convert_xlsform(build_example_household_form(member_count=4))

    assert [s.name for s in form.slides] == ["household", "members"]
    household, members = form.slides
    assert household.node_type == NodeType.SLIDE
    assert members.node_type == NodeType.REPEATING_SLIDE
    assert members.max_reps == 4

    assert [n.name for n in household.nodes] == [
        "intro", "head_name", "size", "dwelling", "visit_date", "visit_time",
    ]
    dwelling = form.find_node("dwelling")
    assert dwelling.node_type == NodeType.GROUP
    assert [n.field_type for n in dwelling.nodes] == [
        FieldType.SINGLE_CHOICE,
        FieldType.BOOLEAN,
        FieldType.MULTIPLE_CHOICE,
    ]

    assert [o.name for o in form.choices_origins] == ["dwelling_type", "yes_no", "fuels"]


def test_example_household_form_ids():
    form = convert_xlsform(build_example_household_form())

    assert (form.find_node("household").id, form.find_node("household").previous) == (1, 0)
    assert (form.find_node("visit_time").id, form.find_node("visit_time").previous) == (1006, 1005)
    assert (form.find_node("fuels").id, form.find_node("fuels").previous) == (1004003, 1004002)
    assert (form.find_node("members").id, form.find_node("members").previous) == (2, 1)
    assert (form.find_node("is_adult").id, form.find_node("is_adult").previous) == (2003, 2002)
