"""
Example XLSForm for demos and tests.

Builds a small household survey as it would come out of the reader:
a "household" page with a nested "dwelling" group, a repeating "members"
section, and the choice lists they use.
"""
from typing import List

from xls2ajf.model import ChoicesRow, SurveyRow, XlsForm


def _survey_rows(member_count: int) -> List[SurveyRow]:
    rows = [
        ("begin group", "household", "Household", {}),
        ("note", "intro", "Welcome to the <b>household</b> survey", {}),
        ("text", "head_name", "Name of the household head", {"required": "yes"}),
        ("decimal", "size", "How many people live here?", {"constraint": ". > 0"}),
        ("begin group", "dwelling", "Dwelling", {}),
        ("select_one dwelling_type", "dwelling_type", "Type of dwelling", {}),
        ("select_one yes_no", "has_water", "Running water?", {}),
        ("select_multiple fuels", "fuels", "Cooking fuels", {"relevant": "${has_water} = 'yes'"}),
        ("end group", "", "", {}),
        ("date", "visit_date", "Date of visit", {}),
        ("time", "visit_time", "Time of visit", {}),
        ("end group", "", "", {}),
        ("begin repeat", "members", "Members", {"repeat_count": str(member_count)}),
        ("text", "member_name", "Name", {"required": "yes"}),
        ("decimal", "member_age", "Age", {}),
        ("calculate", "is_adult", "", {"calculation": "${member_age} >= 18"}),
        ("end repeat", "", "", {}),
    ]
    return [
        SurveyRow(type=t, name=name, label=label, line_number=i + 2, **extra)
        for i, (t, name, label, extra) in enumerate(rows)
    ]


def _choices_rows() -> List[ChoicesRow]:
    rows = [
        ("dwelling_type", "house", "House"),
        ("dwelling_type", "flat", "Flat"),
        ("yes_no", "yes", "Yes"),
        ("yes_no", "no", "No"),
        ("fuels", "gas", "Gas"),
        ("fuels", "wood", "Wood"),
        ("fuels", "electric", "Electricity"),
    ]
    return [
        ChoicesRow(list_name=list_name, name=name, label=label, line_number=i + 2)
        for i, (list_name, name, label) in enumerate(rows)
    ]


def build_example_household_form(member_count: int = 8) -> XlsForm:
    return XlsForm(
        survey=_survey_rows(member_count),
        choices=_choices_rows(),
        file_name="household.xlsx",
    )
