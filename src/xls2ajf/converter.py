"""
Conversion entry point: XLSForm rows in, AJF form out.

Pipeline:
    1. choices sheet  -> choices origins       (xls2ajf.choices)
    2. survey sheet   -> checked, wrapped rows (xls2ajf.structure)
    3. wrapped rows   -> node tree             (xls2ajf.builder)
    4. node tree      -> choice refs checked   (xls2ajf.choices)
    5. node tree      -> navigation ids        (xls2ajf.ids)

The conversion is synchronous and self-contained: each call owns its rows
and its tree, and nothing is logged or written.
"""

from typing import Sequence

from xls2ajf.builder import build_group, build_slides
from xls2ajf.choices import build_choices_origins, check_choices_refs
from xls2ajf.ids import assign_ids
from xls2ajf.model import AjfForm, ChoicesRow, SurveyRow, XlsForm
from xls2ajf.structure import preprocess_groups


def convert(survey: Sequence[SurveyRow], choices: Sequence[ChoicesRow]) -> AjfForm:
    """
    Convert survey and choices rows into an AJF form.

    Args:
        survey: Survey sheet rows, top to bottom, blank rows removed
        choices: Choices sheet rows, top to bottom, blank rows removed

    Returns:
        AjfForm with choices origins and id-assigned slides

    Raises:
        ConversionError: On the first structural, type, reference or
            repeat count error
    """
    origins, choices_map = build_choices_origins(choices)

    rows = preprocess_groups(survey)
    root, _ = build_group(rows)
    check_choices_refs(root, choices_map)

    slides = build_slides(root)
    assign_ids(slides)
    return AjfForm(choices_origins=origins, slides=slides)


def convert_xlsform(xls: XlsForm) -> AjfForm:
    return convert(xls.survey, xls.choices)
