"""
Structural preprocessing of the survey sheet.

Checks that groups and repeats balance and nest legally, then rewrites the
row sequence so that it is always exactly one top-level group:

    begin group "global"
        [begin group "form"]      only if there are ungrouped questions
            ...original rows...
        [end group]
    end group

Nesting rules:
    - groups may nest inside groups
    - a repeat may only be opened at top level
    - nothing may be opened inside a repeat
    - top-level ungrouped questions and repeats cannot coexist
"""

from typing import List, Optional, Sequence, Tuple

from xls2ajf.errors import StructureError
from xls2ajf.model import SurveyRow


BEGIN_GROUP = "begin group"
END_GROUP = "end group"
BEGIN_REPEAT = "begin repeat"
END_REPEAT = "end repeat"

BLOCK_OPENERS = (BEGIN_GROUP, BEGIN_REPEAT)
BLOCK_CLOSERS = (END_GROUP, END_REPEAT)

GROUP = "group"
REPEAT = "repeat"

GLOBAL_GROUP_NAME = "global"
GLOBAL_GROUP_LABEL = "Global"
FORM_GROUP_NAME = "form"
FORM_GROUP_LABEL = "Form"


def check_structure(survey: Sequence[SurveyRow]) -> Tuple[bool, bool]:
    """
    Scan the rows once, validating block balance and nesting.

    Args:
        survey: Survey rows, top to bottom

    Returns:
        (has_ungrouped, has_repeat)

    Raises:
        StructureError: On the first structural violation
    """
    stack: List[Tuple[str, SurveyRow]] = []
    first_ungrouped: Optional[SurveyRow] = None
    has_repeat = False

    for row in survey:
        if row.type == BEGIN_GROUP:
            if stack and stack[-1][0] == REPEAT:
                raise StructureError("groups can't be nested in repeats", row.line_number)
            stack.append((GROUP, row))
        elif row.type == END_GROUP:
            if not stack or stack[-1][0] != GROUP:
                raise StructureError("unexpected 'end group'", row.line_number)
            stack.pop()
        elif row.type == BEGIN_REPEAT:
            if stack:
                raise StructureError("repeats can't be nested", row.line_number)
            stack.append((REPEAT, row))
            has_repeat = True
        elif row.type == END_REPEAT:
            if not stack or stack[-1][0] != REPEAT:
                raise StructureError("unexpected 'end repeat'", row.line_number)
            stack.pop()
        elif not stack and first_ungrouped is None:
            first_ungrouped = row

    if stack:
        kind, opener = stack[-1]
        raise StructureError(f"'begin {kind}' is never closed", opener.line_number)

    if first_ungrouped is not None and has_repeat:
        raise StructureError(
            "repeats and ungrouped questions cannot coexist",
            first_ungrouped.line_number,
        )

    return first_ungrouped is not None, has_repeat


def _wrap(survey: List[SurveyRow], name: str, label: str) -> List[SurveyRow]:
    return [SurveyRow(type=BEGIN_GROUP, name=name, label=label)] + survey + [SurveyRow(type=END_GROUP)]


def preprocess_groups(survey: Sequence[SurveyRow]) -> List[SurveyRow]:
    """
    Validate the survey structure and wrap it into synthetic groups.

    Ungrouped questions are gathered into a "form" group; the result is
    always wrapped into a "global" group so the builder starts from a
    single top-level block.

    Raises:
        StructureError: If the rows are not well formed
    """
    has_ungrouped, _ = check_structure(survey)

    rows = list(survey)
    if has_ungrouped:
        rows = _wrap(rows, FORM_GROUP_NAME, FORM_GROUP_LABEL)
    return _wrap(rows, GLOBAL_GROUP_NAME, GLOBAL_GROUP_LABEL)
