"""
Field mapping: from an XLSForm row type to an AJF field node.

Row types fall in three classes:
    - supported:    mapped to a FieldType (see build_field)
    - unsupported:  valid XLSForm, but no AJF counterpart yet
    - anything else is not a question type at all
"""

from xls2ajf.model import FieldType, FieldValidation, Node, NodeType, SurveyRow


SELECT_ONE_PREFIX = "select_one "
SELECT_MULTIPLE_PREFIX = "select_multiple "
RANK_PREFIX = "rank "
YES_NO = "select_one yes_no"
REQUIRED_YES = "yes"

SIMPLE_FIELD_TYPES = {
    "decimal": FieldType.NUMBER,
    "text": FieldType.STRING,
    YES_NO: FieldType.BOOLEAN,
    "note": FieldType.NOTE,
    "date": FieldType.DATE,
    "time": FieldType.TIME,
    "calculate": FieldType.FORMULA,
}

UNSUPPORTED_FIELD_TYPES = {
    "integer", "range", "geopoint", "geotrace", "geoshape",
    "datetime", "image", "audio", "video", "file",
    "barcode", "acknowledge", "hidden", "xml-external",
    # metadata
    "start", "end", "today", "deviceid", "subscriberid",
    "simserial", "phonenumber", "username", "email",
}


def is_select_one(row_type: str) -> bool:
    return row_type.startswith(SELECT_ONE_PREFIX) and row_type != YES_NO


def is_select_multiple(row_type: str) -> bool:
    return row_type.startswith(SELECT_MULTIPLE_PREFIX)


def is_supported_field(row_type: str) -> bool:
    return row_type in SIMPLE_FIELD_TYPES or is_select_one(row_type) or is_select_multiple(row_type)


def is_unsupported_field(row_type: str) -> bool:
    return row_type in UNSUPPORTED_FIELD_TYPES or row_type.startswith(RANK_PREFIX)


def _list_name(row_type: str) -> str:
    # "select_one colors" -> "colors"
    return row_type.split(" ", 1)[1]


def build_field(row: SurveyRow) -> Node:
    """
    Build the field node for a supported row.

    "select_one yes_no" is always a BOOLEAN, never a SINGLE_CHOICE.
    A "required" value of exactly "yes" adds a not-empty validation.

    Args:
        row: A row whose type passes is_supported_field

    Returns:
        A FIELD node with no id yet
    """
    assert is_supported_field(row.type), f"unsupported row type: {row.type}"

    field = Node(
        node_type=NodeType.FIELD,
        name=row.name,
        label=row.label,
        relevant=row.relevant,
        constraint=row.constraint,
        calculation=row.calculation,
        line_number=row.line_number,
    )

    if row.type in SIMPLE_FIELD_TYPES:
        field.field_type = SIMPLE_FIELD_TYPES[row.type]
    elif is_select_one(row.type):
        field.field_type = FieldType.SINGLE_CHOICE
        field.choices_origin_ref = _list_name(row.type)
    else:
        field.field_type = FieldType.MULTIPLE_CHOICE
        field.choices_origin_ref = _list_name(row.type)

    if field.field_type == FieldType.NOTE:
        field.html = row.label

    if row.required == REQUIRED_YES:
        field.validation = FieldValidation(not_empty=True)

    return field
