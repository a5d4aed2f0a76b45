"""
Choice origins: grouping the choices sheet into named lists, and checking
that every choice field of a built tree points at one of them.
"""

from typing import Dict, List, Sequence, Tuple

from xls2ajf.errors import ChoiceReferenceError
from xls2ajf.model import Choice, ChoicesOrigin, ChoicesRow, Node


ChoicesMap = Dict[str, List[Choice]]


def build_choices_origins(rows: Sequence[ChoicesRow]) -> Tuple[List[ChoicesOrigin], ChoicesMap]:
    """
    Group choice rows by list name.

    Lists are keyed by exact list-name equality and keep their rows in
    input order. Origins are emitted in the order their list name is
    first seen, so the same sheet always gives the same origins.

    Args:
        rows: The choices sheet, top to bottom

    Returns:
        (origins, choices_map) where choices_map maps list name to choices
    """
    choices_map: ChoicesMap = {}
    for row in rows:
        choices_map.setdefault(row.list_name, []).append(
            Choice(value=row.name, label=row.label)
        )

    origins = [
        ChoicesOrigin(name=name, choices=list(choices))
        for name, choices in choices_map.items()
    ]
    return origins, choices_map


def check_choices_refs(node: Node, choices_map: ChoicesMap) -> None:
    """
    Verify that every single/multiple choice field under `node` references
    a defined list.

    Raises:
        ChoiceReferenceError: On the first field, depth first, whose list
            has no choices
    """
    for current in node.walk():
        if current.is_choice_field() and current.choices_origin_ref not in choices_map:
            raise ChoiceReferenceError(
                f"undefined choice list '{current.choices_origin_ref}'",
                current.line_number,
            )
