"""
Core Form Model Objects

Defines the data structures on both sides of the conversion:

Input (the row model):
    - SurveyRow   (one line of the "survey" sheet)
    - ChoicesRow  (one line of the "choices" sheet)
    - XlsForm     (both sheets, as read from a workbook)

Output (the AJF tree):
    - Choice / ChoicesOrigin  (named, ordered option lists)
    - Node                    (field, group, slide or repeating slide)
    - AjfForm                 (root container)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about spreadsheets, JSON or YAML
        - Rows are immutable once read
        - Nodes are built bottom-up, get ids once, then are read-only
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


@dataclass(frozen=True)
class SurveyRow:
    """
    One row of the survey sheet.

    All column values are plain text, "" for blank cells.

    Properties:
        type:
            Raw type token, e.g. "text", "select_one colors", "begin group"
        name / label:
            Identifier and human-readable text
        relevant / constraint / calculation:
            Expressions, copied through untouched
        required:
            "yes" marks the question as mandatory, anything else does not
        repeat_count:
            Optional decimal string limiting a repeat's instances
        line_number:
            1-based row in the source sheet, used in error messages
    """

    type: str
    name: str = ""
    label: str = ""
    relevant: str = ""
    constraint: str = ""
    calculation: str = ""
    required: str = ""
    repeat_count: str = ""
    line_number: int = 0


@dataclass(frozen=True)
class ChoicesRow:
    """One row of the choices sheet: a value/label pair of a named list."""

    list_name: str
    name: str
    label: str = ""
    line_number: int = 0


@dataclass
class XlsForm:
    """Both sheets of a workbook, rows in top-to-bottom order."""

    survey: List[SurveyRow] = field(default_factory=list)
    choices: List[ChoicesRow] = field(default_factory=list)
    file_name: str = ""


class OriginType(Enum):
    FIXED = "fixed"


class ChoicesType(Enum):
    STRING = "string"


@dataclass
class Choice:
    value: str
    label: str


@dataclass
class ChoicesOrigin:
    """
    A named, ordered list of choices.

    One origin exists per distinct list name in the choices sheet.
    Choice order is the order of the rows in the sheet.
    """

    name: str
    choices: List[Choice] = field(default_factory=list)
    type: OriginType = OriginType.FIXED
    choices_type: ChoicesType = ChoicesType.STRING


class NodeType(Enum):
    FIELD = "field"
    GROUP = "group"
    SLIDE = "slide"
    REPEATING_SLIDE = "repeatingSlide"


class FieldType(Enum):
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    SINGLE_CHOICE = "singleChoice"
    MULTIPLE_CHOICE = "multipleChoice"
    NOTE = "note"
    DATE = "date"
    TIME = "time"
    FORMULA = "formula"


CHOICE_FIELD_TYPES = (FieldType.SINGLE_CHOICE, FieldType.MULTIPLE_CHOICE)


@dataclass
class FieldValidation:
    not_empty: bool = False


@dataclass
class Node:
    """
    A node of the AJF form tree.

    Properties:
        node_type:
            FIELD, GROUP, SLIDE or REPEATING_SLIDE
        name / label:
            Copied from the row that produced the node
        id / previous:
            Navigation identity, 0 until assigned by xls2ajf.ids
        nodes:
            Ordered children, always empty for fields
        field_type:
            Set for fields only
        choices_origin_ref:
            Set iff field_type is SINGLE_CHOICE or MULTIPLE_CHOICE
        html:
            Set iff field_type is NOTE, a copy of the label
        validation:
            Optional; currently only the "not empty" flag
        max_reps:
            Repeating slides only; None means unlimited
        relevant / constraint / calculation:
            Expression text copied verbatim from the row ("" if blank)
        line_number:
            Source row, kept for diagnostics (not part of the AJF output)

    INVARIANTS:
        - Each node has exactly one parent (the tree is built by value)
        - After id assignment, ids are positive and unique
    """

    node_type: NodeType
    name: str = ""
    label: str = ""
    id: int = 0
    previous: int = 0
    nodes: List["Node"] = field(default_factory=list)
    field_type: Optional[FieldType] = None
    choices_origin_ref: Optional[str] = None
    html: Optional[str] = None
    validation: Optional[FieldValidation] = None
    max_reps: Optional[int] = None
    relevant: str = ""
    constraint: str = ""
    calculation: str = ""
    line_number: int = 0

    def is_choice_field(self) -> bool:
        return self.node_type == NodeType.FIELD and self.field_type in CHOICE_FIELD_TYPES

    def walk(self):
        """Yield this node and all of its descendants, depth first, in order."""
        yield self
        for child in self.nodes:
            yield from child.walk()


@dataclass
class AjfForm:
    """
    Root container of a converted form.

    Properties:
        choices_origins:
            One origin per list name, in first-seen order
        slides:
            Top-level sections: SLIDE or REPEATING_SLIDE nodes
    """

    choices_origins: List[ChoicesOrigin] = field(default_factory=list)
    slides: List[Node] = field(default_factory=list)

    def get_choices_origin(self, name: str) -> Optional[ChoicesOrigin]:
        for origin in self.choices_origins:
            if origin.name == name:
                return origin
        return None

    def find_node(self, name: str) -> Optional[Node]:
        """
        Retrieve the first node (depth first) with the given name.

        Args:
            name: Node name

        Returns:
            Node or None if not found
        """
        for node in self.all_nodes():
            if node.name == name:
                return node
        return None

    def all_nodes(self):
        for slide in self.slides:
            yield from slide.walk()
