"""
Tree building: recursive descent over the preprocessed survey rows.

The input is a row sequence produced by xls2ajf.structure.preprocess_groups,
so blocks are balanced and the whole sequence is a single group. Each call
works on an index range and returns the node together with the index just
past its closing row; no parser state is shared between calls.
"""

import re
from typing import List, Optional, Sequence, Tuple

from xls2ajf.errors import RepeatCountError, RowTypeError
from xls2ajf.fields import build_field, is_supported_field, is_unsupported_field
from xls2ajf.model import Node, NodeType, SurveyRow
from xls2ajf.structure import BEGIN_REPEAT, BLOCK_CLOSERS, BLOCK_OPENERS


MAX_REPEAT_COUNT = 0xFFFF
_REPEAT_COUNT_RE = re.compile(r"^[0-9]+$")


def parse_repeat_count(row: SurveyRow) -> Optional[int]:
    """
    Parse a repeat_count cell as an unsigned 16-bit repetition limit.

    Returns:
        None for a blank cell, else the limit (1..65535)

    Raises:
        RepeatCountError: For anything else
    """
    text = row.repeat_count.strip()
    if not text:
        return None
    if not _REPEAT_COUNT_RE.match(text) or not 0 < int(text) <= MAX_REPEAT_COUNT:
        raise RepeatCountError(f"invalid repeat count '{row.repeat_count}'", row.line_number)
    return int(text)


def block_end(survey: Sequence[SurveyRow], start: int) -> int:
    """
    Find the index just past the row closing the block opened at `start`.

    Groups and repeats share one depth counter.
    """
    depth = 0
    for i in range(start, len(survey)):
        if survey[i].type in BLOCK_OPENERS:
            depth += 1
        elif survey[i].type in BLOCK_CLOSERS:
            depth -= 1
            if depth == 0:
                return i + 1
    raise AssertionError(f"block opened at row {start} has no end")


def build_group(survey: Sequence[SurveyRow], start: int = 0) -> Tuple[Node, int]:
    """
    Build the group or repeating slide opened at survey[start].

    Args:
        survey: Preprocessed rows
        start: Index of a "begin group" or "begin repeat" row

    Returns:
        (node, index just past the matching close row)

    Raises:
        RowTypeError: For an unsupported or unknown row type inside the block
        RepeatCountError: For an invalid repeat_count on a repeat
    """
    opener = survey[start]
    assert opener.type in BLOCK_OPENERS, "not a group"

    group = Node(
        node_type=NodeType.GROUP,
        name=opener.name,
        label=opener.label,
        relevant=opener.relevant,
        line_number=opener.line_number,
    )
    if opener.type == BEGIN_REPEAT:
        group.node_type = NodeType.REPEATING_SLIDE
        group.max_reps = parse_repeat_count(opener)

    end = block_end(survey, start)
    i = start + 1
    while i < end - 1:
        row = survey[i]
        if row.type in BLOCK_OPENERS:
            child, i = build_group(survey, i)
            group.nodes.append(child)
            continue
        assert row.type not in BLOCK_CLOSERS, "unexpected end of group"
        if is_supported_field(row.type):
            group.nodes.append(build_field(row))
        elif is_unsupported_field(row.type):
            raise RowTypeError(f"field type '{row.type}' is not supported", row.line_number)
        else:
            raise RowTypeError(f"invalid type '{row.type}' in survey", row.line_number)
        i += 1

    return group, end


def build_slides(root: Node) -> List[Node]:
    """
    Return the top-level sections of the synthetic root group.

    Plain groups become slides; repeating slides stay as they are, and
    nested groups are left untouched.
    """
    for node in root.nodes:
        if node.node_type == NodeType.GROUP:
            node.node_type = NodeType.SLIDE
    return root.nodes
