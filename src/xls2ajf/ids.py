"""
Navigation ids for a finished form tree.

With M = ID_MULTIPLIER and a parent id P:
    - the first child gets id P*M + 1 and previous P
    - every later sibling gets the prior sibling's id + 1, and that id
      as its previous
Top-level slides are the children of a virtual root with id 0, so ids
read as base-M digits: 2003 is the third child of the second slide.
"""

from typing import Sequence

from xls2ajf.errors import FanOutError
from xls2ajf.model import Node


ID_MULTIPLIER = 1000
MAX_CHILDREN = ID_MULTIPLIER - 1


def assign_ids(nodes: Sequence[Node], parent: int = 0) -> None:
    """
    Assign id/previous to `nodes` and, recursively, to their descendants.

    Args:
        nodes: Siblings, in order
        parent: Id of their parent (0 for the top level)

    Raises:
        FanOutError: If a node has more children than M - 1; beyond that
            sibling ids would collide with descendants of earlier siblings
    """
    if len(nodes) > MAX_CHILDREN:
        overflow = nodes[MAX_CHILDREN]
        raise FanOutError(
            f"too many items in one group ({len(nodes)}, at most {MAX_CHILDREN})",
            overflow.line_number,
        )

    previous = parent
    next_id = parent * ID_MULTIPLIER + 1
    for node in nodes:
        node.previous = previous
        node.id = next_id
        assign_ids(node.nodes, node.id)
        previous = node.id
        next_id = node.id + 1
