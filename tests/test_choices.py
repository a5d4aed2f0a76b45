"""
Tests for choice origins (building and reference checking).
"""

import pytest
from xls2ajf.choices import build_choices_origins, check_choices_refs
from xls2ajf.errors import ChoiceReferenceError
from xls2ajf.model import Choice, ChoicesRow, FieldType, Node, NodeType


def choice_rows(*triples):
    return [
        ChoicesRow(list_name=list_name, name=name, label=label, line_number=i + 2)
        for i, (list_name, name, label) in enumerate(triples)
    ]


class TestBuildChoicesOrigins:
    """Test grouping choice rows into named lists."""

    def test_empty(self):
        origins, choices_map = build_choices_origins([])
        assert origins == []
        assert choices_map == {}

    def test_groups_by_list_name_keeping_row_order(self):
        """Rows of a list keep their sheet order, even when interleaved."""
        rows = choice_rows(
            ("colors", "red", "Red"),
            ("sizes", "s", "Small"),
            ("colors", "blue", "Blue"),
            ("sizes", "l", "Large"),
            ("colors", "green", "Green"),
        )
        origins, choices_map = build_choices_origins(rows)

        assert [c.value for c in choices_map["colors"]] == ["red", "blue", "green"]
        assert choices_map["sizes"] == [Choice("s", "Small"), Choice("l", "Large")]
        assert origins[0].choices == choices_map["colors"]

    def test_origins_in_first_seen_order(self):
        """Origin order follows the first appearance of each list name."""
        rows = choice_rows(
            ("zeta", "1", "One"),
            ("alpha", "a", "A"),
            ("zeta", "2", "Two"),
            ("mid", "m", "M"),
        )
        origins, _ = build_choices_origins(rows)
        assert [o.name for o in origins] == ["zeta", "alpha", "mid"]

    def test_no_row_dropped(self):
        """Duplicates are kept: lists are neither deduplicated nor sorted."""
        rows = choice_rows(
            ("colors", "red", "Red"),
            ("colors", "red", "Red"),
        )
        origins, _ = build_choices_origins(rows)
        assert len(origins[0].choices) == 2

    def test_exact_name_match(self):
        """List names are compared exactly."""
        rows = choice_rows(("Colors", "red", "Red"), ("colors", "blue", "Blue"))
        origins, _ = build_choices_origins(rows)
        assert [o.name for o in origins] == ["Colors", "colors"]

    def test_deterministic(self):
        rows = choice_rows(("b", "1", "1"), ("a", "2", "2"), ("b", "3", "3"))
        assert build_choices_origins(rows) == build_choices_origins(rows)


def tree_with_choice_field(ref, line_number=7):
    return Node(
        node_type=NodeType.GROUP,
        name="global",
        nodes=[
            Node(
                node_type=NodeType.GROUP,
                name="g",
                nodes=[
                    Node(
                        node_type=NodeType.FIELD,
                        name="pick",
                        field_type=FieldType.MULTIPLE_CHOICE,
                        choices_origin_ref=ref,
                        line_number=line_number,
                    )
                ],
            )
        ],
    )


class TestCheckChoicesRefs:
    """Test choice reference validation over a built tree."""

    def test_defined_list_passes(self):
        check_choices_refs(tree_with_choice_field("colors"), {"colors": [Choice("red", "Red")]})

    def test_undefined_list_fails_with_line(self):
        """A nested field with an unknown list is reported with its line."""
        tree = tree_with_choice_field("nonexistent_list", line_number=12)
        with pytest.raises(ChoiceReferenceError, match="undefined choice list 'nonexistent_list'") as exc:
            check_choices_refs(tree, {"colors": []})
        assert exc.value.line_number == 12
        assert str(exc.value).startswith("line 12:")

    def test_boolean_fields_not_checked(self):
        """yes_no booleans need no yes_no list."""
        tree = Node(
            node_type=NodeType.GROUP,
            nodes=[Node(node_type=NodeType.FIELD, name="ok", field_type=FieldType.BOOLEAN)],
        )
        check_choices_refs(tree, {})
