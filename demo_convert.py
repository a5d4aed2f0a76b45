#!/usr/bin/env python3
"""
Conversion Demo: XLSForm rows → AJF tree → JSON

Shows the full workflow on the built-in household survey:
1. Build the example rows (as the workbook reader would produce them)
2. Convert them into an AJF form
3. Print the navigation ids and the JSON output
"""

from xls2ajf.converter import convert_xlsform
from xls2ajf.examples import build_example_household_form
from xls2ajf.serialization import form_to_json


def print_tree(nodes, depth=0):
    for node in nodes:
        kind = node.field_type.value if node.field_type else node.node_type.value
        print(f"   {'  ' * depth}{node.id:>8} (prev {node.previous:>8})  {node.name} [{kind}]")
        print_tree(node.nodes, depth + 1)


def main():
    print("=" * 80)
    print("CONVERSION DEMO: XLSForm → AJF")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Rows
    # =========================================================================
    print("\n1. BUILDING EXAMPLE ROWS...")
    xls = build_example_household_form(member_count=8)
    print(f"   ✓ Survey rows: {len(xls.survey)}")
    print(f"   ✓ Choice rows: {len(xls.choices)}")

    # =========================================================================
    # STEP 2: Convert
    # =========================================================================
    print("\n2. CONVERTING...")
    form = convert_xlsform(xls)
    print(f"   ✓ Slides: {len(form.slides)}")
    print(f"   ✓ Choice lists: {[o.name for o in form.choices_origins]}")
    print_tree(form.slides)

    # =========================================================================
    # STEP 3: Serialize
    # =========================================================================
    print("\n3. JSON OUTPUT...")
    print(form_to_json(form))


if __name__ == "__main__":
    main()
