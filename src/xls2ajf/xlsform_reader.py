"""
XLSForm reader (Layer 1: Workbook → Rows).

Reads the "survey" and "choices" sheets of an .xlsx workbook into
SurveyRow / ChoicesRow sequences for the converter.

Sheet format:
    survey:  type, name, label, [relevant, constraint, calculation,
             required, repeat_count]
    choices: list name, name, label

Reading rules:
    - The header is the first non-empty row of a sheet
    - Columns are found by exact header text, in any order
    - Rows empty across every cell are skipped
    - line_number is the 1-based row number in the sheet
    - Cells become stripped text ("" for blank, 3.0 -> "3")
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from openpyxl import load_workbook

from xls2ajf.model import ChoicesRow, SurveyRow, XlsForm


logger = logging.getLogger(__name__)


class XlsFormReadError(Exception):
    """Raised when a workbook cannot be read as an XLSForm."""
    pass


@dataclass(frozen=True)
class ColumnInfo:
    header: str
    attribute: str
    mandatory: bool = False


@dataclass(frozen=True)
class SheetInfo:
    name: str
    columns: Sequence[ColumnInfo]
    mandatory: bool = True


SURVEY_SHEET = SheetInfo(
    name="survey",
    columns=(
        ColumnInfo("type", "type", mandatory=True),
        ColumnInfo("name", "name", mandatory=True),
        ColumnInfo("label", "label", mandatory=True),
        ColumnInfo("relevant", "relevant"),
        ColumnInfo("constraint", "constraint"),
        ColumnInfo("calculation", "calculation"),
        ColumnInfo("required", "required"),
        ColumnInfo("repeat_count", "repeat_count"),
    ),
)

CHOICES_SHEET = SheetInfo(
    name="choices",
    columns=(
        ColumnInfo("list name", "list_name", mandatory=True),
        ColumnInfo("name", "name", mandatory=True),
        ColumnInfo("label", "label", mandatory=True),
    ),
)

SUPPORTED_EXTENSIONS = (".xlsx",)


def cell_to_text(value: Any) -> str:
    """Render a cell value as the plain text the converter expects."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _is_empty(row: Sequence[str]) -> bool:
    return all(cell == "" for cell in row)


def _read_sheet(sheet: SheetInfo, cells: List[List[Any]], file_name: str) -> List[Dict[str, Any]]:
    """
    Extract the records of one sheet as attribute dicts.

    Raises:
        XlsFormReadError: For an empty sheet or a missing mandatory column
    """
    rows = [[cell_to_text(value) for value in row] for row in cells]

    head_index = next((i for i, row in enumerate(rows) if not _is_empty(row)), None)
    if head_index is None:
        raise XlsFormReadError(f"Empty sheet '{sheet.name}' in file {file_name}")
    head = rows[head_index]

    indices: Dict[str, int] = {}
    for column in sheet.columns:
        if column.header in head:
            indices[column.attribute] = head.index(column.header)
        elif column.mandatory:
            raise XlsFormReadError(
                f"Error in file {file_name}, sheet '{sheet.name}': column '{column.header}' is mandatory"
            )

    known = {column.header for column in sheet.columns}
    ignored = [h for h in head if h and h not in known]
    if ignored:
        logger.debug("Sheet '%s': ignoring columns %s", sheet.name, ignored)

    records = []
    for i in range(head_index + 1, len(rows)):
        row = rows[i]
        if _is_empty(row):
            continue
        record: Dict[str, Any] = {"line_number": i + 1}
        for attribute, index in indices.items():
            record[attribute] = row[index] if index < len(row) else ""
        records.append(record)

    logger.debug("Sheet '%s': %d rows", sheet.name, len(records))
    return records


def read_xlsform_sheets(sheets: Dict[str, List[List[Any]]], file_name: str = "") -> XlsForm:
    """
    Build an XlsForm from already materialized sheet tables.

    Args:
        sheets: Sheet name -> rows of cell values (row 0 is sheet row 1)
        file_name: Used in error messages

    Returns:
        XlsForm with survey and choices rows

    Raises:
        XlsFormReadError: If a mandatory sheet or column is missing
    """
    form = XlsForm(file_name=file_name)
    for sheet in (SURVEY_SHEET, CHOICES_SHEET):
        cells = sheets.get(sheet.name)
        if cells is None:
            if sheet.mandatory:
                raise XlsFormReadError(f"Missing mandatory sheet '{sheet.name}' in file {file_name}")
            continue
        records = _read_sheet(sheet, cells, file_name)
        if sheet is SURVEY_SHEET:
            form.survey = [SurveyRow(**record) for record in records]
        else:
            form.choices = [ChoicesRow(**record) for record in records]
    return form


def read_xlsform_file(filepath: str, sheet_names: Optional[Sequence[str]] = None) -> XlsForm:
    """
    Read an .xlsx workbook into an XlsForm.

    Args:
        filepath: Path to the workbook
        sheet_names: Sheets to load (defaults to "survey" and "choices")

    Returns:
        XlsForm

    Raises:
        FileNotFoundError: If the file doesn't exist
        XlsFormReadError: If the workbook is not a readable XLSForm
    """
    path = Path(filepath)
    if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise XlsFormReadError(f"Unsupported excel file type: {path.suffix or path.name}")
    if not path.exists():
        raise FileNotFoundError(f"Excel file not found: {filepath}")

    if sheet_names is None:
        sheet_names = (SURVEY_SHEET.name, CHOICES_SHEET.name)

    try:
        workbook = load_workbook(filename=path, read_only=True, data_only=True)
    except Exception as e:
        raise XlsFormReadError(f"Could not read excel file {path.name}: {e}") from e

    try:
        sheets = {
            name: [list(row) for row in workbook[name].iter_rows(values_only=True)]
            for name in sheet_names
            if name in workbook.sheetnames
        }
    finally:
        workbook.close()

    logger.debug("Loaded sheets %s from %s", sorted(sheets), path.name)
    return read_xlsform_sheets(sheets, file_name=path.name)


__all__ = [
    "XlsFormReadError",
    "read_xlsform_file",
    "read_xlsform_sheets",
    "cell_to_text",
]
