"""
XLSForm → AJF Converter Package

Compiles the flat, ordered rows of an XLSForm survey definition into a
hierarchical AJF form: slides, repeating slides, nested groups and typed
fields, each carrying a navigation id and a "previous" back-reference.

ARCHITECTURAL GUARANTEE:
------------------------
The conversion core (choices, structure, fields, builder, ids, converter)
contains ZERO knowledge of:
    - Spreadsheet containers
    - JSON/YAML output
    - Logging or the command line

Rows go in, a tree comes out.

All I/O happens in the outer layers (xlsform_reader, serialization, cli).
"""

from xls2ajf.converter import convert, convert_xlsform
from xls2ajf.errors import ConversionError

__version__ = "0.1.0"

__all__ = ["convert", "convert_xlsform", "ConversionError", "__version__"]
