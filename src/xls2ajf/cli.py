"""
Command line interface: convert an XLSForm workbook into an AJF file.

    xls2ajf survey.xlsx                 # writes survey.json
    xls2ajf survey.xlsx --format yaml   # writes survey.yaml
    xls2ajf survey.xlsx -o -            # prints JSON to stdout
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from xls2ajf import __version__
from xls2ajf.converter import convert_xlsform
from xls2ajf.errors import ConversionError
from xls2ajf.serialization import form_to_json, form_to_yaml
from xls2ajf.xlsform_reader import XlsFormReadError, read_xlsform_file


logger = logging.getLogger(__name__)

FORMATS = ("json", "yaml")
STDOUT = "-"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="xls2ajf",
        description="Convert an XLSForm workbook (.xlsx) into an AJF form definition",
    )
    parser.add_argument("input", help="Path to the XLSForm workbook")
    parser.add_argument(
        "-o", "--output",
        help="Output file (default: input with .json/.yaml suffix; '-' for stdout)",
    )
    parser.add_argument("--format", choices=FORMATS, default="json", help="Output format (default: json)")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def configure_logging(verbose: int, quiet: bool) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def output_path(input_path: str, output: Optional[str], fmt: str) -> str:
    if output:
        return output
    return str(Path(input_path).with_suffix(f".{fmt}"))


def run(args: argparse.Namespace) -> int:
    try:
        xls = read_xlsform_file(args.input)
        form = convert_xlsform(xls)
    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1
    except (XlsFormReadError, ConversionError) as e:
        logger.error("%s: %s", Path(args.input).name, e)
        return 1

    logger.info(
        "Converted %s: %d slides, %d choice lists",
        xls.file_name, len(form.slides), len(form.choices_origins),
    )

    if args.format == "yaml":
        text = form_to_yaml(form)
    else:
        text = form_to_json(form, indent=args.indent) + "\n"

    target = output_path(args.input, args.output, args.format)
    if target == STDOUT:
        sys.stdout.write(text)
    else:
        Path(target).write_text(text, encoding="utf-8")
        logger.info("Wrote %s", target)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose, args.quiet)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
