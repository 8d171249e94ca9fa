"""Command-line front end.

Usage:
    table-checkboxes convert NOTES.md [--outside-tables] [--dry-run]
    table-checkboxes toggle NOTES.md a1b2c3 --checked
    table-checkboxes list NOTES.md

Exit status is 0 on success, 1 when ``toggle`` finds no checkbox with the
given id, and 2 when the file cannot be read as UTF-8 text.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from table_checkboxes.bulk import convert_all_checkboxes
from table_checkboxes.document import PathFile
from table_checkboxes.render import find_rendered_checkboxes
from table_checkboxes.toggle import toggle_checkbox


def _convert(args: argparse.Namespace, file: PathFile) -> int:
    result = convert_all_checkboxes(file.read(), convert_outside_tables=args.outside_tables)
    if args.dry_run:
        sys.stdout.write(result.text)
        return 0
    if result.count:
        file.write(result.text)
    print(f"Converted {result.count} checkbox(es) in {file.path}")
    return 0


def _toggle(args: argparse.Namespace, file: PathFile) -> int:
    new_page = toggle_checkbox(file.read(), args.id, args.checked)
    if new_page is None:
        print(f"No checkbox with id {args.id!r} in {file.path}", file=sys.stderr)
        return 1
    file.write(new_page)
    return 0


def _list(args: argparse.Namespace, file: PathFile) -> int:
    for checkbox in find_rendered_checkboxes(file.read()):
        print(f"{checkbox.id}\t{'checked' if checkbox.checked else 'unchecked'}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="table-checkboxes",
        description="Convert markdown checkboxes to HTML checkboxes",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Convert all checkboxes in a file")
    convert.add_argument("path", help="Markdown file")
    convert.add_argument(
        "--outside-tables",
        action="store_true",
        help="Convert checkboxes outside tables to HTML checkboxes",
    )
    convert.add_argument("--dry-run", action="store_true", help="Print the result instead of writing")
    convert.set_defaults(handler=_convert)

    toggle = subparsers.add_parser("toggle", help="Set the state of one checkbox")
    toggle.add_argument("path", help="Markdown file")
    toggle.add_argument("id", help="Checkbox id")
    state = toggle.add_mutually_exclusive_group(required=True)
    state.add_argument("--checked", dest="checked", action="store_true")
    state.add_argument("--unchecked", dest="checked", action="store_false")
    toggle.set_defaults(handler=_toggle)

    listing = subparsers.add_parser("list", help="List rendered checkboxes")
    listing.add_argument("path", help="Markdown file")
    listing.set_defaults(handler=_list)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    file = PathFile(args.path)
    try:
        return args.handler(args, file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"table-checkboxes: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
