"""
The ``super-grid`` command renders a JSON or CSV data file as a HTML table.

.. highlight:: bash

Basic usage
===========

.. code:: text

    $ super-grid DATA_FILE [OUTPUT_FILENAME]

JSON files must contain an array of objects, one per row. CSV files must give
column names in their first line. The format is guessed from the filename
suffix, or may be given explicitly using ``--format``. If no output filename
is given, the HTML is written to stdout.

Columns
=======

Columns may be hidden using ``--hide NAME`` and retitled using ``--title
NAME=TITLE``. A column's contents may be generated from other columns using
``--column-template NAME=TEMPLATE`` where the template contains
``#OtherColumn#`` placeholders. If the named column does not exist, it is
added to the end of the table. For example::

    $ super-grid customers.json \\
        --hide Address \\
        --title "CompanyName=Company Name" \\
        --column-template "Contact=<a href='mailto:#Email#'>#ContactName#</a>"

.. warning::

    Values are inserted into the HTML without escaping.

Styling
=======

The ``--css-class``, ``--alternate-rows``, ``--column-css``, ``--footer``,
``--odd-row-css`` and ``--even-row-css`` arguments control the CSS classes and
sections of the generated table. The ``--standalone`` argument produces a
complete HTML page rather than just a ``<table>``.

Debugging
=========

``--dump`` produces a summary of the grid's configuration instead of the
table. Adding ``--verbose`` includes the data in the dump and enables debug
logging.
"""

from typing import Tuple

import sys

import logging

from argparse import ArgumentParser, ArgumentTypeError

from pathlib import Path

from super_grid import __version__

from super_grid.grid import Grid

from super_grid.exceptions import SuperGridError

from super_grid.loaders import FORMATS, load_records

from super_grid.renderer.grid_to_table import RenderOptions

from super_grid.renderer.html import render

from super_grid.dump import dump

from super_grid.standalone_page import generate_standalone_page


def name_value_pair(string: str) -> Tuple[str, str]:
    """Parse a 'NAME=VALUE' argument."""
    name, equals, value = string.partition("=")
    if not equals or not name:
        raise ArgumentTypeError(f"expected NAME=VALUE, got {string!r}")
    return (name, value)


def main() -> None:
    parser = ArgumentParser(
        description="""
            Render a JSON or CSV data file as a HTML table.
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    parser.add_argument(
        "data",
        type=Path,
        help="""
            The JSON or CSV file containing the data to display.
        """,
    )
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=None,
        help="""
            The output filename for the generated HTML. Defaults to stdout.
        """,
    )

    parser.add_argument(
        "--format",
        "-f",
        choices=sorted(FORMATS),
        default=None,
        help="""
            The format of the data file. Guessed from the filename suffix if
            not given.
        """,
    )

    parser.add_argument(
        "--id",
        default=None,
        help="""
            The HTML ID of the generated table. Defaults to 'SuperGrid1'.
        """,
    )
    parser.add_argument(
        "--css-class",
        default=None,
        help="""
            A CSS class for the generated table.
        """,
    )
    parser.add_argument(
        "--alternate-rows",
        "-a",
        action="store_true",
        help="""
            Mark alternate rows with odd/even CSS classes.
        """,
    )
    parser.add_argument(
        "--column-css",
        "-c",
        action="store_true",
        help="""
            Mark every cell with a CSS class derived from its column name.
        """,
    )
    parser.add_argument(
        "--footer",
        action="store_true",
        help="""
            Repeat the column titles in a footer row.
        """,
    )
    parser.add_argument(
        "--odd-row-css",
        default="odd",
        help="""
            CSS class for odd rows (default: %(default)s).
        """,
    )
    parser.add_argument(
        "--even-row-css",
        default="even",
        help="""
            CSS class for even rows (default: %(default)s).
        """,
    )

    parser.add_argument(
        "--hide",
        action="append",
        default=[],
        metavar="NAME",
        help="""
            Hide the named column. May be given multiple times.
        """,
    )
    parser.add_argument(
        "--title",
        action="append",
        type=name_value_pair,
        default=[],
        metavar="NAME=TITLE",
        help="""
            Set the title displayed for a column. May be given multiple times.
        """,
    )
    parser.add_argument(
        "--column-template",
        action="append",
        type=name_value_pair,
        default=[],
        metavar="NAME=TEMPLATE",
        help="""
            Generate a column's contents from a template containing
            #ColumnName# placeholders. May be given multiple times.
        """,
    )
    parser.add_argument(
        "--no-template-empty",
        action="store_false",
        dest="template_empty",
        help="""
            Don't apply column templates to rows where the column is empty.
        """,
    )

    parser.add_argument(
        "--standalone",
        "-s",
        action="store_true",
        help="""
            Generate a complete HTML page rather than just a table.
        """,
    )
    parser.add_argument(
        "--page-title",
        default=None,
        help="""
            The title of the page generated with --standalone.
        """,
    )

    parser.add_argument(
        "--dump",
        action="store_true",
        help="""
            Output a summary of the grid configuration instead of the table.
        """,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="""
            Enable debug logging (and include the data in --dump output).
        """,
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )

    options = RenderOptions(
        mark_alternate_rows_css=args.alternate_rows,
        mark_columns_css=args.column_css,
        display_column_names_in_footer=args.footer,
        odd_row_css=args.odd_row_css,
        even_row_css=args.even_row_css,
        css_class=args.css_class,
    )

    try:
        grid = Grid(args.id)
        grid.bind_data(load_records(args.data, args.format))

        for name in args.hide:
            grid.hide_column(name)
        for name, title in args.title:
            grid.set_column_title(name, title)
        for name, template in args.column_template:
            if name not in {column.name for column in grid.columns}:
                grid.add_column(name)
            grid.format_column(name, template, args.template_empty)

        if args.dump:
            html = dump(grid, options, verbose=args.verbose)
        elif args.standalone:
            html = generate_standalone_page(grid, options, args.page_title)
        else:
            html = render(grid, options)
    except (SuperGridError, OSError) as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)

    if args.output is None:
        sys.stdout.write(html + "\n")
    else:
        with args.output.open("w") as f:
            f.write(html + "\n")


if __name__ == "__main__":
    main()
