"""
A diagnostic dump of a grid's configuration (and optionally its data) as a
HTML definition list. This is intended for debugging only and is not part of
the rendered grid.

.. autofunction:: dump
"""

from typing import List, Tuple

import html

from pprint import pformat

from super_grid.grid import Grid, Column

from super_grid.renderer.html import t

from super_grid.renderer.grid_to_table import RenderOptions


COLUMN_TABLE_HEADINGS = [
    "Index",
    "Name",
    "Title",
    "Visible",
    "Template",
    "Placeholders",
]


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def _placeholders(grid: Grid, column: Column) -> Tuple[str, ...]:
    """The distinct columns a column's template refers to, in order of use."""
    if column.template is None:
        return ()
    names = column.template.placeholders(
        other.name for other in grid.columns if other.name != column.name
    )
    return tuple(dict.fromkeys(names))


def dump(
    grid: Grid, options: RenderOptions = RenderOptions(), verbose: bool = False
) -> str:
    """
    Produce a HTML ``<dl>`` describing a grid and the options it would be
    rendered with.

    The dump lists the grid ID, row and column counts, CSS settings and a
    table giving the name, title, visibility, format template and template
    placeholders of every column. When ``verbose`` is True, the raw bound data
    is included too.

    Unlike :py:func:`~super_grid.renderer.html.render`, all values in the dump
    are HTML-escaped.
    """
    entries: List[Tuple[str, str]] = [
        (
            "Grid ID",
            options.grid_id if options.grid_id is not None else grid.grid_id,
        ),
        ("Row Count", str(grid.row_count)),
        ("Column Count", str(grid.column_count)),
        ("CSS Class", options.css_class if options.css_class else "N/A"),
        (
            "Display Column Names in Footer",
            _yes_no(options.display_column_names_in_footer),
        ),
        ("Mark Alternate Rows", _yes_no(options.mark_alternate_rows_css)),
        ("Mark Column CSS", _yes_no(options.mark_columns_css)),
        ("Odd Row CSS", options.odd_row_css),
        ("Even Row CSS", options.even_row_css),
    ]

    lines = [
        t("dt", name) + t("dd", html.escape(value)) for name, value in entries
    ]

    column_rows = "".join(
        t(
            "tr",
            "".join(
                t("td", html.escape(value))
                for value in [
                    str(column.order),
                    column.name,
                    column.title,
                    _yes_no(column.visible),
                    column.template.template if column.template is not None else "",
                    ", ".join(_placeholders(grid, column)),
                ]
            ),
        )
        for column in grid.columns
    )
    lines.append(
        t("dt", "Grid Columns")
        + t(
            "dd",
            t(
                "table",
                t(
                    "thead",
                    t(
                        "tr",
                        "".join(
                            t("th", heading)
                            for heading in COLUMN_TABLE_HEADINGS
                        ),
                    ),
                )
                + t("tbody", column_rows),
            ),
        )
    )

    if verbose:
        data = pformat([dict(row) for row in grid.rows], sort_dicts=False)
        lines.append(t("dt", "Grid Data") + t("dd", t("pre", html.escape(data))))

    return t("dl", "\n" + "\n".join(lines) + "\n", class_="SuperGridConfigDump")
