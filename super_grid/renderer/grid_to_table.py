"""
The following routine converts a :py:class:`~super_grid.grid.Grid` into the
equivalent :py:class:`~super_grid.renderer.table.Table` form, taking into
account column visibility, order and titles, format templates and the display
options given in a :py:class:`RenderOptions`.

.. autofunction:: grid_to_table

.. autoclass:: RenderOptions
    :members:

The CSS class names attached to cells (when
:py:attr:`RenderOptions.mark_columns_css` is set) are derived from column names
by:

.. autofunction:: css_class_for
"""

from typing import List, Optional, Tuple

import re

from dataclasses import dataclass

from super_grid.grid import Grid, Column

from super_grid.values import display_value

from super_grid.exceptions import NoColumnsError

from super_grid.renderer.table import Table, Row, Cell


__all__ = [
    "RenderOptions",
    "css_class_for",
    "grid_to_table",
]


@dataclass(frozen=True)
class RenderOptions:
    mark_alternate_rows_css: bool = False
    """
    If True, body rows are given the class :py:attr:`odd_row_css` or
    :py:attr:`even_row_css` alternately, starting with odd.
    """

    mark_columns_css: bool = False
    """
    If True, every cell is given a CSS class derived from the name of its
    column (see :py:func:`css_class_for`).
    """

    display_column_names_in_footer: bool = False
    """If True, the column titles are repeated in a footer row."""

    odd_row_css: str = "odd"
    even_row_css: str = "even"
    """
    The CSS class names used for odd and even rows when
    :py:attr:`mark_alternate_rows_css` is True.
    """

    css_class: Optional[str] = None
    """If not None, the CSS class given to the table as a whole."""

    grid_id: Optional[str] = None
    """The table ID. Defaults to the ID of the grid being rendered."""


_CSS_CLASS_STRIP = re.compile(r"[ ,#@]")


def css_class_for(column_name: str) -> str:
    """
    Derive a CSS class name from a column name by trimming surrounding
    whitespace and removing all spaces, commas, ``#`` and ``@`` characters.

    Examples::

        >>> css_class_for("CompanyName")
        'CompanyName'
        >>> css_class_for(" Contact E-Mail @ Work, #1 ")
        'ContactE-MailWork1'
    """
    return _CSS_CLASS_STRIP.sub("", column_name.strip())


def _column_classes(column: Column, options: RenderOptions) -> Tuple[str, ...]:
    if options.mark_columns_css:
        return (css_class_for(column.name),)
    else:
        return ()


def _title_row(columns: List[Column], options: RenderOptions) -> Row:
    return Row(
        [Cell(column.title, _column_classes(column, options)) for column in columns]
    )


def grid_to_table(grid: Grid, options: RenderOptions = RenderOptions()) -> Table:
    """
    Convert a grid into tabular form.

    The header row contains the title of every visible column, in order. When
    :py:attr:`RenderOptions.display_column_names_in_footer` is set, an
    identical footer row is produced. Each bound row produces one body row,
    in the order the rows were bound.

    Alternate-row classes depend only on a row's position: the first row is
    'odd', the second 'even', and so on.

    Cell bodies are the displayed (post-template) values of each cell, as
    given by :py:meth:`Grid.cell_value <super_grid.grid.Grid.cell_value>`
    and :py:func:`~super_grid.values.display_value`. Titles and values are
    not escaped.

    Raises
    ======
    NoColumnsError
        If the grid has no columns at all. (A grid whose columns are all
        hidden may be rendered.)
    """
    if grid.column_count == 0:
        raise NoColumnsError()

    columns = grid.visible_columns_in_order()

    body: List[Row] = []
    for row_index in range(grid.row_count):
        row_classes: Tuple[str, ...] = ()
        if options.mark_alternate_rows_css:
            # NB: Row 0 is the first, 'odd' row
            row_classes = (
                options.odd_row_css if row_index % 2 == 0 else options.even_row_css,
            )

        body.append(
            Row(
                [
                    Cell(
                        display_value(grid.cell_value(row_index, column.name)),
                        _column_classes(column, options),
                    )
                    for column in columns
                ],
                row_classes,
            )
        )

    return Table(
        header=_title_row(columns, options),
        body=body,
        footer=(
            _title_row(columns, options)
            if options.display_column_names_in_footer
            else None
        ),
        id=options.grid_id if options.grid_id is not None else grid.grid_id,
        class_names=(options.css_class,) if options.css_class else (),
    )
