r"""
The :py:mod:`super_grid.grid` module defines the data model describing a grid:
a list of column definitions and the rows of data bound to it.

Overview
========

A :py:class:`Grid` holds an ordered list of :py:class:`Column`\ s and a list
of rows. Each row is a mapping from column name to cell value (see
:py:mod:`super_grid.values` for the permitted cell value types).

Columns may be declared explicitly using :py:meth:`Grid.add_column` or, when
none have been declared, are inferred from the first row of data bound using
:py:meth:`Grid.bind_data`. For example::

    >>> grid = Grid("customers")
    >>> grid.bind_data([
    ...     {"ID": 1, "Name": "Acme", "Address": "1 Road Lane"},
    ...     {"ID": 2, "Name": "Initech", "Address": "2 Street Road"},
    ... ])
    >>> [column.name for column in grid.columns]
    ['ID', 'Name', 'Address']

Columns are identified by their :py:attr:`~Column.name` which never changes.
The text shown in the header of the rendered table is the column's
:py:attr:`~Column.title` which defaults to the name::

    >>> grid.set_column_title("Name", "Company Name")
    >>> grid.column("Name").title
    'Company Name'

Columns may be hidden (and shown again) without altering their position::

    >>> grid.hide_column("Address")
    >>> [column.name for column in grid.visible_columns_in_order()]
    ['ID', 'Name']

Finally, a column's contents can be generated from the other values in each
row using a :py:class:`~super_grid.template.FormatTemplate`::

    >>> grid.add_column("Edit", "")
    >>> grid.format_column("Edit", "<button>Edit #Name#</button>")
    >>> grid.cell_value(0, "Edit")
    '<button>Edit Acme</button>'

Templates are evaluated whenever a cell value is read: the stored rows always
hold exactly the data that was bound (plus ``None`` for columns added later).

Grid IDs
========

Every grid has an ID used as the ``id`` of the rendered HTML table. When one
is not given explicitly, it is allocated by an :py:class:`IdSequence`. Pages
containing several automatically named grids should share one sequence
between them so that IDs do not collide.

API
===

.. autoclass:: Grid
    :members:

.. autoclass:: Column
    :members:

.. autoclass:: IdSequence
    :members:
"""

from typing import (
    AbstractSet,
    Any,
    Dict,
    List,
    Mapping,
    Optional,
    Sequence,
)

import logging

from types import MappingProxyType

from dataclasses import dataclass

from collections.abc import Mapping as MappingABC, Sequence as SequenceABC

from super_grid.values import CellValue, Markup, is_cell_value

from super_grid.template import FormatTemplate

from super_grid.exceptions import (
    UnknownColumnError,
    DuplicateColumnError,
    IndexOutOfRangeError,
    InvalidDataError,
)


__all__ = [
    "Grid",
    "Column",
    "IdSequence",
    "Markup",
    "CellValue",
]

logger = logging.getLogger(__name__)


class IdSequence:
    """
    Allocates grid IDs of the form ``<prefix><n>`` from a counter starting at
    1.

        >>> ids = IdSequence()
        >>> ids.next()
        'SuperGrid1'
        >>> ids.next()
        'SuperGrid2'
    """

    def __init__(self, prefix: str = "SuperGrid") -> None:
        self.prefix = prefix
        self._count = 0

    def next(self) -> str:
        self._count += 1
        return f"{self.prefix}{self._count}"


@dataclass
class Column:
    name: str
    """
    The name of the column. Used to look up values in rows and to refer to
    this column in format templates. Never changes.
    """

    title: str
    """The text displayed in the header (and footer) of this column."""

    visible: bool = True
    """Only visible columns appear in the rendered table."""

    order: int = 0
    """The display position of this column (0 = leftmost)."""

    template: Optional[FormatTemplate] = None
    """If not None, the template used to generate this column's contents."""


class Grid:
    """
    A grid data model: an ordered list of columns and the rows of data bound
    to them.

    Parameters
    ==========
    grid_id : str or None
        The ID of this grid. If not given, an ID is taken from ``id_sequence``.
    id_sequence : :py:class:`IdSequence` or None
        The sequence to allocate an ID from when ``grid_id`` is not given. If
        neither argument is given, a new sequence is used meaning the grid ID
        will be 'SuperGrid1'.

    .. note::

        Grids are not thread-safe. When shared between threads, all mutation
        and rendering of a grid must be serialised by the caller (e.g. with a
        single lock).
    """

    _columns: List[Column]
    _rows: List[Dict[str, CellValue]]

    def __init__(
        self,
        grid_id: Optional[str] = None,
        id_sequence: Optional[IdSequence] = None,
    ) -> None:
        if grid_id is None:
            if id_sequence is None:
                id_sequence = IdSequence()
            grid_id = id_sequence.next()

        self._grid_id = grid_id
        self._columns = []
        self._rows = []

    @property
    def grid_id(self) -> str:
        return self._grid_id

    @property
    def columns(self) -> Sequence[Column]:
        """All columns (visible or not) in display order."""
        return tuple(self._columns)

    @property
    def rows(self) -> Sequence[Mapping[str, CellValue]]:
        """
        The raw bound rows, as read-only mappings. (Format templates are not
        applied to these values: use :py:meth:`cell_value` for that.)
        """
        return tuple(MappingProxyType(row) for row in self._rows)

    @property
    def column_count(self) -> int:
        return len(self._columns)

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def _column_index(self, name: str) -> int:
        for index, column in enumerate(self._columns):
            if column.name == name:
                return index
        raise UnknownColumnError(name)

    def _renumber(self) -> None:
        for order, column in enumerate(self._columns):
            column.order = order

    def column(self, name: str) -> Column:
        """
        Get the :py:class:`Column` with the specified name.

        Raises
        ======
        UnknownColumnError
        """
        return self._columns[self._column_index(name)]

    def add_column(
        self, name: str, title: Optional[str] = None, index: Optional[int] = None
    ) -> None:
        """
        Add a new (visible) column to the grid.

        Parameters
        ==========
        name : str
            The name of the new column.
        title : str or None
            The title to display in the column header. Defaults to the column
            name.
        index : int or None
            The position to insert the column at. Columns at and beyond this
            position are shifted right. If None, the column is added to the
            end.

        Every row already bound is given a ``None`` value for the new column.

        Raises
        ======
        DuplicateColumnError
            If a column with the same name already exists.
        IndexOutOfRangeError
            If the index is not in the range 0 to :py:attr:`column_count`
            inclusive.
        """
        if any(column.name == name for column in self._columns):
            raise DuplicateColumnError(name)
        if index is None:
            index = len(self._columns)
        elif not 0 <= index <= len(self._columns):
            raise IndexOutOfRangeError(index, len(self._columns))

        self._columns.insert(
            index, Column(name, title if title is not None else name)
        )
        self._renumber()

        for row in self._rows:
            row[name] = None

        logger.debug("Added column %r to grid %r at %d", name, self._grid_id, index)

    def move_column(self, name: str, index: int) -> None:
        """
        Move a column to a new position, shifting the columns in between.

        Raises
        ======
        UnknownColumnError
        IndexOutOfRangeError
            If index is not a valid column position.
        """
        old_index = self._column_index(name)
        if not 0 <= index < len(self._columns):
            raise IndexOutOfRangeError(index, len(self._columns))

        self._columns.insert(index, self._columns.pop(old_index))
        self._renumber()

    def hide_column(self, name: str) -> None:
        """
        Hide the named column.

        Raises
        ======
        UnknownColumnError
        """
        self.column(name).visible = False

    def show_column(self, name: str) -> None:
        """
        Show the named column.

        Raises
        ======
        UnknownColumnError
        """
        self.column(name).visible = True

    def is_column_visible(self, name: str) -> bool:
        """
        Raises
        ======
        UnknownColumnError
        """
        return self.column(name).visible

    def set_column_title(self, name: str, title: str) -> None:
        """
        Change the displayed title of a column. The column name is unchanged.

        Raises
        ======
        UnknownColumnError
            If no such column exists. Callers for whom a title change is
            merely cosmetic may safely catch and ignore this.
        """
        self.column(name).title = title

    def format_column(
        self, name: str, template: str, apply_to_empty: bool = True
    ) -> None:
        """
        Generate the contents of a column from a template string containing
        ``#ColumnName#`` placeholders (see :py:mod:`super_grid.template`).

        The template applies to the currently bound data only: binding new
        data with :py:meth:`bind_data` removes it again.

        Parameters
        ==========
        name : str
            The column to format.
        template : str
            The template.
        apply_to_empty : bool
            If False, rows with an empty value (None or '') in this column are
            left as they are.

        Raises
        ======
        UnknownColumnError
        """
        column = self.column(name)
        column.template = FormatTemplate(template, apply_to_empty)

        logger.debug("Attached template %r to column %r", template, name)

    def clear_column_format(self, name: str) -> None:
        """
        Remove any template attached by :py:meth:`format_column`.

        Raises
        ======
        UnknownColumnError
        """
        self.column(name).template = None

    def bind_data(self, rows: Sequence[Mapping[str, CellValue]]) -> None:
        """
        Replace the rows of data in the grid.

        If no columns have been declared yet, columns are created for each key
        in the first row (in order), all visible and titled with their name.
        Any format templates previously attached are removed.

        Rows may omit values for some columns: these are treated as ``None``.

        Raises
        ======
        InvalidDataError
            If ``rows`` is not a sequence of mappings, a row contains a key
            which is not a column name (or which is not a string) or contains a
            value of an unsupported type. The grid is left unchanged.
        """
        if not isinstance(rows, SequenceABC) or isinstance(rows, (str, bytes)):
            raise InvalidDataError(
                f"Grid data must be a sequence of records, not {type(rows).__name__}"
            )

        column_names: List[str]
        if self._columns:
            column_names = [column.name for column in self._columns]
        elif rows:
            if not isinstance(rows[0], MappingABC):
                raise InvalidDataError(
                    f"Row 0 is a {type(rows[0]).__name__}, not a mapping"
                )
            column_names = list(rows[0])
        else:
            column_names = []

        known_names = set(column_names)
        new_rows: List[Dict[str, CellValue]] = []
        for row_number, row in enumerate(rows):
            new_rows.append(self._validate_row(row_number, row, known_names))

        if not self._columns:
            for name in column_names:
                self._columns.append(Column(name, name))
            self._renumber()

        for column in self._columns:
            column.template = None

        self._rows = new_rows

        logger.debug(
            "Bound %d rows to grid %r with %d columns",
            len(new_rows),
            self._grid_id,
            len(self._columns),
        )

    @staticmethod
    def _validate_row(
        row_number: int, row: Any, known_names: AbstractSet[str]
    ) -> Dict[str, CellValue]:
        if not isinstance(row, MappingABC):
            raise InvalidDataError(
                f"Row {row_number} is a {type(row).__name__}, not a mapping"
            )

        for name, value in row.items():
            if not isinstance(name, str):
                raise InvalidDataError(
                    f"Row {row_number} has a non-string column name {name!r}"
                )
            if name not in known_names:
                raise InvalidDataError(
                    f"Row {row_number} has a value for unknown column {name!r}"
                )
            if not is_cell_value(value):
                raise InvalidDataError(
                    f"Row {row_number} column {name!r} has unsupported "
                    f"value type {type(value).__name__}"
                )

        return dict(row)

    def visible_columns_in_order(self) -> List[Column]:
        """Return the visible columns, in display order."""
        return sorted(
            (column for column in self._columns if column.visible),
            key=lambda column: column.order,
        )

    def cell_value(self, row: int, column_name: str) -> CellValue:
        """
        Get the value to display for a particular cell.

        If the column has a format template attached, the templated value is
        returned. Otherwise the raw value bound to the grid is returned (or
        None if the row did not define a value for this column).

        Raises
        ======
        UnknownColumnError
        IndexError
            If the row does not exist.
        """
        column = self.column(column_name)
        if row < 0:
            raise IndexError(f"Row {row} does not exist")
        row_values = self._rows[row]

        if column.template is not None:
            return column.template.substitute(
                column.name,
                row_values,
                [other.name for other in self._columns],
            )
        else:
            return row_values.get(column_name)
