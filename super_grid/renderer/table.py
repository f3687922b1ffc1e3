r"""
The following output-agnostic data structure is used to represent a grid in
tabular form.

A :py:class:`Table` consists of a header :py:class:`Row`, an optional footer
:py:class:`Row` and a sequence of body :py:class:`Row`\ s. Each row contains
the same number of :py:class:`Cell`\ s.

Cell bodies are pre-formatted strings which output formats must insert
verbatim.

.. autoclass:: Table
    :members:

.. autoclass:: Row
    :members:

.. autoclass:: Cell
    :members:

.. autoexception:: RaggedTableError
"""

from typing import Sequence, Tuple, Optional, Iterator

from dataclasses import dataclass


@dataclass(frozen=True)
class Cell:
    body: str
    """The text (or markup) to display in this cell."""

    class_names: Tuple[str, ...] = ()
    """CSS class names to attach to this cell."""


@dataclass(frozen=True)
class Row:
    cells: Sequence[Cell]

    class_names: Tuple[str, ...] = ()
    """CSS class names to attach to this row."""

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)


class RaggedTableError(ValueError):
    """Thrown when a table's rows do not all have the same number of cells."""


@dataclass(frozen=True)
class Table:
    header: Row
    """The column titles."""

    body: Sequence[Row] = ()
    """The data rows, in display order. May be empty."""

    footer: Optional[Row] = None
    """If not None, a row (typically repeating the titles) shown after the
    body."""

    id: Optional[str] = None
    """An identifier for the table."""

    class_names: Tuple[str, ...] = ()
    """CSS class names to attach to the table."""

    @property
    def columns(self) -> int:
        """Number of columns in this table"""
        return len(self.header)

    @property
    def rows(self) -> int:
        """Number of body rows in this table"""
        return len(self.body)

    def __post_init__(self) -> None:
        for section, rows in [
            ("footer", [self.footer] if self.footer is not None else []),
            ("body", self.body),
        ]:
            for row_number, row in enumerate(rows):
                if len(row) != self.columns:
                    raise RaggedTableError(
                        f"{section} row {row_number} has {len(row)} cells "
                        f"but the header has {self.columns}"
                    )
