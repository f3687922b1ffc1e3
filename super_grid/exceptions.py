"""
All errors raised by Super Grid derive from :py:exc:`SuperGridError`.

.. autoexception:: SuperGridError

.. autoexception:: NoColumnsError

.. autoexception:: UnknownColumnError

.. autoexception:: DuplicateColumnError

.. autoexception:: IndexOutOfRangeError

.. autoexception:: InvalidDataError
"""


class SuperGridError(ValueError):
    """Base class for exceptions thrown by Super Grid."""


class NoColumnsError(SuperGridError):
    """Thrown when rendering a grid which does not declare any columns."""

    def __init__(self) -> None:
        super().__init__("Grid does not contain any columns to display")


class UnknownColumnError(SuperGridError):
    """Thrown when a column name is used which the grid does not declare."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Column {name!r} not found")
        self.name = name


class DuplicateColumnError(SuperGridError):
    """Thrown when adding a column whose name is already declared."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Column {name!r} already exists")
        self.name = name


class IndexOutOfRangeError(SuperGridError, IndexError):
    """Thrown when a column position lies outside of the grid."""

    def __init__(self, index: int, column_count: int) -> None:
        super().__init__(
            f"Column index {index} out of range for grid with {column_count} columns"
        )
        self.index = index
        self.column_count = column_count


class InvalidDataError(SuperGridError):
    """Thrown when data to be bound is not a sequence of uniform records."""
