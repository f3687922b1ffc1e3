"""
Grid cells hold values drawn from a small, closed set of types:

* :py:class:`str` -- plain text.
* :py:class:`Markup` -- pre-rendered markup (e.g. a HTML snippet).
* Numbers (:py:class:`int`, :py:class:`float`, :py:class:`~decimal.Decimal`
  and :py:class:`~fractions.Fraction`).
* :py:class:`bool`.
* ``None`` -- an absent value.

.. autoclass:: Markup

.. autofunction:: display_value

.. autofunction:: is_cell_value

.. autofunction:: is_empty

.. note::

    Text and markup are both inserted into the rendered output verbatim: no
    escaping takes place. :py:class:`Markup` exists to document intent rather
    than to change how a value is rendered. Callers must sanitise untrusted
    content before binding it to a grid.
"""

from typing import Any, Union, Optional

from decimal import Decimal

from fractions import Fraction


__all__ = [
    "Markup",
    "Number",
    "CellValue",
    "display_value",
    "is_cell_value",
    "is_empty",
]


class Markup(str):
    """A string containing pre-rendered markup."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"


Number = Union[int, float, Decimal, Fraction]

CellValue = Optional[Union[str, Markup, Number, bool]]


def is_cell_value(value: Any) -> bool:
    """Test whether ``value`` may be stored in a grid cell."""
    return value is None or isinstance(value, (str, int, float, Decimal, Fraction))


def is_empty(value: CellValue) -> bool:
    """True for absent values and empty strings."""
    return value is None or value == ""


def display_value(value: CellValue) -> str:
    """
    Convert a cell value into the text displayed in a table cell.

    Examples::

        >>> display_value(None)
        ''
        >>> display_value(True)
        'Yes'
        >>> display_value(1.5)
        '1.5'
        >>> display_value("<b>hi</b>")
        '<b>hi</b>'
    """
    if value is None:
        return ""
    # NB: Must be checked before numbers since bool is a subclass of int
    elif isinstance(value, bool):
        return "Yes" if value else "No"
    elif isinstance(value, str):
        return value
    else:
        return str(value)
