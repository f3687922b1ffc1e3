"""
Column contents may be generated from other columns in the same row using a
format template. A template is an ordinary string containing placeholders of
the form ``#ColumnName#``. For example, the template::

    <a href="mailto:#Email#">Contact #Name#</a>

Would, for a row ``{"Name": "Acme", "Email": "sales@acme.test"}``, produce::

    <a href="mailto:sales@acme.test">Contact Acme</a>

Placeholders are substituted in a single left-to-right pass using the raw
(untemplated) values of the named columns: text inserted by a substitution is
never itself scanned for further placeholders. Only names of columns in the
grid are placeholders; any other ``#...#`` sequence is left untouched, as is a
reference to the templated column itself.

.. autoclass:: FormatTemplate
    :members:
"""

from typing import Iterable, Mapping, Callable, Tuple, Optional, Dict

import re

from functools import lru_cache

from dataclasses import dataclass

from super_grid.values import CellValue, display_value, is_empty


__all__ = ["FormatTemplate"]


@lru_cache(maxsize=64)
def _placeholder_pattern(names: Tuple[str, ...]) -> Optional["re.Pattern[str]"]:
    if not names:
        return None

    # Longest first: names may themselves contain '#'
    alternatives = "|".join(
        re.escape(name) for name in sorted(set(names), key=len, reverse=True)
    )
    return re.compile(f"#({alternatives})#")


@dataclass(frozen=True)
class FormatTemplate:
    template: str
    """The template string containing ``#ColumnName#`` placeholders."""

    apply_to_empty: bool = True
    """
    If False, rows whose own value for the templated column is empty (None or
    an empty string) are left with that raw value rather than being templated.
    """

    def placeholders(self, column_names: Iterable[str]) -> Tuple[str, ...]:
        """
        Return the (stripped) column names which this template references, in
        the order they appear in the template. Repeated references are
        repeated.
        """
        pattern = _placeholder_pattern(
            tuple(name.strip() for name in column_names)
        )
        if pattern is None:
            return ()
        return tuple(match.group(1) for match in pattern.finditer(self.template))

    def substitute(
        self,
        own_name: str,
        row: Mapping[str, CellValue],
        column_names: Iterable[str],
        format_value: Callable[[CellValue], str] = display_value,
    ) -> CellValue:
        """
        Compute the templated value of column ``own_name`` for ``row``.

        Parameters
        ==========
        own_name : str
            The name of the column this template is attached to. This column
            is never substituted into its own template.
        row : {name: value, ...}
            The raw row values. Columns missing from the row substitute as
            empty strings.
        column_names : [str, ...]
            The names of all columns in the grid.
        format_value : fn(value) -> str
            Converts raw cell values into the text substituted into the
            template. Defaults to
            :py:func:`~super_grid.values.display_value`.
        """
        if not self.apply_to_empty and is_empty(row.get(own_name)):
            return row.get(own_name)

        # Placeholders use the whitespace-stripped column name. Where several
        # columns strip to the same name, the first declared one wins.
        lookup: Dict[str, str] = {}
        for name in column_names:
            if name != own_name:
                lookup.setdefault(name.strip(), name)
        pattern = _placeholder_pattern(tuple(lookup))
        if pattern is None:
            return self.template

        return pattern.sub(
            lambda match: format_value(row.get(lookup[match.group(1)])),
            self.template,
        )
