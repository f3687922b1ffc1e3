"""
Super Grid renders tabular data (e.g. the results of a database query) as
HTML tables with configurable column visibility, titles, ordering and content
templates.

A typical session looks like::

    >>> from super_grid import Grid, RenderOptions, render
    >>> grid = Grid("customers")
    >>> grid.bind_data([
    ...     {"ID": 1, "Name": "Acme", "Address": "1 Road Lane"},
    ...     {"ID": 2, "Name": "Initech", "Address": "2 Street Road"},
    ... ])
    >>> grid.hide_column("Address")
    >>> grid.set_column_title("Name", "Company Name")
    >>> html = render(grid, RenderOptions(mark_alternate_rows_css=True))

The grid data model is described in :py:mod:`super_grid.grid` and rendering
in :py:mod:`super_grid.renderer`.
"""

__version__ = "1.0"

from super_grid.grid import Grid, Column, IdSequence, Markup

from super_grid.renderer.grid_to_table import RenderOptions, css_class_for

from super_grid.renderer.html import render

from super_grid.dump import dump

__all__ = [
    "Grid",
    "Column",
    "IdSequence",
    "Markup",
    "RenderOptions",
    "css_class_for",
    "render",
    "dump",
]
