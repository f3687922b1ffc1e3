"""
Grids (:py:mod:`super_grid.grid`) are rendered into tabular markup for
display.

Rendering is split into two parts. First an abstract tabular description is
generated from the grid and then secondly this is rendered into its final form
(i.e. HTML). This decomposition keeps the decisions about which columns, titles
and CSS classes appear apart from the details of any particular output format.

The abstract table representation is defined in
:py:mod:`super_grid.renderer.table`, the grid-to-table conversion in
:py:mod:`super_grid.renderer.grid_to_table` and finally, table-to-HTML
conversion in :py:mod:`super_grid.renderer.html`

:py:mod:`super_grid.renderer.table`: Abstract table description
===============================================================

.. automodule:: super_grid.renderer.table

:py:mod:`super_grid.renderer.grid_to_table`: :py:class:`~super_grid.grid.Grid` to :py:class:`~super_grid.renderer.table.Table` transformation
=============================================================================================================================================

.. automodule:: super_grid.renderer.grid_to_table

:py:mod:`super_grid.renderer.html`: HTML Table Renderer
=======================================================

.. automodule:: super_grid.renderer.html

"""  # noqa: E501
