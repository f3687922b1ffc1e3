"""
Generates a stand alone HTML page containing a single rendered grid.
"""

from typing import Optional

from super_grid import __version__

from super_grid.grid import Grid

from super_grid.renderer.html import render

from super_grid.renderer.grid_to_table import RenderOptions

from super_grid.templates import standalone_grid_template


def generate_standalone_page(
    grid: Grid,
    options: RenderOptions = RenderOptions(),
    title: Optional[str] = None,
) -> str:
    """
    Generate a complete HTML page containing the rendered grid.

    Parameters
    ==========
    grid : :py:class:`~super_grid.grid.Grid`
        The grid to render.
    options : :py:class:`~super_grid.renderer.grid_to_table.RenderOptions`
        Options controlling how the grid is rendered.
    title : str or None
        The page title (escaped). Defaults to the grid ID.

    Raises
    ======
    NoColumnsError
        If the grid has no columns.
    """
    return standalone_grid_template.render(
        title=title if title is not None else grid.grid_id,
        body=render(grid, options),
        version=__version__,
    )
