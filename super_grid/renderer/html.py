"""
This module implements :py:class:`~super_grid.renderer.table.Table` to HTML
conversion. Most callers will want to use the following function which renders
a :py:class:`~super_grid.grid.Grid` directly:

.. autofunction:: render

Which is implemented by:

.. autofunction:: render_table

Generated HTML
==============

The generated table has the following shape (the ``<tfoot>`` is present only
when :py:attr:`~super_grid.renderer.grid_to_table.RenderOptions.display_column_names_in_footer`
is set)::

    <table id="SuperGrid1" class="css_class">
    <thead>
    <tr><th class="ID">ID</th><th class="Name">Name</th></tr>
    </thead>
    <tfoot>
    <tr><td class="ID">ID</td><td class="Name">Name</td></tr>
    </tfoot>
    <tbody>
    <tr class="odd"><td class="ID">1</td><td class="Name">Acme</td></tr>
    <tr class="even"><td class="ID">2</td><td class="Name">Initech</td></tr>
    </tbody>
    </table>

.. warning::

    Column titles and cell values are inserted into the HTML **as-is**, without
    escaping, so that columns may contain markup (e.g. links or buttons
    generated by format templates). Untrusted content must be escaped (e.g.
    with :py:func:`html.escape`) before it is bound to a grid. Attribute values
    (IDs and CSS class names) are always escaped.
"""  # noqa: E501

from typing import Dict, Optional, Tuple

from xml.sax.saxutils import quoteattr

from super_grid.grid import Grid

from super_grid.renderer.table import Table, Row, Cell

from super_grid.renderer.grid_to_table import RenderOptions, grid_to_table


def t(tag: str, body: Optional[str] = None, **attrs: str) -> str:
    """
    A simple utility function for generating HTML tags.

    Examples::

        >>> t("foo")
        '<foo />'
        >>> t("img", src="file.png")
        '<img src="file.png"/>'
        >>> t("a", "Click here", href="elsewhere.html")
        '<a href="elsewhere.html">Click here</a>'
        >>> t("span", "Hiya", class_="fancy")
        '<span class="fancy">Hiya</span>'
        >>> t("span", "Bye", data__foo="bar")
        '<span data-foo="bar">Bye</span>'

    Note that trailing underscores (``_``) are trimmed from attribute names and
    double underscores (``__``) are replaced with hyphens. Attribute values are
    escaped but the body is inserted verbatim.
    """

    attrs_str = " ".join(
        name.rstrip("_").replace("__", "-") + "=" + quoteattr(value)
        for name, value in attrs.items()
    )

    if body is None:
        return f"<{tag} {attrs_str}/>"
    else:
        return f"<{tag}{(' ' + attrs_str).rstrip()}>{body}</{tag}>"


def _class_attr(class_names: Tuple[str, ...]) -> Dict[str, str]:
    return {"class_": " ".join(class_names)} if class_names else {}


def render_cell(cell: Cell, tag: str = "td") -> str:
    return t(tag, cell.body, **_class_attr(cell.class_names))


def render_row(row: Row, cell_tag: str = "td") -> str:
    return t(
        "tr",
        "".join(render_cell(cell, cell_tag) for cell in row),
        **_class_attr(row.class_names),
    )


def render_table(table: Table) -> str:
    """
    Render a :py:class:`~super_grid.renderer.table.Table` as HTML.

    Sections are emitted in the order header, footer (if present), body.
    """
    sections = [t("thead", "\n" + render_row(table.header, "th") + "\n")]

    if table.footer is not None:
        sections.append(t("tfoot", "\n" + render_row(table.footer) + "\n"))

    sections.append(
        t("tbody", "\n" + "".join(render_row(row) + "\n" for row in table.body))
    )

    return t(
        "table",
        "\n" + "\n".join(sections) + "\n",
        **({"id": table.id} if table.id is not None else {}),
        **_class_attr(table.class_names),
    )


def render(grid: Grid, options: RenderOptions = RenderOptions()) -> str:
    """
    Render a grid as a HTML table.

    The grid is not modified: rendering the same grid repeatedly produces the
    same output.

    Raises
    ======
    NoColumnsError
        If the grid has no columns.
    """
    return render_table(grid_to_table(grid, options))
