import pytest

import lxml.html  # type: ignore

from typing import Dict

from super_grid.grid import Grid

from super_grid.renderer.grid_to_table import RenderOptions

from super_grid.dump import dump


@pytest.fixture
def grid() -> Grid:
    grid = Grid("test")
    grid.bind_data(
        [
            {"ID": 1, "Name": "<A>", "Address": "X"},
            {"ID": 2, "Name": "B", "Address": "Y"},
        ]
    )
    grid.hide_column("Address")
    grid.set_column_title("Name", "Company Name")
    grid.format_column("ID", "#Name#")
    return grid


def definitions(html: str) -> Dict[str, lxml.html.HtmlElement]:
    dl = lxml.html.fragment_fromstring(html)
    assert dl.tag == "dl"
    assert dl.get("class") == "SuperGridConfigDump"
    return {
        dt.text_content(): dt.getnext() for dt in dl.xpath("dt")
    }


class TestDump:
    def test_metadata(self, grid: Grid) -> None:
        entries = definitions(dump(grid))
        summary = {
            name: dd.text_content()
            for name, dd in entries.items()
            if name not in ("Grid Columns",)
        }
        assert summary == {
            "Grid ID": "test",
            "Row Count": "2",
            "Column Count": "3",
            "CSS Class": "N/A",
            "Display Column Names in Footer": "No",
            "Mark Alternate Rows": "No",
            "Mark Column CSS": "No",
            "Odd Row CSS": "odd",
            "Even Row CSS": "even",
        }

    def test_options(self, grid: Grid) -> None:
        entries = definitions(
            dump(
                grid,
                RenderOptions(
                    mark_alternate_rows_css=True,
                    mark_columns_css=True,
                    display_column_names_in_footer=True,
                    odd_row_css="o",
                    even_row_css="e",
                    css_class="fancy",
                    grid_id="other",
                ),
            )
        )
        assert entries["Grid ID"].text_content() == "other"
        assert entries["CSS Class"].text_content() == "fancy"
        assert entries["Display Column Names in Footer"].text_content() == "Yes"
        assert entries["Mark Alternate Rows"].text_content() == "Yes"
        assert entries["Mark Column CSS"].text_content() == "Yes"
        assert entries["Odd Row CSS"].text_content() == "o"
        assert entries["Even Row CSS"].text_content() == "e"

    def test_columns(self, grid: Grid) -> None:
        columns = definitions(dump(grid))["Grid Columns"]
        assert [
            [td.text_content() for td in tr.xpath("td")]
            for tr in columns.xpath(".//tbody/tr")
        ] == [
            ["0", "ID", "ID", "Yes", "#Name#", "Name"],
            ["1", "Name", "Company Name", "Yes", "", ""],
            ["2", "Address", "Address", "No", "", ""],
        ]

    def test_placeholders(self) -> None:
        grid = Grid()
        grid.bind_data([{"ID": 1, "Name": "A", "Edit": ""}])
        grid.format_column("Edit", "#Name# #Edit# #Nope# #ID# #Name#")
        columns = definitions(dump(grid))["Grid Columns"]
        headings = columns.xpath(".//thead/tr/th")
        assert headings[-1].text_content() == "Placeholders"
        edit_row = columns.xpath(".//tbody/tr")[-1]
        assert edit_row.xpath("td")[-1].text_content() == "Name, ID"

    def test_not_verbose(self, grid: Grid) -> None:
        assert "Grid Data" not in definitions(dump(grid))

    def test_verbose(self, grid: Grid) -> None:
        html = dump(grid, verbose=True)
        data = definitions(html)["Grid Data"].text_content()
        assert "'Name': '<A>'" in data
        assert "'Address': 'Y'" in data
        # Escaped in the markup
        assert "&lt;A&gt;" in html

    def test_empty_grid(self) -> None:
        entries = definitions(dump(Grid(), verbose=True))
        assert entries["Grid ID"].text_content() == "SuperGrid1"
        assert entries["Row Count"].text_content() == "0"
        assert entries["Column Count"].text_content() == "0"
        assert entries["Grid Data"].text_content() == "[]"
