import pytest

from typing import Mapping

from super_grid.values import CellValue

from super_grid.template import FormatTemplate


NAMES = ["ID", "Name", "E-Mail", "Edit"]


class TestSubstitute:
    @pytest.mark.parametrize(
        "template, row, exp",
        [
            # No placeholders
            ("static", {}, "static"),
            ("", {}, ""),
            # Single placeholder
            (
                "<button>#Name#</button>",
                {"Name": "Acme", "Edit": ""},
                "<button>Acme</button>",
            ),
            # Several placeholders, repeated placeholders
            (
                "#ID#: #Name# (#ID#)",
                {"ID": 1, "Name": "Acme"},
                "1: Acme (1)",
            ),
            # Names containing punctuation
            (
                "alert('#E-Mail#')",
                {"E-Mail": "me@example.com"},
                "alert('me@example.com')",
            ),
            # Missing values substitute as empty
            ("[#Name#]", {}, "[]"),
            ("[#Name#]", {"Name": None}, "[]"),
            # Non-text values use their display form
            ("#ID#", {"ID": True}, "Yes"),
            ("#ID#", {"ID": 2.5}, "2.5"),
            # Unknown names are left alone
            ("#Nope# #Name#", {"Name": "A"}, "#Nope# A"),
            # An unknown name does not prevent a following placeholder from
            # matching
            ("#Nope#Name#", {"Name": "A"}, "#NopeA"),
            # Own column is never substituted
            ("#Edit#/#Name#", {"Name": "A", "Edit": "raw"}, "#Edit#/A"),
            # Substituted values are not re-scanned for placeholders
            ("#Name#", {"Name": "#ID#", "ID": 1}, "#ID#"),
            ("#Name##ID#", {"Name": "#", "ID": 1}, "#1"),
        ],
    )
    def test_substitution(
        self, template: str, row: Mapping[str, CellValue], exp: str
    ) -> None:
        assert FormatTemplate(template).substitute("Edit", row, NAMES) == exp

    def test_column_names_are_stripped(self) -> None:
        assert (
            FormatTemplate("<#Name#>").substitute(
                "Edit", {" Name ": "A"}, [" Name ", "Edit"]
            )
            == "<A>"
        )

    def test_first_column_with_stripped_name_wins(self) -> None:
        row = {"Name": "real", "Name ": "padded"}
        assert (
            FormatTemplate("#Name#").substitute("Edit", row, ["Name", "Name ", "Edit"])
            == "real"
        )
        assert (
            FormatTemplate("#Name#").substitute("Edit", row, ["Name ", "Name", "Edit"])
            == "padded"
        )

    def test_no_other_columns(self) -> None:
        assert FormatTemplate("#Edit#").substitute("Edit", {}, ["Edit"]) == "#Edit#"

    @pytest.mark.parametrize(
        "own_value, exp",
        [
            (None, None),
            ("", ""),
            ("x", "<A>"),
            (0, "<A>"),
        ],
    )
    def test_apply_to_empty_false(self, own_value: CellValue, exp: CellValue) -> None:
        template = FormatTemplate("<#Name#>", apply_to_empty=False)
        row = {"Name": "A", "Edit": own_value}
        assert template.substitute("Edit", row, NAMES) == exp

    def test_apply_to_empty_false_missing_value(self) -> None:
        template = FormatTemplate("<#Name#>", apply_to_empty=False)
        assert template.substitute("Edit", {"Name": "A"}, NAMES) is None

    @pytest.mark.parametrize("own_value", [None, "", "x"])
    def test_apply_to_empty_true(self, own_value: CellValue) -> None:
        template = FormatTemplate("<#Name#>")
        row = {"Name": "A", "Edit": own_value}
        assert template.substitute("Edit", row, NAMES) == "<A>"

    def test_custom_format_value(self) -> None:
        template = FormatTemplate("#ID#")
        assert (
            template.substitute(
                "Edit", {"ID": 3}, NAMES, format_value=lambda v: f"[{v}]"
            )
            == "[3]"
        )


def test_placeholders() -> None:
    template = FormatTemplate("#Name# #Nope# #ID# #Name#")
    assert template.placeholders(NAMES) == ("Name", "ID", "Name")
    assert template.placeholders([]) == ()
