import pytest

from pathlib import Path

from super_grid.exceptions import InvalidDataError

from super_grid.loaders import load_records


class TestLoadRecords:
    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_text('[{"ID": 1, "Name": "A"}, {"ID": 2, "Name": null}]')
        assert load_records(path) == [
            {"ID": 1, "Name": "A"},
            {"ID": 2, "Name": None},
        ]

    def test_csv(self, tmp_path: Path) -> None:
        path = tmp_path / "data.csv"
        path.write_text('ID,Name\n1,A\n2,"B, Inc."\n')
        assert load_records(path) == [
            {"ID": "1", "Name": "A"},
            {"ID": "2", "Name": "B, Inc."},
        ]

    def test_csv_header_only(self, tmp_path: Path) -> None:
        path = tmp_path / "data.csv"
        path.write_text("ID,Name\n")
        assert load_records(path) == []

    def test_explicit_format(self, tmp_path: Path) -> None:
        path = tmp_path / "data.txt"
        path.write_text("a\n1\n")
        assert load_records(path, "csv") == [{"a": "1"}]

    def test_suffix_case_insensitive(self, tmp_path: Path) -> None:
        path = tmp_path / "data.JSON"
        path.write_text("[]")
        assert load_records(path) == []

    def test_unknown_format(self, tmp_path: Path) -> None:
        path = tmp_path / "data.xls"
        path.write_text("")
        with pytest.raises(InvalidDataError):
            load_records(path)

    @pytest.mark.parametrize(
        "content",
        [
            "not json",
            '{"ID": 1}',
            "[1, 2]",
            '[{"ID": 1}, "foo"]',
        ],
    )
    def test_bad_json(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "data.json"
        path.write_text(content)
        with pytest.raises(InvalidDataError):
            load_records(path)

    def test_bad_csv(self, tmp_path: Path) -> None:
        path = tmp_path / "data.csv"
        path.write_text("a,b\n1,2,3\n")
        with pytest.raises(InvalidDataError):
            load_records(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_records(tmp_path / "missing.json")

    def test_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_bytes('[{"Name": "Café ☕"}]'.encode("utf-8"))
        assert load_records(path) == [{"Name": "Café ☕"}]

    @pytest.mark.parametrize("suffix", ["json", "csv"])
    def test_not_utf8(self, tmp_path: Path, suffix: str) -> None:
        path = tmp_path / f"data.{suffix}"
        path.write_bytes(b'[{"a": "\xff\xfe"}]')
        with pytest.raises(InvalidDataError, match="not valid UTF-8"):
            load_records(path)
