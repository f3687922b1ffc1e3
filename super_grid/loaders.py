"""
Loaders reading grid data from files, used by the ``super-grid`` command line
tool. Each returns a list of records suitable for passing to
:py:meth:`Grid.bind_data <super_grid.grid.Grid.bind_data>`.

.. autofunction:: load_records

.. autofunction:: load_json_records

.. autofunction:: load_csv_records
"""

from typing import Any, Dict, List, Optional, TextIO

import csv

import json

from pathlib import Path

from super_grid.exceptions import InvalidDataError


__all__ = [
    "FORMATS",
    "load_records",
    "load_json_records",
    "load_csv_records",
]


def load_json_records(f: TextIO) -> List[Dict[str, Any]]:
    """
    Load a JSON array of objects.

    Raises
    ======
    InvalidDataError
        If the input is not valid JSON or not an array of objects.
    """
    try:
        data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidDataError(f"Invalid JSON: {e}")

    if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
        raise InvalidDataError("JSON data must be an array of objects")

    return data


def load_csv_records(f: TextIO) -> List[Dict[str, Any]]:
    """
    Load a CSV file whose first row gives the column names. All values are
    loaded as strings.

    Raises
    ======
    InvalidDataError
        If a row has more values than there are column names.
    """
    reader = csv.DictReader(f)
    records: List[Dict[str, Any]] = []
    for row in reader:
        # NB: DictReader files surplus values under the key None
        if None in row:
            raise InvalidDataError(
                f"Line {reader.line_num} has more values than there are columns"
            )
        records.append(dict(row))
    return records


FORMATS = {
    "json": load_json_records,
    "csv": load_csv_records,
}


def load_records(path: Path, format: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Load records from a file.

    Parameters
    ==========
    path : Path
        The file to read.
    format : "json", "csv" or None
        The file format. If None, guessed from the filename suffix.

    Raises
    ======
    InvalidDataError
        If the format is unknown or the file is malformed.
    """
    if format is None:
        format = path.suffix.lstrip(".").lower()

    try:
        loader = FORMATS[format]
    except KeyError:
        raise InvalidDataError(f"Unknown data format {format!r} for {path}")

    try:
        with path.open(newline="", encoding="utf-8") as f:
            return loader(f)
    except UnicodeDecodeError as e:
        raise InvalidDataError(f"{path} is not valid UTF-8: {e}")
