import csv
import json

import pytest

from expensetracker.storage import export_as_csv, load_from_file, save_to_file


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "expenses.json"
    data = {"expenses": [{"id": 1, "description": "Bread", "category": None}]}
    save_to_file(path, data)
    assert load_from_file(path) == data


def test_save_creates_parent_directories(tmp_path):
    path = tmp_path / "nested" / "deeper" / "expenses.json"
    save_to_file(path, {"expenses": []})
    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8")) == {"expenses": []}


def test_save_writes_indented_json(tmp_path):
    path = tmp_path / "expenses.json"
    save_to_file(path, {"expenses": [{"id": 1}]})
    text = path.read_text(encoding="utf-8")
    assert "\n  " in text
    assert json.loads(text) == {"expenses": [{"id": 1}]}


def test_save_keeps_non_ascii_text(tmp_path):
    path = tmp_path / "expenses.json"
    save_to_file(path, {"description": "café"})
    assert "café" in path.read_text(encoding="utf-8")


def test_load_missing_file_creates_it_and_fails_to_parse(tmp_path):
    path = tmp_path / "expenses.json"
    with pytest.raises(ValueError):
        load_from_file(path)
    assert path.exists()
    assert path.read_text(encoding="utf-8") == ""


def test_load_in_missing_directory_raises_oserror(tmp_path):
    with pytest.raises(OSError):
        load_from_file(tmp_path / "absent" / "expenses.json")


def test_load_malformed_json_raises_value_error(tmp_path):
    path = tmp_path / "expenses.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_from_file(path)


def test_export_writes_header_and_rows(tmp_path):
    path = tmp_path / "out.csv"
    rows = [
        {"id": 1, "description": "Bread", "category": None},
        {"id": 2, "description": "Milk, fresh", "category": "food"},
    ]
    export_as_csv(path, rows)
    with open(path, newline="", encoding="utf-8") as handle:
        read_back = list(csv.reader(handle))
    assert read_back == [
        ["id", "description", "category"],
        ["1", "Bread", ""],
        ["2", "Milk, fresh", "food"],
    ]


def test_export_quotes_fields_with_commas(tmp_path):
    path = tmp_path / "out.csv"
    export_as_csv(path, [{"description": "a,b"}])
    assert path.read_text(encoding="utf-8").splitlines() == ["description", '"a,b"']


def test_export_empty_rows_writes_empty_file(tmp_path):
    path = tmp_path / "out.csv"
    export_as_csv(path, [])
    assert path.read_text(encoding="utf-8") == ""


def test_export_accepts_generator(tmp_path):
    path = tmp_path / "out.csv"
    export_as_csv(path, ({"n": n} for n in range(3)))
    assert path.read_text(encoding="utf-8").splitlines() == ["n", "0", "1", "2"]


def test_export_into_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        export_as_csv(tmp_path / "absent" / "out.csv", [{"id": 1}])