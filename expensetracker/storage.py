"""Reading and writing expense data on disk."""

from __future__ import annotations

import csv
import json
from collections.abc import Iterable, Mapping
from os import PathLike
from pathlib import Path
from typing import Any, Union

StrPath = Union[str, "PathLike[str]"]


def save_to_file(path: StrPath, data: Any) -> None:
    """Write ``data`` as indented JSON to ``path``, creating parent directories."""
    target = Path(path)
    text = json.dumps(data, indent=2, ensure_ascii=False)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")


def load_from_file(path: StrPath) -> Any:
    """Parse the JSON document stored at ``path``.

    The file is created empty when it does not exist yet, so a missing file
    ends in a ``ValueError`` for the empty document.  ``OSError`` is raised
    when the file cannot be opened at all.
    """
    with open(path, "a+", encoding="utf-8") as handle:
        handle.seek(0)
        return json.load(handle)


def export_as_csv(path: StrPath, rows: Iterable[Mapping[str, Any]]) -> None:
    """Write ``rows`` to ``path`` as CSV with a header taken from the first row.

    ``None`` values become empty fields.  Nothing but an empty file is written
    when there are no rows.
    """
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer: csv.DictWriter | None = None
        for row in rows:
            if writer is None:
                writer = csv.DictWriter(handle, fieldnames=list(row), lineterminator="\n")
                writer.writeheader()
            writer.writerow({key: "" if value is None else value for key, value in row.items()})