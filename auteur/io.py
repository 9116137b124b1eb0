"""
auteur.io - JSON read/write helpers and style vector files.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any

from auteur.exceptions import InvalidVectorError
from auteur.vector import StyleVector

# Keys under which a vector may be nested in an analysis or selection record
VECTOR_KEYS = ("script_vector", "computed_vector", "vector")


def read_json(path: Path) -> Any:
    """Read JSON file with UTF-8 encoding.

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If file contains invalid JSON
    """
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def write_json(path: Path, data: Any, indent: int = 2) -> None:
    """Write JSON file atomically with pretty formatting.

    Writes to a temp file first, then renames to prevent corruption
    on interruption.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        delete=False,
        suffix=".tmp",
    ) as tmp:
        tmp_path = Path(tmp.name)
        try:
            json.dump(data, tmp, indent=indent, ensure_ascii=False)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise
    tmp_path.replace(path)


def read_vector(path: Path) -> StyleVector:
    """Read a style vector from a JSON file.

    Accepts a bare axis mapping, or a record holding the vector under
    ``script_vector``, ``computed_vector`` or ``vector``.

    Raises:
        InvalidVectorError: If no valid vector is found
    """
    data = read_json(path)
    if not isinstance(data, dict):
        raise InvalidVectorError(f"{path}: expected a JSON object")
    for key in VECTOR_KEYS:
        if isinstance(data.get(key), dict):
            return StyleVector.from_mapping(data[key])
    return StyleVector.from_mapping(data)
