# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import json

from pathlib import Path
from typing import Any


def save_json(path: str | Path, data: Any) -> None:
    """
    Serialize data as pretty-printed JSON and write it to a file.

    The JSON is written with `indent=2` and `sort_keys=True` so the same
    artifact always produces the same bytes.

    Args:
        path: Destination file path (string or `Path`).
        data: Any JSON-serializable Python object.

    Side effects:
        - Creates `path.parent` directories if they do not exist.
        - Overwrites the file if it already exists.

    Raises:
        TypeError: If `data` contains non-JSON-serializable objects.
        OSError: If the file cannot be created or written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=True)


def load_json(path: str | Path) -> Any:
    """
    Load and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def save_bytes(path: str | Path, data: bytes) -> None:
    """
    Write raw bytes to a file, creating parent directories if needed.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


def constructor_fields(data: Any, count: int) -> list[str]:
    """
    Pull the hex strings out of a `{"constructor": 0, "fields": [...]}` artifact.

    Args:
        data: Parsed JSON artifact.
        count: Expected number of `{"bytes": ...}` fields.

    Returns:
        The `bytes` values in field order.

    Raises:
        ValueError: If the artifact does not have that shape.
    """
    if not isinstance(data, dict) or data.get("constructor") != 0:
        raise ValueError("artifact must be a constructor 0 object")
    fields = data.get("fields")
    if not isinstance(fields, list) or len(fields) != count:
        raise ValueError(f"artifact must have exactly {count} fields")
    values = []
    for field in fields:
        if not isinstance(field, dict) or not isinstance(field.get("bytes"), str):
            raise ValueError("every artifact field must be a {'bytes': hex} object")
        values.append(field["bytes"])
    return values
