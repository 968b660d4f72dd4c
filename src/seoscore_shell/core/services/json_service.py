# src/seoscore_shell/core/services/json_service.py
import json
from pathlib import Path
from typing import Any


def to_json(data: Any, indent: int = 2, ensure_ascii: bool = False) -> str:
    """
    Convert Python object to JSON string.

    Args:
        data: Python object (dict, list, etc.)
        indent: Indentation level for pretty-printing (default: 2)
        ensure_ascii: If True, escape non-ASCII chars (default: False)

    Returns:
        str: JSON string
    """
    return json.dumps(data, ensure_ascii=ensure_ascii, indent=indent, default=str)


def read_json(path: Path) -> Any:
    """Loads a UTF-8 JSON file. Raises OSError or json.JSONDecodeError on bad input."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
