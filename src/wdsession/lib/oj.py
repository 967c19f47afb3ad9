"""Thin orjson wrapper returning text instead of bytes."""

from typing import Any

import orjson


def dumps(obj: Any, indent: bool = False) -> str:
    """Serialize obj to a JSON string."""
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(obj, option=option).decode("utf-8")


def loads(data: bytes | str) -> Any:
    """Parse JSON from bytes or str."""
    return orjson.loads(data)
