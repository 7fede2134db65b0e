"""Name case conversions and TOML value formatting."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any

_SEPARATORS = re.compile(r"[_-]")


def to_pascal_case(s: str) -> str:
    """Convert ``hello_world`` or ``hello-world`` to ``HelloWorld``."""
    return "".join(part[:1].upper() + part[1:] for part in _SEPARATORS.split(s))


def to_snake_case(s: str) -> str:
    """Convert ``HelloWorld`` to ``hello_world``."""
    pieces = []
    for position, char in enumerate(s):
        if char.isupper() and position > 0:
            pieces.append("_")
        pieces.append(char.lower()[0])
    return "".join(pieces).replace("-", "_")


def to_camel_case(s: str) -> str:
    """Convert to camelCase."""
    pascal = to_pascal_case(s)
    return pascal[:1].lower() + pascal[1:]


def to_kebab_case(s: str) -> str:
    """Convert to kebab-case."""
    return to_snake_case(s).replace("_", "-")


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def toml_value_to_string(value: Any) -> str:
    """Return the string form of a scalar TOML value, or "" for other values."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    return ""