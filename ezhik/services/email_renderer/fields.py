"""Safe field extraction from loosely structured block data.

Block data arrives straight from JSON and is never validated as a whole.
Renderers read individual fields through these helpers, each with a
hardcoded default, so a missing or mistyped field degrades to placeholder
content instead of aborting the document.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, TypeAlias, TypeVar

FieldValue: TypeAlias = (
    str | bool | int | float | list["FieldValue"] | dict[str, "FieldValue"]
)
FieldBag: TypeAlias = Mapping[str, FieldValue]

T = TypeVar("T")


class FieldShape(str, Enum):
    """Expected JSON shape of a field."""

    STRING = "string"
    BOOL = "bool"
    NUMBER = "number"
    LIST = "list"
    MAPPING = "mapping"


def _matches(value: Any, shape: FieldShape) -> bool:
    if shape is FieldShape.STRING:
        return isinstance(value, str)
    if shape is FieldShape.BOOL:
        return isinstance(value, bool)
    if shape is FieldShape.NUMBER:
        return isinstance(value, int | float) and not isinstance(value, bool)
    if shape is FieldShape.LIST:
        return isinstance(value, list | tuple)
    if shape is FieldShape.MAPPING:
        return isinstance(value, Mapping)
    return False


def extract(bag: Any, name: str, shape: FieldShape, default: T) -> Any | T:
    """Return ``bag[name]`` when present with the expected shape, else ``default``."""
    if not isinstance(bag, Mapping):
        return default
    value = bag.get(name)
    if value is None or not _matches(value, shape):
        return default
    return value


def get_str(bag: Any, name: str, default: str = "") -> str:
    return extract(bag, name, FieldShape.STRING, default)


def get_bool(bag: Any, name: str, default: bool = False) -> bool:
    return extract(bag, name, FieldShape.BOOL, default)


def get_int_text(bag: Any, name: str, default: int) -> int:
    """Parse an integer from a string or numeric field.

    The full string is parsed, so ``"12"`` yields 12. Unparsable values
    fall back to ``default``.
    """
    if not isinstance(bag, Mapping):
        return default
    value = bag.get(name)
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            try:
                return int(float(value.strip()))
            except (ValueError, OverflowError):
                return default
    return default


def get_str_list(bag: Any, name: str, example: Sequence[str]) -> list[str]:
    """String items of a list field, or ``example`` when nothing usable is present."""
    raw = extract(bag, name, FieldShape.LIST, [])
    items = [item for item in raw if isinstance(item, str)]
    return items if items else list(example)


def get_mapping_list(
    bag: Any,
    name: str,
    example: Sequence[Mapping[str, Any]],
) -> list[Mapping[str, Any]]:
    """Mapping items of a list field, or ``example`` when nothing usable is present."""
    raw = extract(bag, name, FieldShape.LIST, [])
    items = [item for item in raw if isinstance(item, Mapping)]
    return items if items else [dict(item) for item in example]
