"""JSON value model shared by the parser, diff engine and renderer."""

import json
from enum import Enum
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .sensitivity import SensitivityMap

REDACTED = "sensitive"


class ValueKind(str, Enum):
    """Tag of a decoded JSON value."""
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


class _Absent:
    """Marker for a path that holds no value at all (distinct from JSON null)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


def kind_of(value: Any) -> ValueKind:
    """Return the JSON tag of a decoded value."""
    # bool is a subclass of int, check it first
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.SEQUENCE
    if isinstance(value, dict):
        return ValueKind.MAPPING
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def values_equal(left: Any, right: Any) -> bool:
    """
    Structural equality over JSON values.

    Unlike ``==``, a boolean never equals a number (``True`` vs ``1``).
    """
    left_kind = kind_of(left)
    if left_kind != kind_of(right):
        return False

    if left_kind == ValueKind.SEQUENCE:
        if len(left) != len(right):
            return False
        return all(values_equal(a, b) for a, b in zip(left, right))

    if left_kind == ValueKind.MAPPING:
        if left.keys() != right.keys():
            return False
        return all(values_equal(left[key], right[key]) for key in left)

    return left == right


def render_value(value: Any, sensitivity: Optional["SensitivityMap"] = None) -> str:
    """
    Render a value as compact JSON for display.

    Any path marked sensitive is replaced by the bare ``sensitive`` literal,
    including paths nested inside a container.

    Args:
        value: Decoded JSON value
        sensitivity: Sensitivity tree rooted at this value (optional)

    Returns:
        Display string, e.g. ``"foo"``, ``42``, ``null`` or ``{"a":1}``
    """
    if sensitivity is not None and sensitivity.sensitive:
        return REDACTED

    if isinstance(value, dict):
        parts = []
        for key, item in value.items():
            child = sensitivity.child(key) if sensitivity is not None else None
            parts.append(f"{_dump(key)}:{render_value(item, child)}")
        return "{" + ",".join(parts) + "}"

    if isinstance(value, list):
        parts = []
        for index, item in enumerate(value):
            child = sensitivity.child(str(index)) if sensitivity is not None else None
            parts.append(render_value(item, child))
        return "[" + ",".join(parts) + "]"

    kind_of(value)
    return _dump(value)


def _dump(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)
