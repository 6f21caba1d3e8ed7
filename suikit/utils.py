"""Small helpers for printing results and inspecting request objects."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from enum import Enum
from typing import Any


def _encode(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, bytes):
        return list(obj)
    raise TypeError(f"{type(obj).__name__} is not JSON serialisable")


def pretty_print(value: Any) -> None:
    """Print ``value`` as indented JSON, or as plain text if it cannot be encoded."""
    try:
        text = json.dumps(value, indent=2, ensure_ascii=False, default=_encode)
    except (TypeError, ValueError):
        text = str(value)
    print(text)


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return all(_is_zero(getattr(value, f.name)) for f in dataclasses.fields(value))
    if isinstance(value, (bool, int, float, complex, str, bytes)):
        return not value
    return False


def is_field_non_empty(obj: Any, field_name: str) -> bool:
    """Tell whether ``obj`` has ``field_name`` set to something other than its zero value."""
    if isinstance(obj, Mapping):
        if field_name not in obj:
            return False
        value = obj[field_name]
    else:
        try:
            value = getattr(obj, field_name)
        except AttributeError:
            return False
    return not _is_zero(value)