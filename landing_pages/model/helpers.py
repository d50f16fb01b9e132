"""Utility helpers shared by the page model loader."""

from __future__ import annotations

import enum
import typing as typ

from .models import PageModelError

E = typ.TypeVar("E", bound=enum.Enum)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _text(payload: typ.Mapping[str, typ.Any], key: str, default: str = "") -> str:
    """Return ``payload[key]`` as a string, keeping author whitespace intact."""
    value = payload.get(key)
    if value is None:
        return default
    return str(value)


def _flag(payload: typ.Mapping[str, typ.Any], key: str, default: bool) -> bool:
    """Interpret a boolean-ish editor value."""
    value = payload.get(key, default)
    match value:
        case bool():
            return value
        case str() as text:
            return text.strip().lower() in {"1", "true", "yes", "on"}
        case None:
            return default
        case _:
            return bool(value)


def _member(enum_type: type[E], value: object, default: E) -> E:
    """Return the enum member for ``value`` or ``default`` when unrecognized."""
    if value is None:
        return default
    try:
        return enum_type(str(value).strip().lower())
    except ValueError:
        return default


def _mapping(value: object, *, where: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty."""
    if value is None:
        return {}
    if not isinstance(value, typ.Mapping):
        msg = f"Expected a mapping for {where}, got {type(value).__name__}."
        raise PageModelError(msg)
    return value


def _order(value: object, *, section_id: str) -> int:
    """Return the integer render order of a section."""
    if isinstance(value, bool):
        msg = f"Section '{section_id}' has a non-integer order: {value!r}."
        raise PageModelError(msg)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    msg = f"Section '{section_id}' has a non-integer order: {value!r}."
    raise PageModelError(msg)


__all__ = [
    "_flag",
    "_mapping",
    "_member",
    "_optional_str",
    "_order",
    "_text",
]
