"""Utility helpers shared by the pagedtext configuration loader."""

from __future__ import annotations

import typing as typ

from pagedtext.errors import ConfigError
from pagedtext.nodes import NodeKind


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _positive_int(value: object, *, field: str) -> int:
    """Return ``value`` as an int of at least 1, raising ConfigError otherwise."""
    match value:
        case bool():
            number = None
        case int():
            number = value
        case str() as text if text.strip().lstrip("+").isdecimal():
            number = int(text)
        case _:
            number = None
    if number is None or number < 1:
        msg = f"'{field}' must be a positive integer, got {value!r}."
        raise ConfigError(msg)
    return number


def _normalize_lines(value: str | list[object] | None, *, field: str) -> list[str]:
    """Normalize a string or list of values into a list of text lines."""
    if value is None:
        return []
    if isinstance(value, str):
        return value.splitlines()
    if isinstance(value, list):
        return [str(line) for line in value]
    msg = f"'{field}' must be a string or a list of lines."
    raise ConfigError(msg)


def _build_styles(payload: typ.Mapping[str, typ.Any] | None) -> dict[NodeKind, str]:
    """Map node kind names (``heading-major``, ``image``...) to inline styles."""
    if not payload:
        return {}
    if not isinstance(payload, dict):
        msg = "'styles' must be a mapping of node kind to CSS."
        raise ConfigError(msg)
    styles: dict[NodeKind, str] = {}
    for name, css in payload.items():
        normalized = str(name).strip().lower().replace("_", "-")
        try:
            kind = NodeKind(normalized)
        except ValueError:
            known = ", ".join(kind.value for kind in NodeKind)
            msg = f"Unknown node kind '{name}' in styles. Expected one of: {known}."
            raise ConfigError(msg) from None
        styles[kind] = "" if css is None else str(css).strip()
    return styles


def _merge_styles(
    base: typ.Mapping[NodeKind, str], override: typ.Mapping[NodeKind, str]
) -> dict[NodeKind, str]:
    """Return ``base`` updated with ``override``."""
    merged = dict(base)
    merged.update(override)
    return merged


__all__ = [
    "_build_styles",
    "_merge_styles",
    "_normalize_lines",
    "_optional_str",
    "_positive_int",
]
