"""Utility helpers shared by the anchordown configuration loader."""

from __future__ import annotations

import typing as typ

from .models import RendererConfigError


def _require_bool(payload: typ.Mapping[str, typ.Any], key: str, default: bool) -> bool:  # noqa: FBT001
    """Return the boolean stored under ``key`` or ``default`` when absent."""
    value = payload.get(key, default)
    if not isinstance(value, bool):
        msg = f"'{key}' must be true or false."
        raise RendererConfigError(msg)
    return value


def _optional_str(payload: typ.Mapping[str, typ.Any], key: str, default: str) -> str:
    """Return the string stored under ``key``; ``null`` falls back to ``default``."""
    value = payload.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        msg = f"'{key}' must be a string."
        raise RendererConfigError(msg)
    return value.strip()


def _normalize_headings(value: str | list[object] | None) -> tuple[str, ...] | None:
    """Normalize heading definitions into a tuple of lowercase tag names."""
    if value is None:
        return None
    if isinstance(value, str):
        segments: list[object] = value.replace(",", " ").split()
    elif isinstance(value, list):
        segments = value
    else:
        msg = "'headings' must be a list of tag names."
        raise RendererConfigError(msg)
    normalized: list[str] = []
    for segment in segments:
        text = str(segment).strip().lower()
        if text and text not in normalized:
            normalized.append(text)
    return tuple(normalized)


def _string_mapping(value: object | None, key: str) -> dict[str, str]:
    """Return ``value`` as a ``str -> str`` mapping, rejecting other shapes."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"'{key}' must be a mapping."
        raise RendererConfigError(msg)
    return {str(name): str(item) for name, item in value.items()}


__all__ = [
    "_normalize_headings",
    "_optional_str",
    "_require_bool",
    "_string_mapping",
]
