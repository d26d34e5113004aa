"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .models import SiteConfigError

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(slots=True)
class _IssueCollector:
    """Accumulate validation problems so they can be reported together."""

    issues: list[str] = dc.field(default_factory=list)

    def add(self, location: str, message: str) -> None:
        self.issues.append(f"{location}: {message}")

    def raise_if_any(self) -> None:
        if self.issues:
            raise SiteConfigError(self.issues)


def _key_path(location: str, key: str) -> str:
    """Join a dotted document path; the document root has an empty location."""
    return f"{location}.{key}" if location else key


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_text(
    payload: cabc.Mapping[str, typ.Any],
    key: str,
    location: str,
    issues: _IssueCollector,
) -> str:
    """Return ``payload[key]`` as a non-empty string, recording a problem if not."""
    value = payload.get(key)
    match value:
        case str() if value.strip():
            return value
        case None:
            issues.add(_key_path(location, key), "is required")
        case str():
            issues.add(_key_path(location, key), "must not be empty")
        case _:
            issues.add(_key_path(location, key), f"must be a string, got {value!r}")
    return ""


def _require_link(
    payload: cabc.Mapping[str, typ.Any],
    location: str,
    issues: _IssueCollector,
) -> str:
    """Return the ``link`` entry as a non-empty path string."""
    link = _require_text(payload, "link", location, issues)
    if link and any(char.isspace() for char in link):
        issues.add(
            _key_path(location, "link"),
            f"must not contain whitespace, got {link!r}",
        )
    return link


def _optional_bool(
    payload: cabc.Mapping[str, typ.Any],
    key: str,
    location: str,
    issues: _IssueCollector,
    *,
    default: bool | None,
) -> bool | None:
    """Return a boolean flag, falling back to ``default`` when absent."""
    if key not in payload:
        return default
    value = payload[key]
    if isinstance(value, bool):
        return value
    issues.add(_key_path(location, key), f"must be a boolean, got {value!r}")
    return default


def _optional_mapping(
    payload: cabc.Mapping[str, typ.Any],
    key: str,
    location: str,
    issues: _IssueCollector,
) -> cabc.Mapping[str, typ.Any] | None:
    """Return a nested mapping or None, recording non-mapping values."""
    value = payload.get(key)
    match value:
        case None:
            return None
        case dict():
            return value
        case _:
            issues.add(_key_path(location, key), "must be a mapping")
            return None


def _optional_list(
    payload: cabc.Mapping[str, typ.Any],
    key: str,
    location: str,
    issues: _IssueCollector,
) -> list[typ.Any]:
    """Return a nested list, or an empty list when absent or invalid."""
    value = payload.get(key)
    match value:
        case None:
            return []
        case list():
            return value
        case _:
            issues.add(_key_path(location, key), "must be a list")
            return []


__all__ = [
    "_IssueCollector",
    "_key_path",
    "_optional_bool",
    "_optional_list",
    "_optional_mapping",
    "_optional_str",
    "_require_link",
    "_require_text",
]
