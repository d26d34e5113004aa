"""Builders for the footer, edit link, timestamp, and search settings."""

from __future__ import annotations

import typing as typ

from mlops_pages._constants import PATH_PLACEHOLDER

from .helpers import (
    _IssueCollector,
    _optional_mapping,
    _optional_str,
    _require_link,
    _require_text,
)
from .models import (
    DATE_STYLES,
    EditLinkConfig,
    FooterConfig,
    LastUpdatedConfig,
    SearchConfig,
    SearchProvider,
    SocialLink,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def _build_social_links(
    entries: list[typ.Any], location: str, issues: _IssueCollector
) -> tuple[SocialLink, ...]:
    """Build the header icon links."""
    links: list[SocialLink] = []
    for index, entry in enumerate(entries):
        entry_location = f"{location}[{index}]"
        match entry:
            case {"icon": icon, **rest} if _optional_str(icon):
                link = _require_link(rest, entry_location, issues)
                links.append(SocialLink(icon=str(icon).strip(), link=link))
            case dict():
                issues.add(f"{entry_location}.icon", "is required")
            case _:
                issues.add(entry_location, "social links must be mappings")
    return tuple(links)


def _build_footer_config(
    payload: cabc.Mapping[str, typ.Any] | None,
    location: str,
    issues: _IssueCollector,
) -> FooterConfig | None:
    if payload is None:
        return None
    message = payload.get("message", "")
    copyright_text = payload.get("copyright", "")
    for key, value in (("message", message), ("copyright", copyright_text)):
        if not isinstance(value, str):
            issues.add(f"{location}.{key}", f"must be a string, got {value!r}")
    return FooterConfig(message=str(message), copyright=str(copyright_text))


def _build_edit_link_config(
    payload: cabc.Mapping[str, typ.Any] | None,
    location: str,
    issues: _IssueCollector,
) -> EditLinkConfig | None:
    """Build the edit-link template, checking the path placeholder count."""
    if payload is None:
        return None
    pattern = _require_text(payload, "pattern", location, issues)
    text = payload.get("text", "Edit this page")
    if not isinstance(text, str):
        issues.add(f"{location}.text", f"must be a string, got {text!r}")
        text = "Edit this page"
    if not pattern:
        return None
    count = pattern.count(PATH_PLACEHOLDER)
    if count != 1:
        issues.add(
            f"{location}.pattern",
            f"must contain exactly one '{PATH_PLACEHOLDER}' placeholder, found {count}",
        )
        return None
    return EditLinkConfig(pattern=pattern, text=text)


def _build_last_updated_config(
    payload: cabc.Mapping[str, typ.Any] | None,
    location: str,
    issues: _IssueCollector,
) -> LastUpdatedConfig | None:
    if payload is None:
        return None
    base = LastUpdatedConfig()
    text = payload.get("text", base.text)
    if not isinstance(text, str):
        issues.add(f"{location}.text", f"must be a string, got {text!r}")
        text = base.text
    options = _optional_mapping(payload, "formatOptions", location, issues) or {}
    styles: dict[str, str] = {}
    for key, default in (("dateStyle", base.date_style), ("timeStyle", base.time_style)):
        value = options.get(key, default)
        if value not in DATE_STYLES:
            allowed = ", ".join(DATE_STYLES)
            issues.add(
                f"{location}.formatOptions.{key}",
                f"must be one of {allowed}, got {value!r}",
            )
            value = default
        styles[key] = value
    return LastUpdatedConfig(
        text=text, date_style=styles["dateStyle"], time_style=styles["timeStyle"]
    )


def _build_search_config(
    payload: cabc.Mapping[str, typ.Any] | None,
    location: str,
    issues: _IssueCollector,
) -> SearchConfig:
    if payload is None:
        return SearchConfig()
    provider = payload.get("provider", SearchProvider.LOCAL.value)
    try:
        return SearchConfig(provider=SearchProvider(provider))
    except ValueError:
        allowed = ", ".join(member.value for member in SearchProvider)
        issues.add(
            f"{location}.provider", f"must be one of {allowed}, got {provider!r}"
        )
        return SearchConfig()


__all__ = [
    "_build_edit_link_config",
    "_build_footer_config",
    "_build_last_updated_config",
    "_build_search_config",
    "_build_social_links",
]
