"""Format "last updated" timestamps the way the site displays them.

The site configuration stores Intl-style ``dateStyle``/``timeStyle`` names
(``full``, ``long``, ``medium``, ``short``). :func:`format_last_updated`
renders a timestamp with the matching ``en-US`` patterns so previews and
reports agree with the published pages.

Examples
--------
>>> import datetime as dt
>>> from mlops_pages.config import LastUpdatedConfig
>>> moment = dt.datetime(2026, 10, 19, 15, 4, 5, tzinfo=dt.UTC)
>>> options = LastUpdatedConfig(date_style="full", time_style="medium")
>>> format_last_updated(moment, options)
'Monday, October 19, 2026 at 3:04:05 PM'
"""

from __future__ import annotations

import datetime as dt
import typing as typ

if typ.TYPE_CHECKING:
    from mlops_pages.config import LastUpdatedConfig

_DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def normalize_timestamp(value: dt.datetime | str | None) -> dt.datetime | None:
    """Return a timezone-aware UTC datetime parsed from ``value``, or None."""
    match value:
        case dt.datetime():
            parsed = value
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError:
                return None
        case _:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


def format_date(moment: dt.datetime, style: str) -> str:
    """Render the date part of ``moment`` for an Intl ``dateStyle``."""
    month = _MONTH_NAMES[moment.month - 1]
    match style:
        case "full":
            weekday = _DAY_NAMES[moment.weekday()]
            return f"{weekday}, {month} {moment.day}, {moment.year}"
        case "long":
            return f"{month} {moment.day}, {moment.year}"
        case "medium":
            return f"{month[:3]} {moment.day}, {moment.year}"
        case "short":
            return f"{moment.month}/{moment.day}/{moment.year % 100:02d}"
    msg = f"Unknown date style '{style}'."
    raise ValueError(msg)


def format_time(moment: dt.datetime, style: str) -> str:
    """Render the time part of ``moment`` for an Intl ``timeStyle``."""
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    match style:
        case "short":
            return f"{hour}:{moment.minute:02d} {meridiem}"
        case "medium":
            return f"{hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}"
        case "long":
            return f"{hour}:{moment.minute:02d}:{moment.second:02d} {meridiem} UTC"
        case "full":
            return (
                f"{hour}:{moment.minute:02d}:{moment.second:02d} {meridiem} "
                "Coordinated Universal Time"
            )
    msg = f"Unknown time style '{style}'."
    raise ValueError(msg)


def format_last_updated(
    moment: dt.datetime | str, options: LastUpdatedConfig
) -> str:
    """Render ``moment`` with the date and time styles from ``options``.

    Naive datetimes are treated as UTC; aware ones are converted to UTC.
    ``full`` and ``long`` dates are joined to the time with ``" at "``, the
    shorter styles with a comma, matching ``Intl.DateTimeFormat`` output.

    Raises
    ------
    ValueError
        If ``moment`` cannot be parsed as an ISO 8601 timestamp.
    """
    normalized = normalize_timestamp(moment)
    if normalized is None:
        msg = f"Cannot format timestamp {moment!r}."
        raise ValueError(msg)
    date_text = format_date(normalized, options.date_style)
    time_text = format_time(normalized, options.time_style)
    separator = " at " if options.date_style in {"full", "long"} else ", "
    return f"{date_text}{separator}{time_text}"


__all__ = [
    "format_date",
    "format_last_updated",
    "format_time",
    "normalize_timestamp",
]
