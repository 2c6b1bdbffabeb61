from __future__ import annotations
import datetime as dt
from xml.sax.saxutils import escape as _xml_escape

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def escape(text) -> str:
    return _xml_escape(str(text), {'"': "&quot;"})


def ordinal(n: int) -> str:
    if n % 100 in (11, 12, 13):
        return f"{n}th"
    return f"{n}" + {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def pluralize(count: int, noun: str = "contribution") -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def tooltip(date: str, count: int, style: str = "ordinal") -> str:
    """Hover text for one cell; empty when the day is unknown."""
    if not date:
        return ""
    if style == "ordinal":
        try:
            d = dt.date.fromisoformat(date)
        except ValueError:
            pass
        else:
            return f"{pluralize(count)} on {MONTHS[d.month - 1]} {ordinal(d.day)}"
    return f"{date}: {pluralize(count)}"


def summary(total: int) -> str:
    return f"{pluralize(total)} in the last year"
