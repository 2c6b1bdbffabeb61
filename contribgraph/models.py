from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple


@dataclass(frozen=True)
class ContributionDay:
    date: str
    count: int
    weekday: int

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> "ContributionDay":
        # Absent fields resolve to an empty, zero-count day.
        weekday = raw.get("weekday")
        return cls(
            date=str(raw.get("date") or ""),
            count=int(raw.get("contributionCount") or 0),
            weekday=int(weekday) if weekday is not None else -1,
        )


Week = Tuple[ContributionDay, ...]


@dataclass(frozen=True)
class Calendar:
    """Weeks oldest first, each holding up to seven days, plus the API total."""

    weeks: Tuple[Week, ...] = field(default_factory=tuple)
    total: int = 0

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> "Calendar":
        weeks = []
        for w in raw.get("weeks") or []:
            days = (w or {}).get("contributionDays") or []
            weeks.append(tuple(ContributionDay.from_api(d) for d in days if d))
        return cls(weeks=tuple(weeks), total=int(raw.get("totalContributions") or 0))
