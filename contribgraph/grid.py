from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple
import numpy as np

from .models import Calendar, Week


def normalize_weeks(weeks: Sequence[Week], columns: int = 53) -> Tuple[Week, ...]:
    """
    GitHub returns 52 or 53 weeks depending on how the year falls.
    Pad empty weeks at the *front* when short, drop the oldest when long.
    """
    out = tuple(weeks)
    if len(out) > columns:
        out = out[-columns:]
    elif len(out) < columns:
        out = ((),) * (columns - len(out)) + out
    return out


def _thresholds(breakpoints: Sequence[int]) -> np.ndarray:
    # Leading 0 reserves level 0 for "no activity".
    return np.asarray((0,) + tuple(int(b) for b in breakpoints), dtype=np.int64)


def level_for(count: int, breakpoints: Sequence[int], levels: int) -> int:
    """
    Step function over count, e.g. breakpoints (2, 5, 9) with 5 levels:
      0     -> 0
      1..2  -> 1
      3..5  -> 2
      6..9  -> 3
      >=10  -> 4
    """
    lvl = int(np.searchsorted(_thresholds(breakpoints), count, side="left"))
    return min(lvl, levels - 1)


@dataclass(frozen=True)
class Grid:
    counts: np.ndarray  # shape (columns, rows)
    dates: Tuple[Tuple[str, ...], ...]

    @property
    def columns(self) -> int:
        return self.counts.shape[0]

    @property
    def rows(self) -> int:
        return self.counts.shape[1]

    def levels(self, breakpoints: Sequence[int], levels: int) -> np.ndarray:
        lvl = np.searchsorted(_thresholds(breakpoints), self.counts, side="left")
        return np.minimum(lvl, levels - 1)


def build_grid(calendar: Calendar, columns: int = 53, rows: int = 7) -> Grid:
    weeks = normalize_weeks(calendar.weeks, columns)
    counts = np.zeros((columns, rows), dtype=np.int64)
    dates = [[""] * rows for _ in range(columns)]
    for x, week in enumerate(weeks):
        for day in week:
            # Out of range weekdays are dropped; later duplicates win.
            if not 0 <= day.weekday < rows:
                continue
            counts[x, day.weekday] = max(0, day.count)
            dates[x][day.weekday] = day.date
    return Grid(counts=counts, dates=tuple(tuple(col) for col in dates))
