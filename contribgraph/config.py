from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple
import os
import yaml

# No activity first, then lowest -> highest
DEFAULT_PALETTE: Tuple[str, ...] = (
    "#97BAA9",
    "#ABCCA3",
    "#C8D9AA",
    "#F3DEB4",
    "#FBD2C6",
)
DEFAULT_BREAKPOINTS: Tuple[int, ...] = (2, 5, 9)
TOOLTIP_STYLES = ("ordinal", "date")


class MissingTokenError(RuntimeError):
    """Raised when no GitHub token is present in the environment."""


@dataclass(frozen=True)
class Config:
    github_user: str = "fiona-cai"
    output: str = "assets/contributions.svg"
    png_output: str | None = None
    palette: Tuple[str, ...] = DEFAULT_PALETTE
    breakpoints: Tuple[int, ...] = DEFAULT_BREAKPOINTS
    cell: int = 11
    gap: int = 2
    columns: int = 53
    rows: int = 7
    pad_x: int = 10
    pad_y: int = 10
    header_height: int = 24
    legend_height: int = 28
    radius: int = 2
    tooltip_style: str = "ordinal"
    show_summary: bool = True
    show_legend: bool = True
    background: str = "transparent"
    text_color: str = "#8b949e"
    font_family: str = "system-ui, -apple-system, sans-serif"
    timeout: float = 25.0

    def __post_init__(self):
        validate_levels(self.palette, self.breakpoints)
        if self.tooltip_style not in TOOLTIP_STYLES:
            raise ValueError(f"tooltip_style must be one of {TOOLTIP_STYLES}, got {self.tooltip_style!r}")
        if self.columns < 1 or self.rows < 1:
            raise ValueError("columns and rows must be positive")


def validate_levels(palette, breakpoints) -> None:
    """
    Palette of N colours needs N-2 breakpoints: level 0 is reserved for
    zero, the last level takes everything above the final breakpoint.
    """
    if not palette:
        raise ValueError("palette must not be empty")
    expected = max(0, len(palette) - 2)
    if len(breakpoints) != expected:
        raise ValueError(
            f"palette of {len(palette)} colours needs {expected} breakpoints, got {len(breakpoints)}"
        )
    prev = 0
    for b in breakpoints:
        if int(b) <= prev:
            raise ValueError(f"breakpoints must be strictly increasing positive integers: {list(breakpoints)}")
        prev = int(b)


def _as_list(data: dict, key: str, default):
    value = data.get(key, default)
    # A bare YAML scalar would otherwise be split per character.
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{key} must be a list, got {type(value).__name__}")
    return value


def load_config(path: str | Path = "config.yml") -> Config:
    p = Path(path)
    data = {}
    if p.exists():
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    defaults = Config()
    # Env overrides
    gh_user = str(os.getenv("GH_PROFILE_USER") or data.get("github_user") or defaults.github_user).strip()
    output = str(os.getenv("CONTRIB_OUTPUT") or data.get("output") or defaults.output).strip()
    png_output = data.get("png_output")

    return Config(
        github_user=gh_user,
        output=output,
        png_output=str(png_output) if png_output else None,
        palette=tuple(str(c) for c in _as_list(data, "palette", defaults.palette)),
        breakpoints=tuple(int(b) for b in _as_list(data, "breakpoints", defaults.breakpoints)),
        cell=int(data.get("cell", defaults.cell)),
        gap=int(data.get("gap", defaults.gap)),
        columns=int(data.get("columns", defaults.columns)),
        rows=int(data.get("rows", defaults.rows)),
        pad_x=int(data.get("pad_x", defaults.pad_x)),
        pad_y=int(data.get("pad_y", defaults.pad_y)),
        header_height=int(data.get("header_height", defaults.header_height)),
        legend_height=int(data.get("legend_height", defaults.legend_height)),
        radius=int(data.get("radius", defaults.radius)),
        tooltip_style=str(data.get("tooltip_style", defaults.tooltip_style)),
        show_summary=bool(data.get("show_summary", defaults.show_summary)),
        show_legend=bool(data.get("show_legend", defaults.show_legend)),
        background=str(data.get("background", defaults.background)),
        text_color=str(data.get("text_color", defaults.text_color)),
        font_family=str(data.get("font_family", defaults.font_family)),
        timeout=float(data.get("timeout", defaults.timeout)),
    )


def load_token() -> str:
    # Prefer explicit GH_TOKEN secret, else fall back to GITHUB_TOKEN.
    token = (os.getenv("GH_TOKEN") or os.getenv("GITHUB_TOKEN") or "").strip()
    if not token:
        raise MissingTokenError("Missing GH_TOKEN env var.")
    return token
