from __future__ import annotations
from typing import List, Sequence, Tuple
from PIL import Image, ImageColor, ImageDraw, ImageFont

from .config import Config, validate_levels
from .grid import Grid, build_grid
from .labels import escape, summary, tooltip
from .models import Calendar

LEGEND_SWATCH = 10
LEGEND_GAP = 2


def header_band(cfg: Config) -> int:
    return cfg.header_height if cfg.show_summary else 0


def legend_band(cfg: Config) -> int:
    return cfg.legend_height if cfg.show_legend else 0


def canvas_size(cfg: Config) -> Tuple[int, int]:
    """Depends on layout constants only, never on the data."""
    grid_w = cfg.pad_x * 2 + cfg.columns * cfg.cell + (cfg.columns - 1) * cfg.gap
    grid_h = cfg.pad_y * 2 + cfg.rows * cfg.cell + (cfg.rows - 1) * cfg.gap
    return grid_w, header_band(cfg) + grid_h + legend_band(cfg)


def cell_origin(cfg: Config, x: int, y: int) -> Tuple[int, int]:
    step = cfg.cell + cfg.gap
    return cfg.pad_x + x * step, header_band(cfg) + cfg.pad_y + y * step


def legend_layout(cfg: Config, n_colors: int) -> Tuple[int, int, List[int]]:
    """Baseline y, start x and swatch x positions of the Less/More legend."""
    width, height = canvas_size(cfg)
    legend_y = height - 14
    start_x = width - cfg.pad_x - 34 - n_colors * (LEGEND_SWATCH + LEGEND_GAP)
    xs = [start_x + i * (LEGEND_SWATCH + LEGEND_GAP) for i in range(n_colors)]
    return legend_y, start_x, xs


def _cells(grid: Grid, palette: Sequence[str], cfg: Config):
    levels = grid.levels(cfg.breakpoints, len(palette))
    for x in range(grid.columns):
        for y in range(grid.rows):
            px, py = cell_origin(cfg, x, y)
            yield px, py, int(grid.counts[x, y]), grid.dates[x][y], palette[int(levels[x, y])]


def render_svg(calendar: Calendar, palette: Sequence[str], cfg: Config) -> str:
    validate_levels(palette, cfg.breakpoints)
    grid = build_grid(calendar, cfg.columns, cfg.rows)
    width, height = canvas_size(cfg)
    font = escape(cfg.font_family)
    text_color = escape(cfg.text_color)

    rects = []
    for px, py, count, date, fill in _cells(grid, palette, cfg):
        title = tooltip(date, count, cfg.tooltip_style)
        rects.append(
            f'    <rect x="{px}" y="{py}" width="{cfg.cell}" height="{cfg.cell}" '
            f'rx="{cfg.radius}" ry="{cfg.radius}" fill="{escape(fill)}">'
            + (f"<title>{escape(title)}</title>" if title else "")
            + "</rect>"
        )

    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
        f'xmlns="http://www.w3.org/2000/svg" role="img" '
        f'aria-label="GitHub contributions graph for {escape(cfg.github_user)}">',
        f'  <rect width="100%" height="100%" fill="{escape(cfg.background)}"/>',
    ]
    if cfg.show_summary:
        parts.append(
            f'  <text x="{cfg.pad_x}" y="{header_band(cfg) - 8}" font-family="{font}" font-size="12" '
            f'fill="{text_color}">{escape(summary(calendar.total))}</text>'
        )
    parts.append("  <g>")
    parts.extend(rects)
    parts.append("  </g>")

    if cfg.show_legend:
        legend_y, start_x, xs = legend_layout(cfg, len(palette))
        label = f'font-family="{font}" font-size="9" fill="{text_color}"'
        parts.append(f'  <text x="{start_x - 32}" y="{legend_y}" {label}>Less</text>')
        for lx, color in zip(xs, palette):
            parts.append(
                f'  <rect x="{lx}" y="{legend_y - LEGEND_SWATCH + 2}" width="{LEGEND_SWATCH}" '
                f'height="{LEGEND_SWATCH}" rx="2" ry="2" fill="{escape(color)}"/>'
            )
        more_x = start_x + len(palette) * (LEGEND_SWATCH + LEGEND_GAP) + 6
        parts.append(f'  <text x="{more_x}" y="{legend_y}" {label}>More</text>')

    parts.append("</svg>")
    return "\n".join(parts) + "\n"


def _load_font(size: int):
    try:
        return ImageFont.truetype("DejaVuSans.ttf", size)
    except OSError:
        return ImageFont.load_default()


def _rgba(color: str) -> Tuple[int, int, int, int]:
    if color == "transparent":
        return (0, 0, 0, 0)
    return ImageColor.getcolor(color, "RGBA")


def render_png(calendar: Calendar, palette: Sequence[str], cfg: Config) -> Image.Image:
    """Raster preview of the same layout. Tooltips have no raster form."""
    validate_levels(palette, cfg.breakpoints)
    grid = build_grid(calendar, cfg.columns, cfg.rows)
    width, height = canvas_size(cfg)
    im = Image.new("RGBA", (width, height), _rgba(cfg.background))
    draw = ImageDraw.Draw(im)
    text_color = _rgba(cfg.text_color)

    if cfg.show_summary:
        draw.text((cfg.pad_x, header_band(cfg) - 20), summary(calendar.total), font=_load_font(12), fill=text_color)

    for px, py, _count, _date, fill in _cells(grid, palette, cfg):
        draw.rounded_rectangle(
            (px, py, px + cfg.cell - 1, py + cfg.cell - 1), radius=cfg.radius, fill=_rgba(fill)
        )

    if cfg.show_legend:
        legend_y, start_x, xs = legend_layout(cfg, len(palette))
        small = _load_font(9)
        top = legend_y - LEGEND_SWATCH + 2
        draw.text((start_x - 32, top), "Less", font=small, fill=text_color)
        for lx, color in zip(xs, palette):
            draw.rounded_rectangle(
                (lx, top, lx + LEGEND_SWATCH - 1, top + LEGEND_SWATCH - 1), radius=2, fill=_rgba(color)
            )
        more_x = start_x + len(palette) * (LEGEND_SWATCH + LEGEND_GAP) + 6
        draw.text((more_x, top), "More", font=small, fill=text_color)
    return im
