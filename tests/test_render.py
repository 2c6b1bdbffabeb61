import re

import pytest

from contribgraph.config import Config, DEFAULT_PALETTE
from contribgraph.grid import level_for
from contribgraph.models import Calendar, ContributionDay
from contribgraph.render import canvas_size, render_png, render_svg


def test_single_day_calendar_renders_tooltip_and_fill(single_day_calendar: Calendar) -> None:
    cfg = Config()
    svg = render_svg(single_day_calendar, cfg.palette, cfg)
    fill = cfg.palette[level_for(3, cfg.breakpoints, len(cfg.palette))]

    # Single week lands in the last column after front padding.
    assert (
        f'<rect x="686" y="60" width="11" height="11" rx="2" ry="2" fill="{fill}">'
        "<title>3 contributions on March 5th</title></rect>"
    ) in svg
    assert svg.count("<title>") == 1
    assert "3 contributions in the last year" in svg


def test_single_day_calendar_date_tooltip_style(single_day_calendar: Calendar) -> None:
    cfg = Config(tooltip_style="date")
    svg = render_svg(single_day_calendar, cfg.palette, cfg)

    assert "<title>2024-03-05: 3 contributions</title>" in svg


def test_empty_calendar_renders_all_level_zero() -> None:
    cfg = Config()
    svg = render_svg(Calendar(), cfg.palette, cfg)
    fills = re.findall(r'<rect x="\d+" y="\d+" width="11" height="11"[^>]*fill="([^"]+)"', svg)

    assert len(fills) == 53 * 7
    assert set(fills) == {DEFAULT_PALETTE[0]}
    assert "<title>" not in svg
    assert "0 contributions in the last year" in svg


def test_render_is_deterministic(single_day_calendar: Calendar) -> None:
    cfg = Config()
    assert render_svg(single_day_calendar, cfg.palette, cfg) == render_svg(single_day_calendar, cfg.palette, cfg)


def test_canvas_size_is_independent_of_data(single_day_calendar: Calendar) -> None:
    cfg = Config()
    big = Calendar(
        weeks=tuple((ContributionDay(date="2024-01-01", count=20, weekday=1),) for _ in range(80)),
        total=1600,
    )

    assert canvas_size(cfg) == (707, 161)
    for calendar in (Calendar(), single_day_calendar, big):
        assert '<svg width="707" height="161" viewBox="0 0 707 161"' in render_svg(calendar, cfg.palette, cfg)


def test_disabled_bands_shrink_canvas_and_drop_text() -> None:
    cfg = Config(show_summary=False, show_legend=False)
    svg = render_svg(Calendar(total=4), cfg.palette, cfg)

    assert canvas_size(cfg) == (707, 109)
    assert "in the last year" not in svg
    assert "Less" not in svg and "More" not in svg


def test_legend_lists_every_palette_color() -> None:
    cfg = Config()
    svg = render_svg(Calendar(), cfg.palette, cfg)

    assert ">Less</text>" in svg and ">More</text>" in svg
    swatches = re.findall(r'width="10" height="10" rx="2" ry="2" fill="([^"]+)"', svg)
    assert swatches == list(cfg.palette)


def test_data_and_user_text_are_escaped() -> None:
    cfg = Config(github_user='<bad&"user>')
    day = ContributionDay(date='<a&"b>', count=1, weekday=0)
    svg = render_svg(Calendar(weeks=((day,),), total=1), cfg.palette, cfg)

    assert "<title>&lt;a&amp;&quot;b&gt;: 1 contribution</title>" in svg
    assert 'for &lt;bad&amp;&quot;user&gt;"' in svg
    assert '<a&"b>' not in svg
    assert "<bad" not in svg


def test_render_png_matches_svg_canvas(single_day_calendar: Calendar) -> None:
    cfg = Config()
    im = render_png(single_day_calendar, cfg.palette, cfg)

    assert im.size == canvas_size(cfg)
    assert im.mode == "RGBA"
    # centre of the active cell carries the level-2 colour
    assert im.getpixel((686 + 5, 60 + 5)) == (0xC8, 0xD9, 0xAA, 255)


def test_render_rejects_palette_that_does_not_match_breakpoints() -> None:
    cfg = Config()
    six = ("#000000", "#111111", "#222222", "#333333", "#444444", "#555555")

    with pytest.raises(ValueError):
        render_svg(Calendar(), six, cfg)
    with pytest.raises(ValueError):
        render_png(Calendar(), six, cfg)


def test_four_color_palette_reaches_every_level() -> None:
    cfg = Config(palette=("#a0a0a0", "#b0b0b0", "#c0c0c0", "#d0d0d0"), breakpoints=(2, 6))
    palette = ("#000000", "#111111", "#222222", "#333333")
    week = tuple(
        ContributionDay(date=f"2024-01-0{i + 1}", count=c, weekday=i) for i, c in enumerate([0, 1, 3, 6, 7, 999])
    )
    svg = render_svg(Calendar(weeks=(week,), total=1016), palette, cfg)
    fills = re.findall(r'<rect x="\d+" y="\d+" width="11" height="11"[^>]*fill="([^"]+)"', svg)

    assert set(fills) == set(palette)


def test_summary_baseline_follows_header_height() -> None:
    svg = render_svg(Calendar(), DEFAULT_PALETTE, Config(header_height=40))

    assert '<text x="10" y="32"' in svg
    assert '<text x="10" y="16"' in render_svg(Calendar(), DEFAULT_PALETTE, Config())
