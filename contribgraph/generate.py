from __future__ import annotations
from pathlib import Path
import logging
import sys

from .config import load_config, load_token
from .github_contribs import fetch_calendar
from .render import render_png, render_svg

logger = logging.getLogger(__name__)


def run(config_path: str | Path = "config.yml") -> Path:
    cfg = load_config(config_path)
    # Token first: a missing secret must fail before any network call.
    token = load_token()

    calendar = fetch_calendar(cfg.github_user, token, timeout=cfg.timeout)
    svg = render_svg(calendar, cfg.palette, cfg)

    out_path = Path(cfg.output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(svg, encoding="utf-8")
    logger.info("Wrote %d bytes to %s", len(svg.encode("utf-8")), out_path)

    # Optional raster preview
    if cfg.png_output:
        png_path = Path(cfg.png_output)
        png_path.parent.mkdir(parents=True, exist_ok=True)
        render_png(calendar, cfg.palette, cfg).save(png_path)
        logger.info("Wrote preview %s", png_path)

    return out_path


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s", stream=sys.stderr)
    try:
        out_path = run()
    except Exception as e:
        logger.error("Generation failed: %s", e)
        return 1
    print(f"OK: wrote {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
