"""Render a GitHub contribution calendar as a heatmap SVG."""
