"""
canvas.py — SVG Bar Renderer
==============================
Pure rendering function: Frame → SVG string.

The renderer consumes:
  • frame   – the observer snapshot (values, highlight pair, status)
  • config  – visual config (canvas size, colors, bar spacing, …)

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  This function is stateless — the caller passes in
    everything it needs and gets back a string.
  - Bars are drawn bottom-up; bar height is value * height / value_max.
  - Highlighted bars (the two indices touched most recently) use the
    accent color, every other bar the base color.
"""

from typing import Optional

from sequence import Frame, VALUE_RANGE


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 520
    bg:     str = "#1e1e1e"

    # bars
    bar_color:       str = "#00c8ff"   # cyan
    highlight_color: str = "#ff3c3c"   # red — bars touched by the last step
    bar_spacing:     int = 1
    bar_radius:      int = 2
    value_max:       int = VALUE_RANGE

    # empty-state text
    text_color:  str = "#7d8590"
    text_size:   int = 14


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_bars(frame: Optional[Frame], config: CanvasConfig = CONFIG) -> str:
    """
    Returns an SVG string.

    Args:
        frame  : Snapshot from SortCoordinator.snapshot() (or None).
        config : Visual config.
    """

    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    if frame is None or not frame.values:
        svg_parts.append(
            f'<text x="{config.width / 2}" y="{config.height / 2}" text-anchor="middle" '
            f'font-size="{config.text_size}" fill="{config.text_color}">No values</text>'
        )
        svg_parts.append("</svg>")
        return "\n".join(svg_parts)

    n = len(frame.values)
    slot = config.width / n
    bar_w = max(slot - config.bar_spacing, 1)
    highlighted = {frame.highlight_a, frame.highlight_b}

    for i, value in enumerate(frame.values):
        svg_parts.append(_render_bar(i, value, slot, bar_w, i in highlighted, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Bar Rendering
# ---------------------------------------------------------------------------
def _render_bar(
    index: int,
    value: int,
    slot: float,
    bar_w: float,
    highlighted: bool,
    config: CanvasConfig,
) -> str:
    h = min(value, config.value_max) * config.height / config.value_max
    x = index * slot
    y = config.height - h
    fill = config.highlight_color if highlighted else config.bar_color
    return (
        f'<rect class="bar" data-index="{index}" x="{x:.2f}" y="{y:.2f}" '
        f'width="{bar_w:.2f}" height="{h:.2f}" rx="{config.bar_radius}" fill="{fill}"/>'
    )
